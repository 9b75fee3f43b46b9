"""Health check router: liveness del processo e raggiungibilità dello store."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bowling_league.core.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Health check for load balancers and monitoring."""
    return {"status": "healthy"}


@router.get("/health/db")
def health_db(db: Session = Depends(get_db)):
    """SELECT 1 sullo store tramite la sessione di richiesta. 503 se non raggiungibile."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("health_db failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "healthy"}
