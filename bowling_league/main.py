"""Bowling League: API bowlers/teams e pagina tabella."""

import logging
from pathlib import Path

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from bowling_league.core.config import (
    get_bowlers_api_base_url,
    get_database_url,
    init_db_enabled,
    seed_demo_data_enabled,
)
from bowling_league.core.database import SessionLocal, init_db, seed_demo_data
from bowling_league.core.logging import configure_logging
from bowling_league.routers import api_test_router, bowlers_router, health_router
from bowling_league.routers.bowlers import FEATURED_TEAM_NAMES
from bowling_league.services.bowler_table import BowlerTableClient
from bowling_league.services.store_probe import StoreHealthProbe, log_startup_report

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bowling League",
    description="Read-only API over the bowling league store (bowlers, teams).",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(api_test_router)
app.include_router(bowlers_router)

templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


async def get_api_client(request: Request):
    """
    Client HTTP verso l'API bowlers. Senza BOWLERS_API_BASE_URL le chiamate
    restano in-process attraverso lo stack ASGI di questa stessa app.
    """
    base_url = get_bowlers_api_base_url()
    if base_url:
        client = httpx.AsyncClient(base_url=base_url, timeout=30.0)
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url=str(request.base_url).rstrip("/"),
        )
    async with client:
        yield client


@app.get("/", include_in_schema=False)
async def index(request: Request, client: httpx.AsyncClient = Depends(get_api_client)):
    table = await BowlerTableClient(client).fetch()
    return templates.TemplateResponse(
        request,
        "bowlers.html",
        {"rows": table.rows, "error": table.error},
    )


@app.get("/test-database", include_in_schema=False)
async def page_test_database(request: Request, client: httpx.AsyncClient = Depends(get_api_client)):
    result, error = await BowlerTableClient(client).fetch_test_result()
    return templates.TemplateResponse(
        request,
        "test_database.html",
        {"result": result, "error": error},
    )


static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir), html=True), name="static")


@app.on_event("startup")
def on_startup():
    """Logging e probe dello store; tabelle create solo con INIT_DB o SEED_DEMO_DATA."""
    configure_logging()
    logger.info("Starting application...")
    log_startup_report(StoreHealthProbe(get_database_url(), FEATURED_TEAM_NAMES).run())
    if init_db_enabled():
        init_db()
    if seed_demo_data_enabled():
        with SessionLocal() as db:
            seed_demo_data(db)
