"""
API Bowlers: elenco bowlers delle squadre in evidenza, dettaglio singolo bowler,
elenco squadre (solo id e nome).
"""

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from bowling_league.core.config import expose_error_detail
from bowling_league.core.database import get_db
from bowling_league.core.errors import StoreError
from bowling_league.schemas.bowlers import BowlerView, ErrorMessage, TeamSummary
from bowling_league.services.bowler_repository import BowlerRepository
from bowling_league.services.team_repository import TeamRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bowlers", tags=["bowlers"])

FEATURED_TEAM_NAMES = frozenset({"Marlins", "Sharks"})


def get_bowler_repository(db: Session = Depends(get_db)) -> BowlerRepository:
    return BowlerRepository(db)


def get_team_repository(db: Session = Depends(get_db)) -> TeamRepository:
    return TeamRepository(db)


def _server_error(summary: str, exc: StoreError) -> JSONResponse:
    message = f"{summary}: {exc}" if expose_error_detail() else summary
    return JSONResponse(status_code=500, content={"message": message})


@router.get(
    "",
    response_model=list[BowlerView],
    responses={500: {"model": ErrorMessage}},
)
def list_bowlers(repo: BowlerRepository = Depends(get_bowler_repository)):
    """
    Tutti i bowlers di Marlins e Sharks, con il nome squadra appiattito.
    Sempre un array JSON, anche vuoto. 500 con {"message"} se lo store fallisce.
    """
    try:
        bowlers = repo.list_by_team(FEATURED_TEAM_NAMES)
    except StoreError as e:
        logger.exception("Errore GET bowlers: %s", e)
        return _server_error("Error retrieving bowlers", e)
    for b in bowlers[:5]:
        logger.debug("  BowlerID: %s, Name: %s %s, Team: %s",
                     b.bowler_id, b.bowler_first_name, b.bowler_last_name, b.team_name)
    return bowlers


@router.get(
    "/teams",
    response_model=list[TeamSummary],
    responses={500: {"model": ErrorMessage}},
)
def list_teams(repo: TeamRepository = Depends(get_team_repository)):
    """Squadre in evidenza come coppie {teamId, teamName}; mai la collezione bowlers."""
    try:
        teams = repo.list_by_name(FEATURED_TEAM_NAMES)
    except StoreError as e:
        logger.exception("Errore GET teams: %s", e)
        return _server_error("Error retrieving teams", e)
    return [TeamSummary(team_id=t.id, team_name=t.name) for t in teams]


@router.get(
    "/{bowler_id}",
    response_model=BowlerView,
    responses={404: {"description": "Bowler not found"}, 500: {"model": ErrorMessage}},
)
def get_bowler(bowler_id: int, repo: BowlerRepository = Depends(get_bowler_repository)):
    """Singolo bowler. 404 senza body se non esiste."""
    try:
        bowler = repo.get_by_id(bowler_id)
    except StoreError as e:
        logger.exception("Errore GET bowler bowler_id=%s: %s", bowler_id, e)
        return _server_error("Error retrieving bowler", e)
    if bowler is None:
        return Response(status_code=404)
    return bowler
