"""Repository teams: sola lettura."""

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bowling_league.core.database import fits_int64
from bowling_league.core.errors import translate_store_error
from bowling_league.models import Team

logger = logging.getLogger(__name__)


class TeamRepository:
    def __init__(self, db: Session):
        self._db = db

    def list_all(self) -> list[Team]:
        logger.info("Getting all teams")
        try:
            return self._db.query(Team).all()
        except SQLAlchemyError as e:
            raise translate_store_error(e, "list_all teams") from e

    def list_by_name(self, names: Iterable[str]) -> list[Team]:
        team_names = sorted(set(names))
        logger.info("Getting teams with names: %s", ", ".join(team_names))
        if not team_names:
            return []
        try:
            return self._db.query(Team).filter(Team.name.in_(team_names)).all()
        except SQLAlchemyError as e:
            raise translate_store_error(e, "list_by_name") from e

    def get_by_id(self, team_id: int) -> Team | None:
        logger.info("Getting team with ID: %s", team_id)
        if not fits_int64(team_id):
            logger.warning("Team with ID %s not found (outside INTEGER range)", team_id)
            return None
        try:
            team = self._db.get(Team, team_id)
        except SQLAlchemyError as e:
            raise translate_store_error(e, f"get_by_id team_id={team_id}") from e
        if team is None:
            logger.warning("Team with ID %s not found", team_id)
        return team
