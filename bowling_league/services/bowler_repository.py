"""
Repository bowlers: sola lettura, proiezione su BowlerView.
Una sola query con join su Teams; nessun N+1, nessun grafo Team <-> Bowler serializzato.
"""

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from bowling_league.core.database import fits_int64
from bowling_league.core.errors import translate_store_error
from bowling_league.models import Bowler, Team
from bowling_league.schemas.bowlers import BowlerView

logger = logging.getLogger(__name__)


def _to_view(row) -> BowlerView:
    return BowlerView(
        bowler_id=row.bowler_id,
        bowler_last_name=row.bowler_last_name,
        bowler_first_name=row.bowler_first_name,
        bowler_middle_init=row.bowler_middle_init,
        bowler_address=row.bowler_address,
        bowler_city=row.bowler_city,
        bowler_state=row.bowler_state,
        bowler_zip=row.bowler_zip,
        bowler_phone_number=row.bowler_phone_number,
        team_name=row.team_name,
    )


class BowlerRepository:
    """Query object over a request-scoped session."""

    def __init__(self, db: Session):
        self._db = db

    def _view_query(self) -> Query:
        return (
            self._db.query(
                Bowler.id.label("bowler_id"),
                Bowler.last_name.label("bowler_last_name"),
                Bowler.first_name.label("bowler_first_name"),
                Bowler.middle_init.label("bowler_middle_init"),
                Bowler.address.label("bowler_address"),
                Bowler.city.label("bowler_city"),
                Bowler.state.label("bowler_state"),
                Bowler.zip.label("bowler_zip"),
                Bowler.phone_number.label("bowler_phone_number"),
                Team.name.label("team_name"),
            )
            .join(Team, Bowler.team_id == Team.id)
        )

    def list_all(self) -> list[BowlerView]:
        logger.info("Getting all bowlers")
        try:
            rows = self._view_query().all()
        except SQLAlchemyError as e:
            raise translate_store_error(e, "list_all bowlers") from e
        return [_to_view(r) for r in rows]

    def list_by_team(self, names: Iterable[str]) -> list[BowlerView]:
        """
        Tutti i bowler la cui squadra ha nome esattamente in `names`.
        Niente normalizzazione maiuscole/minuscole, niente match parziale.
        """
        team_names = sorted(set(names))
        logger.info("Getting bowlers for teams: %s", ", ".join(team_names))
        if not team_names:
            return []
        try:
            rows = self._view_query().filter(Team.name.in_(team_names)).all()
        except SQLAlchemyError as e:
            raise translate_store_error(e, "list_by_team") from e
        logger.info("Found %s bowlers for teams %s", len(rows), team_names)
        return [_to_view(r) for r in rows]

    def get_by_id(self, bowler_id: int) -> BowlerView | None:
        logger.info("Getting bowler with ID: %s", bowler_id)
        if not fits_int64(bowler_id):
            logger.warning("Bowler with ID %s not found (outside INTEGER range)", bowler_id)
            return None
        try:
            row = self._view_query().filter(Bowler.id == bowler_id).first()
        except SQLAlchemyError as e:
            raise translate_store_error(e, f"get_by_id bowler_id={bowler_id}") from e
        if row is None:
            logger.warning("Bowler with ID %s not found", bowler_id)
            return None
        return _to_view(row)
