"""
Probe diagnostico dello store: connessione diretta (fuori dai repository),
esistenza file e tabelle, conteggi righe. Solo lettura, mai eccezioni verso il chiamante.
"""

import logging
import os
from collections.abc import Iterable
from typing import Any

from sqlalchemy import bindparam, create_engine, inspect, text
from sqlalchemy.engine import Engine, make_url

logger = logging.getLogger(__name__)

TEAMS_BY_NAME_SQL = text(
    "SELECT TeamID, TeamName FROM Teams WHERE TeamName IN :names ORDER BY TeamID"
).bindparams(bindparam("names", expanding=True))

FILTERED_BOWLERS_COUNT_SQL = text("""
SELECT COUNT(*)
FROM Bowlers b
JOIN Teams t ON b.TeamID = t.TeamID
WHERE t.TeamName IN :names
""").bindparams(bindparam("names", expanding=True))


def sqlite_file_path(database_url: str) -> str | None:
    """Path of the SQLite file behind `database_url`, None for other backends or in-memory."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return None
    database = url.database or ""
    if not database or database == ":memory:" or database.startswith("file:"):
        return None
    return database


class StoreHealthProbe:
    """
    Esegue i controlli di salute dello store e restituisce un dict pronto per JSON.
    Un engine esplicito permette di puntare il probe a uno store già aperto (test).
    """

    def __init__(self, database_url: str, team_names: Iterable[str], engine: Engine | None = None):
        self._database_url = database_url
        self._team_names = sorted(set(team_names))
        self._engine = engine

    def run(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        try:
            url = make_url(self._database_url)
            result["connectionString"] = url.render_as_string(hide_password=True)
            db_path = sqlite_file_path(self._database_url)
            result["dbPath"] = db_path
            if db_path is not None:
                file_exists = os.path.isfile(db_path)
                result["fileExists"] = file_exists
                if not file_exists:
                    logger.warning("Database file not found at %s (cwd=%s)", db_path, os.getcwd())
                    return result
                result["fileSize"] = os.path.getsize(db_path)

            owns_engine = self._engine is None
            engine = self._engine or create_engine(self._database_url)
            try:
                self._probe(engine, result)
            finally:
                if owns_engine:
                    engine.dispose()
        except Exception as e:
            logger.exception("Store probe failed: %s", e)
            result["error"] = f"{type(e).__name__}: {e}"
        return result

    def _probe(self, engine: Engine, result: dict[str, Any]) -> None:
        with engine.connect() as conn:
            result["connectionOpened"] = True

            insp = inspect(conn)
            result["teamsTableExists"] = insp.has_table("Teams")
            result["bowlersTableExists"] = insp.has_table("Bowlers")

            result["teamsCount"] = conn.execute(text("SELECT COUNT(*) FROM Teams")).scalar() or 0
            result["bowlersCount"] = conn.execute(text("SELECT COUNT(*) FROM Bowlers")).scalar() or 0

            rows = conn.execute(TEAMS_BY_NAME_SQL, {"names": self._team_names}).fetchall()
            result["teams"] = [{"teamId": r[0], "teamName": r[1]} for r in rows]

            result["filteredBowlersCount"] = (
                conn.execute(FILTERED_BOWLERS_COUNT_SQL, {"names": self._team_names}).scalar() or 0
            )


def log_startup_report(result: dict[str, Any]) -> None:
    """Riassunto del probe nei log all'avvio; non blocca l'applicazione."""
    if "error" in result:
        logger.error("Store probe all'avvio fallito: %s", result["error"])
        return
    logger.info("Using database connection string: %s", result.get("connectionString"))
    if result.get("fileExists") is False:
        logger.warning("Database file not found at %s", result.get("dbPath"))
        return
    if result.get("dbPath"):
        logger.info("Database file found at %s (%s bytes)", result["dbPath"], result.get("fileSize"))
    logger.info(
        "Teams table exists: %s, Bowlers table exists: %s",
        result.get("teamsTableExists"),
        result.get("bowlersTableExists"),
    )
