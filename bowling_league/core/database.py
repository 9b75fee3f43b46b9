"""SQLAlchemy engine, session, dependency e inizializzazione tabelle."""

import logging
import sqlite3
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from bowling_league.core.config import get_database_url, init_db_enabled

logger = logging.getLogger(__name__)


# Range degli INTEGER sqlite (64 bit): fuori range il driver solleva OverflowError.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def build_engine(url: str, allow_create: bool = False) -> Engine:
    """
    Engine per `url`. Per un file SQLite, senza allow_create il file deve già
    esistere: l'apertura avviene in mode=rw e un file mancante dà
    "unable to open database file" invece di uno store vuoto.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True, echo=False)

    database = parsed.database or ""
    if not database or database == ":memory:" or database.startswith("file:"):
        # FastAPI runs sync handlers in a threadpool; sqlite connections must be shareable.
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False)

    mode = "rwc" if allow_create else "rw"

    def _connect():
        return sqlite3.connect(f"file:{quote(database)}?mode={mode}", uri=True, check_same_thread=False)

    return create_engine(url, creator=_connect, pool_pre_ping=True, echo=False)


engine = build_engine(get_database_url(), allow_create=init_db_enabled())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea le tabelle mancanti. Le tabelle esistenti non vengono toccate.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from bowling_league.models import bowler, team  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")


def seed_demo_data(db: Session) -> bool:
    """
    Inserisce una lega dimostrativa (Marlins, Sharks, Terrapins) se lo store è vuoto.
    Returns True when rows were inserted.
    """
    from bowling_league.models import Bowler, Team

    if db.query(Team).count() > 0:
        logger.info("seed_demo_data: teams già presenti, nessun inserimento")
        return False

    marlins = Team(id=1, name="Marlins")
    sharks = Team(id=2, name="Sharks")
    terrapins = Team(id=3, name="Terrapins")
    db.add_all([marlins, sharks, terrapins])
    db.add_all(
        [
            Bowler(
                id=1, first_name="Barbara", middle_init="A", last_name="Fournier",
                address="457 211th St NE", city="Bothell", state="WA", zip="98011",
                phone_number="(206) 555-9876", team=marlins,
            ),
            Bowler(
                id=2, first_name="David", last_name="Fournier",
                address="457 211th St NE", city="Bothell", state="WA", zip="98011",
                phone_number="(206) 555-9876", team=marlins,
            ),
            Bowler(
                id=3, first_name="John", last_name="Kennedy",
                address="2601 Seaview Lane", city="Redmond", state="WA", zip="98052",
                phone_number="(206) 555-6688", team=sharks,
            ),
            Bowler(id=4, first_name="Sara", last_name="Sheskey", city="Duvall", team=sharks),
            Bowler(id=5, first_name="Ann", last_name="Patterson", city="Seattle", team=terrapins),
        ]
    )
    marlins.captain_id = 1
    sharks.captain_id = 3
    db.commit()
    logger.info("seed_demo_data: inseriti 3 teams e 5 bowlers")
    return True
