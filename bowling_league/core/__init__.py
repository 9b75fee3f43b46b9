from bowling_league.core.config import get_database_url
from bowling_league.core.database import Base, SessionLocal, engine, get_db, init_db, seed_demo_data

__all__ = [
    "get_database_url",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "seed_demo_data",
]
