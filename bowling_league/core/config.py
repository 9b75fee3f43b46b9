"""Application configuration. Load from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///BowlingLeague.sqlite"

_TRUTHY = {"1", "true", "yes", "on"}


def get_database_url() -> str:
    """Return DATABASE_URL from environment, defaulting to the local SQLite file."""
    url = os.environ.get("DATABASE_URL", "").strip()
    return url or DEFAULT_DATABASE_URL


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_file() -> str | None:
    """Optional path of a log file, in addition to stderr."""
    path = os.environ.get("LOG_FILE", "").strip()
    return path or None


def expose_error_detail() -> bool:
    """Whether 500 responses include the underlying store error text."""
    return os.environ.get("EXPOSE_ERROR_DETAIL", "").strip().lower() in _TRUTHY


def get_bowlers_api_base_url() -> str | None:
    """Base URL used by the bowler table page. None means in-process calls."""
    url = os.environ.get("BOWLERS_API_BASE_URL", "").strip()
    return url.rstrip("/") or None


def seed_demo_data_enabled() -> bool:
    """Seed the demo league at startup when the store is empty (local development)."""
    return os.environ.get("SEED_DEMO_DATA", "").strip().lower() in _TRUTHY


def init_db_enabled() -> bool:
    """
    Create missing tables (and a missing SQLite file) at startup.
    Off by default: the store is expected to pre-exist. Seeding implies it.
    """
    return os.environ.get("INIT_DB", "").strip().lower() in _TRUTHY or seed_demo_data_enabled()
