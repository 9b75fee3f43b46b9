"""Errori dello store: tassonomia unica per repository e router."""

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError


class StoreError(RuntimeError):
    """Base error for any failure talking to the store. The cause is kept in __cause__."""


class StoreUnavailable(StoreError):
    """Store missing, unreachable or impossible to open."""


class QueryFailure(StoreError):
    """Malformed query, missing table or constraint violation."""


# OperationalError covers both open/lock failures and bad SQL ("syntax error",
# "no such column", "no such table"); only these markers mean the store is unavailable.
UNAVAILABLE_MARKERS = (
    "unable to open database file",
    "database is locked",
    "disk i/o error",
    "could not connect",
    "connection refused",
    "connection to server",
    "server closed the connection",
)


def translate_store_error(exc: SQLAlchemyError, action: str) -> StoreError:
    """Map a SQLAlchemy exception to the store taxonomy. Caller raises ... from exc."""
    if isinstance(exc, InterfaceError):
        return StoreUnavailable(f"{action}: {exc}")
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StoreUnavailable(f"{action}: {exc}")
    if isinstance(exc, OperationalError):
        message = str(exc).lower()
        if any(marker in message for marker in UNAVAILABLE_MARKERS):
            return StoreUnavailable(f"{action}: {exc}")
    return QueryFailure(f"{action}: {exc}")
