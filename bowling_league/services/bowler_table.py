"""
Client della tabella bowlers: chiama l'API, normalizza la forma della risposta
e prepara le righe da renderizzare con valori di fallback per campo.
Gli errori non escono mai da qui: diventano un messaggio sulla tabella.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

MISSING_FIELD = "N/A"
MISSING_NAME = "Unknown"

EMPTY_OBJECT_ERROR = "Received an empty object from the server."
NULL_BODY_ERROR = "Received null or undefined data from the server."
UNEXPECTED_SHAPE_ERROR = "Received data in an unexpected format."
NO_RESPONSE_ERROR = "No response received from server. Please check your connection."


@dataclass
class NormalizedBowlers:
    bowlers: list[Any]
    error: str | None = None


@dataclass(frozen=True)
class BowlerRow:
    key: str
    name: str
    team: str
    address: str
    city: str
    state: str
    zip: str
    phone: str


@dataclass
class BowlerTable:
    rows: list[BowlerRow] = field(default_factory=list)
    error: str | None = None


def normalize_bowlers(body: Any) -> NormalizedBowlers:
    """
    Ordered fallback, first match wins:
    list -> "value" list -> "result" list -> values of a mapping -> error.
    """
    if body is None:
        logger.error("Response body is null")
        return NormalizedBowlers([], NULL_BODY_ERROR)
    if isinstance(body, list):
        return NormalizedBowlers(body)
    if isinstance(body, Mapping):
        if isinstance(body.get("value"), list):
            return NormalizedBowlers(body["value"])
        if isinstance(body.get("result"), list):
            return NormalizedBowlers(body["result"])
        values = list(body.values())
        if not values:
            logger.error("Response body is an empty object")
            return NormalizedBowlers([], EMPTY_OBJECT_ERROR)
        logger.warning("Response body is an object, using its %s values as rows", len(values))
        return NormalizedBowlers(values)
    logger.error("Unexpected response body type: %s", type(body).__name__)
    return NormalizedBowlers([], UNEXPECTED_SHAPE_ERROR)


def format_bowler_row(record: Any, index: int = 0) -> BowlerRow:
    """Una riga sempre renderizzabile, anche da record parziali o non-dict."""
    r = record if isinstance(record, Mapping) else {}
    middle = r.get("bowlerMiddleInit")
    name = (
        f"{r.get('bowlerFirstName') or MISSING_NAME} "
        f"{str(middle) + '. ' if middle else ''}"
        f"{r.get('bowlerLastName') or MISSING_NAME}"
    )
    bowler_id = r.get("bowlerId")
    return BowlerRow(
        key=str(bowler_id) if bowler_id else f"row-{index}",
        name=name,
        team=r.get("teamName") or MISSING_FIELD,
        address=r.get("bowlerAddress") or MISSING_FIELD,
        city=r.get("bowlerCity") or MISSING_FIELD,
        state=r.get("bowlerState") or MISSING_FIELD,
        zip=r.get("bowlerZip") or MISSING_FIELD,
        phone=r.get("bowlerPhoneNumber") or MISSING_FIELD,
    )


def build_table(body: Any) -> BowlerTable:
    normalized = normalize_bowlers(body)
    rows = [format_bowler_row(r, i) for i, r in enumerate(normalized.bowlers)]
    return BowlerTable(rows=rows, error=normalized.error)


def _error_detail(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:300]
    if isinstance(data, Mapping):
        for key in ("message", "title", "detail"):
            if data.get(key):
                return str(data[key])
    return str(data)[:300]


class BowlerTableClient:
    """Client async verso l'API bowlers. Il chiamante possiede l'httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def _get(self, path: str) -> tuple[httpx.Response | None, str | None]:
        try:
            resp = await self._client.get(path)
        except httpx.RequestError as e:
            logger.exception("Nessuna risposta da %s: %s", path, e)
            return None, NO_RESPONSE_ERROR
        if resp.status_code >= 400:
            logger.error("GET %s -> %s", path, resp.status_code)
            return None, f"Server error: {resp.status_code} - {_error_detail(resp)}"
        return resp, None

    async def fetch(self) -> BowlerTable:
        resp, error = await self._get("/api/bowlers")
        if resp is None:
            return BowlerTable(error=error)
        try:
            body = resp.json()
        except ValueError:
            logger.error("GET /api/bowlers returned a non-JSON body")
            return BowlerTable(error=UNEXPECTED_SHAPE_ERROR)
        table = build_table(body)
        logger.info("Bowler table: %s rows, error=%s", len(table.rows), table.error)
        return table

    async def fetch_test_result(self) -> tuple[Any, str | None]:
        resp, error = await self._get("/api/test")
        if resp is None:
            return None, error
        try:
            return resp.json(), None
        except ValueError:
            return None, UNEXPECTED_SHAPE_ERROR
