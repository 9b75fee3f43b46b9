"""Pydantic schemas per API Bowlers. Forme piatte e acicliche, serializzate in camelCase."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BowlerView(BaseModel):
    """Bowler con il nome della squadra appiattito; nessun riferimento all'entità Team."""
    bowler_id: int
    bowler_last_name: str | None = None
    bowler_first_name: str | None = None
    bowler_middle_init: str | None = None
    bowler_address: str | None = None
    bowler_city: str | None = None
    bowler_state: str | None = None
    bowler_zip: str | None = None
    bowler_phone_number: str | None = None
    team_name: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TeamSummary(BaseModel):
    """Solo id e nome: la collezione bowlers resta fuori dal payload."""
    team_id: int
    team_name: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ErrorMessage(BaseModel):
    message: str
