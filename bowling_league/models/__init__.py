from bowling_league.models.bowler import Bowler
from bowling_league.models.team import Team

__all__ = [
    "Team",
    "Bowler",
]
