"""Team ORM model. Mappa la tabella legacy Teams (colonne PascalCase)."""

from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from bowling_league.core.database import Base


class Team(Base):
    __tablename__ = "Teams"
    __table_args__ = (CheckConstraint("length(TeamName) > 0", name="ck_teams_name_not_empty"),)

    id = Column("TeamID", Integer, primary_key=True, index=True)
    name = Column("TeamName", String(50), nullable=False)
    # Riferimento al capitano senza vincolo FK: Bowlers punta già a Teams.
    captain_id = Column("CaptainID", Integer, nullable=True)

    bowlers = relationship("Bowler", back_populates="team")
