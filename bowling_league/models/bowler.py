"""Bowler ORM model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bowling_league.core.database import Base


class Bowler(Base):
    __tablename__ = "Bowlers"

    id = Column("BowlerID", Integer, primary_key=True, index=True)
    last_name = Column("BowlerLastName", String(50), nullable=True)
    first_name = Column("BowlerFirstName", String(50), nullable=True)
    middle_init = Column("BowlerMiddleInit", String(1), nullable=True)
    address = Column("BowlerAddress", String(50), nullable=True)
    city = Column("BowlerCity", String(50), nullable=True)
    state = Column("BowlerState", String(2), nullable=True)
    zip = Column("BowlerZip", String(10), nullable=True)
    phone_number = Column("BowlerPhoneNumber", String(14), nullable=True)
    team_id = Column("TeamID", Integer, ForeignKey("Teams.TeamID"), nullable=False, index=True)

    team = relationship("Team", back_populates="bowlers")
