"""Pytest configuration and fixtures."""

import os

# Must be set before bowling_league.core.database builds its engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bowling_league.core.database import Base, get_db
from bowling_league.main import app
from bowling_league.models import Bowler, Team
from bowling_league.routers.api_test import get_store_probe
from bowling_league.routers.bowlers import FEATURED_TEAM_NAMES
from bowling_league.services.store_probe import StoreHealthProbe


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def league(session):
    """Marlins and Sharks plus one team outside the featured set."""
    marlins = Team(id=1, name="Marlins")
    sharks = Team(id=2, name="Sharks")
    orcas = Team(id=3, name="Orcas")
    session.add_all([marlins, sharks, orcas])
    session.add_all(
        [
            Bowler(id=10, first_name="Amy", last_name="Lee", city="Bothell", state="WA", team=marlins),
            Bowler(id=11, first_name="Ben", middle_init="Q", last_name="Ortiz", team=marlins),
            Bowler(id=20, first_name="Cara", last_name="Diaz", zip="98052", team=sharks),
            Bowler(id=30, first_name="Dan", last_name="Wu", team=orcas),
        ]
    )
    session.commit()
    return {"marlins": marlins, "sharks": sharks, "orcas": orcas}


@pytest.fixture
def client(engine, session_factory):
    """TestClient bound to the test engine; startup hooks are not run."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_store_probe] = lambda: StoreHealthProbe(
        "sqlite://", FEATURED_TEAM_NAMES, engine=engine
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
