"""Shared pytest fixtures for faretrack tests."""

import os
import tempfile
from datetime import date

import pytest

from faretrack.database.factories import create_sqlite_database
from faretrack.domain.favorite import FavoriteRouteService
from faretrack.domain.period import PeriodService
from faretrack.domain.settings import SettingsService
from faretrack.domain.stats import StatsService
from faretrack.domain.trip import TripService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def period_service(temp_db):
    """Create a PeriodService with a temporary database."""
    return PeriodService(temp_db)


@pytest.fixture
def trip_service(temp_db):
    """Create a TripService with a temporary database."""
    return TripService(temp_db)


@pytest.fixture
def stats_service(temp_db):
    """Create a StatsService with a temporary database."""
    return StatsService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def route_service(temp_db):
    """Create a FavoriteRouteService with a temporary database."""
    return FavoriteRouteService(temp_db)


@pytest.fixture
def active_period(period_service):
    """Start a period today and return it."""
    period_id = period_service.start_period(start_date=date.today())
    return period_service.get_period(period_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
