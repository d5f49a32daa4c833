"""Pytest fixtures for rooted tests."""

from __future__ import annotations

import tempfile
from datetime import date, timedelta
from pathlib import Path

import pytest

from rooted.calories.models import DailyTracking, FitnessGoal, UserProfile
from rooted.config import reload_settings
from rooted.db.connection import DatabaseConnection, set_db
from rooted.storage import InMemoryCalorieStore, SQLiteCalorieStore


@pytest.fixture
def temp_db():
    """Create a temporary database with schema."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = DatabaseConnection(db_path)
    db.initialize_schema()

    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture(params=["memory", "sqlite"])
def store(request, temp_db):
    """Each store backend in turn."""
    if request.param == "memory":
        return InMemoryCalorieStore()
    return SQLiteCalorieStore(temp_db)


@pytest.fixture
def female_profile() -> UserProfile:
    """30 year old woman, 65 in, 150 lbs, moderately active.

    BMR = 1401.263, TDEE = round(1401.263 × 1.55) = 2172
    """
    return UserProfile(
        age=30,
        sex="female",
        height_inches=65,
        weight_lbs=150,
        activity_level="moderate",
    )


@pytest.fixture
def lose_goal() -> FitnessGoal:
    """Lose 1 lb/week down to 140 lbs."""
    return FitnessGoal(
        goal_type="lose_weight",
        target_weight_lbs=140,
        weekly_goal_lbs=1.0,
        start_date=date(2024, 1, 1),
        target_date=date(2024, 3, 1),
    )


def _make_week(target: float, consumed: float, start: date = date(2024, 1, 1), days: int = 7):
    """Build consecutive tracked days with the same target and intake."""
    return [
        DailyTracking.for_day(start + timedelta(days=i), target, consumed)
        for i in range(days)
    ]


@pytest.fixture
def cli_env(temp_db, tmp_path, monkeypatch):
    """Point the CLI at a temporary database and an empty config."""
    monkeypatch.setenv("ROOTED_CONFIG", str(tmp_path / "config.yaml"))
    reload_settings()
    set_db(temp_db)

    yield temp_db

    set_db(None)
    reload_settings()


@pytest.fixture
def make_week():
    """Factory for consecutive tracked days."""
    return _make_week
