import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from omnilife.main import app
from omnilife.models import DEFAULT_HABITS, Habit, HabitCategory

# fixed clock: mid-June of a leap year
TODAY = date(2024, 6, 15)


def span(start: date, days: int):
    """``days`` consecutive dates starting at ``start``."""
    return [start + timedelta(days=i) for i in range(days)]


def records_for(habit_id: str, days):
    return {d.isoformat(): [habit_id] for d in days}


@pytest.fixture
def habit() -> Habit:
    return Habit(id="h1", name="Morning Workout", category=HabitCategory.health, goal_frequency=5, target_consistency=90)


@pytest.fixture
def habits():
    return list(DEFAULT_HABITS[:2])


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
