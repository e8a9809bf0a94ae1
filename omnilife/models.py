from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HabitCategory(str, Enum):
    health = "Health"
    productivity = "Productivity"
    mindfulness = "Mindfulness"
    finance = "Finance"
    learning = "Learning"
    other = "Other"


class Grade(str, Enum):
    a_plus = "A+"
    a = "A"
    a_minus = "A-"
    b_plus = "B+"
    b = "B"
    b_minus = "B-"
    c = "C"
    f = "F"


class Status(str, Enum):
    on_track = "On Track"
    at_risk = "At Risk"
    off_track = "Off Track"


class MonthlyStatus(str, Enum):
    """Coarser month-level label, separate from the letter grade scale."""
    excellent = "Excellent"
    good = "Good"
    average = "Average"
    needs_work = "Needs Work"


class Habit(BaseModel):
    id: str
    name: str
    category: HabitCategory = HabitCategory.other
    goal_frequency: int = 7  # sessions per week, informational only
    target_consistency: Optional[int] = None  # percent; unset means the configured default
    color: Optional[str] = None


class HabitStats(BaseModel):
    """Snapshot for one habit. Consistency is year-scoped, streaks are global."""
    model_config = ConfigDict(frozen=True)

    consistency: int
    current_streak: int
    best_streak: int
    total_completions: int
    status: Status
    grade: Grade


class HabitYearlyStats(HabitStats):
    best_month: str
    recommendation: str
    yearly_avg: int


class DetailedMonthlyStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str
    avg_consistency: int
    best_day_score: int
    worst_day_score: int
    total_habits_done: int
    total_possible: int
    grade: Grade
    status: MonthlyStatus
    habits_on_track: int
    habits_at_risk: int


class YearlyOverview(BaseModel):
    """Key insights across all habits for one year."""
    model_config = ConfigDict(frozen=True)

    year: int
    total_possible: int
    total_completions: int
    yearly_avg: int
    success_rate: int
    best_month: Optional[str] = None


class GoalProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    habit_id: str
    name: str
    goal_pct: int
    current_pct: int
    progress: float = Field(..., ge=0, le=100)
    gap: int
    achieved: bool


class HabitSummary(BaseModel):
    habit: str
    category: HabitCategory
    consistency: str  # "NN%"
    streak: int
    status: Status


class InsightSummary(BaseModel):
    """Payload handed to the external narrative generator."""
    date: str
    habits: List[HabitSummary] = Field(default_factory=list)


DEFAULT_HABITS: List[Habit] = [
    Habit(id="1", name="Morning Workout", category=HabitCategory.health, goal_frequency=5, target_consistency=85, color="#ef4444"),
    Habit(id="2", name="Read 30 Mins", category=HabitCategory.learning, goal_frequency=7, target_consistency=90, color="#f97316"),
    Habit(id="3", name="Deep Work (2h)", category=HabitCategory.productivity, goal_frequency=5, target_consistency=80, color="#f59e0b"),
    Habit(id="4", name="No Sugar", category=HabitCategory.health, goal_frequency=6, target_consistency=95, color="#84cc16"),
    Habit(id="5", name="Meditation", category=HabitCategory.mindfulness, goal_frequency=7, target_consistency=100, color="#10b981"),
    Habit(id="6", name="Track Expenses", category=HabitCategory.finance, goal_frequency=7, target_consistency=90, color="#06b6d4"),
    Habit(id="7", name="Drink 3L Water", category=HabitCategory.health, goal_frequency=7, target_consistency=100, color="#3b82f6"),
    Habit(id="8", name="Sleep by 11PM", category=HabitCategory.health, goal_frequency=7, target_consistency=85, color="#6366f1"),
]
