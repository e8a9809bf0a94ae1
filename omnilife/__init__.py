"""
OmniLife habit consistency & streak engine.

Turns sparse "habit completed on date D" records into streaks, consistency
percentages, grades and monthly/yearly rollups.
"""

from omnilife.models import (
    DEFAULT_HABITS,
    DetailedMonthlyStats,
    Grade,
    Habit,
    HabitCategory,
    HabitStats,
    HabitYearlyStats,
    MonthlyStatus,
    Status,
)
from omnilife.records import CompletionLog
from omnilife.services.habit_stats import compute_habit_stats
from omnilife.services.monthly import compute_monthly_stats
from omnilife.services.yearly import compute_yearly_stats

__version__ = "2.0.0"

__all__ = [
    "DEFAULT_HABITS",
    "CompletionLog",
    "DetailedMonthlyStats",
    "Grade",
    "Habit",
    "HabitCategory",
    "HabitStats",
    "HabitYearlyStats",
    "MonthlyStatus",
    "Status",
    "compute_habit_stats",
    "compute_monthly_stats",
    "compute_yearly_stats",
]
