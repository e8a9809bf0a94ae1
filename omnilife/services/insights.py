"""
Formats engine output for the external narrative generator.

The generator itself (and any network call) lives outside this package; it
only receives the JSON produced here.
"""

from datetime import date
from typing import Mapping, Optional, Sequence

from omnilife.dates import format_date, resolve_today
from omnilife.models import Habit, HabitStats, HabitSummary, InsightSummary


def build_insight_summary(
    habits: Sequence[Habit],
    stats: Mapping[str, HabitStats],
    *,
    today: Optional[date] = None,
) -> InsightSummary:
    summaries = []
    for habit in habits:
        s = stats.get(habit.id)
        if s is None:
            continue
        summaries.append(
            HabitSummary(
                habit=habit.name,
                category=habit.category,
                consistency=f"{s.consistency}%",
                streak=s.current_streak,
                status=s.status,
            )
        )
    return InsightSummary(date=format_date(resolve_today(today)), habits=summaries)


def format_insight_payload(
    habits: Sequence[Habit],
    stats: Mapping[str, HabitStats],
    *,
    today: Optional[date] = None,
) -> str:
    return build_insight_summary(habits, stats, today=today).model_dump_json()
