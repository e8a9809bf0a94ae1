"""
Per-habit statistics: yearly consistency plus global streaks.

Consistency is scoped to the requested year; current and best streak scan
the whole record set regardless of year.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional, Union

from omnilife.dates import DateLike, days_between, days_in_year, resolve_today, round_half_up
from omnilife.models import Habit, HabitStats
from omnilife.records import CompletionLog
from omnilife.services.grading import grade, status

logger = logging.getLogger("omnilife")

Records = Union[CompletionLog, Mapping[DateLike, Iterable[str]]]


def completions_in_year(habit_id: str, log: CompletionLog, year: int) -> int:
    return sum(1 for day in log.dates_for(habit_id) if day.year == year)


def days_elapsed(year: int, today: date) -> int:
    """Eligible days of ``year`` as of ``today`` (inclusive). Past years count in full."""
    if year < today.year:
        return days_in_year(year)
    return days_between(date(year, 1, 1), today) + 1


def yearly_consistency(habit_id: str, log: CompletionLog, year: int, today: date) -> int:
    days_passed = days_elapsed(year, today)
    if days_passed <= 0:
        return 0
    return round_half_up(completions_in_year(habit_id, log, year) / days_passed * 100)


def best_streak(habit_id: str, log: CompletionLog) -> int:
    best = 0
    run = 0
    previous: Optional[date] = None
    for day in log.dates_for(habit_id):
        if previous is not None and days_between(previous, day) == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def current_streak(habit_id: str, log: CompletionLog, today: date) -> int:
    """Consecutive completed days ending today; an unlogged today is a grace day."""
    streak = 0
    check = today
    while True:
        if log.is_completed(habit_id, check):
            streak += 1
        elif check != today:
            break
        check -= timedelta(days=1)
    return streak


def compute_habit_stats(
    habit: Habit,
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> HabitStats:
    today = resolve_today(today)
    year = today.year if year is None else year
    log = CompletionLog.coerce(records)

    total = completions_in_year(habit.id, log, year)
    consistency = yearly_consistency(habit.id, log, year, today)

    stats = HabitStats(
        consistency=consistency,
        current_streak=current_streak(habit.id, log, today),
        best_streak=best_streak(habit.id, log),
        total_completions=total,
        status=status(consistency),
        grade=grade(consistency),
    )
    logger.debug(
        "habit_stats_computed",
        extra={"habit_id": habit.id, "year": year, "consistency": consistency},
    )
    return stats
