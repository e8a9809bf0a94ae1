"""
Month-by-month rollups across all active habits.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from omnilife.dates import (
    MONTH_NAMES,
    days_in_month,
    month_dates,
    parse_date,
    resolve_today,
    round_half_up,
)
from omnilife.models import DetailedMonthlyStats, Habit
from omnilife.records import CompletionLog
from omnilife.services.grading import MONTHLY_ON_TRACK_THRESHOLD, grade, monthly_status
from omnilife.services.habit_stats import Records

logger = logging.getLogger("omnilife")


def _active_ids(habits: Sequence[Habit]) -> frozenset:
    return frozenset(h.id for h in habits)


def habit_month_count(habit_id: str, log: CompletionLog, year: int, month_index: int) -> int:
    return sum(1 for day in month_dates(year, month_index) if log.is_completed(habit_id, day))


def habit_month_percentage(habit: Habit, records: Records, year: int, month_index: int) -> int:
    """Rounded share of the month's days on which the habit was completed."""
    log = CompletionLog.coerce(records)
    count = habit_month_count(habit.id, log, year, month_index)
    return round_half_up(count / days_in_month(year, month_index) * 100)


def daily_score(habits: Sequence[Habit], records: Records, day) -> int:
    """Rounded percentage of active habits completed on ``day``."""
    if not habits:
        return 0
    log = CompletionLog.coerce(records)
    done = log.count_on(parse_date(day), _active_ids(habits))
    return round_half_up(done / len(habits) * 100)


def _month_stats(
    habits: Sequence[Habit],
    log: CompletionLog,
    year: int,
    month_index: int,
) -> DetailedMonthlyStats:
    active = _active_ids(habits)
    n_days = days_in_month(year, month_index)

    total_done = 0
    daily_scores: List[float] = []
    for day in month_dates(year, month_index):
        done = log.count_on(day, active)
        total_done += done
        daily_scores.append(done / len(habits) * 100 if habits else 0)

    avg = round_half_up(sum(daily_scores) / len(daily_scores)) if daily_scores else 0

    on_track = 0
    at_risk = 0
    for habit in habits:
        pct = habit_month_count(habit.id, log, year, month_index) / n_days * 100
        if pct >= MONTHLY_ON_TRACK_THRESHOLD:
            on_track += 1
        else:
            at_risk += 1

    return DetailedMonthlyStats(
        month=MONTH_NAMES[month_index],
        avg_consistency=avg,
        best_day_score=round_half_up(max(daily_scores)) if daily_scores else 0,
        worst_day_score=round_half_up(min(daily_scores)) if daily_scores else 0,
        total_habits_done=total_done,
        total_possible=n_days * len(habits),
        grade=grade(avg),
        status=monthly_status(avg),
        habits_on_track=on_track,
        habits_at_risk=at_risk,
    )


def compute_monthly_stats(
    habits: Sequence[Habit],
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> List[DetailedMonthlyStats]:
    """Twelve entries, January first. An empty habit list yields zeroed months."""
    year = resolve_today(today).year if year is None else year
    log = CompletionLog.coerce(records)
    months = [_month_stats(habits, log, year, m) for m in range(12)]
    logger.debug("monthly_stats_computed", extra={"year": year, "habits": len(habits)})
    return months
