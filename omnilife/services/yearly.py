"""
Yearly views: per-habit summary with best month and recommendation, the
dashboard overview across all habits, and the top-habits ranking.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from omnilife.dates import MONTH_NAMES, days_in_month, resolve_today, round_half_up
from omnilife.models import Habit, HabitYearlyStats, YearlyOverview
from omnilife.records import CompletionLog
from omnilife.services.grading import recommendation
from omnilife.services.habit_stats import Records, compute_habit_stats
from omnilife.services.monthly import compute_monthly_stats, habit_month_count

logger = logging.getLogger("omnilife")

NO_BEST_MONTH = "-"


def compute_yearly_stats(
    habit: Habit,
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> HabitYearlyStats:
    today = resolve_today(today)
    year = today.year if year is None else year
    log = CompletionLog.coerce(records)
    base = compute_habit_stats(habit, log, year, today=today)

    best_month = NO_BEST_MONTH
    best_pct = -1.0
    days_active = 0
    for month_index, name in enumerate(MONTH_NAMES):
        count = habit_month_count(habit.id, log, year, month_index)
        pct = count / days_in_month(year, month_index) * 100
        # strict comparison: the earlier month keeps a tie
        if pct > best_pct:
            best_pct = pct
            best_month = name
        days_active += count

    return HabitYearlyStats(
        **base.model_dump(exclude={"total_completions"}),
        total_completions=days_active,
        best_month=best_month,
        recommendation=recommendation(base.grade),
        yearly_avg=base.consistency,
    )


def rank_habits(
    habits: Sequence[Habit],
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> List[Tuple[Habit, HabitYearlyStats]]:
    """Habits ordered by yearly average, best first. Ties keep input order."""
    today = resolve_today(today)
    log = CompletionLog.coerce(records)
    rows = [(h, compute_yearly_stats(h, log, year, today=today)) for h in habits]
    return sorted(rows, key=lambda row: row[1].yearly_avg, reverse=True)


def compute_yearly_overview(
    habits: Sequence[Habit],
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> YearlyOverview:
    year = resolve_today(today).year if year is None else year
    months = compute_monthly_stats(habits, records, year)

    total_possible = sum(m.total_possible for m in months)
    total_completions = sum(m.total_habits_done for m in months)
    yearly_avg = round_half_up(sum(m.avg_consistency for m in months) / len(months)) if months else 0
    success_rate = round_half_up(total_completions / total_possible * 100) if total_possible > 0 else 0

    best = None
    for month in months:
        if best is None or month.avg_consistency > best.avg_consistency:
            best = month

    overview = YearlyOverview(
        year=year,
        total_possible=total_possible,
        total_completions=total_completions,
        yearly_avg=yearly_avg,
        success_rate=success_rate,
        best_month=best.month if best else None,
    )
    logger.debug("yearly_overview_computed", extra={"year": year, "success_rate": success_rate})
    return overview
