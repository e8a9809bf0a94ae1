import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException

from omnilife.dates import InvalidDateError, resolve_today
from omnilife.models import (
    DetailedMonthlyStats,
    GoalProgress,
    HabitStats,
    HabitYearlyStats,
    InsightSummary,
    YearlyOverview,
)
from omnilife.records import CompletionLog
from omnilife.schema.request import StatsRequest
from omnilife.services.goals import compute_goals
from omnilife.services.habit_stats import compute_habit_stats
from omnilife.services.insights import build_insight_summary
from omnilife.services.monthly import compute_monthly_stats
from omnilife.services.yearly import compute_yearly_overview, compute_yearly_stats

logger = logging.getLogger("omnilife")

router = APIRouter(prefix="/api/stats", tags=["stats"])


def _unpack(body: StatsRequest):
    try:
        log = CompletionLog.from_mapping(body.records)
    except InvalidDateError as e:
        logger.info("stats_request_rejected", extra={"key": str(e.value)})
        raise HTTPException(status_code=422, detail=str(e))
    today = resolve_today(body.today)
    year = body.year if body.year is not None else today.year
    return log, year, today


@router.post("/habits", response_model=Dict[str, HabitStats])
def habit_stats(body: StatsRequest):
    log, year, today = _unpack(body)
    return {h.id: compute_habit_stats(h, log, year, today=today) for h in body.habits}


@router.post("/monthly", response_model=List[DetailedMonthlyStats])
def monthly_stats(body: StatsRequest):
    log, year, _ = _unpack(body)
    return compute_monthly_stats(body.habits, log, year)


@router.post("/yearly", response_model=List[HabitYearlyStats])
def yearly_stats(body: StatsRequest):
    log, year, today = _unpack(body)
    return [compute_yearly_stats(h, log, year, today=today) for h in body.habits]


@router.post("/overview", response_model=YearlyOverview)
def overview(body: StatsRequest):
    log, year, _ = _unpack(body)
    return compute_yearly_overview(body.habits, log, year)


@router.post("/goals", response_model=List[GoalProgress])
def goals(body: StatsRequest):
    log, year, today = _unpack(body)
    return compute_goals(body.habits, log, year, today=today)


@router.post("/insights", response_model=InsightSummary)
def insights(body: StatsRequest):
    log, year, today = _unpack(body)
    stats = {h.id: compute_habit_stats(h, log, year, today=today) for h in body.habits}
    return build_insight_summary(body.habits, stats, today=today)
