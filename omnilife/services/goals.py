from datetime import date
from typing import List, Optional, Sequence

from omnilife.config import settings
from omnilife.dates import resolve_today
from omnilife.models import GoalProgress, Habit
from omnilife.records import CompletionLog
from omnilife.services.habit_stats import Records
from omnilife.services.yearly import compute_yearly_stats


def target_for(habit: Habit) -> int:
    # 0 and None both mean "not set"
    return habit.target_consistency or settings.default_target_consistency


def compute_goal_progress(
    habit: Habit,
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> GoalProgress:
    """Compare the habit's yearly average against its own target consistency."""
    stats = compute_yearly_stats(habit, records, year, today=today)
    goal_pct = target_for(habit)
    current_pct = stats.yearly_avg
    progress = current_pct / goal_pct * 100 if goal_pct > 0 else 0.0
    gap = goal_pct - current_pct

    return GoalProgress(
        habit_id=habit.id,
        name=habit.name,
        goal_pct=goal_pct,
        current_pct=current_pct,
        progress=min(progress, 100.0),
        gap=gap,
        achieved=gap <= 0,
    )


def compute_goals(
    habits: Sequence[Habit],
    records: Records,
    year: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> List[GoalProgress]:
    today = resolve_today(today)
    log = CompletionLog.coerce(records)
    return [compute_goal_progress(h, log, year, today=today) for h in habits]
