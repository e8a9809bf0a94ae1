from omnilife.services.goals import compute_goal_progress, compute_goals
from omnilife.services.grading import grade, monthly_status, recommendation, status
from omnilife.services.habit_stats import best_streak, compute_habit_stats, current_streak
from omnilife.services.insights import build_insight_summary, format_insight_payload
from omnilife.services.monthly import compute_monthly_stats, daily_score, habit_month_percentage
from omnilife.services.yearly import compute_yearly_overview, compute_yearly_stats, rank_habits
