from datetime import date
from conftest import TODAY, records_for, span
from omnilife.models import Grade, Habit
from omnilife.services.habit_stats import compute_habit_stats
from omnilife.services.yearly import compute_yearly_overview, compute_yearly_stats, rank_habits


def test_yearly_extends_base_snapshot(habit):
    records = records_for(habit.id, span(date(2023, 1, 1), 365))
    base = compute_habit_stats(habit, records, 2023, today=TODAY)
    yearly = compute_yearly_stats(habit, records, 2023, today=TODAY)
    assert yearly.consistency == base.consistency == 100
    assert yearly.yearly_avg == yearly.consistency
    assert yearly.best_streak == base.best_streak
    assert yearly.grade == Grade.a_plus
    assert yearly.recommendation == "Excellent! Mentor others."
    assert yearly.total_completions == 365


def test_best_month_tie_goes_to_earlier_month(habit):
    records = records_for(habit.id, span(date(2023, 3, 1), 31) + span(date(2023, 1, 1), 31))
    yearly = compute_yearly_stats(habit, records, 2023, today=TODAY)
    assert yearly.best_month == "January"


def test_best_month_uses_percentage_not_count(habit):
    # 28/28 in February beats 30/31 in March
    records = records_for(habit.id, span(date(2023, 2, 1), 28) + span(date(2023, 3, 1), 30))
    yearly = compute_yearly_stats(habit, records, 2023, today=TODAY)
    assert yearly.best_month == "February"


def test_no_completions_reports_january_and_f(habit):
    yearly = compute_yearly_stats(habit, {}, 2023, today=TODAY)
    assert yearly.best_month == "January"
    assert yearly.total_completions == 0
    assert yearly.grade == Grade.f
    assert yearly.recommendation == "Start smaller, aim for 3 days/week."


def test_total_completions_counts_only_the_year(habit):
    records = records_for(habit.id, span(date(2023, 12, 25), 14))
    yearly = compute_yearly_stats(habit, records, 2024, today=TODAY)
    assert yearly.total_completions == 7


def test_recommendation_for_b_grade(habit):
    # 256/365 = 70.1% -> B
    records = records_for(habit.id, span(date(2023, 1, 1), 256))
    yearly = compute_yearly_stats(habit, records, 2023, today=TODAY)
    assert yearly.grade == Grade.b
    assert yearly.recommendation == "Good, push for a longer streak."


def test_yearly_serializes_to_json(habit):
    yearly = compute_yearly_stats(habit, records_for(habit.id, [date(2024, 6, 14)]), 2024, today=TODAY)
    data = yearly.model_dump(mode="json")
    assert data["grade"] == "F"
    assert data["status"] == "Off Track"
    assert data["best_month"] == "June"
    assert data["current_streak"] == 1


def test_rank_habits_orders_by_yearly_average():
    slow = Habit(id="slow", name="Slow")
    fast = Habit(id="fast", name="Fast")
    idle = Habit(id="idle", name="Idle")
    records = {}
    for d in span(date(2023, 1, 1), 200):
        records[d.isoformat()] = ["fast"]
    for d in span(date(2023, 1, 1), 50):
        records[d.isoformat()].append("slow")
    ranked = rank_habits([idle, slow, fast], records, 2023, today=TODAY)
    assert [h.id for h, _ in ranked] == ["fast", "slow", "idle"]
    assert ranked[0][1].yearly_avg == 55


def test_overview_across_habits():
    a = Habit(id="a", name="A")
    b = Habit(id="b", name="B")
    records = {d.isoformat(): ["a", "b"] for d in span(date(2023, 3, 1), 31)}
    overview = compute_yearly_overview([a, b], records, 2023)
    assert overview.year == 2023
    assert overview.total_possible == 730
    assert overview.total_completions == 62
    assert overview.success_rate == 8
    assert overview.yearly_avg == 8
    assert overview.best_month == "March"


def test_overview_without_habits():
    overview = compute_yearly_overview([], {}, 2023)
    assert overview.total_possible == 0
    assert overview.success_rate == 0
    assert overview.yearly_avg == 0
    assert overview.best_month == "January"


def test_overview_average_rounds_half_up():
    # April 9/30 = 30% is the only active month: 30 / 12 = 2.5
    a = Habit(id="a", name="A")
    records = {d.isoformat(): ["a"] for d in span(date(2023, 4, 1), 9)}
    overview = compute_yearly_overview([a], records, 2023)
    assert overview.yearly_avg == 3
    assert overview.success_rate == 2
    assert overview.best_month == "April"
