"""
Percentage -> grade / status mappings.

Three separate scales live here and are intentionally not unified: the
letter grade, the per-habit status, and the coarser monthly label.
Callers round the percentage first; nothing here rounds.
"""

from typing import List, Tuple, Union

from omnilife.models import Grade, MonthlyStatus, Status

Number = Union[int, float]

GRADE_THRESHOLDS: List[Tuple[Number, Grade]] = [
    (90, Grade.a_plus),
    (85, Grade.a),
    (80, Grade.a_minus),
    (75, Grade.b_plus),
    (70, Grade.b),
    (65, Grade.b_minus),
    (60, Grade.c),
]

STATUS_THRESHOLDS: List[Tuple[Number, Status]] = [
    (70, Status.on_track),
    (50, Status.at_risk),
]

MONTHLY_STATUS_THRESHOLDS: List[Tuple[Number, MonthlyStatus]] = [
    (80, MonthlyStatus.excellent),
    (70, MonthlyStatus.good),
    (60, MonthlyStatus.average),
]

# Fixed month-level cut-off; not the habit's own target_consistency
MONTHLY_ON_TRACK_THRESHOLD = 70

DEFAULT_RECOMMENDATION = "Keep it up!"


def grade(percentage: Number) -> Grade:
    for threshold, value in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return value
    return Grade.f


def status(percentage: Number) -> Status:
    for threshold, value in STATUS_THRESHOLDS:
        if percentage >= threshold:
            return value
    return Status.off_track


def monthly_status(percentage: Number) -> MonthlyStatus:
    for threshold, value in MONTHLY_STATUS_THRESHOLDS:
        if percentage >= threshold:
            return value
    return MonthlyStatus.needs_work


def recommendation(value: Union[Grade, str]) -> str:
    """Coaching line for a letter grade. B+ and B- get the generic line."""
    letter = value.value if isinstance(value, Grade) else str(value)
    if letter == "F":
        return "Start smaller, aim for 3 days/week."
    if letter in ("C", "D"):
        return "Try to stack this habit with another."
    if letter == "B":
        return "Good, push for a longer streak."
    if letter.startswith("A"):
        return "Excellent! Mentor others."
    return DEFAULT_RECOMMENDATION
