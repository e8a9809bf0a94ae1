"""
Completion record set: which habits were completed on which calendar day.

A habit ID present in a day's set means "completed that day"; absence means
"not completed". IDs of habits no longer in the active list are kept.
"""

from collections import abc
from datetime import date
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Union

from omnilife.dates import DateLike, format_date, parse_date


def _as_ids(ids: Union[str, Iterable[str], None]) -> Iterable[str]:
    # a bare string is one ID, not a sequence of characters
    if ids is None:
        return ()
    if isinstance(ids, str):
        return (ids,)
    return ids


class CompletionLog(abc.Mapping):
    """Immutable mapping of ``date`` -> frozenset of completed habit IDs."""

    __slots__ = ("_days",)

    def __init__(self, days: Optional[Mapping[DateLike, Iterable[str]]] = None):
        """Keys may be ISO date strings or ``date`` values. Bad keys raise InvalidDateError."""
        merged: Dict[date, set] = {}
        for key, ids in (days or {}).items():
            merged.setdefault(parse_date(key), set()).update(_as_ids(ids))
        self._days: Dict[date, FrozenSet[str]] = {day: frozenset(ids) for day, ids in merged.items()}

    @classmethod
    def from_mapping(cls, mapping: Mapping[DateLike, Iterable[str]]) -> "CompletionLog":
        return cls(mapping)

    @classmethod
    def coerce(cls, records: Union["CompletionLog", Mapping[DateLike, Iterable[str]]]) -> "CompletionLog":
        if isinstance(records, cls):
            return records
        return cls.from_mapping(records)

    def __getitem__(self, day: date) -> FrozenSet[str]:
        return self._days[day]

    def __iter__(self) -> Iterator[date]:
        return iter(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"CompletionLog({len(self._days)} days)"

    def completed_on(self, day: date) -> FrozenSet[str]:
        return self._days.get(day, frozenset())

    def is_completed(self, habit_id: str, day: date) -> bool:
        return habit_id in self._days.get(day, ())

    def count_on(self, day: date, habit_ids: FrozenSet[str]) -> int:
        """Completions on ``day`` restricted to ``habit_ids``."""
        return len(self.completed_on(day) & habit_ids)

    def dates_for(self, habit_id: str) -> List[date]:
        """Every day the habit was completed, oldest first."""
        return sorted(day for day, ids in self._days.items() if habit_id in ids)

    def toggled(self, habit_id: str, day: DateLike) -> "CompletionLog":
        """Return a new log with the habit's completion on ``day`` flipped."""
        day = parse_date(day)
        days = dict(self._days)
        current = days.get(day, frozenset())
        if habit_id in current:
            days[day] = current - {habit_id}
        else:
            days[day] = current | {habit_id}
        return CompletionLog(days)

    def to_mapping(self) -> Dict[str, List[str]]:
        return {format_date(day): sorted(ids) for day, ids in sorted(self._days.items())}
