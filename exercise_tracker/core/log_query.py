"""Log Query — the date window and result cap applied to a user's exercise log.

Invariants:
    - Both bounds are inclusive and independently optional
    - limit is None (no cap) or a positive integer no larger than INT32_MAX
    - build_log_query raises InvalidFieldError for unparsable bounds; an unparsable
      or zero limit means "no cap", a negative limit caps at its absolute value
    - Pure: no IO, no clock

Design Decisions:
    - Frozen dataclass: a query is a value, shared between service and repository
"""

from dataclasses import dataclass
from datetime import date

from exercise_tracker.core.errors import InvalidFieldError
from exercise_tracker.core.parsing import (
    INT32_MAX, parse_calendar_date, parse_leading_int,
)


@dataclass(frozen=True)
class LogQuery:
    """Filter and cap for a log retrieval."""
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None

    @property
    def has_date_filter(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    def matches(self, day: date) -> bool:
        """Whether an entry dated `day` falls inside the window."""
        if self.date_from is not None and day < self.date_from:
            return False
        if self.date_to is not None and day > self.date_to:
            return False
        return True


def _parse_bound(field: str, raw: str | None) -> date | None:
    if raw is None or not raw.strip():
        return None
    parsed = parse_calendar_date(raw)
    if parsed is None:
        raise InvalidFieldError(field, "Invalid date")
    return parsed


def _normalize_limit(raw: str | None) -> int | None:
    value = parse_leading_int(raw)
    if not value:
        return None
    return min(abs(value), INT32_MAX)


def build_log_query(
    date_from: str | None = None,
    date_to: str | None = None,
    limit: str | None = None,
) -> LogQuery:
    """Build a LogQuery from raw query-string values."""
    return LogQuery(
        date_from=_parse_bound("from", date_from),
        date_to=_parse_bound("to", date_to),
        limit=_normalize_limit(limit),
    )
