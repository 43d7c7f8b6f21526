"""Field Parsing — turns loosely-typed request text into domain values.

Invariants:
    - Integers parse from a leading run of digits ("30" → 30, " 45min" → 45, "abc" → None)
    - Dates are calendar dates (no time component); timestamps keep their date part
    - format_calendar_date output looks like "Mon Jan 02 2023" and parses back
    - Parsers return None on failure; callers decide whether that is an error

Design Decisions:
    - Leading-integer parsing keeps compatibility with clients that post "30 min"
    - Weekday and month names are spelled out here, not via strftime, so output
      does not depend on the process locale
"""

import math
import re
from datetime import date, datetime
from uuid import UUID

from exercise_tracker.core.domain_types import UserId

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Largest value an INTEGER column or LIMIT clause accepts on every supported store
INT32_MAX = 2**31 - 1

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Tried in order after ISO parsing fails
_DATE_FORMATS = ("%a %b %d %Y", "%Y/%m/%d", "%m/%d/%Y")


def parse_leading_int(raw: object) -> int | None:
    """Parse an integer from the start of raw text. None if there is none."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def parse_calendar_date(raw: str) -> date | None:
    """Parse caller-supplied text as a calendar date. None if unparsable."""
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_calendar_date(value: date) -> str:
    """Render a date as 'Www Mmm DD YYYY'."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_user_id(raw: str) -> UserId | None:
    """Parse a path identifier. None if it is not a valid UUID."""
    try:
        return UserId(UUID(raw.strip()))
    except (ValueError, AttributeError):
        return None
