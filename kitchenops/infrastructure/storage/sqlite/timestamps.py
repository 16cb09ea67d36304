"""
Timestamp encoding for SQLite TEXT columns.

All timestamps are stored as UTC ISO-8601 strings with a fixed microsecond
precision so that lexical comparison in SQL matches chronological order and
`substr(col, 1, 10)` yields the calendar date.
"""

from datetime import UTC, datetime


def to_db(value: datetime | None) -> str | None:
    """Encode a datetime; naive values are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="microseconds")


def from_db(value: str | None) -> datetime | None:
    """Decode a stored timestamp, returning None for empty or bad values."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def now_db() -> str:
    """Current time, encoded."""
    return to_db(datetime.now(UTC))  # type: ignore[return-value]
