"""Date formatting helpers for event details."""
from datetime import datetime, timezone
from typing import Any, Optional

DATE_NOT_SPECIFIED = "Date not specified"


def coerce_event_date(value: Any) -> str:
    """
    Turn an API date value into a string.

    Numbers are epoch milliseconds and become an ISO 8601 UTC datetime;
    anything else that is not a string is passed through str().

    Example: 1736121600000 → "2025-01-06T00:00:00+00:00"
    """
    if value is None:
        return ""

    if isinstance(value, str):
        return value

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).isoformat()
        except (OverflowError, OSError, ValueError):
            return str(value)

    return str(value)


def parse_event_date(date_str: str) -> datetime:
    """
    Parse an event date from the API.

    Args:
        date_str: ISO 8601 date or datetime (e.g. "2025-01-06", "2025-01-06T18:00:00Z")

    Returns:
        datetime object

    Raises:
        ValueError: If the date cannot be parsed
    """
    return datetime.fromisoformat(date_str.strip().replace("Z", "+00:00"))


def format_event_date(date_str: Optional[Any]) -> str:
    """
    Format an event date as a long English date.

    Args:
        date_str: ISO 8601 date string, epoch milliseconds, or None/empty

    Returns:
        e.g. "Monday, January 6, 2025"
        - "Date not specified" if date_str is empty
        - The raw value as text if it cannot be parsed
    """
    date_str = coerce_event_date(date_str)
    if not date_str.strip():
        return DATE_NOT_SPECIFIED

    try:
        parsed = parse_event_date(date_str)
    except ValueError:
        return date_str

    return f"{parsed:%A}, {parsed:%B} {parsed.day}, {parsed.year}"
