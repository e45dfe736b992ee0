"""Timestamp normalization helpers for UTC windowing."""

from datetime import datetime, timezone, timedelta
from typing import Optional, Union

Timestamp = Union[datetime, str]


def to_utc_datetime(value: Optional[Timestamp]) -> Optional[datetime]:
    """
    Normalize a stored timestamp to an aware UTC datetime.

    Naive datetimes are taken to be UTC, which is how MongoDB hands
    them back. Strings must be ISO 8601; a trailing "Z" is accepted.

    Args:
        value: datetime, ISO 8601 string, or None

    Returns:
        Aware UTC datetime, or None if value is None or empty

    Raises:
        ValueError: If a string cannot be parsed
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        value = datetime.fromisoformat(text)

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_date_string(value: Timestamp) -> str:
    """Return the UTC calendar date of a timestamp as YYYY-MM-DD."""
    return to_utc_datetime(value).strftime("%Y-%m-%d")


def window_start(now: Timestamp, days: int) -> datetime:
    """Start of a trailing window of `days` ending at `now`."""
    return to_utc_datetime(now) - timedelta(days=days)


def is_within_window(value: Optional[Timestamp], start: datetime) -> bool:
    """True if the timestamp is present and not earlier than `start`."""
    moment = to_utc_datetime(value)
    return moment is not None and moment >= start


def to_iso_string(value: Optional[Timestamp]) -> Optional[str]:
    """Render a timestamp as an ISO 8601 UTC string, or None."""
    moment = to_utc_datetime(value)
    if moment is None:
        return None
    return moment.isoformat().replace("+00:00", "Z")
