"""
Date and time helpers.

Numeric timestamps are epoch milliseconds throughout this module.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, timedelta

logger = logging.getLogger(__name__)

MS_PER_DAY = 1000 * 60 * 60 * 24
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

DateLike = date | datetime | int | float


class HourOutOfRangeError(ValueError):
    """Raised when an hour is outside the 24-hour clock."""

    def __init__(self, hour: int) -> None:
        self.hour = hour
        super().__init__("hour must be between 0 and 23")


def am_pm_to_hr(hour: int) -> str:
    """
    Render a 24-hour clock hour as a 12-hour label.

    0 -> "12am", 12 -> "12pm", 23 -> "11pm".

    Raises:
        HourOutOfRangeError: If hour is not in [0, 23].
    """
    if hour > 23 or hour < 0:
        logger.debug("Rejected hour %r", hour)
        raise HourOutOfRangeError(hour)
    h12 = 12 if hour % 12 == 0 else hour % 12
    suffix = "am" if hour < 12 else "pm"
    return f"{h12}{suffix}"


def date_difference(start: DateLike, end: DateLike) -> int:
    """Whole days between two dates, rounded up. Order does not matter."""
    delta_ms = abs(_to_epoch_ms(start) - _to_epoch_ms(end))
    return math.ceil(delta_ms / MS_PER_DAY)


def is_valid_date(*parts: object) -> bool:
    """
    Check whether a date can be built from ``parts``.

    - no parts: now, always valid
    - one str: ISO-8601 text
    - one number: epoch milliseconds
    - one date/datetime: valid
    - otherwise: positional (year, month, day, hour, minute, second, microsecond),
      month 1-based
    """
    try:
        _build_datetime(parts)
    except (TypeError, ValueError, OverflowError, OSError):
        return False
    return True


def _build_datetime(parts: tuple[object, ...]) -> datetime:
    if not parts:
        return datetime.now(UTC)
    if len(parts) == 1:
        (value,) = parts
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if math.isnan(value):
                raise ValueError("timestamp is NaN")
            return datetime.fromtimestamp(value / 1000, UTC)
        raise TypeError(f"cannot build a date from {type(value).__name__}")
    if len(parts) == 2:
        # datetime() needs at least year, month, day; the month alone means day 1
        parts = (*parts, 1)
    return datetime(*parts)  # type: ignore[arg-type]


def _to_epoch_ms(value: DateLike) -> float:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return (value - _EPOCH) / _ONE_MS
    if isinstance(value, date):
        return (datetime(value.year, value.month, value.day, tzinfo=UTC) - _EPOCH) / _ONE_MS
    if isinstance(value, bool):
        raise TypeError("bool is not a timestamp")
    return float(value)
