"""Null-safe date range check used by the filter manager."""

from datetime import date


def is_valid_range(start: date | None, end: date | None) -> bool:
    """
    Return True unless both dates are present and start is after end.

    A range with either endpoint missing is open on that side and valid.
    """
    return start is None or end is None or start <= end
