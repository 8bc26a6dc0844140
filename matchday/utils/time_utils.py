"""
Time helpers for the Matchday rotation manager.
"""
import time
from datetime import date
from typing import Optional


def now_ts() -> float:
    """
    Get current timestamp in epoch seconds.

    Returns:
        Current time as floating point epoch seconds
    """
    return time.time()


def today_iso() -> str:
    """Today's date as ``YYYY-MM-DD``."""
    return date.today().isoformat()


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` string.

    Args:
        value: Date string to parse

    Returns:
        Parsed date, or None if the value is empty or malformed

    Example:
        >>> parse_iso_date("2024-05-04")
        datetime.date(2024, 5, 4)
        >>> parse_iso_date("04/05/2024") is None
        True
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class ArrivalClock:
    """
    Issues arrival timestamps that never go backwards.

    Two registrations within the same clock tick, or a wall clock that jumps
    back, still get strictly increasing values so arrival order is preserved.
    """

    def __init__(self, last: float = 0.0):
        self._last = last

    def advance_to(self, value: float) -> None:
        """Make sure future stamps are later than ``value``."""
        self._last = max(self._last, value)

    def next(self) -> float:
        stamp = now_ts()
        if stamp <= self._last:
            stamp = self._last + 0.001
        self._last = stamp
        return stamp
