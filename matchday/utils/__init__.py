"""
Utilities package for the Matchday rotation manager.

This package contains utility functions and constants used throughout the application.
"""
from .time_utils import now_ts, today_iso, parse_iso_date, ArrivalClock
from .id_utils import new_id
from .constants import (
    APP_TITLE, SQUAD_CAPACITY, GOALKEEPER_HINT_COUNT, MIN_LINEUP_PLAYERS,
    MIN_SKILL_SCORE, MAX_SKILL_SCORE, DEFAULT_SKILL_SCORE, AGE_GROUPS,
    PITCHES, POS_SHORT_TO_FULL
)

__all__ = [
    "now_ts", "today_iso", "parse_iso_date", "ArrivalClock", "new_id",
    "APP_TITLE", "SQUAD_CAPACITY", "GOALKEEPER_HINT_COUNT", "MIN_LINEUP_PLAYERS",
    "MIN_SKILL_SCORE", "MAX_SKILL_SCORE", "DEFAULT_SKILL_SCORE", "AGE_GROUPS",
    "PITCHES", "POS_SHORT_TO_FULL"
]
