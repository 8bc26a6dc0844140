"""Attendance statistics and roster listings for the club screens."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from ..models import ClubState, Player, Position
from ..utils.constants import LOWEST_SKILL_TIER, SKILL_TIERS


def attendance_leaderboard(state: ClubState) -> List[Player]:
    """Members ordered by lifetime attendance, most first (name breaks ties)."""
    return sorted(state.members.values(), key=lambda p: (-p.total_attendance, p.name))


def total_attendance(state: ClubState) -> int:
    return sum(p.total_attendance for p in state.members.values())


def attendees_on(state: ClubState, session_date: str) -> List[Player]:
    """Members with at least one attendance on the given date, at any pitch."""
    attendee_ids = {r.player_id for r in state.attendance if r.date == session_date}
    return [p for p in state.members.values() if p.id in attendee_ids]


def position_distribution(players: Iterable[Player]) -> Dict[str, int]:
    """Count players per preferred position; every position is present."""
    counts = Counter(p.preferred_position for p in players)
    return {position.value: counts.get(position, 0) for position in Position}


def search(players: Iterable[Player], term: str) -> List[Player]:
    """Case-insensitive name filter, sorted by name."""
    needle = (term or "").strip().lower()
    matches = [p for p in players if needle in p.name.lower()]
    return sorted(matches, key=lambda p: p.name.lower())


def skill_tier(score: float) -> str:
    """
    Bucket a skill score for display.

    Example:
        >>> skill_tier(4.5)
        'elite'
        >>> skill_tier(2.4)
        'developing'
    """
    for threshold, label in SKILL_TIERS:
        if score >= threshold:
            return label
    return LOWEST_SKILL_TIER
