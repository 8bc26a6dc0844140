"""
Fair rotation for a session's quarters.

Picks who plays the next match: players with fewer matches today go first,
and among equals whoever arrived first keeps their place.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, List, Mapping, Sequence

from ..models import AttendanceRecord, MatchRecord, Player, Position
from ..utils.constants import GOALKEEPER_HINT_COUNT, SQUAD_CAPACITY

logger = logging.getLogger(__name__)


def attendees_for(
    records: Iterable[AttendanceRecord],
    members: Mapping[str, Player],
    session_date: str,
    pitch: str,
) -> List[Player]:
    """
    Resolve the attendees of one session in arrival order.

    Args:
        records: Full attendance log
        members: Roster keyed by player id
        session_date: Session date (``YYYY-MM-DD``)
        pitch: Venue identifier

    Returns:
        Copies of the players who registered for the session, earliest
        arrival first, so later roster edits leave proposals and confirmed
        matches alone. Records pointing at unknown players are skipped.
    """
    session_records = sorted(
        (r for r in records if r.matches(session_date, pitch)),
        key=lambda r: r.timestamp,
    )
    attendees = []
    for record in session_records:
        player = members.get(record.player_id)
        if player is None:
            logger.warning("Attendance %s references unknown player %s", record.id, record.player_id)
            continue
        attendees.append(player.snapshot())
    return attendees


def count_matches(attendees: Sequence[Player], history: Iterable[MatchRecord]) -> Dict[str, int]:
    """
    Tally confirmed matches per attendee.

    Every attendee starts at zero; ids in the history that are not among the
    attendees are ignored.
    """
    counts = {p.id: 0 for p in attendees}
    for match in history:
        for player_id in match.player_ids:
            if player_id in counts:
                counts[player_id] += 1
    return counts


def select_squad(
    attendees: Sequence[Player],
    match_counts: Mapping[str, int],
    excluded: AbstractSet[str] = frozenset(),
    capacity: int = SQUAD_CAPACITY,
) -> List[Player]:
    """
    Choose the players for the next match.

    Args:
        attendees: Session attendees in arrival order
        match_counts: Matches already played this session, keyed by player id
        excluded: Ids the coach toggled out for the session
        capacity: Maximum squad size

    Returns:
        Up to ``capacity`` players, fewest matches first, arrival order
        within equal counts. The last two selected players come back
        labelled as goalkeepers (a hint only, the inputs are not modified).
    """
    available = [p for p in attendees if p.id not in excluded]
    # sorted() is stable, equal counts keep arrival order
    ranked = sorted(available, key=lambda p: match_counts.get(p.id, 0))
    squad = ranked[:max(0, capacity)]

    if len(squad) < GOALKEEPER_HINT_COUNT:
        return squad

    hint_start = len(squad) - GOALKEEPER_HINT_COUNT
    return [
        p.with_position(Position.GOALKEEPER) if i >= hint_start and not p.is_goalkeeper else p
        for i, p in enumerate(squad)
    ]


def goalkeeper_hint_ids(squad: Sequence[Player]) -> List[str]:
    """Ids of the squad members that received the goalkeeper hint slot."""
    if len(squad) < GOALKEEPER_HINT_COUNT:
        return []
    return [p.id for p in squad[-GOALKEEPER_HINT_COUNT:]]
