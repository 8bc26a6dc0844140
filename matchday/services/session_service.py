"""
Session controller for one date at one pitch.

Owns the session-scoped state around the rotation and balancing engine: the
coach's exclusion set, the confirmed match history and the lineup currently
on the table. The engine itself only ever sees snapshots of this state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from ..models import ClubState, MatchRecord, Player, Position, TeamResult
from ..models import move_player as _move_player
from ..models import update_position as _update_position
from ..utils.constants import MIN_LINEUP_PLAYERS, SQUAD_CAPACITY
from .balancing_service import balance_teams
from .rotation_service import attendees_for, count_matches, goalkeeper_hint_ids, select_squad

logger = logging.getLogger(__name__)

INSUFFICIENT_PLAYERS = "insufficient players"
NO_PROPOSAL = "no lineup has been generated"


@dataclass
class LineupOutcome:
    """Result of a lineup operation with success status and error message."""
    success: bool
    teams: Optional[TeamResult] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, teams: TeamResult) -> "LineupOutcome":
        return cls(success=True, teams=teams)

    @classmethod
    def failure(cls, error: str) -> "LineupOutcome":
        return cls(success=False, error=error)


class MatchSession:
    """
    Manages the quarters played on one date at one pitch.

    Attributes:
        session_date: Session date (``YYYY-MM-DD``)
        pitch: Venue identifier
        capacity: Maximum squad size per match
        excluded_ids: Players toggled out by the coach
        history: Confirmed matches, in order
        current: The proposal being edited, if any
    """

    def __init__(self, session_date: str, pitch: str, capacity: int = SQUAD_CAPACITY):
        self.session_date = session_date
        self.pitch = pitch
        self.capacity = capacity
        self.excluded_ids: Set[str] = set()
        self.history: List[MatchRecord] = []
        self.current: Optional[TeamResult] = None

    # ---------- Selection ---------- #

    def attendees(self, state: ClubState) -> List[Player]:
        """Session attendees in arrival order."""
        return attendees_for(state.attendance, state.members, self.session_date, self.pitch)

    def match_counts(self, state: ClubState) -> Dict[str, int]:
        return count_matches(self.attendees(state), self.history)

    def squad(self, state: ClubState) -> List[Player]:
        """The players who would take the field in the next match."""
        attendees = self.attendees(state)
        counts = count_matches(attendees, self.history)
        return select_squad(attendees, counts, frozenset(self.excluded_ids), self.capacity)

    def overview(self, state: ClubState) -> List[dict]:
        """
        Per-attendee view for the session screen.

        Returns:
            One entry per attendee in arrival order with the match count,
            exclusion flag, squad membership and goalkeeper hint.
        """
        attendees = self.attendees(state)
        counts = count_matches(attendees, self.history)
        squad = select_squad(attendees, counts, frozenset(self.excluded_ids), self.capacity)
        squad_ids = {p.id for p in squad}
        hinted = set(goalkeeper_hint_ids(squad))
        return [
            {
                "arrival": index + 1,
                "player": player.to_dict(),
                "matches_played": counts.get(player.id, 0),
                "excluded": player.id in self.excluded_ids,
                "in_squad": player.id in squad_ids,
                "goalkeeper_hint": player.id in hinted,
            }
            for index, player in enumerate(attendees)
        ]

    def toggle_exclusion(self, player_id: str) -> bool:
        """
        Flip a player in or out of the session.

        Any pending proposal is discarded since the squad changes.

        Returns:
            True if the player is now excluded
        """
        if player_id in self.excluded_ids:
            self.excluded_ids.discard(player_id)
            excluded = False
        else:
            self.excluded_ids.add(player_id)
            excluded = True
        self.current = None
        return excluded

    # ---------- Lineup ---------- #

    def generate_lineup(self, state: ClubState) -> LineupOutcome:
        """
        Balance the current squad into a new proposal.

        Returns:
            LineupOutcome holding the proposal, or a failure when fewer than
            two players are available
        """
        squad = self.squad(state)
        if len(squad) < MIN_LINEUP_PLAYERS:
            logger.info("Lineup refused for %s/%s: %d player(s)", self.session_date, self.pitch, len(squad))
            return LineupOutcome.failure(INSUFFICIENT_PLAYERS)
        self.current = balance_teams(squad)
        return LineupOutcome.ok(self.current)

    def move_player(self, player_id: str) -> LineupOutcome:
        """Move a player to the other team in the current proposal."""
        if self.current is None:
            return LineupOutcome.failure(NO_PROPOSAL)
        self.current = _move_player(self.current, player_id)
        return LineupOutcome.ok(self.current)

    def update_position(self, player_id: str, position: Position) -> LineupOutcome:
        """Change a player's position in the current proposal."""
        if self.current is None:
            return LineupOutcome.failure(NO_PROPOSAL)
        self.current = _update_position(self.current, player_id, position)
        return LineupOutcome.ok(self.current)

    def confirm(self) -> Optional[MatchRecord]:
        """
        Lock in the current proposal as the next match.

        Returns:
            The new MatchRecord, or None when there is nothing to confirm
        """
        if self.current is None:
            return None
        record = MatchRecord.from_teams(len(self.history) + 1, self.current)
        self.history.append(record)
        self.current = None
        logger.info(
            "Match %d confirmed at %s on %s (%.1f vs %.1f)",
            record.match_number, self.pitch, self.session_date,
            record.teams.score_a, record.teams.score_b,
        )
        return record

    # ---------- Lifecycle ---------- #

    def reset(self) -> None:
        """Clear the match history, exclusions and proposal together."""
        self.history = []
        self.excluded_ids = set()
        self.current = None

    def change_venue(self, session_date: str, pitch: str) -> None:
        """Switch to another date/pitch; a new session starts from scratch."""
        if session_date == self.session_date and pitch == self.pitch:
            return
        self.session_date = session_date
        self.pitch = pitch
        self.reset()

    def to_dict(self) -> dict:
        return {
            "date": self.session_date,
            "pitch": self.pitch,
            "capacity": self.capacity,
            "next_match_number": len(self.history) + 1,
            "excluded_ids": sorted(self.excluded_ids),
            "history": [m.to_dict() for m in self.history],
            "current": self.current.to_dict() if self.current else None,
        }
