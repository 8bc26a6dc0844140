"""
ClubState model for the Matchday rotation manager.

This module contains the ClubState dataclass which holds the canonical club
data: the member roster and the attendance log.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .attendance import AttendanceRecord
from .player import Player


@dataclass
class ClubState:
    """
    Represents everything the club persists.

    Attributes:
        members: Players keyed by id
        attendance: Attendance records in registration order
    """
    members: Dict[str, Player] = field(default_factory=dict)
    attendance: List[AttendanceRecord] = field(default_factory=list)

    def find_by_name(self, name: str) -> Optional[Player]:
        """Return the member registered under exactly this name, if any."""
        for player in self.members.values():
            if player.name == name:
                return player
        return None

    def records_for(self, player_id: str) -> List[AttendanceRecord]:
        return [r for r in self.attendance if r.player_id == player_id]

    def latest_timestamp(self) -> float:
        return max((r.timestamp for r in self.attendance), default=0.0)

    def to_json(self) -> dict:
        """
        Convert ClubState to JSON-serializable dictionary.

        Returns:
            Dictionary with a ``members`` list and an ``attendance`` list
        """
        return {
            "members": [p.to_dict() for p in self.members.values()],
            "attendance": [r.to_dict() for r in self.attendance],
        }

    @staticmethod
    def from_json(data: dict) -> "ClubState":
        """
        Create ClubState from JSON dictionary.

        Args:
            data: Dictionary with club data

        Returns:
            New ClubState instance
        """
        state = ClubState()
        for pdata in data.get("members", []) or []:
            player = Player.from_dict(pdata)
            state.members[player.id] = player
        state.attendance = [
            AttendanceRecord.from_dict(rdata) for rdata in data.get("attendance", []) or []
        ]
        return state
