"""Confirmed match within a session."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .team_result import TeamResult


@dataclass(frozen=True)
class MatchRecord:
    """
    A lineup the coach locked in.

    Attributes:
        match_number: 1-based sequence number within the session
        teams: The confirmed pairing
        player_ids: Ids of every participating player
    """
    match_number: int
    teams: TeamResult
    player_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_teams(cls, match_number: int, teams: TeamResult) -> "MatchRecord":
        return cls(match_number=match_number, teams=teams, player_ids=teams.player_ids())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_number": self.match_number,
            "teams": self.teams.to_dict(),
            "player_ids": list(self.player_ids),
        }
