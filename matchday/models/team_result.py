"""
Team pairing produced by the balancer and edited by the coach.

Scores are always derived from the current membership so they can never go
stale after a manual edit.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .player import Player, Position

TEAM_A = "A"
TEAM_B = "B"


@dataclass
class TeamResult:
    """
    Two proposed teams.

    Attributes:
        team_a: Players on team A, in placement order
        team_b: Players on team B, in placement order
    """
    team_a: List[Player] = field(default_factory=list)
    team_b: List[Player] = field(default_factory=list)

    @property
    def score_a(self) -> float:
        return sum(p.skill_score for p in self.team_a)

    @property
    def score_b(self) -> float:
        return sum(p.skill_score for p in self.team_b)

    @property
    def score_gap(self) -> float:
        return abs(self.score_a - self.score_b)

    def player_ids(self) -> List[str]:
        """Ids of every player in the pairing, team A first."""
        return [p.id for p in self.team_a] + [p.id for p in self.team_b]

    def team_of(self, player_id: str) -> Optional[str]:
        """Return ``"A"`` or ``"B"`` for the team holding the player, or None."""
        if any(p.id == player_id for p in self.team_a):
            return TEAM_A
        if any(p.id == player_id for p in self.team_b):
            return TEAM_B
        return None

    def goalkeeper_counts(self) -> Dict[str, int]:
        return {
            TEAM_A: sum(1 for p in self.team_a if p.is_goalkeeper),
            TEAM_B: sum(1 for p in self.team_b if p.is_goalkeeper),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "team_a": [p.to_dict() for p in self.team_a],
            "team_b": [p.to_dict() for p in self.team_b],
            "score_a": self.score_a,
            "score_b": self.score_b,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamResult":
        """Create from dictionary; stored scores are ignored and recomputed."""
        return cls(
            team_a=[Player.from_dict(p) for p in data.get("team_a", [])],
            team_b=[Player.from_dict(p) for p in data.get("team_b", [])],
        )


def move_player(result: TeamResult, player_id: str) -> TeamResult:
    """
    Move a player to the opposite team.

    The moved player is appended to the end of the receiving team. An unknown
    id yields an unchanged copy.

    Args:
        result: Current pairing
        player_id: Id of the player to move

    Returns:
        New TeamResult with recomputed scores
    """
    side = result.team_of(player_id)
    team_a = list(result.team_a)
    team_b = list(result.team_b)
    if side == TEAM_A:
        moving = [p for p in team_a if p.id == player_id]
        team_a = [p for p in team_a if p.id != player_id]
        team_b.extend(moving)
    elif side == TEAM_B:
        moving = [p for p in team_b if p.id == player_id]
        team_b = [p for p in team_b if p.id != player_id]
        team_a.extend(moving)
    return TeamResult(team_a=team_a, team_b=team_b)


def update_position(result: TeamResult, player_id: str, position: Position) -> TeamResult:
    """
    Change the position of one player inside the pairing.

    Only the proposal changes; the club roster keeps its own preference.
    """
    def _swap(team: List[Player]) -> List[Player]:
        return [p.with_position(position) if p.id == player_id else p for p in team]

    return TeamResult(team_a=_swap(result.team_a), team_b=_swap(result.team_b))
