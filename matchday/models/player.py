"""
Player model for the Matchday rotation manager.

This module contains the Player dataclass which represents a club member,
together with the position and age group enumerations.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict

from ..utils.constants import DEFAULT_SKILL_SCORE, MAX_SKILL_SCORE, MIN_SKILL_SCORE


class Position(Enum):
    """Preferred playing position."""
    GOALKEEPER = "GK"
    DEFENDER = "DF"
    MIDFIELDER = "MF"
    FORWARD = "FW"

    @classmethod
    def parse(cls, value: Any) -> "Position":
        """
        Parse a position from its code ("GK") or name ("goalkeeper").

        Raises:
            ValueError: If the value is not a known position
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip()
        for position in cls:
            if text.upper() == position.value or text.upper() == position.name:
                return position
        raise ValueError(f"Unknown position: {value!r}")


class AgeGroup(Enum):
    """Age bracket, display only."""
    TWENTIES = "20s"
    THIRTIES = "30s"
    FORTIES = "40s"
    FIFTIES = "50s"
    SIXTIES_PLUS = "60s+"

    @classmethod
    def parse(cls, value: Any) -> "AgeGroup":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise ValueError(f"Unknown age group: {value!r}")


def clamp_skill(score: float) -> float:
    """Clamp a skill score into the allowed rating range."""
    return max(MIN_SKILL_SCORE, min(MAX_SKILL_SCORE, float(score)))


@dataclass
class Player:
    """
    Represents a club member as seen by the rotation and balancing engine.

    Attributes:
        id: Opaque stable identifier
        name: Display name (unique within the club, used to match attendance)
        age_group: Age bracket, cosmetic only
        skill_score: Coach-assigned rating in [0.0, 5.0]
        preferred_position: Preferred position
        total_attendance: Lifetime number of attendance registrations
    """
    id: str
    name: str
    age_group: AgeGroup = AgeGroup.THIRTIES
    skill_score: float = DEFAULT_SKILL_SCORE
    preferred_position: Position = Position.MIDFIELDER
    total_attendance: int = 0

    def __post_init__(self) -> None:
        self.skill_score = clamp_skill(self.skill_score)

    @property
    def is_goalkeeper(self) -> bool:
        return self.preferred_position is Position.GOALKEEPER

    def set_skill(self, score: float) -> None:
        """
        Set the skill score, clamped into the allowed range.

        Args:
            score: New skill score
        """
        self.skill_score = clamp_skill(score)

    def snapshot(self) -> "Player":
        """Return an independent copy of this player."""
        return replace(self)

    def with_position(self, position: Position) -> "Player":
        """Return a copy of this player with a different preferred position."""
        return replace(self, preferred_position=position)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert player to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the player
        """
        return {
            "id": self.id,
            "name": self.name,
            "age_group": self.age_group.value,
            "skill_score": self.skill_score,
            "preferred_position": self.preferred_position.value,
            "total_attendance": self.total_attendance,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Create player from dictionary for JSON deserialization.

        Args:
            data: Dictionary representation of player

        Returns:
            Player instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            age_group=AgeGroup.parse(data.get("age_group", AgeGroup.THIRTIES.value)),
            skill_score=data.get("skill_score", DEFAULT_SKILL_SCORE),
            preferred_position=Position.parse(
                data.get("preferred_position", Position.MIDFIELDER.value)
            ),
            total_attendance=int(data.get("total_attendance", 0)),
        )
