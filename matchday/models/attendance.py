"""Attendance record model."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AttendanceRecord:
    """
    A single attendance registration.

    Attributes:
        id: Opaque identifier
        date: Session date as ``YYYY-MM-DD``
        pitch: Venue/pitch identifier
        player_id: Id of the attending player
        timestamp: Arrival time, used only for ordering
    """
    id: str
    date: str
    pitch: str
    player_id: str
    timestamp: float

    def matches(self, session_date: str, pitch: str) -> bool:
        return self.date == session_date and self.pitch == pitch

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date,
            "pitch": self.pitch,
            "player_id": self.player_id,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttendanceRecord":
        """Create from dictionary for JSON deserialization."""
        return cls(
            id=data["id"],
            date=data["date"],
            pitch=data["pitch"],
            player_id=data["player_id"],
            timestamp=float(data["timestamp"]),
        )
