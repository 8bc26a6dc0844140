"""
Models package for the Matchday rotation manager.

This package contains the core data models used throughout the application.
"""
from .player import Player, Position, AgeGroup, clamp_skill
from .attendance import AttendanceRecord
from .team_result import TeamResult, TEAM_A, TEAM_B, move_player, update_position
from .match_record import MatchRecord
from .club_state import ClubState

__all__ = [
    "Player", "Position", "AgeGroup", "clamp_skill", "AttendanceRecord",
    "TeamResult", "TEAM_A", "TEAM_B", "move_player", "update_position",
    "MatchRecord", "ClubState"
]
