"""
Matchday Rotation Manager

Attendance tracking and lineup generation for a single club's practice
sessions: attendees are rotated fairly across the quarters played in a day
and split into two skill-balanced teams.

This package provides the rotation and balancing engine, the services around
it and a Flask web interface.
"""
from .models import Player, Position, AgeGroup, AttendanceRecord, TeamResult, MatchRecord, ClubState
from .services import select_squad, balance_teams, MatchSession
from .ui import create_app, run_web_app
from .utils import APP_TITLE, SQUAD_CAPACITY

__version__ = "1.0.0"

__all__ = [
    "Player", "Position", "AgeGroup", "AttendanceRecord", "TeamResult",
    "MatchRecord", "ClubState", "select_squad", "balance_teams", "MatchSession",
    "create_app", "run_web_app", "APP_TITLE", "SQUAD_CAPACITY"
]
