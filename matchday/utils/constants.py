"""
Constants for the Matchday rotation manager.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Matchday Rotation Manager"

# Squad selection
SQUAD_CAPACITY = 22  # full-roster scrimmage, 11 a side
GOALKEEPER_HINT_COUNT = 2
MIN_LINEUP_PLAYERS = 2

# Skill rating bounds
MIN_SKILL_SCORE = 0.0
MAX_SKILL_SCORE = 5.0
DEFAULT_SKILL_SCORE = 2.5

# Skill tiers used by the admin listing, highest threshold first
SKILL_TIERS = [
    (4.5, "elite"),
    (3.5, "strong"),
    (2.5, "solid"),
]
LOWEST_SKILL_TIER = "developing"

POS_SHORT_TO_FULL = {
    "GK": "Goalkeeper",
    "DF": "Defender",
    "MF": "Midfielder",
    "FW": "Forward",
}

AGE_GROUPS = ["20s", "30s", "40s", "50s", "60s+"]

PITCHES = ["Pitch A (main)", "Pitch B (training)", "Pitch C (futsal)"]

# Shared secret guarding the coach-only screens. Not a security boundary.
DEFAULT_ACCESS_CODE = "1234"

# Roster used until the first save
INITIAL_MEMBERS = [
    {"id": "jjw", "name": "Jinwon Jeon", "age_group": "30s", "skill_score": 3.0,
     "preferred_position": "MF", "total_attendance": 0},
    {"id": "hn", "name": "Hanna", "age_group": "20s", "skill_score": 3.0,
     "preferred_position": "FW", "total_attendance": 0},
]

# Storage keys
MEMBERS_KEY = "matchday_members"
ATTENDANCE_KEY = "matchday_attendance"
DEFAULT_DATA_FILE = "matchday_data.json"

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
