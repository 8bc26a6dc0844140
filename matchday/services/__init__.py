"""
Services package for the Matchday rotation manager.

This package contains the rotation and balancing engine plus the services
that feed it and consume its output.
"""
from .rotation_service import attendees_for, count_matches, select_squad, goalkeeper_hint_ids
from .balancing_service import balance_teams
from .member_service import (
    MemberService, MatchdayError, MemberValidationError, MemberNotFoundError
)
from .session_service import MatchSession, LineupOutcome, INSUFFICIENT_PLAYERS, NO_PROPOSAL
from .persistence_service import (
    PersistenceService, StorageBackend, InMemoryStorage, JsonFileStorage
)
from .access_service import AccessGate
from .service_factory import ServiceFactory

__all__ = [
    "attendees_for", "count_matches", "select_squad", "goalkeeper_hint_ids",
    "balance_teams", "MemberService", "MatchdayError", "MemberValidationError",
    "MemberNotFoundError", "MatchSession", "LineupOutcome", "INSUFFICIENT_PLAYERS",
    "NO_PROPOSAL", "PersistenceService", "StorageBackend", "InMemoryStorage",
    "JsonFileStorage", "AccessGate", "ServiceFactory"
]
