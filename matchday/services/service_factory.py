"""
Service Factory for dependency injection.

This module provides a factory for creating properly configured service
instances with their dependencies injected.
"""
from typing import Any, Dict, Optional, Sequence

from ..models import ClubState
from ..utils import today_iso
from ..utils.constants import DEFAULT_ACCESS_CODE, PITCHES, SQUAD_CAPACITY
from .access_service import AccessGate
from .member_service import MemberService
from .persistence_service import PersistenceService, StorageBackend
from .session_service import MatchSession


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    The storage backend and access code are configured once and shared by
    every service the factory builds.
    """

    def __init__(
        self,
        storage: Optional[StorageBackend] = None,
        access_code: str = DEFAULT_ACCESS_CODE,
        initial_members: Optional[Sequence[Dict[str, Any]]] = None,
    ):
        """
        Initialize factory.

        Args:
            storage: Storage backend for club data (in-memory when omitted)
            access_code: Shared secret for the coach areas
            initial_members: Roster to start from when storage has none
        """
        self._storage = storage
        self._access_code = access_code
        self._initial_members = initial_members
        self._persistence_service: Optional[PersistenceService] = None

    def create_member_service(self, state: Optional[ClubState] = None) -> MemberService:
        """
        Create MemberService whose arrival clock continues after the newest
        stored attendance.
        """
        service = MemberService()
        if state is not None:
            service.clock.advance_to(state.latest_timestamp())
        return service

    def create_session(
        self,
        session_date: Optional[str] = None,
        pitch: Optional[str] = None,
        capacity: int = SQUAD_CAPACITY,
    ) -> MatchSession:
        """Create a session for today at the main pitch unless told otherwise."""
        return MatchSession(session_date or today_iso(), pitch or PITCHES[0], capacity)

    def create_access_gate(self) -> AccessGate:
        return AccessGate(self._access_code)

    def create_complete_service_suite(self) -> dict:
        """
        Create a complete suite of services with proper dependencies.

        Returns:
            Dictionary with the loaded club state and all configured services
        """
        persistence = self._get_persistence_service()
        state = persistence.load_state()
        return {
            'state': state,
            'persistence': persistence,
            'members': self.create_member_service(state),
            'session': self.create_session(),
            'access': self.create_access_gate(),
        }

    def _get_persistence_service(self) -> PersistenceService:
        """Get singleton persistence service."""
        if self._persistence_service is None:
            self._persistence_service = PersistenceService(self._storage, self._initial_members)
        return self._persistence_service
