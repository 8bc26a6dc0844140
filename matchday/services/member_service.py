"""
Member service for the Matchday rotation manager.

This module provides business logic for managing club members: attendance
registration (which creates members on first sight), skill and position
edits made by the coach, and input validation.
"""
import logging
import math
from typing import List, Optional

from ..models import AgeGroup, AttendanceRecord, ClubState, Player, Position
from ..utils import ArrivalClock, DEFAULT_SKILL_SCORE, new_id, parse_iso_date

logger = logging.getLogger(__name__)


class MatchdayError(Exception):
    """Base class for errors raised by the supporting services."""
    pass


class MemberValidationError(MatchdayError):
    """Raised when member or attendance input is invalid."""
    pass


class MemberNotFoundError(MatchdayError):
    """Raised when a member id is not on the roster."""
    pass


class MemberService:
    """
    Service class for member registration and coach edits.

    Holds the arrival clock so attendance timestamps keep increasing within
    a process, even when two players register in the same instant.
    """

    def __init__(self, clock: Optional[ArrivalClock] = None):
        """
        Initialize MemberService.

        Args:
            clock: Optional arrival clock (a fresh one is created otherwise)
        """
        self.clock = clock or ArrivalClock()

    def validate_registration(self, name: str, session_date: str, pitch: str) -> List[str]:
        """
        Validate attendance form input and return list of validation errors.

        Args:
            name: Member name as typed
            session_date: Session date string
            pitch: Venue identifier

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        if not name or not name.strip():
            errors.append("Member name is required")
        if parse_iso_date(session_date) is None:
            errors.append(f"Invalid session date: {session_date!r} (expected YYYY-MM-DD)")
        if not pitch or not pitch.strip():
            errors.append("Pitch is required")
        return errors

    def register_attendance(
        self,
        state: ClubState,
        name: str,
        age_group: AgeGroup,
        position: Position,
        session_date: str,
        pitch: str,
    ) -> AttendanceRecord:
        """
        Register one attendance, creating the member on first attendance.

        An existing member keeps their coach-assigned skill and position; the
        age group and position from the form only seed new members.

        Args:
            state: Club state to update
            name: Member name (matched exactly after trimming)
            age_group: Age bracket for a new member
            position: Preferred position for a new member
            session_date: Session date (``YYYY-MM-DD``)
            pitch: Venue identifier

        Returns:
            The new AttendanceRecord

        Raises:
            MemberValidationError: If the input is invalid
        """
        errors = self.validate_registration(name, session_date, pitch)
        if errors:
            raise MemberValidationError(f"Attendance validation failed: {'; '.join(errors)}")

        name = name.strip()
        pitch = pitch.strip()
        member = state.find_by_name(name)
        if member is None:
            member = Player(
                id=new_id(),
                name=name,
                age_group=age_group,
                skill_score=DEFAULT_SKILL_SCORE,
                preferred_position=position,
                total_attendance=0,
            )
            state.members[member.id] = member
            logger.info("Created member %s (%s)", member.name, member.id)

        member.total_attendance += 1

        self.clock.advance_to(state.latest_timestamp())
        record = AttendanceRecord(
            id=new_id(),
            date=session_date,
            pitch=pitch,
            player_id=member.id,
            timestamp=self.clock.next(),
        )
        state.attendance.append(record)
        logger.info("%s checked in at %s on %s", member.name, pitch, session_date)
        return record

    def get_member(self, state: ClubState, player_id: str) -> Player:
        """
        Look up a member by id.

        Raises:
            MemberNotFoundError: If the id is unknown
        """
        try:
            return state.members[player_id]
        except KeyError:
            raise MemberNotFoundError(f"Member not found: {player_id}")

    def update_skill(self, state: ClubState, player_id: str, score: float) -> Player:
        """
        Set a member's skill score, clamped to the rating range.

        Raises:
            MemberNotFoundError: If the id is unknown
            MemberValidationError: If the score is not a finite number
        """
        member = self.get_member(state, player_id)
        try:
            value = float(score)
        except (TypeError, ValueError):
            raise MemberValidationError(f"Skill score must be a number, got {score!r}")
        if not math.isfinite(value):
            raise MemberValidationError(f"Skill score must be finite, got {score!r}")
        member.set_skill(value)
        return member

    def update_position(self, state: ClubState, player_id: str, position: Position) -> Player:
        """
        Set a member's preferred position.

        Raises:
            MemberNotFoundError: If the id is unknown
        """
        member = self.get_member(state, player_id)
        member.preferred_position = position
        return member
