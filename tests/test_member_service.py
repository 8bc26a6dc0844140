"""
Unit tests for MemberService and the attendance statistics helpers.
"""
import unittest
from unittest.mock import patch

from matchday.models import AgeGroup, ClubState, Position
from matchday.services import stats_service
from matchday.services.member_service import (
    MemberNotFoundError, MemberService, MemberValidationError
)


class TestMemberService(unittest.TestCase):
    """Test attendance registration and coach edits."""

    def setUp(self) -> None:
        self.state = ClubState()
        self.service = MemberService()

    def register(self, name: str, date: str = "2024-05-04", pitch: str = "Pitch A",
                 position: Position = Position.MIDFIELDER):
        return self.service.register_attendance(
            self.state, name, AgeGroup.THIRTIES, position, date, pitch
        )

    def test_first_attendance_creates_member(self) -> None:
        record = self.register("Alex", position=Position.GOALKEEPER)
        member = self.state.members[record.player_id]

        self.assertEqual(member.name, "Alex")
        self.assertEqual(member.skill_score, 2.5)
        self.assertIs(member.preferred_position, Position.GOALKEEPER)
        self.assertEqual(member.total_attendance, 1)
        self.assertEqual(len(self.state.attendance), 1)

    def test_repeat_attendance_reuses_member(self) -> None:
        first = self.register("Alex")
        self.service.update_skill(self.state, first.player_id, 4.0)
        second = self.register("  Alex ", date="2024-05-11", position=Position.FORWARD)

        self.assertEqual(first.player_id, second.player_id)
        member = self.state.members[first.player_id]
        self.assertEqual(member.total_attendance, 2)
        self.assertEqual(member.skill_score, 4.0)
        self.assertIs(member.preferred_position, Position.MIDFIELDER)
        self.assertEqual(len(self.state.members), 1)

    def test_attendance_counter_matches_records(self) -> None:
        for name in ["Alex", "Sam", "Alex", "Kim", "Alex"]:
            self.register(name)
        for member in self.state.members.values():
            self.assertEqual(member.total_attendance, len(self.state.records_for(member.id)))

    def test_timestamps_strictly_increase(self) -> None:
        with patch("matchday.utils.time_utils.now_ts", return_value=1000.0):
            records = [self.register(name) for name in ["A1", "B1", "C1"]]
        stamps = [r.timestamp for r in records]
        self.assertEqual(stamps, sorted(stamps))
        self.assertEqual(len(set(stamps)), 3)

    def test_ids_are_unique(self) -> None:
        records = [self.register(f"Player {i}") for i in range(10)]
        self.assertEqual(len({r.id for r in records}), 10)
        self.assertEqual(len(set(self.state.members)), 10)

    def test_invalid_registration(self) -> None:
        with self.assertRaises(MemberValidationError):
            self.register("   ")
        with self.assertRaises(MemberValidationError):
            self.register("Alex", date="04/05/2024")
        with self.assertRaises(MemberValidationError):
            self.register("Alex", pitch="")
        self.assertEqual(self.state.members, {})
        self.assertEqual(self.state.attendance, [])

    def test_update_skill_clamps(self) -> None:
        player_id = self.register("Alex").player_id
        self.assertEqual(self.service.update_skill(self.state, player_id, 6.5).skill_score, 5.0)
        self.assertEqual(self.service.update_skill(self.state, player_id, "-2").skill_score, 0.0)
        with self.assertRaises(MemberValidationError):
            self.service.update_skill(self.state, player_id, "lots")

    def test_update_skill_rejects_non_finite(self) -> None:
        player_id = self.register("Alex").player_id
        self.service.update_skill(self.state, player_id, 3.5)
        for bad in (float("nan"), float("inf"), "-inf", "NaN"):
            with self.assertRaises(MemberValidationError):
                self.service.update_skill(self.state, player_id, bad)
        self.assertEqual(self.state.members[player_id].skill_score, 3.5)

    def test_update_position(self) -> None:
        player_id = self.register("Alex").player_id
        member = self.service.update_position(self.state, player_id, Position.DEFENDER)
        self.assertIs(member.preferred_position, Position.DEFENDER)

    def test_unknown_member(self) -> None:
        with self.assertRaises(MemberNotFoundError):
            self.service.update_skill(self.state, "missing", 3.0)
        with self.assertRaises(MemberNotFoundError):
            self.service.update_position(self.state, "missing", Position.FORWARD)


class TestStats(unittest.TestCase):
    """Test leaderboard, attendee listing and filters."""

    def setUp(self) -> None:
        self.state = ClubState()
        service = MemberService()
        plan = [
            ("Alex", "2024-05-04", Position.GOALKEEPER),
            ("Sam", "2024-05-04", Position.FORWARD),
            ("Alex", "2024-05-11", Position.GOALKEEPER),
            ("kim", "2024-05-11", Position.DEFENDER),
        ]
        for name, day, position in plan:
            service.register_attendance(self.state, name, AgeGroup.TWENTIES, position, day, "Pitch A")

    def test_leaderboard(self) -> None:
        ranked = stats_service.attendance_leaderboard(self.state)
        self.assertEqual([p.name for p in ranked], ["Alex", "Sam", "kim"])
        self.assertEqual(stats_service.total_attendance(self.state), 4)

    def test_attendees_and_distribution(self) -> None:
        attendees = stats_service.attendees_on(self.state, "2024-05-11")
        self.assertEqual(sorted(p.name for p in attendees), ["Alex", "kim"])
        self.assertEqual(
            stats_service.position_distribution(attendees),
            {"GK": 1, "DF": 1, "MF": 0, "FW": 0},
        )
        self.assertEqual(stats_service.attendees_on(self.state, "2023-01-01"), [])

    def test_search_is_case_insensitive_and_sorted(self) -> None:
        members = self.state.members.values()
        self.assertEqual([p.name for p in stats_service.search(members, "")], ["Alex", "kim", "Sam"])
        self.assertEqual([p.name for p in stats_service.search(members, "KI")], ["kim"])

    def test_skill_tier(self) -> None:
        self.assertEqual(stats_service.skill_tier(5.0), "elite")
        self.assertEqual(stats_service.skill_tier(3.5), "strong")
        self.assertEqual(stats_service.skill_tier(2.5), "solid")
        self.assertEqual(stats_service.skill_tier(0.0), "developing")


if __name__ == "__main__":
    unittest.main()
