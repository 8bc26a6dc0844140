"""
Unit tests for MatchSession: the quarter-by-quarter workflow.
"""
import unittest

from matchday.models import AttendanceRecord, ClubState, Position
from matchday.services.member_service import MemberService
from matchday.services.session_service import INSUFFICIENT_PLAYERS, NO_PROPOSAL, MatchSession

from helpers import make_player

DATE = "2024-05-04"
PITCH = "Pitch A"


def build_state(count: int) -> ClubState:
    state = ClubState()
    for i in range(count):
        player = make_player(f"p{i:02d}", skill=(i % 5) + 0.5)
        state.members[player.id] = player
        state.attendance.append(AttendanceRecord(f"r{i}", DATE, PITCH, player.id, float(i)))
    return state


class TestMatchSession(unittest.TestCase):
    """Test session state handling around the engine."""

    def setUp(self) -> None:
        self.state = build_state(26)
        self.session = MatchSession(DATE, PITCH)

    def test_first_squad_is_first_arrivals(self) -> None:
        squad = self.session.squad(self.state)
        self.assertEqual([p.id for p in squad], [f"p{i:02d}" for i in range(22)])

    def test_confirmed_match_rotates_bench_in(self) -> None:
        outcome = self.session.generate_lineup(self.state)
        self.assertTrue(outcome.success)

        record = self.session.confirm()
        self.assertEqual(record.match_number, 1)
        self.assertEqual(len(record.player_ids), 22)
        self.assertIsNone(self.session.current)

        counts = self.session.match_counts(self.state)
        self.assertEqual(sum(counts.values()), 22)
        self.assertEqual(counts["p25"], 0)

        squad_ids = [p.id for p in self.session.squad(self.state)]
        self.assertEqual(squad_ids[:4], ["p22", "p23", "p24", "p25"])
        self.assertEqual(len(squad_ids), 22)

    def test_tally_matches_confirmed_history(self) -> None:
        for _ in range(3):
            self.session.generate_lineup(self.state)
            self.session.confirm()

        counts = self.session.match_counts(self.state)
        for player_id, count in counts.items():
            expected = sum(1 for m in self.session.history if player_id in m.player_ids)
            self.assertEqual(count, expected)
        self.assertEqual([m.match_number for m in self.session.history], [1, 2, 3])

    def test_insufficient_players(self) -> None:
        session = MatchSession(DATE, PITCH)
        outcome = session.generate_lineup(build_state(1))
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.error, INSUFFICIENT_PLAYERS)
        self.assertIsNone(session.current)

    def test_exclusion_toggle_clears_proposal(self) -> None:
        self.session.generate_lineup(self.state)
        self.assertTrue(self.session.toggle_exclusion("p00"))
        self.assertIsNone(self.session.current)
        self.assertNotIn("p00", [p.id for p in self.session.squad(self.state)])

        self.assertFalse(self.session.toggle_exclusion("p00"))
        self.assertIn("p00", [p.id for p in self.session.squad(self.state)])

    def test_edits_require_proposal(self) -> None:
        self.assertEqual(self.session.move_player("p00").error, NO_PROPOSAL)
        self.assertEqual(self.session.update_position("p00", Position.FORWARD).error, NO_PROPOSAL)
        self.assertIsNone(self.session.confirm())

    def test_move_and_position_edit_update_scores(self) -> None:
        teams = self.session.generate_lineup(self.state).teams
        mover = teams.team_a[0]

        moved = self.session.move_player(mover.id).teams
        self.assertEqual(moved.team_of(mover.id), "B")
        self.assertAlmostEqual(moved.score_a, teams.score_a - mover.skill_score)
        self.assertAlmostEqual(moved.score_b, teams.score_b + mover.skill_score)

        edited = self.session.update_position(mover.id, Position.DEFENDER).teams
        self.assertIs(edited.team_b[-1].preferred_position, Position.DEFENDER)
        # the roster keeps its own preference
        self.assertIsNot(self.state.members[mover.id].preferred_position, Position.DEFENDER)

        record = self.session.confirm()
        self.assertIn(mover.id, record.player_ids)

    def test_reset_clears_everything(self) -> None:
        self.session.generate_lineup(self.state)
        self.session.confirm()
        self.session.toggle_exclusion("p03")
        self.session.generate_lineup(self.state)

        self.session.reset()
        self.assertEqual(self.session.history, [])
        self.assertEqual(self.session.excluded_ids, set())
        self.assertIsNone(self.session.current)

    def test_change_venue_starts_new_session(self) -> None:
        self.session.generate_lineup(self.state)
        self.session.confirm()

        self.session.change_venue(DATE, PITCH)
        self.assertEqual(len(self.session.history), 1)

        self.session.change_venue(DATE, "Pitch B")
        self.assertEqual(self.session.history, [])
        self.assertEqual(self.session.squad(self.state), [])

    def test_roster_edits_leave_confirmed_match_alone(self) -> None:
        self.session.generate_lineup(self.state)
        record = self.session.confirm()
        scores = (record.teams.score_a, record.teams.score_b)
        positions = [p.preferred_position for p in record.teams.team_a]

        service = MemberService()
        service.update_skill(self.state, "p00", 5.0)
        service.update_position(self.state, "p01", Position.GOALKEEPER)

        self.assertEqual((record.teams.score_a, record.teams.score_b), scores)
        self.assertEqual([p.preferred_position for p in record.teams.team_a], positions)

    def test_roster_edits_leave_pending_proposal_consistent(self) -> None:
        teams = self.session.generate_lineup(self.state).teams
        before = {p.id: p.skill_score for p in teams.team_a + teams.team_b}

        service = MemberService()
        service.update_skill(self.state, "p00", 0.0)
        service.update_skill(self.state, "p21", 0.0)

        current = self.session.current
        self.assertEqual({p.id: p.skill_score for p in current.team_a + current.team_b}, before)
        self.assertEqual(current.score_a, sum(before[p.id] for p in current.team_a))

        regenerated = self.session.generate_lineup(self.state).teams
        skills = {p.id: p.skill_score for p in regenerated.team_a + regenerated.team_b}
        self.assertEqual((skills["p00"], skills["p21"]), (0.0, 0.0))

    def test_overview_flags(self) -> None:
        self.session.toggle_exclusion("p01")
        rows = self.session.overview(self.state)

        self.assertEqual(len(rows), 26)
        self.assertEqual(rows[0]["arrival"], 1)
        self.assertTrue(rows[1]["excluded"])
        self.assertFalse(rows[1]["in_squad"])
        hinted = [r["player"]["id"] for r in rows if r["goalkeeper_hint"]]
        self.assertEqual(hinted, ["p21", "p22"])


if __name__ == "__main__":
    unittest.main()
