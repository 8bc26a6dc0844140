"""
Unit tests for the Player model and its enumerations.
"""
import unittest

from matchday.models.player import AgeGroup, Player, Position, clamp_skill


class TestPosition(unittest.TestCase):
    """Test position parsing."""

    def test_parse_codes_and_names(self) -> None:
        self.assertIs(Position.parse("GK"), Position.GOALKEEPER)
        self.assertIs(Position.parse("fw"), Position.FORWARD)
        self.assertIs(Position.parse("defender"), Position.DEFENDER)
        self.assertIs(Position.parse(Position.MIDFIELDER), Position.MIDFIELDER)

    def test_parse_unknown_raises(self) -> None:
        with self.assertRaises(ValueError):
            Position.parse("ST")
        with self.assertRaises(ValueError):
            Position.parse(None)

    def test_age_group_parse(self) -> None:
        self.assertIs(AgeGroup.parse("60s+"), AgeGroup.SIXTIES_PLUS)
        with self.assertRaises(ValueError):
            AgeGroup.parse("teens")


class TestPlayer(unittest.TestCase):
    """Test Player behaviour."""

    def test_defaults(self) -> None:
        player = Player(id="p1", name="Alex")
        self.assertEqual(player.skill_score, 2.5)
        self.assertIs(player.preferred_position, Position.MIDFIELDER)
        self.assertEqual(player.total_attendance, 0)
        self.assertFalse(player.is_goalkeeper)

    def test_skill_is_clamped(self) -> None:
        self.assertEqual(Player(id="p1", name="Alex", skill_score=7).skill_score, 5.0)
        self.assertEqual(Player(id="p2", name="Sam", skill_score=-1).skill_score, 0.0)

        player = Player(id="p3", name="Kim")
        player.set_skill(4.25)
        self.assertEqual(player.skill_score, 4.25)
        player.set_skill(9)
        self.assertEqual(player.skill_score, 5.0)
        self.assertEqual(clamp_skill(0.0), 0.0)

    def test_with_position_returns_copy(self) -> None:
        player = Player(id="p1", name="Alex", preferred_position=Position.FORWARD)
        keeper = player.with_position(Position.GOALKEEPER)

        self.assertTrue(keeper.is_goalkeeper)
        self.assertIs(player.preferred_position, Position.FORWARD)
        self.assertEqual(keeper.id, player.id)

    def test_dict_round_trip(self) -> None:
        player = Player(
            id="p1", name="Alex", age_group=AgeGroup.FORTIES, skill_score=3.5,
            preferred_position=Position.DEFENDER, total_attendance=4,
        )
        data = player.to_dict()

        self.assertEqual(data["preferred_position"], "DF")
        self.assertEqual(data["age_group"], "40s")
        self.assertEqual(Player.from_dict(data), player)

    def test_from_dict_fills_defaults(self) -> None:
        player = Player.from_dict({"id": "p9", "name": "New"})
        self.assertEqual(player.skill_score, 2.5)
        self.assertIs(player.age_group, AgeGroup.THIRTIES)


if __name__ == "__main__":
    unittest.main()
