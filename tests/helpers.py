"""Shared builders for the test suite."""
from matchday.models import Player, Position


def make_player(player_id: str, skill: float = 2.5, position: Position = Position.MIDFIELDER) -> Player:
    return Player(id=player_id, name=f"Player {player_id}", skill_score=skill,
                  preferred_position=position)
