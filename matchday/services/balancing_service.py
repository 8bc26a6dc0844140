"""
Skill-balanced team generation.

Greedy two-phase split: goalkeepers are spread first, then outfield players
are dealt strongest first to whichever side is behind. Not an optimal
partition, but deterministic and O(n log n).
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from ..models import Player, TeamResult

logger = logging.getLogger(__name__)


def _by_skill_desc(players: Sequence[Player]) -> List[Player]:
    return sorted(players, key=lambda p: p.skill_score, reverse=True)


def balance_teams(squad: Sequence[Player]) -> TeamResult:
    """
    Split a squad into two teams of similar total skill.

    Args:
        squad: Players to split, in squad order

    Returns:
        TeamResult holding every squad member exactly once. Squads with fewer
        than two players give a degenerate split with an empty side.
    """
    goalkeepers = _by_skill_desc([p for p in squad if p.is_goalkeeper])
    outfield = _by_skill_desc([p for p in squad if not p.is_goalkeeper])

    team_a: List[Player] = []
    team_b: List[Player] = []
    score_a = 0.0
    score_b = 0.0

    # Phase 1: keepers go to A while A is neither ahead on score nor on size
    for keeper in goalkeepers:
        if score_a <= score_b and len(team_a) <= len(team_b):
            team_a.append(keeper)
            score_a += keeper.skill_score
        else:
            team_b.append(keeper)
            score_b += keeper.skill_score

    # Phase 2: lower score wins, then fewer players, then A
    for player in outfield:
        if score_a < score_b:
            to_a = True
        elif score_b < score_a:
            to_a = False
        else:
            to_a = len(team_a) <= len(team_b)

        if to_a:
            team_a.append(player)
            score_a += player.skill_score
        else:
            team_b.append(player)
            score_b += player.skill_score

    result = TeamResult(team_a=team_a, team_b=team_b)
    logger.debug(
        "Balanced %d players: A=%d (%.1f) B=%d (%.1f)",
        len(squad), len(team_a), result.score_a, len(team_b), result.score_b,
    )
    return result
