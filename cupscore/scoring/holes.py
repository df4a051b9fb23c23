"""Per-hole handicap adjustment and match-play indicators."""

from __future__ import annotations

from typing import Tuple

from .errors import ScoringValidationError
from .handicap import strokes_for_hole
from .schemas import Hole, Team


def _match_play_split(usa: float, europe: float) -> Tuple[float, float]:
    if usa < europe:
        return 1.0, 0.0
    if europe < usa:
        return 0.0, 1.0
    return 0.5, 0.5


def _net(score: int, strokes: float) -> float:
    return score - strokes


def adjust_hole(hole: Hole, handicap_strokes: float, higher_handicap_team: Team) -> Hole:
    """Return a copy of ``hole`` with adjusted scores and match-play results.

    The receiving team's adjusted score is its net score (raw minus the
    hole's handicap strokes); the other side's adjusted score is its raw
    score. Until both sides have a score the adjusted scores stay null and
    the match-play fields stay at 0.
    """

    try:
        team = Team(higher_handicap_team)
    except ValueError:
        raise ScoringValidationError(
            f"invalid higher handicap team: {higher_handicap_team!r}"
        )
    for label, score in (
        ("usa", hole.usa_player_score),
        ("europe", hole.europe_player_score),
    ):
        if score is not None and score < 0:
            raise ScoringValidationError(
                f"hole {hole.hole_number}: negative {label} score {score}"
            )

    strokes = strokes_for_hole(handicap_strokes, hole.stroke_index)
    usa_strokes = strokes if team is Team.USA else 0
    europe_strokes = strokes if team is Team.EUROPE else 0

    update = {
        "usa_player_adjusted_score": None,
        "europe_player_adjusted_score": None,
        "usa_player_match_play_score": 0.0,
        "europe_player_match_play_score": 0.0,
        "usa_player_match_play_adjusted_score": 0.0,
        "europe_player_match_play_adjusted_score": 0.0,
    }

    if hole.is_played:
        usa_adjusted = _net(hole.usa_player_score, usa_strokes)
        europe_adjusted = _net(hole.europe_player_score, europe_strokes)
        usa_raw, europe_raw = _match_play_split(
            hole.usa_player_score, hole.europe_player_score
        )
        usa_adj, europe_adj = _match_play_split(usa_adjusted, europe_adjusted)
        update.update(
            {
                "usa_player_adjusted_score": usa_adjusted,
                "europe_player_adjusted_score": europe_adjusted,
                "usa_player_match_play_score": usa_raw,
                "europe_player_match_play_score": europe_raw,
                "usa_player_match_play_adjusted_score": usa_adj,
                "europe_player_match_play_adjusted_score": europe_adj,
            }
        )

    return hole.model_copy(update=update)


__all__ = ["adjust_hole"]
