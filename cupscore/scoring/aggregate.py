"""Fold adjusted holes into game-level stroke-play and match-play totals."""

from __future__ import annotations

from typing import Sequence

from .errors import ScoringValidationError
from .schemas import HOLES_PER_ROUND, GameAggregate, Hole, ScoreTotals


def aggregate(holes: Sequence[Hole]) -> GameAggregate:
    """Sum 18 adjusted holes.

    Stroke-play sums only count holes where both players have a raw score;
    a hole with a single score (a no-show) is left out for both teams.
    """

    if len(holes) != HOLES_PER_ROUND:
        raise ScoringValidationError(
            f"expected {HOLES_PER_ROUND} holes, got {len(holes)}"
        )

    usa = europe = adjusted_usa = adjusted_europe = 0.0
    mp_usa = mp_europe = mp_adjusted_usa = mp_adjusted_europe = 0.0
    holes_played = 0

    for hole in holes:
        if not hole.is_played:
            continue
        if (
            hole.usa_player_adjusted_score is None
            or hole.europe_player_adjusted_score is None
        ):
            raise ScoringValidationError(
                f"hole {hole.hole_number} has scores but was not adjusted"
            )

        holes_played += 1
        usa += hole.usa_player_score
        europe += hole.europe_player_score
        adjusted_usa += hole.usa_player_adjusted_score
        adjusted_europe += hole.europe_player_adjusted_score

        mp_usa += hole.usa_player_match_play_score
        mp_europe += hole.europe_player_match_play_score
        mp_adjusted_usa += hole.usa_player_match_play_adjusted_score
        mp_adjusted_europe += hole.europe_player_match_play_adjusted_score

    return GameAggregate(
        stroke_play_score=ScoreTotals(
            usa=usa,
            europe=europe,
            adjusted_usa=adjusted_usa,
            adjusted_europe=adjusted_europe,
        ),
        match_play_score=ScoreTotals(
            usa=mp_usa,
            europe=mp_europe,
            adjusted_usa=mp_adjusted_usa,
            adjusted_europe=mp_adjusted_europe,
        ),
        holes_played=holes_played,
    )


__all__ = ["aggregate"]
