"""Full game scoring pipeline: adjust holes, aggregate, award points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .aggregate import aggregate
from .holes import adjust_hole
from .points import calculate_game_points

if TYPE_CHECKING:  # pragma: no cover
    from cupscore.games.models import Game


def score_game(game: "Game") -> "Game":
    """Return a copy of ``game`` with every derived field recomputed.

    The input is left untouched. Raises ``ScoringValidationError`` when the
    game does not carry exactly 18 well-formed holes.
    """

    holes = [
        adjust_hole(hole, game.handicap_strokes, game.higher_handicap_team)
        for hole in game.holes
    ]
    totals = aggregate(holes)
    scored = game.model_copy(
        update={
            "holes": holes,
            "stroke_play_score": totals.stroke_play_score,
            "match_play_score": totals.match_play_score,
        }
    )
    return scored.model_copy(update={"points": calculate_game_points(scored)})


__all__ = ["score_game"]
