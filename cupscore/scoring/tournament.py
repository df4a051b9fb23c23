"""Sum game points into tournament totals."""

from __future__ import annotations

from typing import Iterable

from .points import calculate_game_points
from .schemas import GameTotals, PointsSplit, TournamentScores


def compute_tournament_scores(games: Iterable[GameTotals]) -> TournamentScores:
    """Total (complete games only) and projected (all games) points.

    Points are recalculated from each game's stroke and match totals. A
    game's stored ``points`` field is not read, so a game forced back to
    in progress still contributes its live result to the projection.
    """

    total = PointsSplit()
    projected = PointsSplit()
    completed = 0

    for game in games:
        points = calculate_game_points(game)
        projected = projected + points
        if game.is_complete:
            total = total + points
            completed += 1

    return TournamentScores(
        total_score=total, projected_score=projected, completed_games=completed
    )


def scores_changed(
    previous_total: PointsSplit,
    previous_projected: PointsSplit,
    scores: TournamentScores,
) -> bool:
    return previous_total != scores.total_score or previous_projected != scores.projected_score


__all__ = ["compute_tournament_scores", "scores_changed"]
