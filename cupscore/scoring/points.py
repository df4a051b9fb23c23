"""Ryder-Cup points for a single game."""

from __future__ import annotations

from typing import Tuple

from .schemas import GameTotals, PointsSplit, TeamScore


def _lower_wins(usa: float, europe: float) -> Tuple[float, float]:
    if usa < europe:
        return 1.0, 0.0
    if europe < usa:
        return 0.0, 1.0
    return 0.5, 0.5


def _higher_wins(usa: float, europe: float) -> Tuple[float, float]:
    if usa > europe:
        return 1.0, 0.0
    if europe > usa:
        return 0.0, 1.0
    return 0.5, 0.5


def _split(stroke_usa: float, stroke_europe: float, mp_usa: float, mp_europe: float) -> TeamScore:
    stroke = _lower_wins(stroke_usa, stroke_europe)
    match = _higher_wins(mp_usa, mp_europe)
    return TeamScore(usa=stroke[0] + match[0], europe=stroke[1] + match[1])


def calculate_game_points(game: GameTotals) -> PointsSplit:
    """Award one stroke-play point and one match-play point, raw and adjusted.

    A game that has not started scores nothing. Any started game hands out
    exactly two points per flavor, ties splitting a point in half.
    """

    if not game.is_started:
        return PointsSplit()

    stroke = game.stroke_play_score
    match = game.match_play_score
    return PointsSplit(
        raw=_split(stroke.usa, stroke.europe, match.usa, match.europe),
        adjusted=_split(
            stroke.adjusted_usa,
            stroke.adjusted_europe,
            match.adjusted_usa,
            match.adjusted_europe,
        ),
    )


__all__ = ["calculate_game_points"]
