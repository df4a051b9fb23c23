"""Handicap stroke allocation across the 18 holes of a game."""

from __future__ import annotations

import math

from .errors import ScoringValidationError
from .schemas import HOLES_PER_ROUND


def _check_handicap(total_handicap: float) -> float:
    try:
        value = float(total_handicap)
    except (TypeError, ValueError):
        raise ScoringValidationError(f"invalid handicap strokes: {total_handicap!r}")
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ScoringValidationError(f"invalid handicap strokes: {total_handicap!r}")
    return value


def _check_stroke_index(stroke_index: int) -> int:
    if isinstance(stroke_index, bool) or not isinstance(stroke_index, int):
        raise ScoringValidationError(f"invalid stroke index: {stroke_index!r}")
    if stroke_index < 1 or stroke_index > HOLES_PER_ROUND:
        raise ScoringValidationError(f"invalid stroke index: {stroke_index!r}")
    return stroke_index


def strokes_for_hole(total_handicap: float, stroke_index: int) -> float:
    """Return the strokes one hole contributes to the receiving team.

    Every hole gets ``floor(total / 18)`` strokes. Holes whose stroke index is
    at or below the remainder get one more. A fractional remainder is handed
    to the next hole in stroke-index order, so 7.5 strokes give holes 1-7 a
    full stroke and hole 8 half a stroke.
    """

    handicap = _check_handicap(total_handicap)
    index = _check_stroke_index(stroke_index)

    base = math.floor(handicap / HOLES_PER_ROUND)
    remainder = handicap - base * HOLES_PER_ROUND
    full_holes = math.floor(remainder)
    fraction = round(remainder - full_holes, 6)

    if index <= remainder:
        return base + 1
    if fraction and index == full_holes + 1:
        return base + fraction
    return base


def allocate_strokes(total_handicap: float, stroke_indices: list[int]) -> list[float]:
    """Strokes per hole, in the order the stroke indices are given."""

    return [strokes_for_hole(total_handicap, index) for index in stroke_indices]


__all__ = ["allocate_strokes", "strokes_for_hole"]
