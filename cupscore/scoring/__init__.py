"""Ryder-Cup scoring engine."""

from .aggregate import aggregate  # noqa: F401
from .engine import score_game  # noqa: F401
from .errors import ScoringValidationError  # noqa: F401
from .handicap import allocate_strokes, strokes_for_hole  # noqa: F401
from .holes import adjust_hole  # noqa: F401
from .points import calculate_game_points  # noqa: F401
from .schemas import (  # noqa: F401
    HOLES_PER_ROUND,
    GameAggregate,
    GameTotals,
    Hole,
    PointsSplit,
    ScoreTotals,
    Team,
    TeamScore,
    TournamentScores,
)
from .tournament import compute_tournament_scores, scores_changed  # noqa: F401
