from .models import (
    HistoricalScore,
    Player,
    compute_average_score,
    derive_handicap,
)

__all__ = [
    "HistoricalScore",
    "Player",
    "compute_average_score",
    "derive_handicap",
]
