from .models import ProgressEntry, Tournament
from .service import (
    TournamentNotFound,
    TournamentService,
    get_tournament_service,
)

__all__ = [
    "ProgressEntry",
    "Tournament",
    "TournamentService",
    "TournamentNotFound",
    "get_tournament_service",
]
