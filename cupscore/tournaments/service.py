from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List

from cupscore.config import get_settings
from cupscore.games.models import Game
from cupscore.scoring import compute_tournament_scores, scores_changed
from cupscore.scoring.schemas import TournamentScores
from cupscore.storage import read_json, sanitize_id, write_json_atomic
from cupscore.telemetry.events import record_tournament_recomputed

from .models import ProgressEntry, Tournament, new_tournament_id

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "year", "is_active", "use_handicaps"}


class TournamentNotFound(Exception):
    pass


class TournamentService:
    def __init__(self, base_dir: Path | str | None = None):
        base = Path(base_dir or get_settings().data_dir).expanduser()
        self._base_dir = base.resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    # Tournament lifecycle
    def create_tournament(
        self,
        *,
        name: str,
        year: int,
        use_handicaps: bool = False,
        is_active: bool = True,
    ) -> Tournament:
        tournament = Tournament(
            id=new_tournament_id(),
            name=name,
            year=year,
            use_handicaps=use_handicaps,
            is_active=is_active,
        )
        self._write(tournament)
        logger.info(
            "created tournament",
            extra={"tournament_id": tournament.id, "use_handicaps": use_handicaps},
        )
        return tournament

    def get_tournament(self, tournament_id: str) -> Tournament:
        data = read_json(self._tournament_path(tournament_id))
        if data is None:
            raise TournamentNotFound(tournament_id)
        return Tournament.model_validate(data)

    def update_tournament(self, tournament_id: str, updates: dict) -> Tournament:
        """Apply settings changes; scores and progress are never touched here."""

        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"fields cannot be updated: {sorted(unknown)}")

        tournament = self.get_tournament(tournament_id)
        merged = tournament.model_dump()
        merged.update(updates)
        merged["updated_at"] = datetime.now(timezone.utc)
        updated = Tournament.model_validate(merged)
        self._write(updated)
        return updated

    def list_games(self, tournament_id: str) -> List[Game]:
        games_dir = self.games_dir(tournament_id)
        if not games_dir.exists():
            return []
        games = [
            Game.model_validate(read_json(path))
            for path in sorted(games_dir.glob("*.json"))
        ]
        return games

    # Scoring
    def recompute_tournament(
        self, tournament_id: str, games: Iterable[Game] | None = None
    ) -> TournamentScores:
        """Recompute totals and persist them only when they changed.

        A persisted change appends exactly one progress entry. Unchanged
        totals leave the stored document alone.
        """

        tournament = self.get_tournament(tournament_id)
        source = list(games) if games is not None else self.list_games(tournament_id)
        scores = compute_tournament_scores(source)

        changed = scores_changed(
            tournament.total_score, tournament.projected_score, scores
        )
        if changed:
            now = datetime.now(timezone.utc)
            entry = ProgressEntry(
                score=scores.total_score,
                projected_score=scores.projected_score,
                completed_games=scores.completed_games,
                timestamp=now,
            )
            updated = tournament.model_copy(
                update={
                    "total_score": scores.total_score,
                    "projected_score": scores.projected_score,
                    "progress": [*tournament.progress, entry],
                    "updated_at": now,
                }
            )
            self._write(updated)
            logger.info(
                "tournament totals updated",
                extra={
                    "tournament_id": tournament_id,
                    "completed_games": scores.completed_games,
                    "progress_entries": len(updated.progress),
                },
            )
        else:
            logger.debug("tournament %s totals unchanged", tournament_id)

        record_tournament_recomputed(
            tournament_id, changed=changed, completed_games=scores.completed_games
        )
        return scores

    # Internal helpers
    def tournament_dir(self, tournament_id: str) -> Path:
        safe_id = sanitize_id(tournament_id, kind="tournament_id")
        return self._base_dir / "tournaments" / safe_id

    def games_dir(self, tournament_id: str) -> Path:
        return self.tournament_dir(tournament_id) / "games"

    def _tournament_path(self, tournament_id: str) -> Path:
        return self.tournament_dir(tournament_id) / "tournament.json"

    def _write(self, tournament: Tournament) -> None:
        write_json_atomic(
            self._tournament_path(tournament.id),
            tournament.model_dump(mode="json", by_alias=True),
        )


@lru_cache(maxsize=1)
def get_tournament_service() -> TournamentService:
    return TournamentService()


__all__ = [
    "TournamentNotFound",
    "TournamentService",
    "get_tournament_service",
]
