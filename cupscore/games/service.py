from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from cupscore.config import get_settings
from cupscore.courses.stroke_indices import StrokeIndexCache, default_loader
from cupscore.players.models import Player, derive_handicap
from cupscore.scoring import score_game
from cupscore.scoring.schemas import HOLES_PER_ROUND, PointsSplit, Team
from cupscore.storage import read_json, sanitize_id, write_json_atomic
from cupscore.telemetry.events import record_game_scored, record_game_status_changed
from cupscore.tournaments.service import TournamentService, get_tournament_service

from .models import Game, GameStatus, empty_holes, new_game_id

logger = logging.getLogger(__name__)


class GameNotFound(Exception):
    pass


class GameStatusError(ValueError):
    pass


class GameService:
    """Stores games and keeps their tournament totals in step.

    Every mutation rescores the game and then recomputes the owning
    tournament.
    """

    def __init__(
        self,
        tournaments: TournamentService,
        stroke_indices: StrokeIndexCache | None = None,
        *,
        min_hole_score: int | None = None,
        max_hole_score: int | None = None,
    ):
        settings = get_settings()
        self._tournaments = tournaments
        self._stroke_indices = stroke_indices or StrokeIndexCache(
            default_loader(settings.stroke_index_path)
        )
        self._min_hole_score = (
            settings.min_hole_score if min_hole_score is None else min_hole_score
        )
        self._max_hole_score = (
            settings.max_hole_score if max_hole_score is None else max_hole_score
        )

    @property
    def stroke_indices(self) -> StrokeIndexCache:
        return self._stroke_indices

    # Game lifecycle
    def create_game(
        self,
        *,
        tournament_id: str,
        usa_player: Player,
        europe_player: Player,
        handicap_strokes: Optional[float] = None,
        higher_handicap_team: Optional[Team] = None,
    ) -> Game:
        if usa_player.id == europe_player.id:
            raise ValueError("a player cannot face themselves")

        tournament = self._tournaments.get_tournament(tournament_id)

        if handicap_strokes is None:
            if tournament.use_handicaps:
                handicap_strokes, derived_team = derive_handicap(usa_player, europe_player)
                higher_handicap_team = higher_handicap_team or derived_team
            else:
                handicap_strokes = 0.0

        game = Game(
            id=new_game_id(),
            tournament_id=tournament_id,
            usa_player_id=usa_player.id,
            usa_player_name=usa_player.name,
            usa_player_handicap=usa_player.resolved_average(),
            europe_player_id=europe_player.id,
            europe_player_name=europe_player.name,
            europe_player_handicap=europe_player.resolved_average(),
            handicap_strokes=handicap_strokes,
            higher_handicap_team=higher_handicap_team or Team.USA,
            holes=empty_holes(self._stroke_indices.get()),
            player_ids=[usa_player.id, europe_player.id],
            updated_at=datetime.now(timezone.utc),
        )
        game = score_game(game)
        self._write_game(game)
        logger.info(
            "created game",
            extra={
                "tournament_id": tournament_id,
                "game_id": game.id,
                "handicap_strokes": game.handicap_strokes,
                "higher_handicap_team": game.higher_handicap_team.value,
            },
        )
        self._tournaments.recompute_tournament(tournament_id)
        return game

    def get_game(self, tournament_id: str, game_id: str) -> Game:
        data = read_json(self._game_path(tournament_id, game_id))
        if data is None:
            raise GameNotFound(game_id)
        return Game.model_validate(data)

    def list_games(self, tournament_id: str) -> List[Game]:
        self._tournaments.get_tournament(tournament_id)
        return self._tournaments.list_games(tournament_id)

    # Score entry
    def record_hole_score(
        self,
        *,
        tournament_id: str,
        game_id: str,
        hole_number: int,
        usa_score: Optional[int],
        europe_score: Optional[int],
    ) -> Game:
        if hole_number < 1 or hole_number > HOLES_PER_ROUND:
            raise ValueError(f"hole_number must be between 1 and {HOLES_PER_ROUND}")
        for score in (usa_score, europe_score):
            if score is not None and score < 0:
                raise ValueError("scores must be non-negative")

        game = self.get_game(tournament_id, game_id)
        holes = list(game.holes)
        position = hole_number - 1
        if position >= len(holes):
            raise ValueError(f"game {game_id} has no hole {hole_number}")
        holes[position] = holes[position].model_copy(
            update={
                "usa_player_score": usa_score,
                "europe_player_score": europe_score,
            }
        )
        game = game.model_copy(update={"holes": holes})

        status = game.status
        if status is GameStatus.NOT_STARTED and game.holes_played > 0:
            status = GameStatus.IN_PROGRESS
        if status is not GameStatus.COMPLETE and game.all_holes_played:
            status = GameStatus.COMPLETE
        elif status is GameStatus.COMPLETE and not game.all_holes_played:
            status = GameStatus.IN_PROGRESS
        previous = game.status
        if status is not previous:
            game = self._transition(game, status)

        game = self._rescore(game, previous_status=previous)
        record_game_scored(game.id, tournament_id, holes_played=game.holes_played)
        return game

    def set_handicap(
        self,
        *,
        tournament_id: str,
        game_id: str,
        handicap_strokes: float,
        higher_handicap_team: Team,
    ) -> Game:
        if handicap_strokes < 0:
            raise ValueError("handicap_strokes must be non-negative")
        game = self.get_game(tournament_id, game_id)
        game = game.model_copy(
            update={
                "handicap_strokes": float(handicap_strokes),
                "higher_handicap_team": Team(higher_handicap_team),
            }
        )
        return self._rescore(game)

    def set_status(self, *, tournament_id: str, game_id: str, status: GameStatus) -> Game:
        """Force a status transition requested by an administrator."""

        status = GameStatus(status)
        game = self.get_game(tournament_id, game_id)

        if status is GameStatus.COMPLETE:
            self._check_completable(game)

        previous = game.status
        game = self._transition(game, status)
        return self._rescore(
            game,
            keep_points=status is GameStatus.COMPLETE,
            previous_status=previous,
        )

    # Internal helpers
    def _transition(self, game: Game, status: GameStatus) -> Game:
        now = datetime.now(timezone.utc)
        updated = game.with_status(status)
        if status is GameStatus.NOT_STARTED:
            updated = updated.model_copy(update={"start_time": None, "end_time": None})
        elif status is GameStatus.IN_PROGRESS:
            updated = updated.model_copy(
                update={"start_time": game.start_time or now, "end_time": None}
            )
        else:
            updated = updated.model_copy(
                update={"start_time": game.start_time or now, "end_time": now}
            )
        return updated

    def _check_completable(self, game: Game) -> None:
        if not game.all_holes_played:
            raise GameStatusError(
                "All holes must have scores before marking the game as complete"
            )
        for hole in game.holes:
            for score in (hole.usa_player_score, hole.europe_player_score):
                if score < self._min_hole_score or score > self._max_hole_score:
                    raise GameStatusError(
                        f"All scores must be between {self._min_hole_score} "
                        f"and {self._max_hole_score}"
                    )

    def _rescore(
        self,
        game: Game,
        *,
        keep_points: bool = True,
        previous_status: Optional[GameStatus] = None,
    ) -> Game:
        scored = score_game(game)
        if not keep_points:
            scored = scored.model_copy(update={"points": PointsSplit()})
        scored = scored.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        self._write_game(scored)
        if previous_status is not None and previous_status is not scored.status:
            logger.info(
                "game status changed",
                extra={
                    "game_id": scored.id,
                    "from_status": previous_status.value,
                    "to_status": scored.status.value,
                },
            )
            record_game_status_changed(scored.id, scored.status.value)
        self._tournaments.recompute_tournament(scored.tournament_id)
        return scored

    def _game_path(self, tournament_id: str, game_id: str) -> Path:
        safe_id = sanitize_id(game_id, kind="game_id")
        return self._tournaments.games_dir(tournament_id) / f"{safe_id}.json"

    def _write_game(self, game: Game) -> None:
        write_json_atomic(
            self._game_path(game.tournament_id, game.id),
            game.model_dump(mode="json", by_alias=True),
        )


@lru_cache(maxsize=1)
def get_game_service() -> GameService:
    return GameService(get_tournament_service())


__all__ = [
    "GameNotFound",
    "GameService",
    "GameStatusError",
    "get_game_service",
]
