"""Shared pytest fixtures for scoring tests."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from cupscore.app import app
from cupscore.courses import DEFAULT_STROKE_INDICES, StrokeIndexCache
from cupscore.games.models import Game, GameStatus, empty_holes
from cupscore.games.service import GameService, get_game_service
from cupscore.players import Player
from cupscore.scoring import Team
from cupscore.telemetry import set_scoring_telemetry_emitter
from cupscore.tournaments.service import TournamentService, get_tournament_service


@pytest.fixture
def tournament_service(tmp_path) -> TournamentService:
    return TournamentService(base_dir=tmp_path)


@pytest.fixture
def stroke_indices() -> StrokeIndexCache:
    return StrokeIndexCache()


@pytest.fixture
def game_service(tournament_service, stroke_indices) -> GameService:
    return GameService(tournament_service, stroke_indices)


@pytest.fixture
def scoring_client(tournament_service, game_service):
    app.dependency_overrides[get_tournament_service] = lambda: tournament_service
    app.dependency_overrides[get_game_service] = lambda: game_service
    client = TestClient(app)
    yield client, tournament_service, game_service
    app.dependency_overrides.pop(get_tournament_service, None)
    app.dependency_overrides.pop(get_game_service, None)


@pytest.fixture
def telemetry_events():
    events: list[tuple[str, dict]] = []
    set_scoring_telemetry_emitter(lambda name, payload: events.append((name, payload)))
    yield events
    set_scoring_telemetry_emitter(None)


@pytest.fixture
def players() -> tuple[Player, Player]:
    return (
        Player(id="usa-1", name="Jordan", team=Team.USA),
        Player(id="eur-1", name="Rory", team=Team.EUROPE),
    )


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Build an unscored game document from per-hole raw scores."""

    def _make(
        usa: Sequence[Optional[int]] = (),
        europe: Sequence[Optional[int]] = (),
        *,
        handicap_strokes: float = 0.0,
        higher_handicap_team: Team = Team.USA,
        status: GameStatus = GameStatus.IN_PROGRESS,
        stroke_indices: List[int] | None = None,
        tournament_id: str = "tour_test",
        game_id: str = "game_test",
    ) -> Game:
        holes = empty_holes(stroke_indices or list(DEFAULT_STROKE_INDICES))
        usa_scores = list(usa) + [None] * (len(holes) - len(usa))
        europe_scores = list(europe) + [None] * (len(holes) - len(europe))
        holes = [
            hole.model_copy(
                update={"usa_player_score": u, "europe_player_score": e}
            )
            for hole, u, e in zip(holes, usa_scores, europe_scores)
        ]
        return Game(
            id=game_id,
            tournament_id=tournament_id,
            usa_player_id="usa-1",
            europe_player_id="eur-1",
            handicap_strokes=handicap_strokes,
            higher_handicap_team=higher_handicap_team,
            holes=holes,
            status=status,
        )

    return _make
