import pytest

from cupscore.games.models import GameStatus
from cupscore.scoring import ScoringValidationError
from cupscore.storage import write_json_atomic
from cupscore.telemetry import (
    record_game_scored,
    record_game_status_changed,
    record_tournament_recomputed,
    set_scoring_telemetry_emitter,
)


def test_events_reach_registered_emitter(telemetry_events):
    record_game_scored("game_1", "tour_1", holes_played=3)
    record_game_status_changed("game_1", "complete")
    record_tournament_recomputed("tour_1", changed=True, completed_games=1)

    names = [name for name, _ in telemetry_events]
    assert names == ["game.scored", "game.status_changed", "tournament.recomputed"]
    scored = telemetry_events[0][1]
    assert scored["gameId"] == "game_1"
    assert scored["holesPlayed"] == 3
    assert isinstance(scored["ts"], int)
    assert telemetry_events[2][1]["completedGames"] == 1


def test_no_emitter_is_a_noop():
    set_scoring_telemetry_emitter(None)
    record_game_scored("game_1", "tour_1", holes_played=0)


def test_service_emits_lifecycle_events(telemetry_events, game_service, tournament_service, players):
    tournament = tournament_service.create_tournament(name="Cup", year=2024)
    game = game_service.create_game(
        tournament_id=tournament.id, usa_player=players[0], europe_player=players[1]
    )
    telemetry_events.clear()

    game_service.record_hole_score(
        tournament_id=tournament.id,
        game_id=game.id,
        hole_number=1,
        usa_score=4,
        europe_score=4,
    )

    names = [name for name, _ in telemetry_events]
    assert names == ["game.status_changed", "tournament.recomputed", "game.scored"]
    assert telemetry_events[0][1]["status"] == GameStatus.IN_PROGRESS.value
    assert telemetry_events[1][1]["changed"] is True


def test_failed_rescore_emits_no_status_change(
    telemetry_events, game_service, tournament_service, players
):
    tournament = tournament_service.create_tournament(name="Cup", year=2024)
    game = game_service.create_game(
        tournament_id=tournament.id, usa_player=players[0], europe_player=players[1]
    )
    path = tournament_service.games_dir(tournament.id) / f"{game.id}.json"
    document = game.model_dump(mode="json", by_alias=True)
    document["holes"] = document["holes"][:17]
    write_json_atomic(path, document)
    telemetry_events.clear()

    with pytest.raises(ScoringValidationError):
        game_service.record_hole_score(
            tournament_id=tournament.id,
            game_id=game.id,
            hole_number=1,
            usa_score=4,
            europe_score=4,
        )

    assert telemetry_events == []
    assert game_service.get_game(tournament.id, game.id).status is GameStatus.NOT_STARTED


def test_forced_status_event_follows_write(
    telemetry_events, game_service, tournament_service, players
):
    tournament = tournament_service.create_tournament(name="Cup", year=2024)
    game = game_service.create_game(
        tournament_id=tournament.id, usa_player=players[0], europe_player=players[1]
    )
    telemetry_events.clear()

    game_service.set_status(
        tournament_id=tournament.id, game_id=game.id, status=GameStatus.IN_PROGRESS
    )
    game_service.set_status(
        tournament_id=tournament.id, game_id=game.id, status=GameStatus.IN_PROGRESS
    )

    names = [name for name, _ in telemetry_events]
    assert names.count("game.status_changed") == 1
    assert telemetry_events[0][1]["status"] == GameStatus.IN_PROGRESS.value
