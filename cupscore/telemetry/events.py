"""Telemetry helpers for scoring lifecycle instrumentation."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, MutableMapping, Optional

ScoringTelemetryEmitter = Callable[[str, Mapping[str, object]], None]

_emitter: Optional[ScoringTelemetryEmitter] = None
_logger = logging.getLogger("cupscore.telemetry.events")


def set_scoring_telemetry_emitter(candidate: ScoringTelemetryEmitter | None) -> None:
    """Register a telemetry emitter used for scoring instrumentation."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:  # pragma: no cover
        _logger.exception("failed to emit telemetry event %s", event)


def record_game_scored(game_id: str, tournament_id: str, *, holes_played: int) -> None:
    payload: Dict[str, object] = {
        "gameId": game_id,
        "tournamentId": tournament_id,
        "holesPlayed": int(holes_played),
        "ts": _now_ms(),
    }
    _safe_emit("game.scored", payload)


def record_game_status_changed(game_id: str, status: str) -> None:
    payload: Dict[str, object] = {"gameId": game_id, "status": status}
    payload["ts"] = _now_ms()
    _safe_emit("game.status_changed", payload)


def record_tournament_recomputed(
    tournament_id: str, *, changed: bool, completed_games: int | None = None
) -> None:
    payload: Dict[str, object] = {"tournamentId": tournament_id, "changed": changed}
    if completed_games is not None:
        payload["completedGames"] = int(completed_games)
    payload["ts"] = _now_ms()
    _safe_emit("tournament.recomputed", payload)


def _now_ms() -> int:
    from time import time

    return int(time() * 1000)


__all__ = [
    "set_scoring_telemetry_emitter",
    "record_game_scored",
    "record_game_status_changed",
    "record_tournament_recomputed",
]
