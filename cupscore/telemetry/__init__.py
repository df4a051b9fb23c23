"""Telemetry helpers for scoring instrumentation."""

from .events import (
    record_game_scored,
    record_game_status_changed,
    record_tournament_recomputed,
    set_scoring_telemetry_emitter,
)

__all__ = [
    "record_game_scored",
    "record_game_status_changed",
    "record_tournament_recomputed",
    "set_scoring_telemetry_emitter",
]
