from __future__ import annotations


class ScoringValidationError(ValueError):
    """Raised when engine input is malformed; the output must not be persisted."""

    user_message = "unable to compute scores for this game"


__all__ = ["ScoringValidationError"]
