"""Stroke index configuration for the tournament course."""

from __future__ import annotations

import json
from pathlib import Path
from threading import Lock
from typing import Callable, List, Optional, Sequence

from cupscore.scoring.schemas import HOLES_PER_ROUND

# Hole order: the entry at position n is the stroke index of hole n + 1.
DEFAULT_STROKE_INDICES: List[int] = [
    3, 7, 13, 15, 11, 5, 17, 1, 9, 6, 2, 14, 18, 8, 10, 16, 4, 12,
]

StrokeIndexLoader = Callable[[], List[int]]


def validate_stroke_indices(indices: Sequence[int]) -> List[int]:
    values = list(indices)
    if sorted(values) != list(range(1, HOLES_PER_ROUND + 1)):
        raise ValueError(
            f"stroke indices must be a permutation of 1..{HOLES_PER_ROUND}: {values!r}"
        )
    return values


def load_stroke_indices(path: Path | str) -> List[int]:
    """Read ``{"indices": [...]}`` from ``path``."""

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("indices"), list):
        raise ValueError(f"stroke index file {path} has no 'indices' list")
    return validate_stroke_indices(data["indices"])


def default_loader(path: Optional[Path | str] = None) -> StrokeIndexLoader:
    if path is None:
        return lambda: list(DEFAULT_STROKE_INDICES)
    return lambda: load_stroke_indices(path)


class StrokeIndexCache:
    """Caller-owned cache of the course stroke indices.

    Loads lazily on first ``get()`` and keeps the result until ``reset()``.
    """

    def __init__(self, loader: StrokeIndexLoader | None = None) -> None:
        self._loader = loader or default_loader()
        self._indices: Optional[List[int]] = None
        self._lock = Lock()
        self.load_count = 0

    def get(self) -> List[int]:
        with self._lock:
            if self._indices is None:
                self._indices = validate_stroke_indices(self._loader())
                self.load_count += 1
            return list(self._indices)

    def set(self, indices: Sequence[int]) -> None:
        with self._lock:
            self._indices = validate_stroke_indices(indices)

    def reset(self) -> None:
        with self._lock:
            self._indices = None


__all__ = [
    "DEFAULT_STROKE_INDICES",
    "StrokeIndexCache",
    "default_loader",
    "load_stroke_indices",
    "validate_stroke_indices",
]
