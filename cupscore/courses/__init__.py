from .stroke_indices import (
    DEFAULT_STROKE_INDICES,
    StrokeIndexCache,
    default_loader,
    load_stroke_indices,
)

__all__ = [
    "DEFAULT_STROKE_INDICES",
    "StrokeIndexCache",
    "default_loader",
    "load_stroke_indices",
]
