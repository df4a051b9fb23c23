"""Stateless scoring endpoints over caller-supplied totals."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cupscore.scoring import (
    GameTotals,
    PointsSplit,
    ScoringValidationError,
    calculate_game_points,
    strokes_for_hole,
)

router = APIRouter(prefix="/api/scoring", tags=["scoring"])


class StrokesResponse(BaseModel):
    handicap: float
    stroke_index: int = Field(
        validation_alias=AliasChoices("stroke_index", "strokeIndex"),
        serialization_alias="strokeIndex",
    )
    strokes: float

    model_config = ConfigDict(populate_by_name=True)


@router.post("/points", response_model=PointsSplit)
def compute_points(payload: GameTotals) -> PointsSplit:
    return calculate_game_points(payload)


@router.get("/strokes", response_model=StrokesResponse)
def compute_strokes(
    handicap: float = Query(...),
    stroke_index: int = Query(..., alias="strokeIndex"),
) -> StrokesResponse:
    try:
        strokes = strokes_for_hole(handicap, stroke_index)
    except ScoringValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    return StrokesResponse(
        handicap=handicap, stroke_index=stroke_index, strokes=strokes
    )
