from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cupscore.scoring.schemas import PointsSplit


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProgressEntry(BaseModel):
    score: PointsSplit
    projected_score: PointsSplit = Field(
        default_factory=PointsSplit,
        validation_alias=AliasChoices("projected_score", "projectedScore"),
        serialization_alias="projectedScore",
    )
    completed_games: int = Field(
        default=0,
        validation_alias=AliasChoices("completed_games", "completedGames"),
        serialization_alias="completedGames",
    )
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class Tournament(BaseModel):
    id: str
    name: str
    year: int
    is_active: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_active", "isActive"),
        serialization_alias="isActive",
    )
    use_handicaps: bool = Field(
        default=False,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )
    total_score: PointsSplit = Field(
        default_factory=PointsSplit,
        validation_alias=AliasChoices("total_score", "totalScore"),
        serialization_alias="totalScore",
    )
    projected_score: PointsSplit = Field(
        default_factory=PointsSplit,
        validation_alias=AliasChoices("projected_score", "projectedScore"),
        serialization_alias="projectedScore",
    )
    progress: List[ProgressEntry] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=_now,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        default_factory=_now,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(populate_by_name=True)


def new_tournament_id() -> str:
    """Generate a new tournament identifier."""

    return f"tour_{uuid.uuid4().hex[:12]}"


__all__ = ["ProgressEntry", "Tournament", "new_tournament_id"]
