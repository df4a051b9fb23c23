from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasChoices, Field, model_validator

from cupscore.scoring.schemas import (
    HOLES_PER_ROUND,
    GameTotals,
    Hole,
    PointsSplit,
    Team,
)


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"

    @classmethod
    def from_flags(cls, is_started: bool, is_complete: bool) -> "GameStatus":
        if is_complete:
            return cls.COMPLETE
        if is_started:
            return cls.IN_PROGRESS
        return cls.NOT_STARTED


class Game(GameTotals):
    id: str
    tournament_id: str = Field(
        validation_alias=AliasChoices("tournament_id", "tournamentId"),
        serialization_alias="tournamentId",
    )
    usa_player_id: str = Field(
        validation_alias=AliasChoices("usa_player_id", "usaPlayerId"),
        serialization_alias="usaPlayerId",
    )
    usa_player_name: str = Field(
        default="",
        validation_alias=AliasChoices("usa_player_name", "usaPlayerName"),
        serialization_alias="usaPlayerName",
    )
    usa_player_handicap: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("usa_player_handicap", "usaPlayerHandicap"),
        serialization_alias="usaPlayerHandicap",
    )
    europe_player_id: str = Field(
        validation_alias=AliasChoices("europe_player_id", "europePlayerId"),
        serialization_alias="europePlayerId",
    )
    europe_player_name: str = Field(
        default="",
        validation_alias=AliasChoices("europe_player_name", "europePlayerName"),
        serialization_alias="europePlayerName",
    )
    europe_player_handicap: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("europe_player_handicap", "europePlayerHandicap"),
        serialization_alias="europePlayerHandicap",
    )
    handicap_strokes: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("handicap_strokes", "handicapStrokes"),
        serialization_alias="handicapStrokes",
    )
    higher_handicap_team: Team = Field(
        default=Team.USA,
        validation_alias=AliasChoices("higher_handicap_team", "higherHandicapTeam"),
        serialization_alias="higherHandicapTeam",
    )
    holes: List[Hole] = Field(default_factory=list)
    points: PointsSplit = Field(default_factory=PointsSplit)
    status: GameStatus = GameStatus.NOT_STARTED
    player_ids: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("player_ids", "playerIds"),
        serialization_alias="playerIds",
    )
    start_time: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("start_time", "startTime"),
        serialization_alias="startTime",
    )
    end_time: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("end_time", "endTime"),
        serialization_alias="endTime",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    @model_validator(mode="before")
    @classmethod
    def _fill_status(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        has_flags = any(
            key in data for key in ("isStarted", "is_started", "isComplete", "is_complete")
        )
        status = data.get("status")
        if status is None:
            # Older documents only carry the two booleans.
            started = bool(data.get("isStarted", data.get("is_started", False)))
            complete = bool(data.get("isComplete", data.get("is_complete", False)))
            data = dict(data)
            data["status"] = GameStatus.from_flags(started, complete).value
        elif not has_flags:
            resolved = GameStatus(status)
            data = dict(data)
            data["isStarted"] = resolved is not GameStatus.NOT_STARTED
            data["isComplete"] = resolved is GameStatus.COMPLETE
        return data

    @model_validator(mode="after")
    def _check_status_flags(self) -> "Game":
        if self.is_complete and not self.is_started:
            raise ValueError("a complete game must also be started")
        expected = GameStatus.from_flags(self.is_started, self.is_complete)
        if expected is not self.status:
            raise ValueError(
                f"status {self.status.value!r} contradicts isStarted={self.is_started} "
                f"isComplete={self.is_complete}"
            )
        return self

    @property
    def holes_played(self) -> int:
        return sum(1 for hole in self.holes if hole.is_played)

    @property
    def all_holes_played(self) -> bool:
        return len(self.holes) == HOLES_PER_ROUND and all(
            hole.is_played for hole in self.holes
        )

    def with_status(self, status: GameStatus) -> "Game":
        return self.model_copy(
            update={
                "status": status,
                "is_started": status is not GameStatus.NOT_STARTED,
                "is_complete": status is GameStatus.COMPLETE,
            }
        )


def new_game_id() -> str:
    return f"game_{uuid.uuid4().hex[:12]}"


def empty_holes(stroke_indices: List[int], par_scores: Optional[List[int]] = None) -> List[Hole]:
    pars = par_scores or [4] * HOLES_PER_ROUND
    return [
        Hole(hole_number=number, stroke_index=index, par_score=par)
        for number, (index, par) in enumerate(zip(stroke_indices, pars), start=1)
    ]


__all__ = ["Game", "GameStatus", "empty_holes", "new_game_id"]
