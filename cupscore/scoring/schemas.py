"""Pydantic records exchanged between the scoring engine and the store."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

HOLES_PER_ROUND = 18


class Team(str, Enum):
    USA = "USA"
    EUROPE = "EUROPE"


class TeamScore(BaseModel):
    """A `{USA, EUROPE}` pair of numbers."""

    usa: float = Field(
        default=0.0,
        validation_alias=AliasChoices("usa", "USA"),
        serialization_alias="USA",
    )
    europe: float = Field(
        default=0.0,
        validation_alias=AliasChoices("europe", "EUROPE"),
        serialization_alias="EUROPE",
    )

    model_config = ConfigDict(populate_by_name=True)

    def total(self) -> float:
        return self.usa + self.europe

    def __add__(self, other: "TeamScore") -> "TeamScore":
        return TeamScore(usa=self.usa + other.usa, europe=self.europe + other.europe)


class ScoreTotals(BaseModel):
    """Raw and adjusted per-team sums for one scoring discipline."""

    usa: float = Field(
        default=0.0,
        validation_alias=AliasChoices("usa", "USA"),
        serialization_alias="USA",
    )
    europe: float = Field(
        default=0.0,
        validation_alias=AliasChoices("europe", "EUROPE"),
        serialization_alias="EUROPE",
    )
    adjusted_usa: float = Field(
        default=0.0,
        validation_alias=AliasChoices("adjusted_usa", "adjustedUSA"),
        serialization_alias="adjustedUSA",
    )
    adjusted_europe: float = Field(
        default=0.0,
        validation_alias=AliasChoices("adjusted_europe", "adjustedEUROPE"),
        serialization_alias="adjustedEUROPE",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def raw(self) -> TeamScore:
        return TeamScore(usa=self.usa, europe=self.europe)

    @property
    def adjusted(self) -> TeamScore:
        return TeamScore(usa=self.adjusted_usa, europe=self.adjusted_europe)


class PointsSplit(BaseModel):
    """Ryder-Cup points, raw and handicap-adjusted."""

    raw: TeamScore = Field(default_factory=TeamScore)
    adjusted: TeamScore = Field(default_factory=TeamScore)

    model_config = ConfigDict(populate_by_name=True)

    def __add__(self, other: "PointsSplit") -> "PointsSplit":
        return PointsSplit(raw=self.raw + other.raw, adjusted=self.adjusted + other.adjusted)


class Hole(BaseModel):
    hole_number: int = Field(
        ge=1,
        le=HOLES_PER_ROUND,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    stroke_index: int = Field(
        ge=1,
        le=HOLES_PER_ROUND,
        validation_alias=AliasChoices("stroke_index", "strokeIndex"),
        serialization_alias="strokeIndex",
    )
    par_score: Optional[int] = Field(
        default=4,
        validation_alias=AliasChoices("par_score", "parScore"),
        serialization_alias="parScore",
    )
    usa_player_score: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("usa_player_score", "usaPlayerScore"),
        serialization_alias="usaPlayerScore",
    )
    europe_player_score: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("europe_player_score", "europePlayerScore"),
        serialization_alias="europePlayerScore",
    )
    usa_player_adjusted_score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "usa_player_adjusted_score", "usaPlayerAdjustedScore"
        ),
        serialization_alias="usaPlayerAdjustedScore",
    )
    europe_player_adjusted_score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "europe_player_adjusted_score", "europePlayerAdjustedScore"
        ),
        serialization_alias="europePlayerAdjustedScore",
    )
    usa_player_match_play_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "usa_player_match_play_score", "usaPlayerMatchPlayScore"
        ),
        serialization_alias="usaPlayerMatchPlayScore",
    )
    europe_player_match_play_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "europe_player_match_play_score", "europePlayerMatchPlayScore"
        ),
        serialization_alias="europePlayerMatchPlayScore",
    )
    usa_player_match_play_adjusted_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "usa_player_match_play_adjusted_score", "usaPlayerMatchPlayAdjustedScore"
        ),
        serialization_alias="usaPlayerMatchPlayAdjustedScore",
    )
    europe_player_match_play_adjusted_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "europe_player_match_play_adjusted_score",
            "europePlayerMatchPlayAdjustedScore",
        ),
        serialization_alias="europePlayerMatchPlayAdjustedScore",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_played(self) -> bool:
        return self.usa_player_score is not None and self.europe_player_score is not None


class GameTotals(BaseModel):
    """The aggregate view of a game; all the Points Engine needs."""

    is_started: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_started", "isStarted"),
        serialization_alias="isStarted",
    )
    is_complete: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_complete", "isComplete"),
        serialization_alias="isComplete",
    )
    stroke_play_score: ScoreTotals = Field(
        default_factory=ScoreTotals,
        validation_alias=AliasChoices("stroke_play_score", "strokePlayScore"),
        serialization_alias="strokePlayScore",
    )
    match_play_score: ScoreTotals = Field(
        default_factory=ScoreTotals,
        validation_alias=AliasChoices("match_play_score", "matchPlayScore"),
        serialization_alias="matchPlayScore",
    )

    model_config = ConfigDict(populate_by_name=True)


class GameAggregate(BaseModel):
    stroke_play_score: ScoreTotals = Field(
        validation_alias=AliasChoices("stroke_play_score", "strokePlayScore"),
        serialization_alias="strokePlayScore",
    )
    match_play_score: ScoreTotals = Field(
        validation_alias=AliasChoices("match_play_score", "matchPlayScore"),
        serialization_alias="matchPlayScore",
    )
    holes_played: int = Field(
        default=0,
        validation_alias=AliasChoices("holes_played", "holesPlayed"),
        serialization_alias="holesPlayed",
    )

    model_config = ConfigDict(populate_by_name=True)


class TournamentScores(BaseModel):
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
    completed_games: int = Field(
        default=0,
        validation_alias=AliasChoices("completed_games", "completedGames"),
        serialization_alias="completedGames",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "HOLES_PER_ROUND",
    "GameAggregate",
    "GameTotals",
    "Hole",
    "PointsSplit",
    "ScoreTotals",
    "Team",
    "TeamScore",
    "TournamentScores",
]
