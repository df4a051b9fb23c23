from __future__ import annotations

import math
from typing import Iterable, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cupscore.scoring.schemas import Team

AVERAGE_WINDOW_YEARS = 3


class HistoricalScore(BaseModel):
    year: int
    score: float


class Player(BaseModel):
    id: str
    name: str = ""
    team: Optional[Team] = None
    historical_scores: List[HistoricalScore] = Field(
        default_factory=list,
        validation_alias=AliasChoices("historical_scores", "historicalScores"),
        serialization_alias="historicalScores",
    )
    average_score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("average_score", "averageScore"),
        serialization_alias="averageScore",
    )

    model_config = ConfigDict(populate_by_name=True)

    def resolved_average(self) -> Optional[float]:
        if self.average_score is not None:
            return self.average_score
        return compute_average_score(self.historical_scores)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_average_score(
    scores: Iterable[HistoricalScore], years: int = AVERAGE_WINDOW_YEARS
) -> Optional[int]:
    """Mean of the most recent ``years`` scores, rounded half up."""

    recent = sorted(scores, key=lambda s: s.year, reverse=True)[: max(1, years)]
    if not recent:
        return None
    return _round_half_up(sum(s.score for s in recent) / len(recent))


def derive_handicap(usa_player: Player, europe_player: Player) -> Tuple[float, Team]:
    """Handicap strokes for a game and the team that receives them.

    The allowance is the gap between the two players' average scores and
    goes to the player with the higher average.
    """

    usa_average = usa_player.resolved_average()
    europe_average = europe_player.resolved_average()
    if usa_average is None or europe_average is None:
        return 0.0, Team.USA

    strokes = float(abs(usa_average - europe_average))
    team = Team.USA if usa_average > europe_average else Team.EUROPE
    return strokes, team


__all__ = [
    "AVERAGE_WINDOW_YEARS",
    "HistoricalScore",
    "Player",
    "compute_average_score",
    "derive_handicap",
]
