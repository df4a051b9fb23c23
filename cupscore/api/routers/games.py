from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from cupscore.games.models import Game, GameStatus
from cupscore.games.service import (
    GameNotFound,
    GameService,
    GameStatusError,
    get_game_service,
)
from cupscore.players.models import Player
from cupscore.scoring import HOLES_PER_ROUND, ScoringValidationError, Team
from cupscore.tournaments.service import TournamentNotFound

router = APIRouter(prefix="/api/tournaments/{tournament_id}/games", tags=["games"])

logger = logging.getLogger(__name__)


class CreateGameRequest(BaseModel):
    usa_player: Player = Field(
        validation_alias=AliasChoices("usa_player", "usaPlayer"),
        serialization_alias="usaPlayer",
    )
    europe_player: Player = Field(
        validation_alias=AliasChoices("europe_player", "europePlayer"),
        serialization_alias="europePlayer",
    )
    handicap_strokes: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("handicap_strokes", "handicapStrokes"),
        serialization_alias="handicapStrokes",
    )
    higher_handicap_team: Optional[Team] = Field(
        default=None,
        validation_alias=AliasChoices("higher_handicap_team", "higherHandicapTeam"),
        serialization_alias="higherHandicapTeam",
    )

    model_config = ConfigDict(populate_by_name=True)


class HoleScoreRequest(BaseModel):
    usa_score: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("usa_score", "usaScore", "usaPlayerScore"),
        serialization_alias="usaScore",
    )
    europe_score: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices(
            "europe_score", "europeScore", "europePlayerScore"
        ),
        serialization_alias="europeScore",
    )

    model_config = ConfigDict(populate_by_name=True)


class HandicapRequest(BaseModel):
    handicap_strokes: float = Field(
        ge=0,
        validation_alias=AliasChoices("handicap_strokes", "handicapStrokes"),
        serialization_alias="handicapStrokes",
    )
    higher_handicap_team: Team = Field(
        validation_alias=AliasChoices("higher_handicap_team", "higherHandicapTeam"),
        serialization_alias="higherHandicapTeam",
    )

    model_config = ConfigDict(populate_by_name=True)


class StatusRequest(BaseModel):
    status: GameStatus


def _translate(exc: Exception, *, tournament_id: str, game_id: str | None = None):
    """Map a service exception onto the matching HTTP error."""

    if isinstance(exc, TournamentNotFound):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="tournament not found"
        )
    if isinstance(exc, GameNotFound):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="game not found"
        )
    if isinstance(exc, GameStatusError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, (ScoringValidationError, ValidationError)):
        logger.warning(
            "game scoring rejected",
            extra={
                "tournament_id": tournament_id,
                "game_id": game_id,
                "error": str(exc),
            },
        )
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=ScoringValidationError.user_message,
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


_HANDLED = (TournamentNotFound, GameNotFound, ValueError)


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
def create_game(
    tournament_id: str,
    payload: CreateGameRequest,
    service: GameService = Depends(get_game_service),
) -> Game:
    try:
        return service.create_game(
            tournament_id=tournament_id,
            usa_player=payload.usa_player,
            europe_player=payload.europe_player,
            handicap_strokes=payload.handicap_strokes,
            higher_handicap_team=payload.higher_handicap_team,
        )
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id)


@router.get("", response_model=list[Game])
def list_games(
    tournament_id: str,
    service: GameService = Depends(get_game_service),
) -> list[Game]:
    try:
        return service.list_games(tournament_id)
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id)


@router.get("/{game_id}", response_model=Game)
def get_game(
    tournament_id: str,
    game_id: str,
    service: GameService = Depends(get_game_service),
) -> Game:
    try:
        return service.get_game(tournament_id, game_id)
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id, game_id=game_id)


@router.put("/{game_id}/holes/{hole_number}", response_model=Game)
def record_hole_score(
    tournament_id: str,
    game_id: str,
    payload: HoleScoreRequest,
    hole_number: int = Path(ge=1, le=HOLES_PER_ROUND),
    service: GameService = Depends(get_game_service),
) -> Game:
    try:
        return service.record_hole_score(
            tournament_id=tournament_id,
            game_id=game_id,
            hole_number=hole_number,
            usa_score=payload.usa_score,
            europe_score=payload.europe_score,
        )
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id, game_id=game_id)


@router.put("/{game_id}/handicap", response_model=Game)
def set_handicap(
    tournament_id: str,
    game_id: str,
    payload: HandicapRequest,
    service: GameService = Depends(get_game_service),
) -> Game:
    try:
        return service.set_handicap(
            tournament_id=tournament_id,
            game_id=game_id,
            handicap_strokes=payload.handicap_strokes,
            higher_handicap_team=payload.higher_handicap_team,
        )
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id, game_id=game_id)


@router.post("/{game_id}/status", response_model=Game)
def set_status(
    tournament_id: str,
    game_id: str,
    payload: StatusRequest,
    service: GameService = Depends(get_game_service),
) -> Game:
    try:
        return service.set_status(
            tournament_id=tournament_id, game_id=game_id, status=payload.status
        )
    except _HANDLED as exc:
        raise _translate(exc, tournament_id=tournament_id, game_id=game_id)
