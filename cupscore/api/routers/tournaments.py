from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from cupscore.scoring import ScoringValidationError, TournamentScores
from cupscore.tournaments.models import ProgressEntry, Tournament
from cupscore.tournaments.service import (
    TournamentNotFound,
    TournamentService,
    get_tournament_service,
)
from cupscore.tournaments.stats import FunFact, generate_fun_facts

router = APIRouter(prefix="/api/tournaments", tags=["tournaments"])

logger = logging.getLogger(__name__)


class CreateTournamentRequest(BaseModel):
    name: str = Field(min_length=1)
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

    model_config = ConfigDict(populate_by_name=True)


class UpdateTournamentRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    year: int | None = None
    is_active: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("is_active", "isActive"),
        serialization_alias="isActive",
    )
    use_handicaps: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )

    model_config = ConfigDict(populate_by_name=True)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="tournament not found"
    )


def _unscorable(exc: Exception, tournament_id: str) -> HTTPException:
    logger.warning(
        "tournament recompute rejected",
        extra={"tournament_id": tournament_id, "error": str(exc)},
    )
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=ScoringValidationError.user_message,
    )


@router.post("", response_model=Tournament, status_code=status.HTTP_201_CREATED)
def create_tournament(
    payload: CreateTournamentRequest,
    service: TournamentService = Depends(get_tournament_service),
) -> Tournament:
    return service.create_tournament(
        name=payload.name,
        year=payload.year,
        is_active=payload.is_active,
        use_handicaps=payload.use_handicaps,
    )


@router.get("/{tournament_id}", response_model=Tournament)
def get_tournament(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> Tournament:
    try:
        return service.get_tournament(tournament_id)
    except TournamentNotFound:
        raise _not_found()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.patch("/{tournament_id}", response_model=Tournament)
def update_tournament(
    tournament_id: str,
    payload: UpdateTournamentRequest,
    service: TournamentService = Depends(get_tournament_service),
) -> Tournament:
    updates = payload.model_dump(exclude_none=True)
    try:
        return service.update_tournament(tournament_id, updates)
    except TournamentNotFound:
        raise _not_found()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post("/{tournament_id}/recompute", response_model=TournamentScores)
def recompute_tournament(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> TournamentScores:
    try:
        return service.recompute_tournament(tournament_id)
    except TournamentNotFound:
        raise _not_found()
    except (ScoringValidationError, ValidationError) as exc:
        raise _unscorable(exc, tournament_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{tournament_id}/progress", response_model=list[ProgressEntry])
def get_progress(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> list[ProgressEntry]:
    try:
        return service.get_tournament(tournament_id).progress
    except TournamentNotFound:
        raise _not_found()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{tournament_id}/stats", response_model=list[FunFact])
def get_fun_facts(
    tournament_id: str,
    service: TournamentService = Depends(get_tournament_service),
) -> list[FunFact]:
    try:
        tournament = service.get_tournament(tournament_id)
        games = service.list_games(tournament_id)
    except TournamentNotFound:
        raise _not_found()
    except ValidationError as exc:
        raise _unscorable(exc, tournament_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return generate_fun_facts(games, use_handicaps=tournament.use_handicaps)
