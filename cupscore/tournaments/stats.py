"""Notable moments across a tournament's games."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from cupscore.games.models import Game

BLOW_UP_MIN_STROKES = 6
GRIND_MIN_TIED_HOLES = 3
UPSET_MIN_HANDICAP_GAP = 3
UNKNOWN_PLAYER = "An unknown player"


class FunFactKind(str, Enum):
    BLOW_UP = "blow_up"
    HOLE_IN_ONE = "hole_in_one"
    BIRDIE = "birdie"
    GRIND = "grind"
    UPSET = "upset"


class FunFact(BaseModel):
    kind: FunFactKind
    message: str
    game_id: str = Field(
        validation_alias=AliasChoices("game_id", "gameId"),
        serialization_alias="gameId",
    )
    player_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("player_id", "playerId"),
        serialization_alias="playerId",
    )
    hole_number: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    value: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


def _name(name: str) -> str:
    return name or UNKNOWN_PLAYER


def _player_scores(game: Game):
    """Yield ``(hole, player_id, player_name, score)`` for every entered score."""

    for hole in game.holes:
        if hole.usa_player_score is not None:
            yield hole, game.usa_player_id, game.usa_player_name, hole.usa_player_score
        if hole.europe_player_score is not None:
            yield hole, game.europe_player_id, game.europe_player_name, hole.europe_player_score


def find_most_strokes_on_hole(games: Iterable[Game]) -> Optional[FunFact]:
    """The single worst hole of the tournament, if it reached the blow-up mark.

    Ties keep the first occurrence in game and hole order.
    """

    worst: Optional[FunFact] = None
    for game in games:
        for hole, player_id, name, score in _player_scores(game):
            if worst is None or score > worst.value:
                worst = FunFact(
                    kind=FunFactKind.BLOW_UP,
                    message=(
                        f"{_name(name)} had a tough time, taking {score} strokes "
                        f"on hole {hole.hole_number}."
                    ),
                    game_id=game.id,
                    player_id=player_id,
                    hole_number=hole.hole_number,
                    value=score,
                )
    if worst is None or worst.value < BLOW_UP_MIN_STROKES:
        return None
    return worst


def find_hole_in_ones(games: Iterable[Game]) -> List[FunFact]:
    facts: List[FunFact] = []
    for game in games:
        for hole, player_id, name, score in _player_scores(game):
            if score == 1 and hole.par_score > 1:
                facts.append(
                    FunFact(
                        kind=FunFactKind.HOLE_IN_ONE,
                        message=f"{_name(name)} got an ace on hole {hole.hole_number}!",
                        game_id=game.id,
                        player_id=player_id,
                        hole_number=hole.hole_number,
                        value=score,
                    )
                )
    return facts


def find_birdies(games: Iterable[Game]) -> List[FunFact]:
    """One under par on a hole; aces are reported separately."""

    facts: List[FunFact] = []
    for game in games:
        for hole, player_id, name, score in _player_scores(game):
            if score > 1 and score == hole.par_score - 1:
                facts.append(
                    FunFact(
                        kind=FunFactKind.BIRDIE,
                        message=(
                            f"{_name(name)} makes a birdie on hole {hole.hole_number}!"
                        ),
                        game_id=game.id,
                        player_id=player_id,
                        hole_number=hole.hole_number,
                        value=score,
                    )
                )
    return facts


def _longest_tied_run(game: Game) -> int:
    longest = current = 0
    for hole in sorted(game.holes, key=lambda h: h.hole_number):
        if (
            hole.is_played
            and hole.usa_player_match_play_score == hole.europe_player_match_play_score
        ):
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def find_grind_matches(games: Iterable[Game]) -> List[FunFact]:
    """Games containing a run of consecutive halved holes."""

    facts: List[FunFact] = []
    for game in games:
        run = _longest_tied_run(game)
        if run >= GRIND_MIN_TIED_HOLES:
            facts.append(
                FunFact(
                    kind=FunFactKind.GRIND,
                    message=(
                        f"{_name(game.usa_player_name)} vs "
                        f"{_name(game.europe_player_name)} featured a hard-fought "
                        f"streak of {run} consecutive tied holes!"
                    ),
                    game_id=game.id,
                    value=run,
                )
            )
    return facts


def find_upset_alerts(games: Iterable[Game], *, use_handicaps: bool) -> List[FunFact]:
    """Complete games won on adjusted points by the clearly weaker player."""

    if not use_handicaps:
        return []

    facts: List[FunFact] = []
    for game in games:
        usa_hcp = game.usa_player_handicap
        europe_hcp = game.europe_player_handicap
        if not game.is_complete or usa_hcp is None or europe_hcp is None:
            continue

        adjusted = game.points.adjusted
        if usa_hcp > europe_hcp + UPSET_MIN_HANDICAP_GAP and adjusted.usa > adjusted.europe:
            underdog = (game.usa_player_id, game.usa_player_name, usa_hcp)
            favourite = (game.europe_player_name, europe_hcp)
        elif europe_hcp > usa_hcp + UPSET_MIN_HANDICAP_GAP and adjusted.europe > adjusted.usa:
            underdog = (game.europe_player_id, game.europe_player_name, europe_hcp)
            favourite = (game.usa_player_name, usa_hcp)
        else:
            continue

        player_id, name, hcp = underdog
        favourite_name, favourite_hcp = favourite
        facts.append(
            FunFact(
                kind=FunFactKind.UPSET,
                message=(
                    f"{_name(name)} (Hcp {hcp:g}) overcame the odds to defeat "
                    f"{_name(favourite_name)} (Hcp {favourite_hcp:g})!"
                ),
                game_id=game.id,
                player_id=player_id,
                value=abs(usa_hcp - europe_hcp),
            )
        )
    return facts


def generate_fun_facts(games: Iterable[Game], *, use_handicaps: bool) -> List[FunFact]:
    games = list(games)
    facts: List[FunFact] = []

    blow_up = find_most_strokes_on_hole(games)
    if blow_up is not None:
        facts.append(blow_up)
    facts.extend(find_hole_in_ones(games))
    facts.extend(find_birdies(games))
    facts.extend(find_grind_matches(games))
    facts.extend(find_upset_alerts(games, use_handicaps=use_handicaps))
    return facts


__all__ = [
    "BLOW_UP_MIN_STROKES",
    "GRIND_MIN_TIED_HOLES",
    "UPSET_MIN_HANDICAP_GAP",
    "FunFact",
    "FunFactKind",
    "find_birdies",
    "find_grind_matches",
    "find_hole_in_ones",
    "find_most_strokes_on_hole",
    "find_upset_alerts",
    "generate_fun_facts",
]
