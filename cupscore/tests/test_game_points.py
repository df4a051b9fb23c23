import pytest

from cupscore.scoring import (
    GameTotals,
    ScoreTotals,
    Team,
    calculate_game_points,
    score_game,
)


def _totals(stroke, match, *, adjusted_stroke=None, adjusted_match=None, started=True):
    adjusted_stroke = adjusted_stroke or stroke
    adjusted_match = adjusted_match or match
    return GameTotals(
        is_started=started,
        stroke_play_score=ScoreTotals(
            usa=stroke[0],
            europe=stroke[1],
            adjusted_usa=adjusted_stroke[0],
            adjusted_europe=adjusted_stroke[1],
        ),
        match_play_score=ScoreTotals(
            usa=match[0],
            europe=match[1],
            adjusted_usa=adjusted_match[0],
            adjusted_europe=adjusted_match[1],
        ),
    )


@pytest.mark.parametrize(
    "stroke, match, expected",
    [
        ((70, 75), (10, 8), (2, 0)),
        ((70, 75), (9, 9), (1.5, 0.5)),
        ((70, 75), (8, 10), (1, 1)),
        ((72, 72), (10, 8), (1.5, 0.5)),
        ((72, 72), (9, 9), (1, 1)),
        ((72, 72), (8, 10), (0.5, 1.5)),
        ((75, 70), (10, 8), (1, 1)),
        ((75, 70), (9, 9), (0.5, 1.5)),
        ((75, 70), (8, 10), (0, 2)),
    ],
)
def test_points_table(stroke, match, expected):
    points = calculate_game_points(_totals(stroke, match))
    assert (points.raw.usa, points.raw.europe) == expected
    assert points.raw.total() == 2
    assert points.adjusted.total() == 2


def test_not_started_game_scores_nothing():
    points = calculate_game_points(_totals((60, 90), (18, 0), started=False))
    assert points.raw.usa == 0
    assert points.raw.europe == 0
    assert points.adjusted.total() == 0


def test_started_game_with_no_holes_splits_evenly():
    points = calculate_game_points(GameTotals(is_started=True))
    assert points.raw.usa == 1
    assert points.raw.europe == 1


def test_handicap_reverses_stroke_play_only():
    totals = _totals(
        (80, 72),
        (6, 12),
        adjusted_stroke=(70, 72),
        adjusted_match=(7, 11),
    )
    points = calculate_game_points(totals)

    assert (points.raw.usa, points.raw.europe) == (0, 2)
    assert (points.adjusted.usa, points.adjusted.europe) == (1, 1)


def test_accepts_camel_case_documents():
    totals = GameTotals.model_validate(
        {
            "isStarted": True,
            "isComplete": True,
            "strokePlayScore": {"USA": 70, "EUROPE": 75, "adjustedUSA": 70, "adjustedEUROPE": 75},
            "matchPlayScore": {"USA": 10, "EUROPE": 8, "adjustedUSA": 10, "adjustedEUROPE": 8},
        }
    )
    points = calculate_game_points(totals)
    assert points.model_dump(by_alias=True) == {
        "raw": {"USA": 2.0, "EUROPE": 0.0},
        "adjusted": {"USA": 2.0, "EUROPE": 0.0},
    }


def test_full_game_with_handicap(make_game):
    # USA shoots 5s, EUROPE 4s; ten strokes to USA on the ten hardest holes.
    game = make_game(
        [5] * 18,
        [4] * 18,
        handicap_strokes=10,
        higher_handicap_team=Team.USA,
    )
    scored = score_game(game)

    assert scored.stroke_play_score.adjusted_usa == 80
    assert scored.match_play_score.usa == 0
    assert scored.match_play_score.adjusted_usa == 5
    assert scored.match_play_score.adjusted_europe == 13
    assert (scored.points.raw.usa, scored.points.raw.europe) == (0, 2)
    assert (scored.points.adjusted.usa, scored.points.adjusted.europe) == (0, 2)
