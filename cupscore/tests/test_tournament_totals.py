from cupscore.scoring import (
    GameTotals,
    PointsSplit,
    ScoreTotals,
    TeamScore,
    compute_tournament_scores,
    scores_changed,
)


def _usa_sweep(*, complete: bool) -> GameTotals:
    return GameTotals(
        is_started=True,
        is_complete=complete,
        stroke_play_score=ScoreTotals(usa=70, europe=75, adjusted_usa=70, adjusted_europe=75),
        match_play_score=ScoreTotals(usa=10, europe=8, adjusted_usa=10, adjusted_europe=8),
    )


def _live_split() -> GameTotals:
    return GameTotals(
        is_started=True,
        stroke_play_score=ScoreTotals(usa=30, europe=32, adjusted_usa=30, adjusted_europe=32),
        match_play_score=ScoreTotals(usa=2, europe=4, adjusted_usa=2, adjusted_europe=4),
    )


def test_total_counts_complete_games_projected_counts_all():
    games = [_usa_sweep(complete=True), _usa_sweep(complete=True), _live_split()]
    scores = compute_tournament_scores(games)

    assert scores.total_score.raw == TeamScore(usa=4, europe=0)
    assert scores.projected_score.raw == TeamScore(usa=5, europe=1)
    assert scores.total_score.adjusted == TeamScore(usa=4, europe=0)
    assert scores.completed_games == 2


def test_not_started_games_add_nothing():
    scores = compute_tournament_scores([GameTotals(), _usa_sweep(complete=True)])
    assert scores.projected_score.raw == TeamScore(usa=2, europe=0)
    assert scores.completed_games == 1


def test_empty_tournament():
    scores = compute_tournament_scores([])
    assert scores.total_score == PointsSplit()
    assert scores.projected_score == PointsSplit()
    assert scores.completed_games == 0


def test_scores_changed_detects_any_component():
    scores = compute_tournament_scores([_usa_sweep(complete=True)])
    assert not scores_changed(scores.total_score, scores.projected_score, scores)
    assert scores_changed(PointsSplit(), scores.projected_score, scores)

    shifted = scores.projected_score.model_copy(
        update={"adjusted": TeamScore(usa=1.5, europe=0.5)}
    )
    assert scores_changed(scores.total_score, shifted, scores)
