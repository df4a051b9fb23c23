from cupscore.games.models import GameStatus
from cupscore.scoring import Team, score_game
from cupscore.tournaments.stats import (
    FunFactKind,
    find_birdies,
    find_grind_matches,
    find_hole_in_ones,
    find_most_strokes_on_hole,
    find_upset_alerts,
    generate_fun_facts,
)


def _named(game, usa="Jordan", europe="Rory", **extra):
    return game.model_copy(
        update={"usa_player_name": usa, "europe_player_name": europe, **extra}
    )


def test_blow_up_needs_six_strokes(make_game):
    assert find_most_strokes_on_hole([make_game([5], [4])]) is None

    fact = find_most_strokes_on_hole([_named(make_game([4, 7], [4, 5]))])
    assert fact.kind is FunFactKind.BLOW_UP
    assert fact.player_id == "usa-1"
    assert fact.hole_number == 2
    assert fact.value == 7
    assert fact.message == "Jordan had a tough time, taking 7 strokes on hole 2."


def test_blow_up_keeps_first_of_equal_worst(make_game):
    first = make_game([8], [4], game_id="game_a")
    second = make_game([4], [8], game_id="game_b")

    fact = find_most_strokes_on_hole([first, second])
    assert fact.game_id == "game_a"
    assert fact.message.startswith("An unknown player")


def test_hole_in_one_on_par_four(make_game):
    facts = find_hole_in_ones([_named(make_game([4, 4], [4, 1]))])

    assert len(facts) == 1
    assert facts[0].player_id == "eur-1"
    assert facts[0].hole_number == 2
    assert facts[0].message == "Rory got an ace on hole 2!"


def test_birdie_is_one_under_par(make_game):
    game = _named(make_game([3, 1, 2], [4, 4, 4]))

    facts = find_birdies([game])
    assert [fact.hole_number for fact in facts] == [1]
    assert facts[0].message == "Jordan makes a birdie on hole 1!"


def test_grind_needs_three_consecutive_halves(make_game):
    short = score_game(make_game([4, 4, 5, 4, 4], [4, 4, 4, 4, 4], game_id="game_short"))
    long = score_game(make_game([4, 4, 4, 5], [4, 4, 4, 4], game_id="game_long"))

    facts = find_grind_matches([short, _named(long)])
    assert [fact.game_id for fact in facts] == ["game_long"]
    assert facts[0].value == 3
    assert facts[0].message == (
        "Jordan vs Rory featured a hard-fought streak of 3 consecutive tied holes!"
    )


def test_unplayed_holes_break_a_grind(make_game):
    game = score_game(make_game([4, 4, None, 4], [4, 4, 4, 4]))
    assert find_grind_matches([game]) == []


def _upset_game(make_game):
    game = make_game(
        [4] * 18,
        [4] * 18,
        handicap_strokes=10,
        higher_handicap_team=Team.USA,
        status=GameStatus.COMPLETE,
    )
    return score_game(_named(game, usa_player_handicap=90, europe_player_handicap=80))


def test_upset_when_weaker_player_wins_on_adjusted_points(make_game):
    game = _upset_game(make_game)

    facts = find_upset_alerts([game], use_handicaps=True)
    assert len(facts) == 1
    assert facts[0].player_id == "usa-1"
    assert facts[0].value == 10
    assert facts[0].message == "Jordan (Hcp 90) overcame the odds to defeat Rory (Hcp 80)!"


def test_upset_requires_handicaps_and_a_finished_game(make_game):
    game = _upset_game(make_game)

    assert find_upset_alerts([game], use_handicaps=False) == []
    live = game.with_status(GameStatus.IN_PROGRESS)
    assert find_upset_alerts([live], use_handicaps=True) == []


def test_small_handicap_gap_is_not_an_upset(make_game):
    game = _upset_game(make_game).model_copy(update={"usa_player_handicap": 83})
    assert find_upset_alerts([game], use_handicaps=True) == []


def test_generate_orders_facts_by_kind(make_game):
    game = score_game(_named(make_game([7, 1, 3, 4], [4, 4, 4, 4])))

    facts = generate_fun_facts([game], use_handicaps=False)
    assert [fact.kind for fact in facts] == [
        FunFactKind.BLOW_UP,
        FunFactKind.HOLE_IN_ONE,
        FunFactKind.BIRDIE,
    ]


def test_no_games_no_facts():
    assert generate_fun_facts([], use_handicaps=True) == []
