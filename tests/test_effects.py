"""Turn movement per action card.

Each scenario starts with A to move (seat 0, direction +1) and a red 3 on
the discard pile. A plays the action card, then whoever moves next holds a
single playable card and wins the round, which shows who the effect skipped.
"""

from conftest import act, num, rig
from duocardgame.engine import ActionType, Color, DuoCardGame


def _round(game: DuoCardGame, hands, draw=None):
    rig(game, hands, discard=[num(Color.RED, 3)], draw=draw)
    return game.play_round()


def test_draw_two_skips_the_victim(three_player_game: DuoCardGame) -> None:
    snapshot = _round(three_player_game, {
        "A": [act(Color.RED, ActionType.DRAW_TWO), num(Color.BLUE, 9)],
        "B": [num(Color.RED, 1)],
        "C": [num(Color.RED, 7)],
    }, draw=[num(Color.GREEN, 2), num(Color.GREEN, 4), num(Color.YELLOW, 6)])

    assert snapshot.round_winner == "C"
    # A's blue 9, plus B's red 1 and the two penalty cards.
    assert snapshot.scores[2] == ("C", 9 + 1 + 2 + 4)
    assert "B drew 2 cards (penalty)" in three_player_game.history


def test_skip_passes_one_player(three_player_game: DuoCardGame) -> None:
    snapshot = _round(three_player_game, {
        "A": [act(Color.RED, ActionType.SKIP), num(Color.BLUE, 9)],
        "B": [num(Color.RED, 1)],
        "C": [num(Color.RED, 7)],
    })

    assert snapshot.round_winner == "C"
    assert snapshot.scores[2] == ("C", 10)
    assert "B is skipped" in three_player_game.history


def test_reverse_turns_play_around(four_player_game: DuoCardGame) -> None:
    snapshot = _round(four_player_game, {
        "A": [act(Color.RED, ActionType.REVERSE), num(Color.BLUE, 9)],
        "B": [num(Color.GREEN, 5)],
        "C": [num(Color.GREEN, 6)],
        "D": [num(Color.RED, 7)],
    })

    assert snapshot.round_winner == "D"
    assert snapshot.scores[3] == ("D", 9 + 5 + 6)
    assert "direction reversed" in four_player_game.history


def test_reverse_flips_direction_only(four_player_game: DuoCardGame) -> None:
    game = four_player_game
    game.current_player_index = 2
    game.direction = 1
    act(Color.RED, ActionType.REVERSE).execute_effect(game)
    assert game.direction == -1
    assert game.current_player_index == 2


def test_wild_sets_color_and_recolors_card(three_player_game: DuoCardGame) -> None:
    game = three_player_game
    rig(game, {"A": [num(Color.BLUE, 9)], "B": [], "C": []}, discard=[num(Color.RED, 3)])
    wild = act(Color.WILD, ActionType.WILD)

    wild.execute_effect(game)

    assert wild.color is Color.BLUE
    assert game.current_color is Color.BLUE
    assert game.current_player_index == 0


def test_wild_next_player_matches_chosen_color(three_player_game: DuoCardGame) -> None:
    snapshot = _round(three_player_game, {
        "A": [act(Color.WILD, ActionType.WILD), num(Color.BLUE, 9)],
        "B": [num(Color.BLUE, 1)],
        "C": [num(Color.GREEN, 5)],
    })

    assert "A chose blue" in three_player_game.history
    assert snapshot.round_winner == "B"
    assert snapshot.scores[1] == ("B", 14)


def test_wild_draw_four_skips_the_victim(three_player_game: DuoCardGame) -> None:
    snapshot = _round(three_player_game, {
        "A": [act(Color.WILD, ActionType.WILD_DRAW_FOUR), num(Color.BLUE, 9)],
        "B": [num(Color.BLUE, 1)],
        "C": [num(Color.BLUE, 2)],
    }, draw=[num(Color.GREEN, 2), num(Color.GREEN, 4), num(Color.YELLOW, 6),
             num(Color.YELLOW, 8), num(Color.GREEN, 1)])

    history = list(three_player_game.history)
    assert history.index("A chose blue") < history.index("B drew 4 cards (penalty)")
    assert snapshot.round_winner == "C"
    assert snapshot.scores[2] == ("C", 9 + 1 + 2 + 4 + 6 + 8)


def test_shuffle_hands_then_choose_color(three_player_game: DuoCardGame) -> None:
    snapshot = _round(three_player_game, {
        "A": [act(Color.WILD, ActionType.SHUFFLE_HANDS)],
        "B": [num(Color.RED, 1)],
        "C": [num(Color.RED, 2)],
    })

    history = list(three_player_game.history)
    assert history.index("hands shuffled") < history.index("A chose red")
    # A's last card was the shuffle, but the deal-back refilled A's hand.
    assert snapshot.round_winner == "B"
    assert snapshot.scores[1][1] in (1, 2)
    assert three_player_game.players[0].score == 0


def test_shuffle_hands_effect_keeps_turn(three_player_game: DuoCardGame) -> None:
    game = three_player_game
    rig(game, {
        "A": [num(Color.RED, 1), num(Color.RED, 2)],
        "B": [num(Color.GREEN, 1)],
        "C": [num(Color.YELLOW, 1), num(Color.YELLOW, 2), num(Color.YELLOW, 3)],
    }, discard=[num(Color.RED, 3)])
    card = act(Color.WILD, ActionType.SHUFFLE_HANDS)

    card.execute_effect(game)

    assert sorted(len(p.hand) for p in game.players) == [2, 2, 2]
    assert game.current_player_index == 0
    assert card.color is not Color.WILD
    assert game.current_color is card.color
