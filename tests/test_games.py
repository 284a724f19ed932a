import random

import pytest

from gonzocasino.games import Color, HigherThirteen, Slots, TwoColors


class ScriptedRng:
    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        self.calls.append((low, high))
        return value


def console(answers=()):
    replies = list(answers)
    output = []
    return (lambda prompt: replies.pop(0)), output.append, output


# HigherThirteen

def test_higher_wins_double():
    ask, say, _ = console()
    game = HigherThirteen(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number, game.casino_number = 9, 3
    assert game.payout(1) == 2


def test_higher_equal_loses():
    ask, say, _ = console()
    game = HigherThirteen(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number = game.casino_number = 5
    assert game.payout(10) == 0


def test_higher_play_surrender_returns_half():
    rng = ScriptedRng(4)
    ask, say, output = console(["1"])
    game = HigherThirteen(rng=rng, ask=ask, say=say)
    assert game.play(1) == 0.5
    assert rng.calls == [(1, 13)]
    assert game.casino_number is None
    assert output[0] == "Tu numero aleatorio es: 4"


def test_higher_play_win():
    rng = ScriptedRng(13, 1)
    ask, say, output = console(["2"])
    game = HigherThirteen(rng=rng, ask=ask, say=say)
    assert game.play(1) == 2
    assert rng.calls == [(1, 13), (1, 13)]
    assert "Numero casino: 1" in output


def test_higher_play_loss():
    ask, say, _ = console(["2"])
    game = HigherThirteen(rng=ScriptedRng(2, 8), ask=ask, say=say)
    assert game.play(30) == 0


def test_higher_payout_before_round_raises():
    ask, say, _ = console()
    game = HigherThirteen(rng=ScriptedRng(), ask=ask, say=say)
    with pytest.raises(ValueError):
        game.payout(1)


# TwoColors

def test_two_colors_number_and_color_pays_four():
    ask, say, _ = console()
    game = TwoColors(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number = game.casino_number = 3
    game.player_color = game.casino_color = Color.BLACK
    assert game.payout(1) == 4


def test_two_colors_number_only_pays_one_and_half():
    ask, say, _ = console()
    game = TwoColors(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number = game.casino_number = 3
    game.player_color, game.casino_color = Color.WHITE, Color.BLACK
    assert game.payout(1) == 1.5


def test_two_colors_color_only_returns_bet():
    ask, say, _ = console()
    game = TwoColors(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number, game.casino_number = 2, 6
    game.player_color = game.casino_color = Color.WHITE
    assert game.payout(40) == 40


def test_two_colors_nothing_matches_loses():
    ask, say, _ = console()
    game = TwoColors(rng=ScriptedRng(), ask=ask, say=say)
    game.player_number, game.casino_number = 2, 6
    game.player_color, game.casino_color = Color.BLACK, Color.WHITE
    assert game.payout(40) == 0


def test_two_colors_play_uses_choice():
    rng = ScriptedRng(5, 5, 1)
    ask, say, output = console(["2"])
    game = TwoColors(rng=rng, ask=ask, say=say)
    assert game.play(1) == 4
    assert game.player_color is Color.BLACK
    assert rng.calls == [(1, 7), (1, 7), (0, 1)]
    assert output[-1] == "Color casino: Negro."


def test_two_colors_invalid_choice_never_matches_color():
    ask, say, _ = console(["9"])
    game = TwoColors(rng=ScriptedRng(1, 4, 0), ask=ask, say=say)
    assert game.play(10) == 0
    assert game.player_color is None


def test_two_colors_payout_before_round_raises():
    ask, say, _ = console()
    game = TwoColors(rng=ScriptedRng(), ask=ask, say=say)
    with pytest.raises(ValueError):
        game.payout(1)


# Slots

@pytest.mark.parametrize("reel", [1, 4, 7])
def test_slots_triple_pays_seven(reel):
    ask, say, _ = console()
    game = Slots(rng=ScriptedRng(), ask=ask, say=say)
    game.reels = (reel, reel, reel)
    assert game.payout(1) == 7


def test_slots_descending_run_pays_one_and_half():
    ask, say, _ = console()
    game = Slots(rng=ScriptedRng(), ask=ask, say=say)
    game.reels = (5, 4, 3)
    assert game.payout(1) == 1.5


def test_slots_ascending_run_loses():
    ask, say, _ = console()
    game = Slots(rng=ScriptedRng(), ask=ask, say=say)
    game.reels = (3, 4, 5)
    assert game.payout(1) == 0


def test_slots_play_reports_reels():
    rng = ScriptedRng(6, 5, 4)
    ask, say, output = console()
    game = Slots(rng=rng, ask=ask, say=say)
    assert game.play(1) == 1.5
    assert game.reels == (6, 5, 4)
    assert rng.calls == [(1, 7)] * 3
    assert output[-1] == "Resultado slots: 6 5 4"


def test_slots_payout_before_round_raises():
    ask, say, _ = console()
    game = Slots(rng=ScriptedRng(), ask=ask, say=say)
    with pytest.raises(ValueError):
        game.payout(1)


def test_slots_random_payout_is_known_multiple():
    game = Slots(rng=random.Random(1), say=lambda line: None)
    for _ in range(50):
        assert game.play(1) in {0, 1.5, 7}
        assert all(1 <= reel <= 7 for reel in game.reels)