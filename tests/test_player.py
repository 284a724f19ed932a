from gonzocasino.player import Player


def make_player():
    return Player(1, "Pedro rodriguez", 500)


def test_new_player_has_no_games():
    assert make_player().games_played == 0


def test_record_game_counts_each_game():
    player = make_player()
    player.record_game()
    player.record_game()
    assert player.games_played == 2


def test_add_gonzos_increases_balance():
    player = make_player()
    player.add_gonzos(25)
    assert player.gonzos == 525


def test_add_negative_gonzos_decreases_balance():
    player = make_player()
    player.add_gonzos(-500)
    assert player.gonzos == 0


def test_describe_lists_name_balance_and_games():
    player = make_player()
    player.record_game()
    lines = player.describe().splitlines()
    assert lines == [
        "Nombre del jugador: Pedro rodriguez",
        "Gonzos: 500",
        "Juegos jugados: 1",
    ]


def test_describe_shows_fractional_balance():
    player = Player(7, "Ana", 2.5)
    assert "Gonzos: 2.5" in player.describe()