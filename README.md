# gonzocasino

A small casino you play from the terminal. Players buy *gonzos*, the casino's
currency, with pesos at 100 pesos per gonzo. They then bet gonzos on one of
three games:

1. **Mayor a 13** (`HigherThirteen`): you draw a number from 1 to 13. Answer
   `1` to give up and get half your bet back, or anything else to play on. If
   your number is higher than the casino's, you get twice your bet back.
   Otherwise you lose it.
2. **Dos colores** (`TwoColors`): you and the casino each draw a number from
   1 to 7, the casino draws a colour, and you pick white (`1`) or black (`2`).
   Matching both number and colour pays 4×. Matching only the number pays
   1.5×. Matching only the colour returns your bet. Anything else loses.
3. **Slots** (`Slots`): three reels, each from 1 to 7. Three equal numbers pay
   7×. A descending run such as 5‑4‑3 pays 1.5×. Anything else loses.

One player, "Pedro rodriguez" with id 1 and 500 gonzos, is already seated when
the casino opens.

The prompts and messages are in Spanish.

## Installation

```
pip install .
```

## Playing from the console

```
gonzocasino
```

A menu lets you add a player, play a game, look up a player, top up gonzos,
remove a player, or quit with `0`. The menu also ends when input runs out.

## Using the library

```python
from gonzocasino.casino import Casino, CasinoError, pesos_to_gonzos

casino = Casino()
casino.add_player(7, "Ana", 10_000)   # 10 000 pesos -> 100 gonzos
print(casino.player_info(7))

try:
    result = casino.play(3, 7, 5)      # bet 5 gonzos on Slots
    print("won" if result > 0 else "lost", result)
except CasinoError as err:
    print(err)

casino.recharge(7, 500)               # adds 5 gonzos
casino.remove_player(7)
```

- `Casino.add_player(player_id, name, pesos)` registers a player and returns
  the `Player`. It raises `CasinoError` if the id is taken or the pesos are
  not above zero.
- `Casino.play(game_id, player_id, bet)` plays game 1, 2 or 3 and returns the
  net gonzos the bet won (positive) or lost (negative), updating the player's
  balance and game count. It raises `CasinoError` if the bet is below one
  gonzo, the player or game does not exist, or the player cannot cover the
  bet.
- `Casino.recharge(player_id, pesos)` adds the gonzos for `pesos` and returns
  them; negative amounts raise `CasinoError`.
- `Casino.player_info(player_id)` returns the player's name, balance and games
  played; `Casino.remove_player(player_id)` removes and returns the player.
- `Casino.has_player(player_id)` and `Casino.can_afford(player_id, bet)`
  answer questions without changing anything.

`CasinoError` is a subclass of `ValueError`.

The games live in `gonzocasino.games`. Each `Game` has `play(bet)`, which draws
its numbers, asks for any choice it needs and returns what the bet pays back,
and `payout(bet)`, which works out the payback from the current draw. Games,
`Casino` and `View` take `ask` and `say` callables (by default `input` and
`print`), and games and `Casino` take an `rng` (`random.Random`), so they can
be driven by a script or seeded for repeatable draws.

## What it does not do

Players and balances live in memory only. Nothing is saved between runs, and
there is no network play.

## Running the tests

```
pip install .[test]
pytest
```