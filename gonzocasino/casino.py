"""The casino: its registered players and the games they can play."""

from __future__ import annotations

import random
from typing import Callable, Iterable, Optional

from gonzocasino.games import Game, HigherThirteen, Slots, TwoColors
from gonzocasino.player import Player

PESOS_PER_GONZO = 100
MIN_BET = 1


class CasinoError(ValueError):
    """Raised when a casino operation cannot be carried out."""


def pesos_to_gonzos(pesos: float) -> float:
    """Convert an amount of pesos into gonzos."""
    return pesos / PESOS_PER_GONZO


class Casino:
    """Holds players and games, and settles bets between them."""

    def __init__(
        self,
        games: Optional[Iterable[Game]] = None,
        *,
        rng: Optional[random.Random] = None,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ) -> None:
        self.players: dict[int, Player] = {1: Player(1, "Pedro rodriguez", 500)}
        if games is None:
            self.games: list[Game] = [
                HigherThirteen(rng=rng, ask=ask, say=say),
                TwoColors(rng=rng, ask=ask, say=say),
                Slots(rng=rng, ask=ask, say=say),
            ]
        else:
            self.games = list(games)

    def has_player(self, player_id: int) -> bool:
        """Return whether a player with this id is registered."""
        return player_id in self.players

    def _player(self, player_id: int, message: str) -> Player:
        try:
            return self.players[player_id]
        except KeyError:
            raise CasinoError(message) from None

    def add_player(self, player_id: int, name: str, pesos: float) -> Player:
        """Register a new player, converting the pesos they bring into gonzos."""
        if self.has_player(player_id):
            raise CasinoError("El jugador con la identificacion recibida ya existe")
        if pesos <= 0:
            raise CasinoError("El dinero en pesos debe ser mayor que cero")
        player = Player(player_id, name, pesos_to_gonzos(pesos))
        self.players[player_id] = player
        return player

    def remove_player(self, player_id: int) -> Player:
        """Remove a player from the casino and return them."""
        player = self._player(
            player_id, "El jugador con la identificacion recibida NO existe"
        )
        del self.players[player_id]
        return player

    def can_afford(self, player_id: int, bet: float) -> bool:
        """Return whether the player holds at least ``bet`` gonzos."""
        player = self._player(
            player_id, "El jugador con la identificacion recibida NO existe"
        )
        return player.gonzos >= bet

    def play(self, game_id: int, player_id: int, bet: float) -> float:
        """Play game ``game_id`` (numbered from 1) and return the net gonzos won."""
        if bet < MIN_BET:
            raise CasinoError("Debe apostar al menos 1 gonzo")
        if not self.has_player(player_id):
            raise CasinoError(
                "El jugador con la identificacion recibida NO existe, no es posible jugar"
            )
        if not 1 <= game_id <= len(self.games):
            raise CasinoError("NO existe el juego que desea jugar")
        if not self.can_afford(player_id, bet):
            raise CasinoError("No tienes saldo suficiente para jugar")
        game = self.games[game_id - 1]
        player = self.players[player_id]
        won = game.play(bet) - bet
        player.add_gonzos(won)
        player.record_game()
        return won

    def player_info(self, player_id: int) -> str:
        """Return a description of the player."""
        player = self._player(
            player_id, "El jugador con la identificacion recibida NO existe"
        )
        return player.describe()

    def recharge(self, player_id: int, pesos: float) -> float:
        """Add ``pesos`` worth of gonzos to a player; return the gonzos added."""
        player = self._player(
            player_id, "El jugador con la identificacion recibida NO existe"
        )
        if pesos < 0:
            raise CasinoError("La cantidad de dinero a recargar no puede ser negativa")
        gonzos = pesos_to_gonzos(pesos)
        player.add_gonzos(gonzos)
        return gonzos