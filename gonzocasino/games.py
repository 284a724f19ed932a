"""The games offered by the casino."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, Optional


class Color(IntEnum):
    """Card colour used by the two-colours game."""

    WHITE = 0
    BLACK = 1

    @property
    def label(self) -> str:
        return "Blanco" if self is Color.WHITE else "Negro"


class Game(ABC):
    """A game that takes a bet and returns the gonzos paid back."""

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.ask = ask
        self.say = say
        self.player_number: Optional[int] = None
        self.casino_number: Optional[int] = None

    @abstractmethod
    def play(self, bet: float) -> float:
        """Play one round and return the gonzos paid back for ``bet``."""

    @abstractmethod
    def payout(self, bet: float) -> float:
        """Return the gonzos paid back for ``bet`` given the current round."""

    def _roll(self, highest: int) -> int:
        return self.rng.randint(1, highest)

    def _ask_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return None

    def _require_numbers(self) -> tuple[int, int]:
        if self.player_number is None or self.casino_number is None:
            raise ValueError("no round has been played")
        return self.player_number, self.casino_number


class HigherThirteen(Game):
    """Beat the casino's number from 1 to 13, or surrender for half the bet."""

    HIGHEST = 13
    WIN = 2.0
    SURRENDER = 0.5
    SURRENDER_OPTION = 1

    def play(self, bet: float) -> float:
        self.casino_number = None
        self.player_number = self._roll(self.HIGHEST)
        self.say(f"Tu numero aleatorio es: {self.player_number}")
        self.say("Que desea hacer?")
        self.say("1. Rendirse.")
        self.say("2. Jugar.")
        if self._ask_int("Opcion: ") == self.SURRENDER_OPTION:
            return self.SURRENDER * bet
        self.casino_number = self._roll(self.HIGHEST)
        self.say(f"Numero casino: {self.casino_number}")
        return self.payout(bet)

    def payout(self, bet: float) -> float:
        player, casino = self._require_numbers()
        return self.WIN * bet if player > casino else 0.0


class TwoColors(Game):
    """Match the casino's number and colour."""

    HIGHEST = 7
    BOTH = 4.0
    NUMBER_ONLY = 1.5
    COLOR_ONLY = 1.0

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.player_color: Optional[Color] = None
        self.casino_color: Optional[Color] = None

    def play(self, bet: float) -> float:
        self.player_number = self._roll(self.HIGHEST)
        self.casino_number = self._roll(self.HIGHEST)
        self.casino_color = Color(self.rng.randint(0, 1))
        self.say(f"Tu numero aleatorio es: {self.player_number}")
        self.say("Elije un color: ")
        self.say("1. Blanco")
        self.say("2. Negro")
        choice = self._ask_int("")
        self.player_color = (
            Color(choice - 1) if choice is not None and choice - 1 in iter(Color) else None
        )
        self.say(f"Numero casino: {self.casino_number}")
        self.say(f"Color casino: {self.casino_color.label}.")
        return self.payout(bet)

    def payout(self, bet: float) -> float:
        player, casino = self._require_numbers()
        if self.casino_color is None:
            raise ValueError("no round has been played")
        same_number = player == casino
        same_color = self.player_color is not None and self.player_color == self.casino_color
        if same_number and same_color:
            return self.BOTH * bet
        if same_number:
            return self.NUMBER_ONLY * bet
        if same_color:
            return self.COLOR_ONLY * bet
        return 0.0


class Slots(Game):
    """Three reels from 1 to 7; triples and descending runs pay."""

    HIGHEST = 7
    TRIPLE = 7.0
    RUN = 1.5
    TRIPLE_SEVEN = 2.0

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.reels: Optional[tuple[int, int, int]] = None

    def play(self, bet: float) -> float:
        self.say("Calculará tres numeros aleatorios del 1 al 6: ")
        first, second, third = (self._roll(self.HIGHEST) for _ in range(3))
        self.reels = (first, second, third)
        self.say(f"Resultado slots: {first} {second} {third}")
        return self.payout(bet)

    def payout(self, bet: float) -> float:
        if self.reels is None:
            raise ValueError("no round has been played")
        first, second, third = self.reels
        if first == second == third:
            return self.TRIPLE * bet
        if first == second + 1 and second == third + 1:
            return self.RUN * bet
        if first == second == third == 7:
            return self.TRIPLE_SEVEN * bet
        return 0.0