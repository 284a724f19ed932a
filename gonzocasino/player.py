"""Players registered at the casino."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A casino player and the gonzos they hold."""

    id: int
    name: str
    gonzos: float
    games_played: int = 0

    def record_game(self) -> None:
        """Count one more game played."""
        self.games_played += 1

    def add_gonzos(self, amount: float) -> None:
        """Add ``amount`` gonzos to the balance; negative amounts subtract."""
        self.gonzos += amount

    def describe(self) -> str:
        """Return the player's name, balance and number of games played."""
        return (
            f"Nombre del jugador: {self.name}\n"
            f"Gonzos: {self.gonzos:g}\n"
            f"Juegos jugados: {self.games_played}"
        )