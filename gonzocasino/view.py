"""Console menu for running the casino."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from gonzocasino.casino import Casino, CasinoError


class View:
    """Text menu that drives a casino through prompts and messages."""

    def __init__(
        self,
        casino: Optional[Casino] = None,
        *,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ) -> None:
        self.ask = ask
        self.say = say
        self.casino = casino if casino is not None else Casino(ask=ask, say=say)

    def _read_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self.ask(prompt).strip())
            except ValueError:
                continue

    def _read_float(self, prompt: str) -> float:
        while True:
            try:
                return float(self.ask(prompt).strip())
            except ValueError:
                continue

    def _menu(self) -> Optional[int]:
        self.say("Menu")
        self.say("1. Agregar jugador ")
        self.say("2. Jugar")
        self.say("3. Consultar jugador  ")
        self.say("4. Recargar gonzos ")
        self.say("5. Retirar jugador casino ")
        self.say("0. Salir\n")
        try:
            return int(self.ask("Digita el numero: ").strip())
        except ValueError:
            return None

    def run(self) -> None:
        """Show the menu until the user leaves or input runs out."""
        actions = {
            1: self._add_player,
            2: self._play,
            3: self._show_player,
            4: self._recharge,
            5: self._remove_player,
        }
        try:
            while True:
                option = self._menu()
                if option == 0:
                    self.say("Hasta pronto !")
                    return
                action = actions.get(option)
                if action is None:
                    self.say("No hay ninguna opcion para ese numero")
                else:
                    action()
        except EOFError:
            return

    def _add_player(self) -> None:
        name = self.ask("Ingrese el nombre del jugador \n")
        while True:
            player_id = self._read_int("Ingrese el id del jugador \n")
            if not self.casino.has_player(player_id):
                break
            self.say("El jugador con la identificacion recibida ya existe")
        while True:
            pesos = self._read_float("Ingrese el dinero en pesos \n")
            if pesos > 0:
                break
        try:
            self.casino.add_player(player_id, name, pesos)
        except CasinoError as error:
            self.say(f"ERROR con parámetros: {error}")
            return
        self.say("Jugador agregado exitosamente  ")

    def _play(self) -> None:
        player_id = self._read_int("Ingrese el id del jugador para el que quiere jugar \n")
        bet = self._read_float("Cuantos gonzos desea apostar \n")
        self.say("Elija el juego: ")
        self.say("1. Mayor a 13.")
        self.say("2. Dos colores.")
        self.say("3. Slots")
        game_id = self._read_int("Opcion: ")
        try:
            won = self.casino.play(game_id, player_id, bet)
        except CasinoError as error:
            self.say(str(error))
            return
        text = "Haz ganado!: " if won > 0 else "Haz perdido :(!: "
        self.say(f"{text}{won:g} Gonzos")

    def _show_player(self) -> None:
        player_id = self._read_int("Ingrese el id del jugador: ")
        try:
            self.say(self.casino.player_info(player_id))
        except CasinoError as error:
            self.say(str(error))

    def _remove_player(self) -> None:
        player_id = self._read_int("Ingrese el id del jugador: ")
        try:
            self.say(self.casino.player_info(player_id))
            self.casino.remove_player(player_id)
        except CasinoError as error:
            self.say(str(error))
            return
        self.say("Jugador retirado con exito.")

    def _recharge(self) -> None:
        player_id = self._read_int("Ingrese el id del jugador: ")
        if not self.casino.has_player(player_id):
            self.say("El jugador con la identificacion recibida NO existe")
            return
        while True:
            pesos = self._read_float("Ingrese la cantidad de dinero  a recargar: ")
            if pesos >= 0:
                break
        try:
            self.casino.recharge(player_id, pesos)
        except CasinoError as error:
            self.say(str(error))
            return
        self.say("Recarga realizada con exito.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the casino menu on the console."""
    View().run()
    return 0