"""The interactive menu that drives the academic system."""

from __future__ import annotations

import argparse
import random
import re
from datetime import datetime
from typing import Callable

from academia.definitions import DATA_FILE, MenuOption
from academia.errors import AcademicError, StorageError
from academia.history import History
from academia.manager import StudentManager
from academia.screen import Console, banner, clear_screen, line, menu
from academia.storage import load, save
from academia.system import AcademicSystem
from academia.utils import random_quote, timestamp

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class Application:
    """Main loop: shows the menu and dispatches each chosen option."""

    def __init__(
        self,
        system: AcademicSystem | None = None,
        history: History | None = None,
        console: Console | None = None,
        data_path: str = DATA_FILE,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self.system = system if system is not None else AcademicSystem()
        self.history = history if history is not None else History()
        self.console = console if console is not None else Console()
        self.data_path = data_path
        self._rng = rng
        self._clock = clock if clock is not None else datetime.now
        self._clear = clear
        self.manager = StudentManager(
            self.system, self.history, self.console, rng, self._clock
        )

    # ---- helpers ----------------------------------------------------

    def _write(self, text: str) -> None:
        self.console.write(text)

    def _log(self, text: str) -> None:
        self.history.add(f"[{timestamp(self._clock())}]  {text}")

    def _read_option(self) -> int | None:
        """Read the next non-blank line and take the integer it starts with."""
        while True:
            text = self.console.input_func()
            if text.strip():
                break
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else None

    # ---- actions ----------------------------------------------------

    def _averages(self) -> None:
        self._write(self.system.averages())
        self._log("Promedios consultados")

    def _ranking(self) -> None:
        self._write(self.system.ranking())
        self._log("Ranking consultado")

    def _statistics(self) -> None:
        self._write(self.system.statistics())
        self._write("\n")
        self._write(self.system.memory_report())
        self._log("Estadisticas consultadas")

    def _history(self) -> None:
        self._write(self.history.render())

    def _save_and_exit(self) -> None:
        try:
            save(self.system, self.data_path)
        except StorageError as error:
            self._write(f"\n  [X] {error}\n")
        self._log("Datos guardados - Sistema cerrado")
        self._clear()
        self._write(banner(random_quote(self._rng)))
        heavy = line("=")
        self._write(f"\n\n{heavy}\n  DATOS GUARDADOS. HASTA PRONTO!\n{heavy}\n\n")

    # ---- public -----------------------------------------------------

    def handle(self, option: int) -> bool:
        """Carry out one menu option; False once the user chose to leave."""
        actions: dict[MenuOption, Callable[[], object]] = {
            MenuOption.REGISTER: self.manager.register,
            MenuOption.VIEW_CARDS: self.manager.show_cards,
            MenuOption.ENTER_GRADES: self.manager.enter_grades,
            MenuOption.VIEW_AVERAGES: self._averages,
            MenuOption.RANKING: self._ranking,
            MenuOption.EDIT: self.manager.edit,
            MenuOption.REMOVE: self.manager.remove,
            MenuOption.STATISTICS: self._statistics,
            MenuOption.SEARCH: self.manager.search_by_name,
            MenuOption.HISTORY: self._history,
        }
        try:
            choice = MenuOption(option)
        except ValueError:
            choice = None

        try:
            if choice is MenuOption.SAVE_AND_EXIT:
                self._save_and_exit()
                return False
            if choice is None:
                self._write("\n  [X] Opcion invalida (1-11).\n")
                self.console.pause()
                return True
            actions[choice]()
            self.console.pause()
        except EOFError:
            raise
        except AcademicError as error:
            self._write(f"\n  [!] Error del sistema: {error}\n")
            self.console.pause()
        except Exception as error:  # keep the session alive on any failure
            self._write(f"\n  [!] Error estandar: {error}\n")
            self.console.pause()
        return True

    def run(self) -> None:
        """Load saved data, then show the menu until the user leaves."""
        try:
            load(self.system, self.data_path)
        except StorageError as error:
            self._write(f"\n  [!] {error}\n")
        self._log("Sistema iniciado")

        while True:
            self._clear()
            self._write(banner(random_quote(self._rng)))
            self._write(menu())
            try:
                option = self._read_option()
            except EOFError:
                return
            if option is None:
                self._write("\n  [X] Entrada invalida.\n")
                self.console.pause()
                continue
            self._clear()
            try:
                keep_going = self.handle(option)
            except EOFError:
                return
            if not keep_going:
                return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive academic system."""
    parser = argparse.ArgumentParser(
        prog="academia", description="Sistema academico interactivo."
    )
    parser.add_argument(
        "--data", default=DATA_FILE, help="file where the roster is kept"
    )
    args = parser.parse_args(argv)
    Application(data_path=args.data).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())