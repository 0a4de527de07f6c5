"""Console presentation: rules, banner, menu and terminal interaction."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

DEFAULT_WIDTH = 62


def line(char: str = "=", width: int = DEFAULT_WIDTH) -> str:
    """A horizontal rule made of ``char`` repeated ``width`` times."""
    return char * width


def banner(quote: str) -> str:
    """The program banner followed by a quote."""
    stars = line("*")
    return (
        f"\n{stars}\n"
        "  ****   SISTEMA ACADEMICO PROFESIONAL v3.0   ****\n"
        "  *                                              *\n"
        "  *   Structs | Punteros | Modular | Dinamico   *\n"
        "  *                                              *\n"
        f"{stars}\n\n"
        f"  {quote}\n"
    )


def menu() -> str:
    """The main menu, ending with the selection prompt."""
    heavy = line("=")
    return (
        f"\n{heavy}\n"
        "                    MENU PRINCIPAL\n"
        f"{heavy}\n\n"
        "   [1]  Registrar Nuevo Estudiante\n"
        "   [2]  Ver Fichas de Estudiantes\n"
        "   [3]  Ingresar / Actualizar Notas\n"
        "   [4]  Ver Promedios\n"
        "   [5]  Ranking Academico\n"
        "   [6]  Editar Datos de Estudiante\n"
        "   [7]  Eliminar Estudiante\n"
        "   [8]  Estadisticas + Estado de Memoria\n"
        "   [9]  Buscar Estudiantes por Nombre\n"
        "   [10] Ver Historial de Operaciones\n"
        "   [11] Guardar y Salir\n\n"
        f"{line('-')}\n  >>> Seleccione una opcion: "
    )


def clear_screen() -> str:
    """Clear the terminal using the platform's own command; return that command."""
    command = "cls" if sys.platform.startswith("win") else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass
    return command


@dataclass
class Console:
    """Line-oriented terminal input and output."""

    input_func: Callable[[], str] = input
    output: TextIO | None = None

    def _stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text without adding a newline."""
        stream = self._stream()
        stream.write(text)
        stream.flush()

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the line entered."""
        self.write(prompt)
        return self.input_func()

    def pause(self) -> None:
        """Wait until the user presses ENTER."""
        self.write(f"\n{line('-')}\n  Presione ENTER para continuar...")
        try:
            self.input_func()
        except EOFError:
            pass