"""Interactive menu over the flat roster of the first data format."""

from __future__ import annotations

import argparse
import re
from datetime import datetime
from typing import Callable

from academia.errors import StorageError
from academia.legacy.records import (
    CODE_LENGTH,
    DATA_FILE,
    MAX_LEVEL,
    MAX_SCORE,
    MAX_SCORES,
    MAX_STUDENTS,
    MIN_LEVEL,
    MIN_SCORE,
    LegacyStudent,
    RosterFullError,
    code_exists,
    course_for_option,
    load_records,
    save_records,
    timestamp,
)
from academia.screen import Console, clear_screen
from academia.validation import is_digits, is_valid_name

WIDTH = 60
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NO_STUDENTS = "\n  [!] No hay estudiantes registrados.\n"
_NOT_FOUND = "\n  [X] ERROR: Estudiante no encontrado.\n"
_COURSE_NAMES = (
    "Matematica",
    "Comunicacion",
    "Historia",
    "Educacion para el Trabajo",
    "Religion",
    "Educacion Fisica",
    "Desarrollo Personal",
    "Ingles",
)
_TABLE_BORDER = "  +------+------------+----------------------+-----------+\n"


def _rule(char: str) -> str:
    return char * WIDTH


def _banner() -> str:
    stars = _rule("*")
    return (
        f"\n{stars}\n"
        "  *****  SISTEMA ACADEMICO PROFESIONAL  *****\n"
        "  *                                          *\n"
        "  *         GESTION DE ESTUDIANTES           *\n"
        "  *                                          *\n"
        f"{stars}"
    )


def _menu() -> str:
    heavy = _rule("=")
    return (
        f"\n{heavy}\n"
        "                    MENU PRINCIPAL\n"
        f"{heavy}\n\n"
        "  [1] Registrar Estudiante\n"
        "  [2] Mostrar Fichas de Estudiantes\n"
        "  [3] Ingresar Notas\n"
        "  [4] Calcular Promedios\n"
        "  [5] Mostrar Ranking\n"
        "  [6] Editar Estudiante\n"
        "  [7] Eliminar Estudiante\n"
        "  [8] Guardar y Salir\n\n"
        f"{_rule('-')}\n  >>> Seleccione una opcion: "
    )


class LegacyApp:
    """Runs the menu operations against an in-memory list of records."""

    def __init__(
        self,
        students: list[LegacyStudent] | None = None,
        console: Console | None = None,
        data_path: str = DATA_FILE,
        clock: Callable[[], datetime] | None = None,
        clear: Callable[[], None] = clear_screen,
    ) -> None:
        self.students: list[LegacyStudent] = list(students) if students else []
        self.console = console if console is not None else Console()
        self.data_path = data_path
        self._clock = clock if clock is not None else datetime.now
        self._clear = clear

    # ---- input helpers ----------------------------------------------

    def _write(self, text: str) -> None:
        self.console.write(text)

    def _token(self, prompt: str) -> str:
        """First word of the next non-blank line."""
        self._write(prompt)
        while True:
            words = self.console.input_func().split()
            if words:
                return words[0]

    def _number(
        self,
        prompt: str,
        low: float,
        high: float,
        pattern: re.Pattern[str],
        convert: Callable[[str], float],
        error: str,
    ) -> float:
        while True:
            self._write(prompt)
            match = pattern.match(self.console.input_func())
            if match:
                value = convert(match.group(1))
                if low <= value <= high:
                    return value
            self._write(error)

    def _int(self, prompt: str, low: int, high: int, error: str) -> int:
        return int(self._number(prompt, low, high, _INT_PREFIX, int, error))

    def _float(self, prompt: str, low: float, high: float, error: str) -> float:
        return self._number(prompt, low, high, _FLOAT_PREFIX, float, error)

    def _header(self, title: str) -> None:
        heavy = _rule("=")
        self._write(f"{heavy}\n{title}\n{heavy}\n\n")

    def _find(self, code: str) -> LegacyStudent | None:
        return next((s for s in self.students if s.code == code), None)

    def _pause(self) -> None:
        self._write(f"\n{_rule('-')}\n  Presione ENTER para continuar...")
        try:
            self.console.input_func()
        except EOFError:
            pass

    # ---- operations -------------------------------------------------

    def register(self) -> LegacyStudent | None:
        """Ask for a new student's data and append the record."""
        if len(self.students) >= MAX_STUDENTS:
            self._write(f"\n  [X] ERROR: {RosterFullError(MAX_STUDENTS)}\n")
            return None
        self._header("           REGISTRO DE NUEVO ESTUDIANTE")

        while True:
            code = self._token(f"  Codigo ({CODE_LENGTH} digitos): ")
            if len(code) != CODE_LENGTH:
                self._write(
                    f"  [X] El codigo debe tener exactamente {CODE_LENGTH}"
                    " digitos.\n\n"
                )
            elif not is_digits(code):
                self._write("  [X] El codigo solo puede contener digitos.\n\n")
            elif code_exists(self.students, code):
                self._write("  [X] Este codigo ya esta registrado. Use otro.\n\n")
            else:
                break

        while True:
            name = self.console.ask("  Nombre completo: ")
            if not name:
                self._write("  [X] El nombre no puede estar vacio.\n\n")
            elif not is_valid_name(name):
                self._write(
                    "  [X] El nombre solo puede contener letras y espacios.\n\n"
                )
            else:
                break

        level = self._int(
            f"  Grado ({MIN_LEVEL}-{MAX_LEVEL}): ",
            MIN_LEVEL,
            MAX_LEVEL,
            f"  [X] Debe ingresar un numero entre {MIN_LEVEL} y {MAX_LEVEL}.\n\n",
        )

        light = _rule("-")
        listing = "".join(
            f"  [{number}] {course}\n"
            for number, course in enumerate(_COURSE_NAMES, start=1)
        )
        self._write(
            f"\n{light}\n               SELECCIONE EL CURSO\n{light}\n\n{listing}\n"
        )
        option = self._int(
            "  >>> Opcion (1-8): ",
            1,
            8,
            "  [X] Debe seleccionar un numero entre 1 y 8.\n\n",
        )
        course = course_for_option(option)

        student = LegacyStudent(
            code=code,
            name=name,
            level=level,
            course=course.name,
            teacher=course.teacher,
            registered=timestamp(self._clock()),
        )
        self.students.append(student)

        heavy = _rule("=")
        self._write(
            f"\n{heavy}\n  [OK] ESTUDIANTE REGISTRADO EXITOSAMENTE!\n{heavy}\n\n"
            f"  Codigo:   {student.code}\n"
            f"  Nombre:   {student.name}\n"
            f"  Curso:    {student.course}\n"
            f"  Profesor: {student.teacher}\n"
            f"  Fecha:    {student.registered}\n"
        )
        return student

    def show_cards(self) -> str:
        """Show and return the record card of every student."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return _NO_STUDENTS
        heavy = _rule("=")
        light = _rule("-")
        parts = [f"{heavy}\n              FICHAS DE ESTUDIANTES\n{heavy}\n"]
        for number, student in enumerate(self.students, start=1):
            parts.append(
                f"\n{light}\n  ESTUDIANTE #{number}\n{light}\n"
                f"  Codigo:     {student.code}\n"
                f"  Nombre:     {student.name}\n"
                f"  Grado:      {student.level} de Secundaria\n"
                f"  Curso:      {student.course}\n"
                f"  Profesor:   {student.teacher}\n"
                f"  Registrado: {student.registered}\n"
            )
            if student.scores:
                joined = " | ".join(f"{value:.1f}" for value in student.scores)
                parts.append(f"  Notas:      {joined}\n")
                parts.append(
                    f"  Promedio:   {student.average():.2f}"
                    f" {student.status_label()}\n"
                )
            else:
                parts.append("  Notas:      Sin notas registradas\n")
            parts.append(light)
        text = "".join(parts)
        self._write(text)
        return text

    def enter_grades(self) -> LegacyStudent | None:
        """Replace the scores of one student with newly entered ones."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return None
        self._header("                 INGRESO DE NOTAS")
        code = self._token("  Ingrese codigo del estudiante: ")
        student = self._find(code)
        if student is None:
            self._write(_NOT_FOUND)
            return None

        self._write(f"\n  [OK] Estudiante encontrado: {code}\n\n")
        count = self._int(
            f"  Cuantas notas desea ingresar (1-{MAX_SCORES}): ",
            1,
            MAX_SCORES,
            f"  [X] Debe ingresar un numero entre 1 y {MAX_SCORES}.\n\n",
        )
        self._write("\n")
        student.scores = [
            self._float(
                f"  Nota #{number} ({MIN_SCORE}-{MAX_SCORE}): ",
                MIN_SCORE,
                MAX_SCORE,
                f"  [X] La nota debe estar entre {MIN_SCORE} y {MAX_SCORE}.\n\n",
            )
            for number in range(1, count + 1)
        ]

        heavy = _rule("=")
        self._write(
            f"\n{heavy}\n  [OK] NOTAS REGISTRADAS CORRECTAMENTE\n{heavy}\n"
            f"  Promedio calculado: {student.average():.2f}\n"
        )
        return student

    def averages(self) -> str:
        """Show and return the average of every student with scores."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return _NO_STUDENTS
        heavy = _rule("=")
        parts = [f"{heavy}\n            PROMEDIOS DE ESTUDIANTES\n{heavy}\n\n"]
        rows = [
            f"  Codigo: {s.code:<12} | Promedio: {s.average():<6.2f}"
            f" {s.status_label()}\n"
            for s in self.students
            if s.scores
        ]
        parts.extend(rows or ["  [!] Ningun estudiante tiene notas registradas.\n"])
        text = "".join(parts)
        self._write(text)
        return text

    def ranking(self) -> str:
        """Show and return students with scores, highest average first."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return _NO_STUDENTS
        heavy = _rule("=")
        parts = [f"{heavy}\n               RANKING ACADEMICO\n{heavy}\n"]
        ranked = sorted(
            (s for s in self.students if s.scores),
            key=lambda s: s.average(),
            reverse=True,
        )
        if not ranked:
            parts.append("\n  [!] Ningun estudiante tiene notas registradas.\n")
            text = "".join(parts)
            self._write(text)
            return text

        parts += [
            "\n",
            _TABLE_BORDER,
            "  | Pos. |   Codigo   |       Nombre         | Promedio  |\n",
            _TABLE_BORDER,
        ]
        for position, student in enumerate(ranked, start=1):
            name = student.name
            if len(name) > 20:
                name = name[:17] + "..."
            parts.append(
                f"  | {position:>4} | {student.code:<10} | {name:<20}"
                f" | {student.average():>9.2f} |\n"
            )
        parts.append(_TABLE_BORDER)

        stars = _rule("*")
        parts.append(
            f"\n{stars}\n  *** PRIMER LUGAR: {ranked[0].name}"
            f" ({ranked[0].average():.2f})\n"
        )
        if len(ranked) >= 2:
            parts.append(
                f"  **  SEGUNDO LUGAR: {ranked[1].name}"
                f" ({ranked[1].average():.2f})\n"
            )
        if len(ranked) >= 3:
            parts.append(
                f"  *   TERCER LUGAR: {ranked[2].name}"
                f" ({ranked[2].average():.2f})\n{stars}"
            )
        text = "".join(parts)
        self._write(text)
        return text

    def edit(self) -> LegacyStudent | None:
        """Change the name of one student; an empty answer keeps it."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return None
        self._header("               EDITAR ESTUDIANTE")
        code = self._token("  Ingrese codigo del estudiante: ")
        student = self._find(code)
        if student is None:
            self._write(_NOT_FOUND)
            return None

        self._write(
            f"\n  [OK] Estudiante encontrado.\n  Nombre actual: {student.name}\n\n"
        )
        while True:
            new_name = self.console.ask("  Nuevo nombre (Enter para mantener): ")
            if not new_name:
                self._write("\n  [OK] Nombre sin cambios.\n")
                return student
            if is_valid_name(new_name):
                break
            self._write("  [X] El nombre solo puede contener letras y espacios.\n\n")

        student.name = new_name
        heavy = _rule("=")
        self._write(f"\n{heavy}\n  [OK] ESTUDIANTE ACTUALIZADO CORRECTAMENTE\n{heavy}\n")
        return student

    def remove(self) -> bool:
        """Remove one student after confirmation; True if it was removed."""
        if not self.students:
            self._write(_NO_STUDENTS)
            return False
        self._header("              ELIMINAR ESTUDIANTE")
        self._write("  [!] ADVERTENCIA: Esta accion no se puede deshacer.\n\n")
        code = self._token("  Ingrese codigo del estudiante: ")
        student = self._find(code)
        if student is None:
            self._write(_NOT_FOUND)
            return False

        self._write(f"\n  [OK] Estudiante encontrado: {student.name}\n\n")
        answer = self._token("  Confirma eliminacion? (S/N): ")
        if answer[0] not in ("S", "s"):
            self._write("\n  [OK] Operacion cancelada.\n")
            return False

        self.students.remove(student)
        heavy = _rule("=")
        self._write(f"\n{heavy}\n  [OK] ESTUDIANTE ELIMINADO CORRECTAMENTE\n{heavy}\n")
        return True

    # ---- main loop --------------------------------------------------

    def _save_and_exit(self) -> None:
        try:
            save_records(self.students, self.data_path)
        except StorageError:
            self._write("  [X] ERROR: No se pudo guardar los datos.\n")
        self._clear()
        self._write(_banner())
        heavy = _rule("=")
        self._write(
            f"\n\n{heavy}\n"
            "      DATOS GUARDADOS CORRECTAMENTE\n"
            "      GRACIAS POR USAR EL SISTEMA\n"
            "      HASTA PRONTO!\n"
            f"{heavy}\n\n"
        )

    def _read_option(self) -> int | None:
        while True:
            text = self.console.input_func()
            if text.strip():
                break
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else None

    def run(self) -> None:
        """Load saved records, then show the menu until the user leaves."""
        try:
            self.students = load_records(self.data_path)
        except StorageError as error:
            self._write(f"\n  [!] {error}\n")

        actions: dict[int, Callable[[], object]] = {
            1: self.register,
            2: self.show_cards,
            3: self.enter_grades,
            4: self.averages,
            5: self.ranking,
            6: self.edit,
            7: self.remove,
        }
        try:
            while True:
                self._clear()
                self._write(_banner())
                self._write(_menu())
                option = self._read_option()
                if option is None:
                    self._write(
                        "\n  [X] ERROR: Entrada invalida. Intente nuevamente.\n"
                    )
                    self._pause()
                    continue
                self._clear()
                if option == 8:
                    self._save_and_exit()
                    return
                action = actions.get(option)
                if action is None:
                    self._write(
                        "\n  [X] ERROR: Opcion invalida. Seleccione entre 1 y 8.\n"
                    )
                else:
                    action()
                self._pause()
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive roster menu."""
    parser = argparse.ArgumentParser(
        prog="academia-legacy", description="Gestion de estudiantes."
    )
    parser.add_argument(
        "--data", default=DATA_FILE, help="file where the roster is kept"
    )
    args = parser.parse_args(argv)
    LegacyApp(data_path=args.data).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())