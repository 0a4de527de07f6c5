"""Interactive operations that create, change and remove students."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable

from academia.courses import course_by_option, course_menu
from academia.definitions import (
    CODE_LENGTH,
    MAX_GRADES,
    MAX_LEVEL,
    MAX_SCORE,
    MIN_LEVEL,
    MIN_SCORE,
    TOTAL_COURSES,
)
from academia.errors import (
    AcademicError,
    DuplicateCodeError,
    InvalidLevelError,
    InvalidNameError,
    ScoreOutOfRangeError,
    StudentNotFoundError,
)
from academia.grades import Grade
from academia.history import History
from academia.screen import Console, line
from academia.student import Student
from academia.system import AcademicSystem
from academia.utils import random_code, status_label, timestamp
from academia.validation import (
    read_float,
    read_int,
    validate_code,
    validate_level,
    validate_name,
    validate_score,
)

_NO_STUDENTS = "\n  [!] No hay estudiantes registrados.\n"


class StudentManager:
    """Runs the interactive student operations against a system."""

    def __init__(
        self,
        system: AcademicSystem,
        history: History,
        console: Console | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.system = system
        self.history = history
        self.console = console if console is not None else Console()
        self._rng = rng
        self._clock = clock if clock is not None else datetime.now

    # ---- helpers ----------------------------------------------------

    def _now(self) -> str:
        return timestamp(self._clock())

    def _log(self, text: str) -> None:
        self.history.add(f"[{self._now()}]  {text}")

    def _write(self, text: str) -> None:
        self.console.write(text)

    def _token(self, prompt: str) -> str:
        """First word of the next non-blank line, as a word read from a stream."""
        self._write(prompt)
        while True:
            words = self.console.input_func().split()
            if words:
                return words[0]

    def _int(self, prompt: str, low: int, high: int) -> int:
        return read_int(prompt, low, high, self.console.input_func,
                        self.console.output)

    def _float(self, prompt: str, low: float, high: float) -> float:
        return read_float(prompt, low, high, self.console.input_func,
                          self.console.output)

    def _header(self, title: str) -> None:
        heavy = line("=")
        self._write(f"{heavy}\n  {title}\n{heavy}\n\n")

    def _lookup(self) -> Student | None:
        code = self._token("  Ingrese codigo del estudiante: ")
        try:
            return self.system.require(code)
        except StudentNotFoundError as error:
            self._write(f"\n  [X] {error}\n")
            return None

    # ---- operations -------------------------------------------------

    def register(self) -> Student:
        """Ask for the data of a new student and add it to the system."""
        heavy = line("=")
        self._write(f"{heavy}\n          REGISTRO DE NUEVO ESTUDIANTE\n{heavy}\n\n")
        self._write(f"  [*] Codigo sugerido al azar: {random_code(self._rng)}\n\n")

        while True:
            code = self._token(f"  Codigo ({CODE_LENGTH} digitos): ")
            try:
                validate_code(code)
                if self.system.code_exists(code):
                    raise DuplicateCodeError(code)
                break
            except AcademicError as error:
                self._write(f"  [X] {error}\n\n")

        while True:
            name = self.console.ask("  Nombre completo: ")
            try:
                validate_name(name)
                break
            except InvalidNameError as error:
                self._write(f"  [X] {error}\n\n")

        while True:
            level = self._int("  Grado (1-5): ", MIN_LEVEL, MAX_LEVEL)
            try:
                validate_level(level)
                break
            except InvalidLevelError as error:
                self._write(f"  [X] {error}\n\n")

        self._write(course_menu())
        option = self._int("  >>> Opcion (1-8): ", 1, TOTAL_COURSES)
        student = Student(
            code=code,
            name=name,
            level=level,
            course=course_by_option(option),
            registered=self._now(),
        )
        self.system.add(student)
        self._log("Estudiante registrado")

        self._write(
            f"\n{heavy}\n  [OK] ESTUDIANTE REGISTRADO EXITOSAMENTE!\n{heavy}\n"
            f"  Codigo  : {student.code}\n"
            f"  Nombre  : {student.name}\n"
            f"  Grado   : {student.level} de Secundaria\n"
            f"  Curso   : {student.course.name}\n"
            f"  Profesor: {student.course.teacher}\n"
            f"  Fecha   : {student.registered}\n"
        )
        return student

    def show_cards(self) -> None:
        """Show the record card of every student."""
        self._write(self.system.cards())
        self._log("Fichas consultadas")

    def enter_grades(self) -> Student | None:
        """Replace the grades of one student with newly entered ones."""
        if len(self.system) == 0:
            self._write(_NO_STUDENTS)
            return None
        self._header("INGRESO DE NOTAS")
        student = self._lookup()
        if student is None:
            return None

        self._write(f"\n  [OK] Estudiante: {student.name}\n\n")
        count = self._int("  Cuantas notas desea ingresar (1-4): ", 1, MAX_GRADES)

        student.clear_grades()
        for term in range(1, count + 1):
            while True:
                value = self._float(
                    f"  Nota Bimestre {term} (0-20): ", MIN_SCORE, MAX_SCORE
                )
                try:
                    validate_score(value)
                    student.add_grade(Grade(term, value))
                    break
                except ScoreOutOfRangeError as error:
                    self._write(f"  [X] {error}\n\n")

        average = student.average()
        heavy = line("=")
        self._write(
            f"\n{heavy}\n  [OK] NOTAS REGISTRADAS\n{heavy}\n"
            f"  Promedio: {average:.2f}  {status_label(average)}\n"
        )
        self._log("Notas ingresadas")
        return student

    def edit(self) -> Student | None:
        """Change the name, level or course of one student."""
        if len(self.system) == 0:
            self._write(_NO_STUDENTS)
            return None
        self._header("EDITAR ESTUDIANTE")
        student = self._lookup()
        if student is None:
            return None

        self._write(
            f"\n  [OK] Encontrado: {student.name}\n\n"
            "  [1] Cambiar nombre\n"
            "  [2] Cambiar grado\n"
            "  [3] Cambiar curso\n"
            "  [4] Cancelar\n\n"
        )
        option = self._int("  >>> Opcion: ", 1, 4)

        if option == 1:
            while True:
                new_name = self.console.ask("  Nuevo nombre: ")
                try:
                    validate_name(new_name)
                    student.name = new_name
                    self._write("\n  [OK] Nombre actualizado.\n")
                    break
                except InvalidNameError as error:
                    self._write(f"  [X] {error}\n\n")
        elif option == 2:
            new_level = self._int("  Nuevo grado (1-5): ", MIN_LEVEL, MAX_LEVEL)
            try:
                validate_level(new_level)
                student.level = new_level
                self._write("\n  [OK] Grado actualizado.\n")
            except InvalidLevelError as error:
                self._write(f"\n  [X] {error}\n")
        elif option == 3:
            self._write(course_menu())
            choice = self._int("  >>> Opcion (1-8): ", 1, TOTAL_COURSES)
            student.course = course_by_option(choice)
            self._write(f"\n  [OK] Curso actualizado: {student.course.name}\n")
        else:
            self._write("\n  [OK] Cancelado.\n")

        self._log("Datos editados")
        return student

    def remove(self) -> bool:
        """Remove one student after confirmation; True if it was removed."""
        if len(self.system) == 0:
            self._write(_NO_STUDENTS)
            return False
        heavy = line("=")
        self._write(
            f"{heavy}\n  ELIMINAR ESTUDIANTE\n{heavy}\n\n"
            "  [!] Esta accion libera la memoria del estudiante.\n\n"
        )
        student = self._lookup()
        if student is None:
            return False

        self._write(f"\n  [OK] Encontrado: {student.name}\n\n")
        answer = self._token("  Confirmar eliminacion? (S/N): ")
        if answer[0] not in ("S", "s"):
            self._write("\n  [OK] Cancelado.\n")
            return False

        removed = self.system.remove(student.code)
        self._write(
            f"\n{heavy}\n  [OK] ESTUDIANTE ELIMINADO Y MEMORIA LIBERADA\n{heavy}\n"
        )
        self._log("Estudiante eliminado")
        return removed

    def search_by_name(self) -> list[Student]:
        """List the students whose name contains the text entered."""
        self._header("BUSQUEDA POR NOMBRE")
        wanted = self.console.ask("  Ingrese nombre (o parte del nombre): ")
        results = self.system.search(wanted)

        self._write(f"\n{line('-')}\n")
        if not results:
            self._write("\n  [!] No se encontraron estudiantes con ese nombre.\n")
            self._log(f'Busqueda sin resultados: "{wanted}"')
            return results

        self._write(
            f'\n  Resultados encontrados: {len(results)}  para: "{wanted}"\n\n'
        )
        for number, student in enumerate(results, start=1):
            self._write(f"  [{number}] {student}\n")
        self._log(f'Busqueda "{wanted}": {len(results)} resultado(s)')
        return results