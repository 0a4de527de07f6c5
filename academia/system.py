"""The collection of students and the reports built from it."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator

from academia.definitions import AcademicStatus
from academia.errors import StudentNotFoundError
from academia.reports import Report
from academia.screen import line
from academia.student import Student
from academia.utils import status_label

_NO_STUDENTS = "\n  [!] No hay estudiantes registrados.\n"
_NO_GRADES = "  [!] Ningun estudiante tiene notas registradas.\n"
_BAR_WIDTH = 30
_TABLE_BORDER = "  +------+----------+------------------------+----------+\n"


class AcademicSystem(Report):
    """Holds every student and answers queries and reports about them."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    # ---- management -------------------------------------------------

    def add(self, student: Student) -> None:
        """Append a student."""
        self._students.append(student)

    def remove(self, code: str) -> bool:
        """Remove the active student with this code; False if none."""
        for index, student in enumerate(self._students):
            if student.active and student.code == code:
                del self._students[index]
                return True
        return False

    def code_exists(self, code: str) -> bool:
        """True when an active student has this code."""
        return self.find_by_code(code) is not None

    # ---- lookup -----------------------------------------------------

    def _active(self) -> Iterator[Student]:
        return (student for student in self._students if student.active)

    def find_by_code(self, code: str) -> Student | None:
        """The active student with this code, or None."""
        return next((s for s in self._active() if s.code == code), None)

    def find_by_name(self, name: str) -> Student | None:
        """The first active student whose name contains ``name``, ignoring case."""
        return next(iter(self.search(name)), None)

    def require(self, code: str) -> Student:
        """The active student with this code; raise StudentNotFoundError."""
        student = self.find_by_code(code)
        if student is None:
            raise StudentNotFoundError(code)
        return student

    def search(self, name: str) -> list[Student]:
        """Every active student whose name contains ``name``, ignoring case."""
        wanted = name.lower()
        return [s for s in self._active() if wanted in s.name.lower()]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def __getitem__(self, index: int) -> Student:
        return self._students[index]

    def count_with_grades(self) -> int:
        """Number of active students with at least one grade."""
        return sum(1 for s in self._active() if s.grades)

    def ranked(self) -> list[Student]:
        """Active students with grades, highest average first; ties keep order."""
        graded = [s for s in self._active() if s.grades]
        return sorted(graded, key=lambda s: s.average(), reverse=True)

    # ---- reports ----------------------------------------------------

    def cards(self) -> str:
        if not self._students:
            return _NO_STUDENTS
        heavy = line("=")
        light = line("-")
        parts = [f"{heavy}\n  FICHAS DE ESTUDIANTES\n{heavy}"]
        count = 0
        for student in self._active():
            count += 1
            parts.append(f"\n{light}\n  ESTUDIANTE #{count}\n{light}\n")
            parts.append(student.describe())
        parts.append(f"\n{heavy}\n  Total: {count} estudiante(s).\n")
        return "".join(parts)

    def averages(self) -> str:
        if not self._students:
            return _NO_STUDENTS
        heavy = line("=")
        parts = [f"{heavy}\n  PROMEDIOS DE ESTUDIANTES\n{heavy}\n\n"]
        rows = [
            f"  {s.code:<6} | {s.name:<24} | {s.average():>5.2f}"
            f"  {status_label(s.average())}\n"
            for s in self._active()
            if s.grades
        ]
        parts.extend(rows or [_NO_GRADES])
        return "".join(parts)

    def ranking(self) -> str:
        ranked = self.ranked()
        if not ranked:
            return "\n" + _NO_GRADES
        heavy = line("=")
        stars = line("*")
        parts = [
            f"{heavy}\n  RANKING ACADEMICO\n{heavy}\n",
            _TABLE_BORDER,
            "  | Pos. | Codigo   | Nombre                 | Promedio |\n",
            _TABLE_BORDER,
        ]
        for position, student in enumerate(ranked, start=1):
            name = student.name
            if len(name) > 22:
                name = name[:19] + "..."
            parts.append(
                f"  | {position:>4} | {student.code:<8} | {name:<22}"
                f" | {student.average():>8.2f} |\n"
            )
        parts.append(_TABLE_BORDER)
        parts.append(f"\n{stars}")
        medals = ("[ORO]  1er", "[PLAT] 2do", "[BRON] 3er")
        for medal, student in zip(medals, ranked):
            parts.append(f"\n  {medal}: {student.name}  ({student.average():.2f})")
        parts.append(f"\n{stars}\n")
        return "".join(parts)

    def statistics(self) -> str:
        heavy = line("=")
        total = without = 0
        averages: list[float] = []
        tally = {status: 0 for status in AcademicStatus}
        for student in self._active():
            total += 1
            if not student.grades:
                without += 1
                continue
            averages.append(student.average())
            tally[student.status] += 1

        with_grades = len(averages)
        parts = [
            f"{heavy}\n  ESTADISTICAS DEL SISTEMA\n{heavy}\n\n",
            f"  Total estudiantes   : {total}\n",
            f"  Con notas           : {with_grades}\n",
            f"  Sin notas           : {without}\n\n",
        ]
        if with_grades:
            approved = tally[AcademicStatus.APPROVED]
            recovery = tally[AcademicStatus.RECOVERY]
            failed = tally[AcademicStatus.FAILED]
            parts += [
                f"  Aprobados  (>=14)   : {approved}\n",
                f"  Recuperacion(11-13) : {recovery}\n",
                f"  Desaprobados(<11)   : {failed}\n",
                f"\n  Promedio general    : {sum(averages) / with_grades:.2f}\n",
                f"\n{line('-')}\n  DISTRIBUCION:\n\n",
            ]
            for label, value in (
                ("Aprobados", approved),
                ("Recuperacion", recovery),
                ("Desaprobados", failed),
            ):
                filled = value * _BAR_WIDTH // with_grades
                bar = "#" * filled + "." * (_BAR_WIDTH - filled)
                parts.append(f"  {label:<14} [{bar}] {value}\n")
        parts.append(f"\n  Capacidad lista     : {len(self._students)} slots\n")
        parts.append(f"  Slots utilizados    : {total} slots\n")
        return "".join(parts)

    def memory_report(self) -> str:
        """Estimate of the memory held by the students and their grades."""
        heavy = line("=")
        pointer = struct.calcsize("P")
        size = len(self._students)
        capacity = max(
            size, (sys.getsizeof(self._students) - sys.getsizeof([])) // pointer
        )
        parts = [
            f"{heavy}\n            ESTADO DE MEMORIA DINAMICA\n{heavy}\n",
            "  SistemaAcademico (lista de estudiantes):\n",
            f"    Capacidad lista : {capacity} slots\n",
            f"    Estudiantes     : {size} activos\n",
            f"    Slots libres    : {capacity - size}\n\n",
            "  Desglose por estudiante:\n",
            f"  {line('-', 58)}\n",
        ]
        total_bytes = sys.getsizeof(self) + sys.getsizeof(self._students)
        for index, student in enumerate(self._students):
            student_bytes = sys.getsizeof(student)
            grade_bytes = sum(sys.getsizeof(grade) for grade in student.grades)
            total_bytes += student_bytes + grade_bytes
            parts.append(
                f"  [{index}] {student.code} | Estudiante: {student_bytes}B"
                f" | Notas[{len(student.grades)}]: {grade_bytes}B\n"
            )
        parts.append(f"  {line('-', 58)}\n")
        parts.append(f"  Memoria total estimada : ~{total_bytes} bytes\n")
        parts.append(f"{heavy}\n")
        return "".join(parts)