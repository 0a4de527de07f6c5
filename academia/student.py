"""Students: people enrolled in one course with their term grades."""

from __future__ import annotations

from dataclasses import dataclass, field

from academia.courses import Course
from academia.definitions import AcademicStatus, status_for_average
from academia.grades import Grade
from academia.person import Person
from academia.utils import status_label


@dataclass(eq=False)
class Student(Person):
    """A student with a school level, a course and the grades obtained."""

    level: int = 0
    course: Course = field(default_factory=Course)
    registered: str = ""
    active: bool = True
    grades: list[Grade] = field(default_factory=list)
    status: AcademicStatus = field(default=AcademicStatus.NO_GRADES, init=False)

    def __post_init__(self) -> None:
        self.grades = list(self.grades)
        self.update_status()

    def add_grade(self, grade: Grade) -> None:
        """Append a grade and recompute the academic status."""
        self.grades.append(grade)
        self.update_status()

    def clear_grades(self) -> None:
        """Drop every grade; the student is left without a status."""
        self.grades.clear()
        self.status = AcademicStatus.NO_GRADES

    def average(self) -> float:
        """Mean of the grade values, or 0.0 when there are none."""
        if not self.grades:
            return 0.0
        return sum(grade.value for grade in self.grades) / len(self.grades)

    def update_status(self) -> None:
        """Recompute the academic status from the current grades."""
        self.status = status_for_average(self.average() if self.grades else None)

    def describe(self) -> str:
        lines = [
            f"  Codigo    : {self.code}\n",
            f"  Nombre    : {self.name}\n",
            f"  Grado     : {self.level} de Secundaria\n",
            f"  Curso     : {self.course.name}\n",
            f"  Profesor  : {self.course.teacher}\n",
            f"  Registrado: {self.registered}\n",
        ]
        if self.grades:
            average = self.average()
            joined = "  |  ".join(str(grade) for grade in self.grades)
            lines.append(f"  Notas     : {joined}")
            lines.append(
                f"\n  Promedio  : {average:.2f}  {status_label(average)}\n"
            )
        else:
            lines.append("  Notas     : Sin notas registradas.\n")
        return "".join(lines)

    def kind(self) -> str:
        return "Estudiante"

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.average() < other.average()

    def __str__(self) -> str:
        return (
            f"{self.code} | {self.name:<24} | Grado {self.level}"
            f" | {self.course.name}"
        )