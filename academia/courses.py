"""Courses and the fixed table of courses on offer."""

from __future__ import annotations

from dataclasses import dataclass

from academia.definitions import TOTAL_COURSES


@dataclass
class Course:
    """A course together with the teacher who gives it."""

    name: str = ""
    teacher: str = ""


COURSES: tuple[Course, ...] = (
    Course("Matematica", "Sofia Martinez Gonzalez"),
    Course("Comunicacion", "Edwin Ramirez Lopez"),
    Course("Historia", "Maximo Torres Ruiz"),
    Course("Educacion para el Trabajo", "Lucas Fernandez Moreno"),
    Course("Religion", "Isabella Morales Castro"),
    Course("Educacion Fisica", "Mateo Castillo Jimenez"),
    Course("Desarrollo Personal", "Camila Herrera Sanchez"),
    Course("Ingles", "Sebastian Vargas Ortiz"),
)


def course_by_option(option: int) -> Course:
    """Return a copy of the course for a menu option numbered from 1."""
    if not 1 <= option <= TOTAL_COURSES:
        raise ValueError(f"course option must be between 1 and {TOTAL_COURSES}")
    chosen = COURSES[option - 1]
    return Course(chosen.name, chosen.teacher)


def course_menu() -> str:
    """Render the course selection menu."""
    rule = "-" * 62
    lines = [
        f"  [{number}] {course.name:<28}Prof. {course.teacher}\n"
        for number, course in enumerate(COURSES, start=1)
    ]
    return (
        f"\n{rule}\n                SELECCIONE EL CURSO\n{rule}\n\n"
        + "".join(lines)
        + "\n"
    )