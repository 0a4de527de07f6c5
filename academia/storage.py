"""Saving and loading the student roster as a line-oriented text file."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TextIO, Union

from academia.courses import Course
from academia.definitions import DATA_FILE
from academia.errors import StorageError
from academia.grades import Grade
from academia.student import Student
from academia.system import AcademicSystem

PathType = Union[str, "PathLike[str]"]


def _format_score(value: float) -> str:
    """Shortest general form with six significant digits, e.g. ``15.5``."""
    return f"{value:g}"


def dump(system: AcademicSystem, stream: TextIO) -> None:
    """Write every active student of ``system`` to ``stream``."""
    stream.write(f"{len(system)}\n")
    for student in system:
        if not student.active:
            continue
        stream.write(f"{student.code}\n")
        stream.write(f"{student.name}\n")
        stream.write(f"{student.level}\n")
        stream.write(f"{student.course.name}\n")
        stream.write(f"{student.course.teacher}\n")
        stream.write(f"{student.registered}\n")
        stream.write(f"{1 if student.active else 0}\n")
        stream.write(f"{len(student.grades)}\n")
        for grade in student.grades:
            stream.write(f"{grade.term} {_format_score(grade.value)}\n")


class _Lines:
    """Sequential reader over the lines of a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._lines: Iterator[str] = (line.rstrip("\n") for line in stream)

    def text(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise ValueError("unexpected end of data") from None

    def integer(self) -> int:
        return int(self.text().strip())


def parse(stream: TextIO) -> list[Student]:
    """Read the students stored in ``stream``; raise ValueError if malformed."""
    lines = _Lines(stream)
    try:
        header = lines.text().strip()
    except ValueError:
        return []
    if not header:
        return []
    total = int(header)

    students: list[Student] = []
    for _ in range(total):
        code = lines.text()
        name = lines.text()
        level = lines.integer()
        course = Course(lines.text(), lines.text())
        registered = lines.text()
        active = lines.integer() == 1
        count = lines.integer()
        student = Student(
            code=code,
            name=name,
            level=level,
            course=course,
            registered=registered,
            active=active,
        )
        for _ in range(count):
            fields = lines.text().split()
            if len(fields) != 2:
                raise ValueError("a grade line needs a term and a value")
            student.add_grade(Grade(int(fields[0]), float(fields[1])))
        students.append(student)
    return students


def save(system: AcademicSystem, path: PathType = DATA_FILE) -> None:
    """Write the roster to ``path``; raise StorageError if it cannot be written."""
    try:
        with open(path, "w", encoding="utf-8") as stream:
            dump(system, stream)
    except OSError as error:
        raise StorageError(str(path), "escritura") from error


def load(system: AcademicSystem, path: PathType = DATA_FILE) -> int:
    """Add the students stored at ``path`` to ``system``.

    A missing file is not an error: nothing is loaded and 0 is returned.
    Otherwise the number of students added is returned.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            students = parse(stream)
    except FileNotFoundError:
        return 0
    except (OSError, ValueError) as error:
        raise StorageError(str(path), "lectura") from error
    for student in students:
        system.add(student)
    return len(students)