"""Flat student records of the first roster format, and their data file."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from os import PathLike
from typing import Iterable, TextIO, Union

from academia.courses import Course, course_by_option
from academia.errors import AcademicError, StorageError
from academia.utils import status_label as _label

MAX_STUDENTS = 50
MAX_SCORES = 5
MIN_LEVEL = 1
MAX_LEVEL = 5
MIN_SCORE = 0
MAX_SCORE = 20
CODE_LENGTH = 10
DATA_FILE = "datos.txt"

PathType = Union[str, "PathLike[str]"]


class RosterFullError(AcademicError):
    """The roster already holds the maximum number of students."""

    def __init__(self, limit: int = MAX_STUDENTS) -> None:
        super().__init__(f"Limite de {limit} estudiantes alcanzado.")
        self.limit = limit


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, or 0.0 for no values."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


@dataclass
class LegacyStudent:
    """One student record: identity, course and plain score values."""

    code: str
    name: str
    level: int
    course: str
    teacher: str
    registered: str = ""
    scores: list[float] = field(default_factory=list)

    def average(self) -> float:
        """Mean of the scores, or 0.0 when there are none."""
        return mean(self.scores)

    def status_label(self) -> str:
        """Bracketed label for the average of the scores."""
        return _label(self.average())


def format_number(number: int) -> str:
    """Two-digit rendering of a date or time field."""
    return f"0{number}" if number < 10 else str(number)


def timestamp(now: datetime | None = None) -> str:
    """Format a moment (local now by default) as ``dd/mm/yyyy hh:mm``."""
    moment = now if now is not None else datetime.now()
    return (
        f"{format_number(moment.day)}/{format_number(moment.month)}/"
        f"{moment.year} {format_number(moment.hour)}:"
        f"{format_number(moment.minute)}"
    )


def code_exists(students: Iterable[LegacyStudent], code: str) -> bool:
    """True when a record already carries this code."""
    return any(student.code == code for student in students)


def course_for_option(option: int) -> Course:
    """Course and teacher for a menu option numbered 1 to 8."""
    return course_by_option(option)


def _format_score(value: float) -> str:
    return f"{value:g}"


def dump_records(students: Iterable[LegacyStudent], stream: TextIO) -> None:
    """Write the records to ``stream`` in the data file layout."""
    items = list(students)
    stream.write(f"{len(items)}\n")
    for student in items:
        stream.write(f"{student.code}\n")
        stream.write(f"{student.name}\n")
        stream.write(f"{student.level}\n")
        stream.write(f"{student.course}\n")
        stream.write(f"{student.teacher}\n")
        stream.write(f"{student.registered}\n")
        stream.write(f"{len(student.scores)}\n")
        stream.write("".join(f"{_format_score(v)} " for v in student.scores))
        stream.write("\n")


class _Scanner:
    """Mixed word and line reader over a whole text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _end(self) -> ValueError:
        return ValueError("unexpected end of data")

    def token(self) -> str:
        text, size = self._text, len(self._text)
        while self._pos < size and text[self._pos].isspace():
            self._pos += 1
        if self._pos >= size:
            raise self._end()
        start = self._pos
        while self._pos < size and not text[self._pos].isspace():
            self._pos += 1
        return text[start:self._pos]

    def integer(self) -> int:
        word = self.token()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, found {word!r}") from None

    def number(self) -> float:
        word = self.token()
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"expected a number, found {word!r}") from None

    def skip(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def line(self) -> str:
        if self._pos >= len(self._text):
            raise self._end()
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        result = self._text[self._pos:end]
        self._pos = end + 1
        return result.rstrip("\r")


def parse_records(stream: TextIO) -> list[LegacyStudent]:
    """Read records from ``stream``; raise ValueError if malformed."""
    text = stream.read()
    if not text.strip():
        return []
    scanner = _Scanner(text)
    total = scanner.integer()
    if total < 0:
        raise ValueError("negative record count")
    if total > MAX_STUDENTS:
        raise RosterFullError()
    scanner.skip()

    students: list[LegacyStudent] = []
    for _ in range(total):
        code = scanner.token()
        scanner.skip()
        name = scanner.line()
        level = scanner.integer()
        scanner.skip()
        course = scanner.line()
        teacher = scanner.line()
        registered = scanner.line()
        count = scanner.integer()
        if not 0 <= count <= MAX_SCORES:
            raise ValueError(f"score count must be between 0 and {MAX_SCORES}")
        scores = [scanner.number() for _ in range(count)]
        scanner.skip()
        students.append(
            LegacyStudent(code, name, level, course, teacher, registered, scores)
        )
    return students


def load_records(path: PathType = DATA_FILE) -> list[LegacyStudent]:
    """Records stored at ``path``; an absent file gives an empty list."""
    try:
        with open(path, encoding="utf-8") as stream:
            return parse_records(stream)
    except FileNotFoundError:
        return []
    except (OSError, ValueError) as error:
        raise StorageError(str(path), "lectura") from error


def save_records(students: Iterable[LegacyStudent], path: PathType = DATA_FILE) -> None:
    """Write the records to ``path``; raise StorageError on failure."""
    try:
        with open(path, "w", encoding="utf-8") as stream:
            dump_records(students, stream)
    except OSError as error:
        raise StorageError(str(path), "escritura") from error