"""Shared enumerations, limits and defaults of the academic system."""

from __future__ import annotations

from enum import Enum, IntEnum

CODE_LENGTH = 5
MIN_LEVEL = 1
MAX_LEVEL = 5
MAX_GRADES = 4
MIN_SCORE = 0.0
MAX_SCORE = 20.0
TOTAL_COURSES = 8
DATA_FILE = "datos.txt"

APPROVAL_THRESHOLD = 14.0
RECOVERY_THRESHOLD = 11.0


class AcademicStatus(Enum):
    """Standing of a student according to the average of their grades."""

    APPROVED = "APROBADO"
    RECOVERY = "RECUPERACION"
    FAILED = "DESAPROBADO"
    NO_GRADES = "SIN_NOTAS"


class MenuOption(IntEnum):
    """Entries of the main menu, numbered as shown to the user."""

    REGISTER = 1
    VIEW_CARDS = 2
    ENTER_GRADES = 3
    VIEW_AVERAGES = 4
    RANKING = 5
    EDIT = 6
    REMOVE = 7
    STATISTICS = 8
    SEARCH = 9
    HISTORY = 10
    SAVE_AND_EXIT = 11


class ErrorLevel(IntEnum):
    """Severity of an error."""

    MINOR = 0
    MEDIUM = 1
    CRITICAL = 2


def status_for_average(average: float | None) -> AcademicStatus:
    """Classify an average; ``None`` means the student has no grades."""
    if average is None:
        return AcademicStatus.NO_GRADES
    if average >= APPROVAL_THRESHOLD:
        return AcademicStatus.APPROVED
    if average >= RECOVERY_THRESHOLD:
        return AcademicStatus.RECOVERY
    return AcademicStatus.FAILED