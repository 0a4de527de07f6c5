"""Exceptions raised by the academic system."""

from __future__ import annotations


class AcademicError(Exception):
    """Root of every error raised by the academic system."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidCodeError(AcademicError):
    """A student code does not have the required format."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"Codigo invalido: '{code}'. Debe tener 5 digitos numericos."
        )
        self.code = code


class DuplicateCodeError(AcademicError):
    """A student code is already registered."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"El codigo '{code}' ya esta registrado en el sistema."
        )
        self.code = code


class InvalidNameError(AcademicError):
    """A name contains characters other than letters and spaces."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Nombre invalido: '{name}'. Solo se permiten letras y espacios."
        )
        self.name = name


class ScoreOutOfRangeError(AcademicError):
    """A score lies outside the range 0 to 20."""

    def __init__(self, value: float) -> None:
        super().__init__(
            f"Nota fuera de rango: {value:f}. Debe estar entre 0.0 y 20.0."
        )
        self.value = value


class StudentNotFoundError(AcademicError):
    """No active student has the requested code."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"Estudiante con codigo '{code}' no encontrado en el sistema."
        )
        self.code = code


class StorageError(AcademicError):
    """A data file could not be read or written."""

    def __init__(self, filename: str, operation: str) -> None:
        super().__init__(
            f"Error de archivo ({operation}): No se pudo acceder a '{filename}'."
        )
        self.filename = filename
        self.operation = operation


class InvalidLevelError(AcademicError):
    """A school level lies outside the range 1 to 5."""

    def __init__(self, level: int) -> None:
        super().__init__(f"Grado invalido: {level}. Debe ser entre 1 y 5.")
        self.level = level