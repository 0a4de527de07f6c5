"""Validation of user input and interactive reading with retries."""

from __future__ import annotations

import re
import string
import sys
from typing import Callable, TextIO

from academia.definitions import (
    CODE_LENGTH,
    MAX_LEVEL,
    MAX_SCORE,
    MIN_LEVEL,
    MIN_SCORE,
)
from academia.errors import (
    InvalidCodeError,
    InvalidLevelError,
    InvalidNameError,
    ScoreOutOfRangeError,
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NAME_CHARS = frozenset(string.ascii_letters + " ")
_DIGITS = frozenset(string.digits)


def is_valid_name(text: str) -> bool:
    """True when the text is non-empty and holds only letters and spaces."""
    return bool(text) and all(char in _NAME_CHARS for char in text)


def is_digits(text: str) -> bool:
    """True when the text is non-empty and holds only decimal digits."""
    return bool(text) and all(char in _DIGITS for char in text)


def _read_number(
    prompt: str,
    low: float,
    high: float,
    pattern: re.Pattern[str],
    convert: Callable[[str], float],
    noun: str,
    input_func: Callable[[], str],
    output: TextIO | None,
) -> float:
    out = output if output is not None else sys.stdout
    while True:
        out.write(prompt)
        out.flush()
        match = pattern.match(input_func())
        if match:
            value = convert(match.group(1))
            if low <= value <= high:
                return value
        out.write(f"  [X] Ingrese un {noun} entre {low:g} y {high:g}.\n\n")


def read_int(
    prompt: str,
    low: int,
    high: int,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> int:
    """Ask until an integer within ``[low, high]`` is entered."""
    return int(
        _read_number(prompt, low, high, _INT_PREFIX, int, "numero",
                     input_func, output)
    )


def read_float(
    prompt: str,
    low: float,
    high: float,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> float:
    """Ask until a number within ``[low, high]`` is entered."""
    return _read_number(prompt, low, high, _FLOAT_PREFIX, float, "valor",
                        input_func, output)


def read_text(
    prompt: str,
    validator: Callable[[str], bool],
    error_message: str,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> str:
    """Ask until a line accepted by ``validator`` is entered."""
    out = output if output is not None else sys.stdout
    while True:
        out.write(prompt)
        out.flush()
        text = input_func()
        if validator(text):
            return text
        out.write(f"  [X] {error_message}\n\n")


def validate_code(code: str) -> None:
    """Raise InvalidCodeError unless the code is exactly 5 digits."""
    if len(code) != CODE_LENGTH or not is_digits(code):
        raise InvalidCodeError(code)


def validate_name(name: str) -> None:
    """Raise InvalidNameError unless the name is letters and spaces."""
    if not is_valid_name(name):
        raise InvalidNameError(name)


def validate_score(value: float) -> None:
    """Raise ScoreOutOfRangeError unless the score lies in [0, 20]."""
    if value < MIN_SCORE or value > MAX_SCORE:
        raise ScoreOutOfRangeError(value)


def validate_level(level: int) -> None:
    """Raise InvalidLevelError unless the level lies in [1, 5]."""
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise InvalidLevelError(level)