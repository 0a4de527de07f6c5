import io

import pytest

from academia.errors import (
    InvalidCodeError,
    InvalidLevelError,
    InvalidNameError,
    ScoreOutOfRangeError,
)
from academia.validation import (
    is_digits,
    is_valid_name,
    read_float,
    read_int,
    read_text,
    validate_code,
    validate_level,
    validate_name,
    validate_score,
)


def feeder(*lines):
    return iter(lines).__next__


@pytest.mark.parametrize("text,expected", [
    ("Ana Lopez", True), ("", False), ("Ana3", False), ("Ana-Maria", False), (" ", True),
])
def test_is_valid_name(text, expected):
    assert is_valid_name(text) is expected


@pytest.mark.parametrize("text,expected", [
    ("12345", True), ("", False), ("12a45", False), ("-1", False),
])
def test_is_digits(text, expected):
    assert is_digits(text) is expected


def test_validate_code():
    validate_code("12345")
    for bad in ("1234", "123456", "12a45"):
        with pytest.raises(InvalidCodeError) as info:
            validate_code(bad)
        assert info.value.code == bad


def test_validate_name():
    validate_name("Ana")
    with pytest.raises(InvalidNameError):
        validate_name("Ana1")


def test_validate_score_bounds():
    validate_score(0.0)
    validate_score(20.0)
    with pytest.raises(ScoreOutOfRangeError):
        validate_score(20.5)
    with pytest.raises(ScoreOutOfRangeError):
        validate_score(-0.1)


def test_validate_level_bounds():
    validate_level(1)
    validate_level(5)
    with pytest.raises(InvalidLevelError):
        validate_level(6)
    with pytest.raises(InvalidLevelError):
        validate_level(0)


def test_read_int_retries_until_in_range():
    out = io.StringIO()
    value = read_int("Grado: ", 1, 5, feeder("abc", "9", "3"), out)
    assert value == 3
    assert out.getvalue().count("Grado: ") == 3
    assert out.getvalue().count("Ingrese un numero entre 1 y 5.") == 2


def test_read_float_accepts_decimal():
    out = io.StringIO()
    value = read_float("Nota: ", 0.0, 20.0, feeder("25", "x", "15.5"), out)
    assert value == 15.5
    assert out.getvalue().count("Ingrese un valor entre 0 y 20.") == 2


def test_read_text_uses_validator():
    out = io.StringIO()
    text = read_text("Nombre: ", is_valid_name, "Nombre malo",
                     feeder("Ana9", "Ana"), out)
    assert text == "Ana"
    assert "  [X] Nombre malo\n" in out.getvalue()