import random
from datetime import datetime

from academia.definitions import CODE_LENGTH
from academia.utils import QUOTES, random_code, random_quote, status_label, timestamp


def test_timestamp_format():
    assert timestamp(datetime(2024, 3, 5, 9, 7)) == "05/03/2024 09:07"


def test_timestamp_default_shape():
    text = timestamp()
    day, month, rest = text.split("/")
    assert len(day) == 2 and len(month) == 2
    assert rest[4] == " " and rest[7] == ":"


def test_random_quote_is_from_table():
    rng = random.Random(1)
    for _ in range(20):
        assert random_quote(rng) in QUOTES


def test_random_code_shape_and_determinism():
    code = random_code(random.Random(7))
    assert len(code) == CODE_LENGTH
    assert code.isdigit()
    assert random_code(random.Random(7)) == code


def test_status_labels():
    assert status_label(20.0) == "[APROBADO]"
    assert status_label(14.0) == "[APROBADO]"
    assert status_label(13.99) == "[RECUPERACION]"
    assert status_label(11.0) == "[RECUPERACION]"
    assert status_label(10.99) == "[DESAPROBADO]"