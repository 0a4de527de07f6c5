import io
from datetime import datetime

import pytest

from academia.errors import AcademicError, StorageError
from academia.legacy.records import (
    MAX_STUDENTS,
    LegacyStudent,
    RosterFullError,
    code_exists,
    course_for_option,
    dump_records,
    format_number,
    load_records,
    mean,
    parse_records,
    save_records,
    timestamp,
)


def sample(code="1234567890", scores=None):
    return LegacyStudent(
        code=code,
        name="Ana Maria Lopez",
        level=3,
        course="Matematica",
        teacher="Sofia Martinez Gonzalez",
        registered="07/03/2024 09:05",
        scores=[15.5, 12.0] if scores is None else scores,
    )


def test_mean_of_nothing_is_zero():
    assert mean([]) == 0.0


def test_mean_matches_sum_over_count():
    values = [10.0, 20.0, 13.0]
    assert mean(values) == pytest.approx(sum(values) / len(values))


def test_average_and_label():
    student = sample(scores=[20.0, 20.0])
    assert student.average() == 20.0
    assert student.status_label() == "[APROBADO]"
    assert sample(scores=[]).status_label() == "[DESAPROBADO]"
    assert sample(scores=[11.0]).status_label() == "[RECUPERACION]"


def test_format_number():
    assert format_number(5) == "05"
    assert format_number(12) == "12"


def test_timestamp():
    assert timestamp(datetime(2024, 3, 7, 9, 5)) == "07/03/2024 09:05"


def test_code_exists():
    students = [sample("1111111111"), sample("2222222222")]
    assert code_exists(students, "2222222222")
    assert not code_exists(students, "3333333333")


def test_course_for_option():
    course = course_for_option(1)
    assert course.name == "Matematica"
    assert course.teacher == "Sofia Martinez Gonzalez"
    assert course_for_option(8).name == "Ingles"
    with pytest.raises(ValueError):
        course_for_option(9)


def test_round_trip():
    students = [sample("1111111111"), sample("2222222222", scores=[])]
    buffer = io.StringIO()
    dump_records(students, buffer)
    buffer.seek(0)
    assert parse_records(buffer) == students


def test_parse_empty_is_empty():
    assert parse_records(io.StringIO("")) == []


def test_parse_truncated_raises():
    with pytest.raises(ValueError):
        parse_records(io.StringIO("2\n1234567890\nAna\n"))


def test_parse_too_many_students():
    with pytest.raises(RosterFullError) as info:
        parse_records(io.StringIO(f"{MAX_STUDENTS + 1}\n"))
    assert isinstance(info.value, AcademicError)


def test_load_missing_file(tmp_path):
    assert load_records(tmp_path / "absent.txt") == []


def test_save_and_load(tmp_path):
    path = tmp_path / "datos.txt"
    students = [sample()]
    save_records(students, path)
    assert load_records(path) == students


def test_load_malformed_raises_storage_error(tmp_path):
    path = tmp_path / "datos.txt"
    path.write_text("x\n", encoding="utf-8")
    with pytest.raises(StorageError):
        load_records(path)


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(StorageError):
        save_records([sample()], tmp_path)