import pytest

from academia.courses import Course, course_by_option
from academia.definitions import AcademicStatus
from academia.grades import Grade
from academia.person import Person
from academia.student import Student


def make_student(code="12345", name="Ana Lopez", *scores):
    student = Student(code, name, 3, course_by_option(1), "05/03/2024 09:07")
    for term, score in enumerate(scores, start=1):
        student.add_grade(Grade(term, score))
    return student


def test_new_student_has_no_grades():
    student = make_student()
    assert student.status is AcademicStatus.NO_GRADES
    assert student.average() == 0.0
    assert student.active is True


def test_status_follows_average():
    assert make_student("11111", "A", 12.0, 12.0).status is AcademicStatus.RECOVERY
    assert make_student("22222", "B", 18.0, 18.0).status is AcademicStatus.APPROVED
    assert make_student("33333", "C", 5.0).status is AcademicStatus.FAILED


def test_average_of_equal_grades_is_that_grade():
    student = make_student("12345", "Ana", 12.0, 12.0, 12.0)
    assert student.average() == pytest.approx(12.0)


def test_clear_grades_resets_status():
    student = make_student("12345", "Ana", 18.0)
    student.clear_grades()
    assert student.grades == []
    assert student.status is AcademicStatus.NO_GRADES


def test_grades_in_constructor_set_status():
    student = Student("12345", "Ana", 2, Course("X", "Y"), "", True,
                      [Grade(1, 18.0)])
    assert student.status is AcademicStatus.APPROVED


def test_comparison_by_average():
    low = make_student("11111", "Low", 8.0)
    high = make_student("22222", "High", 17.0)
    assert low < high
    assert not high < low
    assert sorted([high, low]) == [low, high]


def test_str_summary_line():
    parts = str(make_student()).split(" | ")
    assert parts[0] == "12345"
    assert parts[1] == "Ana Lopez".ljust(24)
    assert parts[2] == "Grado 3"
    assert parts[3] == "Matematica"


def test_describe_without_grades():
    text = make_student().describe()
    assert "Sin notas registradas." in text
    assert "Matematica" in text
    assert "Sofia Martinez Gonzalez" in text


def test_describe_with_grades():
    text = make_student("12345", "Ana", 12.0, 12.0).describe()
    assert "B1:12.0  |  B2:12.0" in text
    assert "[RECUPERACION]" in text


def test_kind_and_inheritance():
    student = make_student()
    assert student.kind() == "Estudiante"
    assert isinstance(student, Person)