import pytest

from academia.courses import COURSES, Course, course_by_option, course_menu
from academia.definitions import TOTAL_COURSES


def test_default_course_is_empty():
    course = Course()
    assert (course.name, course.teacher) == ("", "")


def test_first_and_last_options():
    assert course_by_option(1) == Course("Matematica", "Sofia Martinez Gonzalez")
    assert course_by_option(TOTAL_COURSES) == Course("Ingles", "Sebastian Vargas Ortiz")


def test_every_option_matches_table():
    chosen = [course_by_option(n) for n in range(1, TOTAL_COURSES + 1)]
    assert chosen == list(COURSES)


def test_option_returns_independent_copy():
    course = course_by_option(2)
    course.teacher = "Someone Else"
    assert course_by_option(2).teacher == "Edwin Ramirez Lopez"


@pytest.mark.parametrize("option", [0, -1, TOTAL_COURSES + 1])
def test_out_of_range_option(option):
    with pytest.raises(ValueError):
        course_by_option(option)


def test_menu_header():
    menu = course_menu()
    assert menu.startswith("\n" + "-" * 62 + "\n                SELECCIONE EL CURSO\n")
    assert menu.endswith("\n\n")


def test_menu_lists_every_course_in_order():
    entries = [ln for ln in course_menu().splitlines() if ln.startswith("  [")]
    assert len(entries) == TOTAL_COURSES
    for number, (entry, course) in enumerate(zip(entries, COURSES), start=1):
        prefix = f"  [{number}] "
        assert entry.startswith(prefix)
        body = entry[len(prefix):]
        assert body[:28].rstrip() == course.name
        assert body[28:] == "Prof. " + course.teacher