import pytest

from academia.definitions import (
    APPROVAL_THRESHOLD,
    RECOVERY_THRESHOLD,
    AcademicStatus,
    ErrorLevel,
    MenuOption,
    status_for_average,
)


@pytest.mark.parametrize(
    "average, expected",
    [
        (20.0, AcademicStatus.APPROVED),
        (14.0, AcademicStatus.APPROVED),
        (13.99, AcademicStatus.RECOVERY),
        (11.0, AcademicStatus.RECOVERY),
        (10.99, AcademicStatus.FAILED),
        (0.0, AcademicStatus.FAILED),
    ],
)
def test_status_for_average_thresholds(average, expected):
    assert status_for_average(average) is expected


def test_status_for_missing_average_is_no_grades():
    assert status_for_average(None) is AcademicStatus.NO_GRADES


def test_thresholds_are_the_boundaries():
    assert status_for_average(APPROVAL_THRESHOLD) is AcademicStatus.APPROVED
    assert status_for_average(RECOVERY_THRESHOLD) is AcademicStatus.RECOVERY


def test_status_labels():
    assert status_for_average(15.0).value == "APROBADO"
    assert status_for_average(12.0).value == "RECUPERACION"
    assert status_for_average(5.0).value == "DESAPROBADO"


def test_menu_option_from_number():
    assert MenuOption(1) is MenuOption.REGISTER
    assert MenuOption(11) is MenuOption.SAVE_AND_EXIT
    assert [int(o) for o in MenuOption] == list(range(1, 12))


@pytest.mark.parametrize("number", [0, 12, -1])
def test_menu_option_rejects_unknown_numbers(number):
    with pytest.raises(ValueError):
        MenuOption(number)


def test_error_levels_are_ordered():
    assert ErrorLevel.MINOR < ErrorLevel.MEDIUM < ErrorLevel.CRITICAL
    assert ErrorLevel(2) is ErrorLevel.CRITICAL