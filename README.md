# academia

`academia` is an interactive console system for keeping the records of
secondary-school students. For each student it stores:

- a code
- a name
- a grade level, from 1 to 5
- a course and its teacher
- up to four bimester scores, on the 0 to 20 scale

Each student is classified by the average of their scores:

| Average      | Status         |
|--------------|----------------|
| 14 or more   | APROBADO       |
| 11 to < 14   | RECUPERACION   |
| below 11     | DESAPROBADO    |

A student with no scores has the status `SIN_NOTAS`.

## Installation

```
pip install .
```

## Running

```
academia
academia --data path/to/roster.txt
```

This opens the main menu. It offers these options:

1. Register a new student. The code must be 5 digits and must not already be in use. A random code is suggested. You then choose a course from a list of eight, each with its teacher.
2. View the record cards of all students.
3. Enter or replace a student's scores (1 to 4 of them).
4. View the averages.
5. View the academic ranking, with the top three highlighted.
6. Edit a student's name, grade level or course.
7. Delete a student, after confirmation.
8. View statistics, with a distribution chart and an estimate of memory use.
9. Search students by part of their name. The search ignores case.
10. View the history of operations in the current session.
11. Save and quit.

The roster is kept in a plain text file, `datos.txt` in the current directory
unless `--data` names another file. The file is loaded at start-up and written
when you choose *Save and quit*.

### The earlier edition

An earlier, simpler edition is also included:

```
academia-legacy
academia-legacy --data path/to/roster.txt
```

It differs from the main edition in these ways:

- codes are 10 digits
- a student can have up to five scores
- the roster holds at most 50 students
- editing changes only the name
- its menu has eight options and no search, statistics or history

It uses the same default file name, `datos.txt`, but stores it in a different
layout. Keep the rosters of the two editions in separate files.

## Using it as a library

```python
from academia.system import AcademicSystem
from academia.student import Student
from academia.courses import course_by_option
from academia.grades import Grade
from academia.storage import save, load

system = AcademicSystem()
student = Student("12345", "Ana Torres", 3, course_by_option(1), "01/03/2024 09:00")
student.add_grade(Grade(1, 15.0))
student.add_grade(Grade(2, 17.0))
system.add(student)

print(student.average())   # 16.0
print(student.status)      # AcademicStatus.APPROVED
print(system.ranking())    # rendered ranking table

save(system, "roster.txt")
other = AcademicSystem()
load(other, "roster.txt")  # returns the number of students added
```

The reports `cards()`, `averages()`, `ranking()`, `statistics()` and
`memory_report()` on `AcademicSystem` each return text. They do not print it.

Look-ups:

- `find_by_code` returns `None` when no student matches.
- `require` raises `StudentNotFoundError` when no student matches.
- `search` returns every student whose name contains the given text. It ignores case.

`academia.validation` provides `validate_code`, `validate_name`,
`validate_score` and `validate_level`. All errors raised by the package derive
from `academia.errors.AcademicError`. Examples are `InvalidCodeError`,
`DuplicateCodeError`, `ScoreOutOfRangeError` and `StorageError`.

## What it does not do

- The history of operations lives only in memory. It is lost when the program ends.
- The roster is a single text file with no locking and no database behind it.
- Nothing is saved until you choose *Save and quit*.