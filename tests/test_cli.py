# tests/test_cli.py

import core.formatters as formatters
from cli.formatters import format_student_oneline
from cli.main import main, run_demo
from models.student import Student


def test_format_list_with_and():
    assert formatters.format_list_with_and([]) == ""
    assert formatters.format_list_with_and(["Ana"]) == "Ana"
    assert formatters.format_list_with_and(["Ana", "Sean"]) == "Ana and Sean"
    assert (
        formatters.format_list_with_and(["Ana", "Sean", "Paul"])
        == "Ana, Sean, and Paul"
    )


def test_format_grade():
    assert formatters.format_grade(None) == "[UNGRADED]"
    assert formatters.format_grade(65) == "65.0"


def test_run_demo_settles_all_grading(capsys):
    class_list = run_demo(seed=7, instant=True)
    students = class_list.students

    for student in students:
        assert student.find_assignment("HW1").is_graded
        assert not student.has_pending_transition

    assert students[0].find_assignment("HW2").is_graded
    assert [s.get_assignment_status("HW2") for s in students[1:]] == [
        "released",
        "released",
    ]

    out = capsys.readouterr().out
    assert "ASSIGNMENT TRACKER" in out
    assert "Ana Lopez has been added to the classlist." in out
    assert "Observer → Paul Atreides has received a final reminder for HW1." in out
    assert "SUMMARY" in out


def test_main_accepts_arguments(capsys):
    main(["--instant", "--seed", "3", "--delay", "0.1"])

    assert "SUMMARY" in capsys.readouterr().out


def test_format_student_oneline():
    student = Student("Ana Lopez", "alopez@mmm.edu")
    assert format_student_oneline(student) == f"{'Ana Lopez':<20}  | alopez@mmm.edu"

    student.withdraw()
    assert (
        format_student_oneline(student)
        == f"{'Ana Lopez':<20} [WITHDRAWN] | alopez@mmm.edu"
    )
