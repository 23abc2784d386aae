# tests/test_assignment.py

from models.assignment import Assignment, AssignmentStatus


def test_new_assignment_is_released():
    assignment = Assignment("HW1")

    assert assignment.name == "HW1"
    assert assignment.status is AssignmentStatus.RELEASED
    assert assignment.grade is None
    assert not assignment.is_graded
    assert assignment.is_outstanding


def test_set_grade_pass_threshold():
    assignment = Assignment("HW1")

    assignment.set_grade(51)
    assert assignment.status is AssignmentStatus.PASSED
    assert assignment.get_grade() == 51

    assignment.set_grade(50)
    assert assignment.status is AssignmentStatus.FAILED
    assert assignment.get_grade() == 50
    assert not assignment.is_outstanding


def test_set_grade_accepts_out_of_range_values():
    assignment = Assignment("HW1")

    assignment.set_grade(150)
    assert assignment.status is AssignmentStatus.PASSED

    assignment.set_grade(-5)
    assert assignment.status is AssignmentStatus.FAILED
    assert assignment.grade == -5


def test_status_values_and_terminal_states():
    assert str(AssignmentStatus.FINAL_REMINDER) == "final reminder"
    assert AssignmentStatus("submitted") is AssignmentStatus.SUBMITTED

    terminal = {s for s in AssignmentStatus if s.is_terminal}
    assert terminal == {AssignmentStatus.PASSED, AssignmentStatus.FAILED}


def test_assignment_to_dict():
    assignment = Assignment("HW1")
    assignment.set_grade(90)

    assert assignment.to_dict() == {"name": "HW1", "status": "passed", "grade": 90}


def test_assignment_to_str():
    assert Assignment("HW1").__str__() == "ASSIGNMENT: name: HW1, status: released"
