# models/assignment.py

"""
The Assignment model represents a single gradable unit owned by exactly one `Student`.

An assignment is created with status `released` and no grade. Setting a grade moves it to a terminal
status: `passed` if the grade is strictly above the pass threshold, otherwise `failed`.
"""

from __future__ import annotations

from enum import Enum

from core.settings import PASS_THRESHOLD


class AssignmentStatus(str, Enum):
    RELEASED = "released"
    WORKING = "working"
    SUBMITTED = "submitted"
    FINAL_REMINDER = "final reminder"
    PASSED = "passed"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self in (AssignmentStatus.PASSED, AssignmentStatus.FAILED)


class Assignment:

    def __init__(self, name: str):
        self._name = name
        self._status: AssignmentStatus = AssignmentStatus.RELEASED
        self._grade: int | None = None

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> AssignmentStatus:
        return self._status

    @status.setter
    def status(self, status: AssignmentStatus) -> None:
        self._status = AssignmentStatus(status)

    @property
    def grade(self) -> int | None:
        return self._grade

    @property
    def is_graded(self) -> bool:
        return self._grade is not None

    @property
    def is_outstanding(self) -> bool:
        return not self._status.is_terminal

    # === data manipulators ===

    def set_grade(self, grade: int) -> None:
        """
        Records a grade and moves the assignment to `passed` or `failed`.

        No bounds checking is applied; a grade of exactly `PASS_THRESHOLD` fails.
        """
        self._grade = grade
        self._status = (
            AssignmentStatus.PASSED
            if grade > PASS_THRESHOLD
            else AssignmentStatus.FAILED
        )

    def get_grade(self) -> int | None:
        return self._grade

    # === reporting ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "status": self._status.value,
            "grade": self._grade,
        }

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Assignment({self._name}, {self._status.value}, {self._grade})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: name: {self._name}, status: {self._status.value}"
