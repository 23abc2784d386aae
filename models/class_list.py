# models/class_list.py

"""
The ClassList model holds the students of a single class and coordinates operations across them.

Students are kept in insertion order. Names are not required to be unique; lookups and removals act on
the first student whose full name matches.

Provides functions for:
- Adding, removing, and finding students
- Querying which students still have outstanding work
- Releasing assignments to every student concurrently on the asyncio event loop
- Escalating unfinished assignments with a final reminder and a forced submission
"""

from __future__ import annotations

import asyncio
import logging

from models.observer import ConsoleObserver, Observer
from models.student import Student

logger = logging.getLogger(__name__)


class ClassList:

    def __init__(self, observer: Observer | None = None):
        self._students: list[Student] = []
        self._observer: Observer = observer or ConsoleObserver()

    # === properties ===

    @property
    def students(self) -> list[Student]:
        return self._students.copy()

    @property
    def observer(self) -> Observer:
        return self._observer

    def __len__(self) -> int:
        return len(self._students)

    # === roster management ===

    def add_student(self, student: Student) -> None:
        student.enroll()
        self._students.append(student)
        print(f"{student.full_name} has been added to the classlist.")

    def remove_student(self, full_name: str) -> bool:
        """
        Removes the first student matching `full_name`.

        Returns:
            True if a student was removed, False if no student matched.

        Notes:
            - The removed student is withdrawn: its pending timers are cancelled, and any transition that
              still fires for it is ignored.
        """
        student = self.find_student_by_name(full_name)

        if student is None:
            return False

        self._students.remove(student)
        student.withdraw()
        logger.debug("withdrew %s from the classlist", full_name)

        return True

    def find_student_by_name(self, full_name: str) -> Student | None:
        return next((s for s in self._students if s.full_name == full_name), None)

    # === queries ===

    def find_outstanding_assignments(self, assignment_name: str) -> list[str]:
        """
        Lists the students who still owe work on `assignment_name`.

        A student is included if the assignment is in a non-terminal status, or, when the student has
        never been given that assignment, if any of their other assignments is non-terminal.

        Returns:
            Student names in class list order.
        """
        outstanding = []

        for student in self._students:
            assignment = student.find_assignment(assignment_name)

            if assignment is not None:
                if assignment.is_outstanding:
                    outstanding.append(student.full_name)

            elif student.has_outstanding_work():
                outstanding.append(student.full_name)

        return outstanding

    # === bulk operations ===

    async def release_assignments_parallel(self, assignment_names: list[str]) -> None:
        """
        Releases every assignment in `assignment_names` to every student concurrently.

        Each (assignment, student) pair runs as its own task on the event loop, with no ordering
        guarantee between pairs. The coroutine completes once every task has run.

        Raises:
            ExceptionGroup: If any release failed. Raised only after all releases have finished, so one
                failure never prevents the others from being applied.
        """

        async def release(student: Student, assignment_name: str) -> None:
            student.update_assignment_status(assignment_name)

        results = await asyncio.gather(
            *(
                release(student, assignment_name)
                for assignment_name in assignment_names
                for student in self._students
            ),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]

        if errors:
            raise ExceptionGroup(
                f"{len(errors)} of {len(results)} assignment releases failed", errors
            )

    def send_reminder(self, assignment_name: str) -> None:
        """
        Sends a final reminder for `assignment_name` and forces submission for every unfinished copy.

        Students without the assignment, or whose assignment is already graded, are skipped.

        Raises:
            ExceptionGroup: If scheduling failed for any student. Raised only after every student has been
                processed; a student whose scheduling failed keeps its previous status.
        """
        errors = []

        for student in self._students:
            try:
                student.force_submit(assignment_name, observer=self._observer)
            except Exception as e:
                errors.append(e)

        if errors:
            raise ExceptionGroup(
                f"{len(errors)} reminders for {assignment_name} failed", errors
            )
