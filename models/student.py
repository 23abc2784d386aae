# models/student.py

"""
Represents a student working through a set of assignments.

Stores the student's name and email alongside an ordered collection of `Assignment` records, keyed by
assignment name in the order each name was first referenced.

Includes functionality for:
- Releasing and grading assignments, with observer notifications for every status change
- Simulating asynchronous work: starting an assignment schedules an automatic submission, and
  submitting schedules an automatic random grade
- Reporting per-assignment status and the average grade

Notes:
- A student has one automatic-submission slot, shared by all assignments: starting work replaces it,
  and any submission cancels it. Grading timers are kept per assignment, so resubmitting or reminding
  one assignment never cancels the pending grade of another.
- Each timer is created before the status change it belongs to, so a scheduling failure leaves the
  assignment and the notification stream untouched.
- Each scheduled callback captures a generation number. A callback whose generation is stale, or that
  fires after the student has been withdrawn, does nothing.
"""

from __future__ import annotations

import itertools
import logging
import random
from typing import Callable

from core.scheduler import LoopScheduler, Scheduler, TimerHandle
from core.settings import GRADING_DELAY_SECONDS, MAX_GRADE, MIN_GRADE
from models.assignment import Assignment, AssignmentStatus
from models.observer import ConsoleObserver, Observer

logger = logging.getLogger(__name__)

NOT_ASSIGNED = "Hasn't been assigned"

_WORKING: tuple[str, ...] = ("working",)


def _grading_key(assignment_name: str) -> tuple[str, ...]:
    return ("grading", assignment_name)


class Student:

    def __init__(
        self,
        full_name: str,
        email: str,
        observer: Observer | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        delay: float = GRADING_DELAY_SECONDS,
    ):
        self._full_name: str = full_name
        self._email: str = email
        self._observer: Observer = observer or ConsoleObserver()
        self._scheduler: Scheduler = scheduler or LoopScheduler()
        self._rng: random.Random = rng or random.Random()
        self._delay: float = delay
        self._assignments: dict[str, Assignment] = {}
        self._timers: dict[tuple[str, ...], tuple[int, TimerHandle]] = {}
        self._generations = itertools.count(1)
        self._is_active: bool = True

    # === properties ===

    @property
    def full_name(self) -> str:
        return self._full_name

    @full_name.setter
    def full_name(self, full_name: str) -> None:
        self._full_name = full_name

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str) -> None:
        self._email = email

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def has_pending_transition(self) -> bool:
        return bool(self._timers)

    @property
    def assignments(self) -> dict[str, Assignment]:
        return self._assignments.copy()

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._full_name}, {self._email}, {self._is_active})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._full_name}, email: {self._email}"

    # === data accessors ===

    def find_assignment(self, assignment_name: str) -> Assignment | None:
        return self._assignments.get(assignment_name)

    def get_assignment_status(self, assignment_name: str) -> str:
        assignment = self._assignments.get(assignment_name)

        if assignment is None:
            return NOT_ASSIGNED

        if assignment.status is AssignmentStatus.PASSED:
            return "Pass"

        if assignment.status is AssignmentStatus.FAILED:
            return "Fail"

        return assignment.status.value

    def get_grade(self) -> float:
        """
        Returns the mean grade over graded assignments, or 0 if nothing has been graded yet.
        """
        grades = [a.grade for a in self._assignments.values() if a.grade is not None]

        if not grades:
            return 0

        return sum(grades) / len(grades)

    def has_outstanding_work(self) -> bool:
        return any(a.is_outstanding for a in self._assignments.values())

    # === data manipulators ===

    def update_assignment_status(
        self, assignment_name: str, grade: int | None = None
    ) -> None:
        """
        Releases an assignment on first reference and records a grade when one is given.

        Args:
            assignment_name (str): The assignment to update.
            grade (int | None): An optional grade. When present, the assignment moves to `passed` or
                `failed` and the observer is notified of the result.

        Notes:
            - An unknown assignment is created with status `released` and a `released` notification is
              sent before any pass/fail notification.
            - A known assignment with no grade supplied is left untouched.
        """
        assignment = self._assignments.get(assignment_name)

        if assignment is None:
            assignment = Assignment(assignment_name)
            self._assignments[assignment_name] = assignment
            self._notify(assignment_name, AssignmentStatus.RELEASED)

        elif grade is None:
            return

        if grade is not None:
            assignment.set_grade(grade)
            self._notify(assignment_name, assignment.status)

    def start_working(self, assignment_name: str) -> None:
        assignment = self._assignments.get(assignment_name)

        if assignment is None:
            return

        timer = self._start_timer(
            _WORKING, lambda: self.submit_assignment(assignment_name)
        )
        self._cancel_timer(_grading_key(assignment_name))

        assignment.status = AssignmentStatus.WORKING
        self._notify(assignment_name, AssignmentStatus.WORKING)

        self._install_timer(_WORKING, timer)

    def submit_assignment(self, assignment_name: str) -> None:
        assignment = self._assignments.get(assignment_name)

        if assignment is None:
            return

        key = _grading_key(assignment_name)
        timer = self._start_timer(key, lambda: self._grade_randomly(assignment_name))
        self._cancel_timer(_WORKING)

        assignment.status = AssignmentStatus.SUBMITTED
        self._notify(assignment_name, AssignmentStatus.SUBMITTED)

        self._install_timer(key, timer)

    def force_submit(
        self, assignment_name: str, observer: Observer | None = None
    ) -> bool:
        """
        Escalates an unfinished assignment with a final reminder and submits it immediately.

        Args:
            assignment_name (str): The assignment to escalate.
            observer (Observer | None): Receives the escalation notifications instead of the student's own
                observer, if given.

        Returns:
            True if the assignment was escalated, False if it does not exist or is already graded.

        Notes:
            - The pending automatic submission is cancelled before the status changes, so the assignment
              is submitted exactly once.
            - If the grading timer cannot be scheduled, the error propagates before any status change or
              notification.
        """
        assignment = self._assignments.get(assignment_name)

        if assignment is None or assignment.status.is_terminal:
            return False

        observer = observer or self._observer
        key = _grading_key(assignment_name)
        timer = self._start_timer(key, lambda: self._grade_randomly(assignment_name))

        assignment.status = AssignmentStatus.FINAL_REMINDER
        observer.notify(
            self._full_name, assignment_name, AssignmentStatus.FINAL_REMINDER.value
        )

        self._cancel_timer(_WORKING)

        assignment.status = AssignmentStatus.SUBMITTED
        observer.notify(
            self._full_name, assignment_name, AssignmentStatus.SUBMITTED.value
        )

        self._install_timer(key, timer)

        return True

    # --- enrollment ---

    def withdraw(self) -> None:
        for key in list(self._timers):
            self._cancel_timer(key)
        self._is_active = False

    def enroll(self) -> None:
        self._is_active = True

    # === helpers ===

    def _notify(self, assignment_name: str, status: AssignmentStatus) -> None:
        self._observer.notify(self._full_name, assignment_name, status.value)

    def _grade_randomly(self, assignment_name: str) -> None:
        grade = self._rng.randint(MIN_GRADE, MAX_GRADE)
        self.update_assignment_status(assignment_name, grade)

    # --- timers ---

    def _start_timer(
        self, key: tuple[str, ...], callback: Callable[[], None]
    ) -> tuple[int, TimerHandle]:
        """
        Schedules `callback` without registering it in a slot yet.

        Callers commit their status change only after this returns, then pass the result to
        `_install_timer()`. A scheduler failure therefore leaves the student untouched.
        """
        generation = next(self._generations)

        def fire() -> None:
            entry = self._timers.get(key)

            if entry is None or entry[0] != generation or not self._is_active:
                logger.debug(
                    "dropping stale %s transition for %s", key[0], self._full_name
                )
                return

            del self._timers[key]
            callback()

        handle = self._scheduler.call_later(self._delay, fire)
        logger.debug(
            "scheduled %s transition for %s in %.3fs",
            key[0],
            self._full_name,
            self._delay,
        )
        return generation, handle

    def _install_timer(
        self, key: tuple[str, ...], timer: tuple[int, TimerHandle]
    ) -> None:
        self._cancel_timer(key)
        self._timers[key] = timer

    def _cancel_timer(self, key: tuple[str, ...]) -> None:
        entry = self._timers.pop(key, None)

        if entry is not None:
            entry[1].cancel()
            logger.debug("cancelled %s transition for %s", key[0], self._full_name)
