# models/observer.py

"""
Notification of assignment status changes.

An `Observer` is any object with a `notify(student_name, assignment_name, status)` method. Students and
class lists receive one at construction and call it whenever an assignment changes state.

`ConsoleObserver` renders each notification as a single line of text and prints it to a stream
(stdout unless another stream is supplied).
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

_TEMPLATES: dict[str, str] = {
    "passed": "{student} has passed {assignment}",
    "failed": "{student} has failed {assignment}",
    "working": "{student} is working on {assignment}.",
    "submitted": "{student} has submitted {assignment}.",
    "released": "{student}, {assignment} has been released.",
    "final reminder": "{student} has received a final reminder for {assignment}.",
}

_FALLBACK_TEMPLATE = "{student}, {assignment} has {status}."

PREFIX = "Observer → "


class Observer(Protocol):
    def notify(self, student_name: str, assignment_name: str, status: str) -> None: ...


def format_notification(student_name: str, assignment_name: str, status: str) -> str:
    # str() so AssignmentStatus members and plain strings format alike
    status = str(status)
    template = _TEMPLATES.get(status, _FALLBACK_TEMPLATE)
    body = template.format(
        student=student_name, assignment=assignment_name, status=status
    )
    return f"{PREFIX}{body}"


class ConsoleObserver:

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def notify(self, student_name: str, assignment_name: str, status: str) -> None:
        print(
            format_notification(student_name, assignment_name, status),
            file=self._stream or sys.stdout,
        )
