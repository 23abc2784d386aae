# cli/formatters.py

from textwrap import dedent

import core.formatters as formatters
from models.assignment import Assignment
from models.class_list import ClassList
from models.student import Student

# === Assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    return f"{assignment.name:<12} | {assignment.status.value:<15} | {formatters.format_grade(assignment.grade)}"


# === Student formatters ===


def format_student_oneline(student: Student) -> str:
    status = "[WITHDRAWN]" if not student.is_active else ""
    return f"{student.full_name:<20} {status} | {student.email}"


def format_student_multiline(student: Student) -> str:
    assignments = "\n".join(
        f"    {format_assignment_oneline(a)}" for a in student.assignments.values()
    )
    return dedent(
        f"""\
        {format_student_oneline(student)}
        ... Average: {formatters.format_grade(student.get_grade())}
        ... Assignments:
        """
    ) + (assignments or "    [NONE]")


# === ClassList formatters ===


def format_class_summary(class_list: ClassList) -> str:
    return "\n\n".join(format_student_multiline(s) for s in class_list.students)
