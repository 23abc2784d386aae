# cli/main.py

"""
Demo runner for the assignment tracker.

Builds a small class, releases assignments to everyone at once, lets students work, escalates an
assignment with a final reminder, and prints a summary once grading has settled.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

import cli.formatters as model_formatters
import core.formatters as formatters
from core.scheduler import LoopScheduler, ManualScheduler, Scheduler
from core.settings import GRADING_DELAY_SECONDS
from models.class_list import ClassList
from models.observer import ConsoleObserver
from models.student import Student

DEFAULT_STUDENTS: list[tuple[str, str]] = [
    ("Ana Lopez", "alopez@mmm.edu"),
    ("Sean Cameron", "scameron@mmm.edu"),
    ("Paul Atreides", "patreides@mmm.edu"),
]

DEFAULT_ASSIGNMENTS: list[str] = ["HW1", "HW2"]


def build_class_list(
    scheduler: Scheduler,
    rng: random.Random,
    delay: float,
    students: list[tuple[str, str]] = DEFAULT_STUDENTS,
) -> ClassList:
    observer = ConsoleObserver()
    class_list = ClassList(observer)

    for full_name, email in students:
        class_list.add_student(
            Student(
                full_name,
                email,
                observer=observer,
                scheduler=scheduler,
                rng=rng,
                delay=delay,
            )
        )

    return class_list


async def simulate_term(
    class_list: ClassList,
    scheduler: Scheduler,
    delay: float,
    assignment_names: list[str] = DEFAULT_ASSIGNMENTS,
) -> None:
    """
    Drives the class through one round of work on `assignment_names`.

    Notes:
        - Every student but the last starts the first assignment; a final reminder is sent halfway
          through the working window, which forces everyone unfinished to submit.
        - The first student also works on the second assignment and is left to submit on their own.
    """
    await class_list.release_assignments_parallel(assignment_names)

    first, *rest = assignment_names
    students = class_list.students

    for student in students[:-1]:
        student.start_working(first)

    await _wait(scheduler, delay / 2)

    outstanding = class_list.find_outstanding_assignments(first)
    print(f"\nStill outstanding on {first}: {formatters.format_list_with_and(outstanding)}")

    class_list.send_reminder(first)
    await _wait(scheduler, delay * 2)

    if rest and students:
        students[0].start_working(rest[0])
        await _wait(scheduler, delay * 3)


async def _wait(scheduler: Scheduler, seconds: float) -> None:
    if isinstance(scheduler, ManualScheduler):
        scheduler.advance(seconds)
    else:
        await asyncio.sleep(seconds)


def run_demo(
    seed: int | None = None,
    delay: float = GRADING_DELAY_SECONDS,
    instant: bool = False,
) -> ClassList:
    """
    Runs the full demo and prints the notification stream followed by a class summary.

    Args:
        seed (int | None): Seed for the random grade generator; None for nondeterministic grades.
        delay (float): Seconds between scheduled transitions.
        instant (bool): Use a virtual clock instead of real time.

    Returns:
        The `ClassList` after grading has settled.
    """
    rng = random.Random(seed)
    scheduler: Scheduler = ManualScheduler() if instant else LoopScheduler()

    print(formatters.format_banner_text("ASSIGNMENT TRACKER"))

    async def run() -> ClassList:
        class_list = build_class_list(scheduler, rng, delay)
        await simulate_term(class_list, scheduler, delay)
        return class_list

    class_list = asyncio.run(run())

    print(f"\n{formatters.format_banner_text('SUMMARY')}")
    print(model_formatters.format_class_summary(class_list))

    return class_list


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="assignment-tracker",
        description="Simulate a class working through assignments with delayed grading.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random grades")
    parser.add_argument(
        "--delay",
        type=float,
        default=GRADING_DELAY_SECONDS,
        help="seconds between scheduled transitions",
    )
    parser.add_argument(
        "--instant", action="store_true", help="use a virtual clock instead of waiting"
    )
    parser.add_argument("--verbose", action="store_true", help="log timer activity")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    run_demo(seed=args.seed, delay=args.delay, instant=args.instant)


if __name__ == "__main__":
    main()
