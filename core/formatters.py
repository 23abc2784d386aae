# core/formatters.py

# text helpers shared by the demo output
# no model imports here; cli/formatters.py handles model objects

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    items = [str(item) for item in items]

    if not items:
        return ""

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return " and ".join(items)

    return ", ".join(items[:-1]) + ", and " + items[-1]


# === grade formatters ===


def format_grade(grade: float | None) -> str:
    if grade is None:
        return "[UNGRADED]"

    return f"{grade:.1f}"
