"""Pure helpers for dynamic form rows and client-side list filtering.

The draft form keeps each multi-value field as a list that always ends in one
blank *sentinel* row. Editing that last row with a non-blank value appends a
fresh sentinel; editing any other row only replaces its value. Cleaning before
submit removes blanks anywhere in the list.

Nothing here touches Django or the network, so both the page view and the
async controller share these functions.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Sequence, TypeVar

SENTINEL: str = ""


class HasDepartments(Protocol):
    departments: Sequence[str]


T = TypeVar("T", bound=HasDepartments)


def is_blank(value: str | None) -> bool:
    """Return ``True`` for ``None``, empty or whitespace-only strings."""
    return value is None or value.strip() == ""


def edit_row(rows: Sequence[str], index: int, value: str) -> list[str]:
    """Return a copy of ``rows`` with ``rows[index]`` replaced by ``value``.

    When ``index`` addresses the last row and ``value`` is non-blank, a new
    sentinel row is appended so the list keeps exactly one trailing blank
    slot. Rows are never removed.

    Raises:
        IndexError: If ``index`` is outside ``rows``.
    """
    new_rows = list(rows)
    new_rows[index] = value
    # negative indexes address the same row as their positive counterpart
    if index % len(new_rows) == len(new_rows) - 1 and not is_blank(value):
        new_rows.append(SENTINEL)
    return new_rows


def with_sentinel(values: Iterable[str] | None) -> list[str]:
    """Return ``values`` followed by one sentinel row (``[""]`` when empty)."""
    return [*(values or ()), SENTINEL]


def clean_departments(rows: Iterable[str]) -> list[str]:
    """Trim department names and drop blank ones, keeping order."""
    return [d for d in (r.strip() for r in rows) if d]


def clean_positions(rows: Iterable[str]) -> list[str]:
    """Drop blank position names, keeping order and the original spelling."""
    return [p for p in rows if not is_blank(p)]


def department_options(staff: Iterable[Any]) -> list[str]:
    """Distinct departments across ``staff`` in first-seen order.

    Works with model instances, :class:`~staffing_app.editor.records.StaffRecord`
    or anything exposing a ``departments`` sequence.
    """
    seen: dict[str, None] = {}
    for member in staff:
        for dept in member.departments or ():
            seen.setdefault(dept, None)
    return list(seen)


def filter_by_department(staff: Sequence[T], department: str | None) -> list[T]:
    """Return members whose departments include ``department``.

    An empty (or ``None``) filter value means "all" and returns every member.
    """
    if not department:
        return list(staff)
    return [m for m in staff if department in (m.departments or ())]
