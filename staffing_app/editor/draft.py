"""Editable draft state behind the staff form.

:class:`StaffDraft` is an immutable value; every edit returns a new draft so
the controller can swap state atomically. Both list fields always carry one
trailing sentinel row (see :mod:`staffing_app.editor.rows`).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .records import StaffRecord
from .rows import SENTINEL, clean_departments, clean_positions, edit_row, with_sentinel


def coerce_experience(raw: Any, previous: int = 0) -> int:
    """Coerce raw input for the experience field to an integer.

    Blank input counts as ``0``. Input that is not a number keeps
    ``previous``. Fractions are truncated toward zero. Bounds are not checked
    here; the server rejects negative values.
    """
    if isinstance(raw, bool):
        return previous
    if isinstance(raw, int):
        return raw
    text = "" if raw is None else str(raw).strip()
    if not text:
        return 0
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return previous


@dataclass(frozen=True)
class StaffDraft:
    """In-progress form values for creating or editing a staff member."""

    name: str = ""
    departments: list[str] = field(default_factory=lambda: [SENTINEL])
    available_positions: list[str] = field(default_factory=lambda: [SENTINEL])
    experience: int = 0

    @classmethod
    def empty(cls) -> "StaffDraft":
        return cls()

    @classmethod
    def from_record(cls, record: StaffRecord) -> "StaffDraft":
        """Load ``record`` for editing, re-adding the sentinel rows."""
        return cls(
            name=record.name,
            departments=with_sentinel(record.departments),
            available_positions=with_sentinel(record.available_positions),
            experience=record.experience,
        )

    def with_name(self, name: str) -> "StaffDraft":
        return replace(self, name=name)

    def with_experience(self, raw: Any) -> "StaffDraft":
        return replace(self, experience=coerce_experience(raw, self.experience))

    def with_department(self, index: int, value: str) -> "StaffDraft":
        return replace(self, departments=edit_row(self.departments, index, value))

    def with_position(self, index: int, value: str) -> "StaffDraft":
        return replace(self, available_positions=edit_row(self.available_positions, index, value))

    def to_payload(self) -> dict[str, Any]:
        """Cleaned API payload: blanks stripped, no sentinel rows."""
        return {
            "name": self.name,
            "departments": clean_departments(self.departments),
            "availablePositions": clean_positions(self.available_positions),
            "experience": self.experience,
        }
