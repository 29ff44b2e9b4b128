"""Plain records for staff and position data exchanged with the JSON API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _str_list(raw: Any) -> list[str]:
    if not raw:
        return []
    return [str(v) for v in raw]


@dataclass(frozen=True)
class StaffRecord:
    """A persisted staff member as returned by ``/api/staff``."""

    name: str
    departments: list[str] = field(default_factory=list)
    available_positions: list[str] = field(default_factory=list)
    experience: int = 0
    id: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "StaffRecord":
        """Build a record from an API payload (camelCase keys)."""
        raw_id = data.get("id")
        return cls(
            id=None if raw_id is None else str(raw_id),
            name=str(data.get("name") or ""),
            departments=_str_list(data.get("departments")),
            available_positions=_str_list(data.get("availablePositions")),
            experience=int(data.get("experience") or 0),
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize back to the API shape; ``id`` only when present."""
        payload: dict[str, Any] = {
            "name": self.name,
            "departments": list(self.departments),
            "availablePositions": list(self.available_positions),
            "experience": self.experience,
        }
        if self.id is not None:
            payload = {"id": self.id, **payload}
        return payload


@dataclass(frozen=True)
class PositionOption:
    """Catalog entry from ``/api/positions``; read-only for the editor."""

    id: str
    name: str
    departments: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PositionOption":
        return cls(
            id=str(data.get("id")),
            name=str(data.get("name") or ""),
            departments=_str_list(data.get("departments")),
        )
