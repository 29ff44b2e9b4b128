"""Staff and position persistence helpers.

Both the JSON API and the server-rendered page go through these functions so
validation and cleaning happen in one place.

Errors:
    - :class:`StaffPayloadError` for invalid payloads (mapped to HTTP 400 or
      form errors by callers).
    - :class:`~staffing_app.models.Staff.DoesNotExist` for unknown ids.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import transaction

from staffing_app.forms import StaffPayloadForm
from staffing_app.models import Position, Staff

logger = logging.getLogger(__name__)

# Largest primary key a ``BigAutoField`` can hold.
BIGINT_MAX: int = 2**63 - 1


class StaffPayloadError(ValueError):
    """Payload failed validation.

    Attributes:
        errors: ``{field: [message, ...]}`` with Japanese messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"invalid staff payload: {errors}")
        self.errors = errors


def _validated(data: Mapping[str, Any]) -> dict[str, Any]:
    form = StaffPayloadForm(data=data)
    if not form.is_valid():
        errors = form.errors_as_dict()
        logger.warning("Rejected staff payload: %s", errors)
        raise StaffPayloadError(errors)
    return form.cleaned_data


def _apply(staff: Staff, cd: Mapping[str, Any]) -> Staff:
    staff.name = cd["name"]
    staff.departments = cd["departments"]
    staff.available_positions = cd["availablePositions"]
    staff.experience = cd["experience"]
    return staff


def list_staff() -> list[Staff]:
    """All staff members in creation order."""
    return list(Staff.objects.order_by("id"))


def list_positions() -> list[Position]:
    """The position catalog ordered by name."""
    return list(Position.objects.order_by("name"))


def get_staff(staff_id: Any) -> Staff:
    """Return the staff member with ``staff_id`` (string or int).

    Raises:
        Staff.DoesNotExist: If the id is not numeric or unknown.
    """
    try:
        pk = int(str(staff_id).strip())
    except ValueError:
        raise Staff.DoesNotExist(f"invalid staff id {staff_id!r}") from None
    if not 0 < pk <= BIGINT_MAX:
        raise Staff.DoesNotExist(f"staff id {staff_id!r} out of range")
    return Staff.objects.get(pk=pk)


def create_staff(data: Mapping[str, Any]) -> Staff:
    """Validate ``data`` and create a staff member."""
    cd = _validated(data)
    staff = _apply(Staff(), cd)
    staff.save()
    logger.info("Created staff id=%s name=%s", staff.pk, staff.name)
    return staff


@transaction.atomic
def update_staff(staff_id: Any, data: Mapping[str, Any]) -> Staff:
    """Replace all editable fields of an existing staff member.

    Raises:
        StaffPayloadError: If ``staff_id`` is missing or ``data`` is invalid.
        Staff.DoesNotExist: If no such staff member exists.
    """
    if staff_id is None or str(staff_id).strip() == "":
        raise StaffPayloadError({"id": ["IDを指定してください。"]})
    cd = _validated(data)
    staff = get_staff(staff_id)
    _apply(staff, cd).save()
    logger.info("Updated staff id=%s name=%s", staff.pk, staff.name)
    return staff
