"""Framework-agnostic staff editor: row helpers, draft state, API client, controller."""

from .client import StaffApiClient, StaffApiError
from .controller import StaffEditor
from .draft import StaffDraft
from .records import PositionOption, StaffRecord
from .rows import (
    clean_departments,
    clean_positions,
    department_options,
    edit_row,
    filter_by_department,
    is_blank,
    with_sentinel,
)

__all__ = [
    "StaffApiClient", "StaffApiError",
    "StaffEditor", "StaffDraft",
    "PositionOption", "StaffRecord",
    "clean_departments", "clean_positions", "department_options",
    "edit_row", "filter_by_department", "is_blank", "with_sentinel",
]
