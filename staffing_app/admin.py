# file: staffing_app/admin.py
"""Django admin configuration for staff members and the position catalog.

Internal documentation (docstrings, comments) is in **English**. All
user-facing labels/descriptions remain **Japanese**.
"""

from __future__ import annotations

from typing import Any

from django.contrib import admin

from .editor.rows import department_options, filter_by_department
from .models import Position, Staff


# ------------------------------------------------------------
# List filters
# ------------------------------------------------------------
class DepartmentFilter(admin.SimpleListFilter):
    """Filter staff by one department tag.

    Evaluated in Python: SQLite has no containment lookup for JSON lists.
    """

    title = "配属先"
    parameter_name = "department"

    def lookups(self, request: Any, model_admin: Any) -> list[tuple[str, str]]:
        return [(d, d) for d in department_options(Staff.objects.only("departments"))]

    def queryset(self, request: Any, queryset: Any) -> Any:
        value = self.value()
        if not value:
            return queryset
        ids = [s.pk for s in filter_by_department(list(queryset.only("id", "departments")), value)]
        return queryset.filter(pk__in=ids)


# ------------------------------------------------------------
# Staff
# ------------------------------------------------------------
@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    """Admin for staff entries with a department filter."""

    list_display = ("name", "departments_display", "positions_display", "experience", "updated_at")
    list_filter = (DepartmentFilter,)
    search_fields = ("name",)
    ordering = ("id",)
    readonly_fields = ("created_at", "updated_at")

    @admin.display(description="配属先")
    def departments_display(self, obj: Staff) -> str:
        return ", ".join(obj.departments or []) or "—"

    @admin.display(description="配置可能ポジション")
    def positions_display(self, obj: Staff) -> str:
        return ", ".join(obj.available_positions or []) or "—"


# ------------------------------------------------------------
# Positions
# ------------------------------------------------------------
@admin.register(Position)
class PositionAdmin(admin.ModelAdmin):
    list_display = ("name", "departments_display")
    search_fields = ("name",)
    ordering = ("name",)

    @admin.display(description="関連部門")
    def departments_display(self, obj: Position) -> str:
        return ", ".join(obj.departments or []) or "—"
