"""Position catalog entries that staff members can be assigned to.

Defines :class:`Position`, read-only reference data for the staff screen.
Each position may list the departments it is associated with. User-facing
labels remain Japanese.
"""

from __future__ import annotations

from typing import Any

from django.db import models

from staffing_app.editor.rows import clean_departments


# --- Model -----------------------------------------------------------------


class Position(models.Model):
    """Named role from the catalog (e.g. 採血, 受付).

    Notes:
        - ``name`` is unique; staff records reference positions by name.
        - ``departments`` is a JSON list of department names, trimmed and
          de-blanked on save.
    """

    name = models.CharField("ポジション名", max_length=100, unique=True)
    departments = models.JSONField("関連部門", default=list, blank=True)

    class Meta:
        verbose_name = "ポジション"
        verbose_name_plural = "ポジション一覧"
        ordering = ("name",)

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Persist the position with a cleaned ``departments`` list."""
        self.departments = clean_departments(self.departments or [])
        super().save(*args, **kwargs)

    def to_payload(self) -> dict[str, Any]:
        """JSON shape served by ``/api/positions``."""
        return {"id": str(self.pk), "name": self.name, "departments": list(self.departments or [])}

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name
