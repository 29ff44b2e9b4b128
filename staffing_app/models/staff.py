"""Staff members with department tags, eligible positions and experience.

Defines the :class:`Staff` model behind ``/api/staff``. Departments and
available positions are stored as JSON lists; blank entries are removed on
save so persisted lists never contain them. All user-facing labels remain
Japanese.
"""

from __future__ import annotations

from typing import Any

from django.core.exceptions import ValidationError
from django.db import models

from staffing_app.editor.rows import clean_departments, clean_positions


def validate_string_list(value: Any) -> None:
    """Reject anything but a list of strings."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError("文字列のリストを指定してください。")


# --- Model -----------------------------------------------------------------


class Staff(models.Model):
    """Staff member who can work in one or more departments.

    Notes:
        - ``departments`` are free-text tags; the screen derives its filter
          options from them.
        - ``available_positions`` hold :class:`~staffing_app.models.Position`
          names; they are not foreign keys.
        - ``experience`` is the number of years, never negative.
    """

    name = models.CharField("スタッフ名", max_length=255)
    departments = models.JSONField(
        "配属先", default=list, blank=True, validators=[validate_string_list]
    )
    available_positions = models.JSONField(
        "配置可能ポジション", default=list, blank=True, validators=[validate_string_list]
    )
    experience = models.PositiveIntegerField("経験年数", default=0)

    created_at = models.DateTimeField("作成日時", auto_now_add=True)
    updated_at = models.DateTimeField("更新日時", auto_now=True)

    class Meta:
        verbose_name = "スタッフ"
        verbose_name_plural = "スタッフ一覧"
        ordering = ("id",)

    def clean(self) -> None:
        """Require a non-blank name.

        Raises:
            ValidationError: If ``name`` is only whitespace.
        """
        if not (self.name or "").strip():
            raise ValidationError({"name": "スタッフ名を入力してください。"})

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Persist with blank list entries removed (departments also trimmed)."""
        self.departments = clean_departments(self.departments or [])
        self.available_positions = clean_positions(self.available_positions or [])
        super().save(*args, **kwargs)

    def to_payload(self) -> dict[str, Any]:
        """JSON shape served by ``/api/staff`` (camelCase keys, string id)."""
        return {
            "id": str(self.pk),
            "name": self.name,
            "departments": list(self.departments or []),
            "availablePositions": list(self.available_positions or []),
            "experience": self.experience,
        }

    def __str__(self) -> str:  # pragma: no cover - trivial
        depts = ", ".join(self.departments or [])
        return f"{self.name} ({depts})" if depts else self.name
