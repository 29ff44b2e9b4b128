"""Forms validating staff payloads from the JSON API and the staff page.

Internal documentation is **English**; all user-facing messages stay
**Japanese**.

Highlights
----------
- ``StringListField`` accepts a list of strings (JSON array or repeated form
  inputs) and runs a row cleaner over it, so blank sentinel rows never reach
  the database.
- ``StaffPayloadForm`` validates ``/api/staff`` bodies (camelCase keys).
- ``StaffDraftForm`` adds the hidden ``editing_id`` used by the page.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from django import forms

from staffing_app.editor.rows import clean_departments, clean_positions

# Upper bound of ``PositiveIntegerField`` on every supported backend.
EXPERIENCE_MAX: int = 2147483647


class RowsInput(forms.Widget):
    """Widget reading every value submitted under one name.

    Handles both ``QueryDict`` (``getlist``) and plain dicts decoded from
    JSON. Rendering is done by the page template row by row.
    """

    def value_from_datadict(self, data: Any, files: Any, name: str) -> Any:
        if hasattr(data, "getlist"):
            return data.getlist(name)
        return data.get(name)

    def value_omitted_from_data(self, data: Any, files: Any, name: str) -> bool:
        return name not in data


class StringListField(forms.Field):
    """List of strings cleaned by ``cleaner`` (blank rows removed)."""

    widget = RowsInput
    default_error_messages = {"invalid": "文字列のリストを指定してください。"}

    def __init__(self, *, cleaner: Callable[[Iterable[str]], list[str]], **kwargs: Any) -> None:
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)
        self.cleaner = cleaner

    def to_python(self, value: Any) -> list[str]:
        if value is None or value == "":
            return []
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
        return self.cleaner(value)


class StaffPayloadForm(forms.Form):
    """Validate a staff payload; only ``name`` and ``experience`` are required."""

    name = forms.CharField(
        label="スタッフ名",
        max_length=255,
        error_messages={"required": "スタッフ名を入力してください。"},
    )
    experience = forms.IntegerField(
        label="経験年数",
        min_value=0,
        max_value=EXPERIENCE_MAX,
        error_messages={
            "required": "経験年数を入力してください。",
            "invalid": "経験年数は整数で入力してください。",
            "min_value": "経験年数は0以上で入力してください。",
            "max_value": "経験年数が大きすぎます。",
        },
    )
    departments = StringListField(label="配属先", cleaner=clean_departments)
    availablePositions = StringListField(label="配置可能ポジション", cleaner=clean_positions)

    def errors_as_dict(self) -> dict[str, list[str]]:
        """Return field errors as plain strings (JSON-friendly)."""
        return {field: [str(e) for e in errs] for field, errs in self.errors.items()}


class StaffDraftForm(StaffPayloadForm):
    """Page form: payload fields plus the id of the record being edited."""

    editing_id = forms.CharField(required=False, widget=forms.HiddenInput)

    def clean_editing_id(self) -> str | None:
        return (self.cleaned_data.get("editing_id") or "").strip() or None
