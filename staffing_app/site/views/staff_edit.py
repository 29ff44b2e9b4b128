"""Server-rendered staff screen: filterable list plus create/edit form.

Exposes :class:`StaffEditView`. ``GET`` renders the department filter, the
filtered list and the draft form; ``POST`` saves the draft through the
service layer and redirects back (post/redirect/get).

Query parameters:
    - ``department`` – filter value; empty means all staff.
    - ``edit`` – id of the staff member loaded into the form (404 if
      unknown). List links add ``#staff-form`` so the browser scrolls the
      form header into view.

Form rows:
    ``departments`` and ``availablePositions`` are repeated inputs that
    always end in one blank row. The template's script appends a new blank
    row when the last one gets a value, mirroring
    :func:`staffing_app.editor.rows.edit_row`.

Context keys:
    - ``staff`` – filtered staff list.
    - ``department_options`` / ``selected_department`` – filter select.
    - ``positions`` / ``position_names`` – catalog used by the position
      selects; stored names missing from it still get their own option.
    - ``form`` – :class:`~staffing_app.forms.StaffDraftForm`.
    - ``department_rows`` / ``position_rows`` – draft rows with sentinel.
    - ``editing`` – staff member being edited, or ``None``.

UI strings are Japanese; internal documentation is English.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.urls import reverse
from django.views.generic import TemplateView

from staffing_app.editor.rows import (
    clean_departments,
    clean_positions,
    department_options,
    filter_by_department,
    with_sentinel,
)
from staffing_app.forms import StaffDraftForm
from staffing_app.models import Staff
from staffing_app.services.staff import (
    StaffPayloadError,
    create_staff,
    get_staff,
    list_positions,
    list_staff,
    update_staff,
)


def _page_url(department: str = "") -> str:
    url = reverse("site:staff_edit")
    if department:
        url += "?" + urlencode({"department": department})
    return url


class StaffEditView(TemplateView):
    """Staff list with department filter and a create/update form."""

    template_name = "site/staff_edit.html"

    def _editing(self, staff_id: Any) -> Staff | None:
        if not staff_id:
            return None
        try:
            return get_staff(staff_id)
        except Staff.DoesNotExist:
            raise Http404("スタッフが見つかりません。") from None

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        """Assemble list, filter and form context.

        Args:
            **kwargs: May carry a bound ``form`` and the ``editing`` member
                when re-rendering after a failed ``POST``.
        """
        ctx = super().get_context_data(**kwargs)
        params = self.request.POST if self.request.method == "POST" else self.request.GET
        department = params.get("department", "")

        staff = list_staff()
        positions = list_positions()
        form: StaffDraftForm | None = kwargs.get("form")

        if form is None:
            editing = self._editing(self.request.GET.get("edit"))
            if editing is not None:
                form = StaffDraftForm(initial={
                    "name": editing.name,
                    "experience": editing.experience,
                    "editing_id": str(editing.pk),
                })
                department_rows = with_sentinel(editing.departments)
                position_rows = with_sentinel(editing.available_positions)
            else:
                form = StaffDraftForm(initial={"experience": 0})
                department_rows = with_sentinel([])
                position_rows = with_sentinel([])
        else:
            editing = kwargs.get("editing")
            # re-render what was submitted, blanks collapsed into one trailing row
            department_rows = with_sentinel(clean_departments(form.data.getlist("departments")))
            position_rows = with_sentinel(clean_positions(form.data.getlist("availablePositions")))

        ctx.update({
            "staff": filter_by_department(staff, department),
            "department_options": department_options(staff),
            "selected_department": department,
            "positions": positions,
            "position_names": [p.name for p in positions],
            "form": form,
            "department_rows": department_rows,
            "position_rows": position_rows,
            "editing": editing,
        })
        return ctx

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        """Save the draft (``action=save``) or discard it (``action=clear``).

        Returns:
            Redirect back to the (filtered) page on success or clear,
            otherwise the page re-rendered with form errors.
        """
        department = request.POST.get("department", "")
        if request.POST.get("action") == "clear":
            return redirect(_page_url(department))

        form = StaffDraftForm(request.POST)
        editing = None
        if form.is_valid():
            editing_id = form.cleaned_data["editing_id"]
            editing = self._editing(editing_id)
            try:
                if editing is not None:
                    staff = update_staff(editing.pk, form.cleaned_data)
                    messages.success(request, f"{staff.name} を更新しました。")
                else:
                    staff = create_staff(form.cleaned_data)
                    messages.success(request, f"{staff.name} を登録しました。")
            except StaffPayloadError as exc:
                for field, errs in exc.errors.items():
                    for err in errs:
                        form.add_error(field if field in form.fields else None, err)
            else:
                return redirect(_page_url(department))
        else:
            editing_id = (request.POST.get("editing_id") or "").strip()
            if editing_id:
                try:
                    editing = get_staff(editing_id)
                except Staff.DoesNotExist:
                    editing = None

        messages.error(request, "入力内容を確認してください。")
        return self.render_to_response(self.get_context_data(form=form, editing=editing))
