"""JSON endpoints for staff records and the position catalog.

Exposes :class:`StaffApiView` (``GET``/``POST``/``PUT`` on ``/api/staff``)
and :class:`PositionsApiView` (``GET`` on ``/api/positions``).

Status codes:
    - ``200`` with the record (or list) on success, including create.
    - ``400`` ``{"error": ...}`` for malformed JSON or a missing id, and
      ``{"errors": {field: [...]}}`` for validation failures.
    - ``404`` ``{"error": ...}`` when updating an unknown id.
    - ``405`` for any other method.

CSRF is not enforced here; the API carries no session-bound state.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from staffing_app.models import Staff
from staffing_app.services.staff import (
    StaffPayloadError,
    create_staff,
    list_positions,
    list_staff,
    update_staff,
)


class BadJson(ValueError):
    """Request body is not a JSON object."""


def _json_body(request: HttpRequest) -> dict[str, Any]:
    try:
        data = json.loads(request.body or b"")
    except (ValueError, UnicodeDecodeError) as exc:
        raise BadJson("JSONの形式が正しくありません。") from exc
    if not isinstance(data, dict):
        raise BadJson("JSONオブジェクトを送信してください。")
    return data


def _error(message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": message}, status=status)


@method_decorator(csrf_exempt, name="dispatch")
class StaffApiView(View):
    """Staff store: list, create and full-replace update."""

    http_method_names = ["get", "post", "put"]

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        """Return every staff member."""
        return JsonResponse([s.to_payload() for s in list_staff()], safe=False)

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        """Create a staff member and return it with its new id."""
        try:
            staff = create_staff(_json_body(request))
        except BadJson as exc:
            return _error(str(exc), 400)
        except StaffPayloadError as exc:
            return JsonResponse({"errors": exc.errors}, status=400)
        return JsonResponse(staff.to_payload())

    def put(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        """Replace the staff member named by ``id`` in the body."""
        try:
            data = _json_body(request)
            staff = update_staff(data.get("id"), data)
        except BadJson as exc:
            return _error(str(exc), 400)
        except StaffPayloadError as exc:
            if set(exc.errors) == {"id"}:
                return _error(exc.errors["id"][0], 400)
            return JsonResponse({"errors": exc.errors}, status=400)
        except Staff.DoesNotExist:
            return _error("指定されたスタッフが見つかりません。", 404)
        return JsonResponse(staff.to_payload())


class PositionsApiView(View):
    """Read-only position catalog."""

    http_method_names = ["get"]

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        return JsonResponse([p.to_payload() for p in list_positions()], safe=False)
