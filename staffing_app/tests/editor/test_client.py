# file: staffing_app/tests/editor/test_client.py
"""Tests for ``StaffApiClient`` using ``httpx.MockTransport``.

Coverage:
* Decoding of staff and position lists.
* Create/Update request shape (method, path, JSON body).
* Non-2xx responses, transport failures and malformed bodies raised as
  ``StaffApiError``.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable

import httpx
import pytest

from staffing_app.editor.client import StaffApiClient, StaffApiError
from staffing_app.editor.controller import MSG_LOAD_STAFF_FAILED, StaffEditor
from staffing_app.editor.records import PositionOption, StaffRecord


# --- Helpers ---------------------------------------------------------------


def _run(handler: Callable[[httpx.Request], httpx.Response], call: Callable[[StaffApiClient], Any]) -> Any:
    """Run ``call`` against a client whose transport is ``handler``."""

    async def go() -> Any:
        async with StaffApiClient("http://api.test", transport=httpx.MockTransport(handler)) as api:
            return await call(api)

    return asyncio.run(go())


# --- Reads -----------------------------------------------------------------


def test_list_staff_decodes_records() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/api/staff"
        return httpx.Response(200, json=[
            {"id": 1, "name": "田中", "departments": ["病理"], "availablePositions": ["採血"], "experience": 3},
        ])

    records = _run(handler, lambda api: api.list_staff())
    assert records == [
        StaffRecord(id="1", name="田中", departments=["病理"], available_positions=["採血"], experience=3)
    ]


def test_list_positions_tolerates_missing_departments() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/positions"
        return httpx.Response(200, json=[{"id": "p1", "name": "採血"}])

    assert _run(handler, lambda api: api.list_positions()) == [PositionOption(id="p1", name="採血")]


# --- Writes ----------------------------------------------------------------


def test_create_staff_posts_payload_and_returns_record() -> None:
    seen: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "9", **seen["body"]})

    payload = {"name": "田中", "departments": ["病理"], "availablePositions": ["採血"], "experience": 3}
    record = _run(handler, lambda api: api.create_staff(payload))
    assert seen == {"method": "POST", "body": payload}
    assert record.id == "9"


def test_update_staff_puts_id_with_payload() -> None:
    seen: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(200)

    _run(handler, lambda api: api.update_staff("42", {"name": "佐藤"}))
    assert seen == {"method": "PUT", "body": {"id": "42", "name": "佐藤"}}


# --- Errors ----------------------------------------------------------------


def test_non_success_status_raises_with_detail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"errors": {"name": ["スタッフ名を入力してください。"]}})

    with pytest.raises(StaffApiError) as exc:
        _run(handler, lambda api: api.create_staff({"name": ""}))
    assert exc.value.status_code == 400
    assert exc.value.detail == {"name": ["スタッフ名を入力してください。"]}


def test_transport_error_raises_without_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StaffApiError) as exc:
        _run(handler, lambda api: api.list_staff())
    assert exc.value.status_code is None


@pytest.mark.parametrize(
    "body",
    [
        {"unexpected": "object"},
        ["not-a-record"],
        [{"id": 1, "name": "田中", "experience": "many"}],
    ],
)
def test_unexpected_staff_body_raises(body: Any) -> None:
    """A 2xx body that is not a list of staff objects is an API error."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(StaffApiError) as exc:
        _run(handler, lambda api: api.list_staff())
    assert exc.value.status_code is None


def test_unexpected_positions_body_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"positions": []})

    with pytest.raises(StaffApiError):
        _run(handler, lambda api: api.list_positions())


def test_mount_surfaces_malformed_staff_body() -> None:
    """The editor reports a malformed list instead of crashing."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/staff":
            return httpx.Response(200, json={"unexpected": "object"})
        return httpx.Response(200, json=[{"id": "p1", "name": "採血"}])

    async def go() -> StaffEditor:
        async with StaffApiClient("http://api.test", transport=httpx.MockTransport(handler)) as api:
            editor = StaffEditor(api)
            await editor.mount()
            return editor

    editor = asyncio.run(go())
    assert editor.staff_list == []
    assert editor.position_names == ["採血"]
    assert editor.error == MSG_LOAD_STAFF_FAILED
