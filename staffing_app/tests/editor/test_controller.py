# file: staffing_app/tests/editor/test_controller.py
"""Tests for ``StaffEditor`` against an in-memory fake API.

Coverage:
* Mount loads staff and positions; one failing fetch does not block the other.
* Filtering and department options over loaded staff.
* Create scenario: cleaned payload, local append, draft reset.
* Update scenario: PUT with id, list re-fetch, draft reset.
* Failures leave state untouched and surface ``error``.
* Edit mode entry (sentinels, focus callback) and cancel.
"""

from __future__ import annotations

import asyncio
from typing import Any

from staffing_app.editor.client import StaffApiError
from staffing_app.editor.controller import (
    MSG_CREATE_FAILED,
    MSG_LOAD_STAFF_FAILED,
    MSG_LOAD_POSITIONS_FAILED,
    MSG_NAME_REQUIRED,
    MSG_UPDATE_FAILED,
    StaffEditor,
)
from staffing_app.editor.draft import StaffDraft
from staffing_app.editor.records import PositionOption, StaffRecord


# --- Fake API --------------------------------------------------------------


class FakeApi:
    """Records calls and serves staff from a list; ``fail`` names calls to break."""

    def __init__(self, staff: list[StaffRecord] | None = None, fail: set[str] | None = None) -> None:
        self.staff = list(staff or [])
        self.positions = [PositionOption(id="p1", name="採血"), PositionOption(id="p2", name="受付")]
        self.fail = fail or set()
        self.calls: list[tuple[str, Any]] = []

    def _check(self, name: str) -> None:
        if name in self.fail:
            raise StaffApiError(f"{name} failed", status_code=500)

    async def list_staff(self) -> list[StaffRecord]:
        self.calls.append(("list_staff", None))
        self._check("list_staff")
        return list(self.staff)

    async def list_positions(self) -> list[PositionOption]:
        self.calls.append(("list_positions", None))
        self._check("list_positions")
        return list(self.positions)

    async def create_staff(self, payload: dict[str, Any]) -> StaffRecord:
        self.calls.append(("create_staff", payload))
        self._check("create_staff")
        record = StaffRecord.from_json({"id": str(len(self.staff) + 100), **payload})
        self.staff.append(record)
        return record

    async def update_staff(self, staff_id: str, payload: dict[str, Any]) -> None:
        self.calls.append(("update_staff", {"id": staff_id, **payload}))
        self._check("update_staff")
        self.staff = [
            StaffRecord.from_json({"id": staff_id, **payload}) if s.id == staff_id else s
            for s in self.staff
        ]


def _mounted(api: FakeApi) -> StaffEditor:
    editor = StaffEditor(api)
    asyncio.run(editor.mount())
    return editor


SATO = StaffRecord(id="42", name="佐藤", departments=["検査"], available_positions=["受付"], experience=8)
SUZUKI = StaffRecord(id="43", name="鈴木", departments=["病理", "総務"], experience=1)


# --- Mount & filter --------------------------------------------------------


def test_mount_loads_staff_and_positions() -> None:
    editor = _mounted(FakeApi([SATO, SUZUKI]))
    assert editor.staff_list == [SATO, SUZUKI]
    assert editor.position_names == ["採血", "受付"]
    assert editor.error is None


def test_mount_failure_of_one_fetch_keeps_the_other() -> None:
    editor = _mounted(FakeApi([SATO], fail={"list_positions"}))
    assert editor.staff_list == [SATO]
    assert editor.position_options == []
    assert editor.error == MSG_LOAD_POSITIONS_FAILED


def test_filter_and_department_options() -> None:
    editor = _mounted(FakeApi([SATO, SUZUKI]))
    assert editor.department_options == ["検査", "病理", "総務"]
    editor.select_department("病理")
    assert editor.filtered_staff == [SUZUKI]
    editor.select_department("")
    assert editor.filtered_staff == [SATO, SUZUKI]


# --- Create ----------------------------------------------------------------


def test_create_scenario_appends_returned_record_and_resets() -> None:
    api = FakeApi([SATO])
    editor = _mounted(api)
    editor.set_name("田中")
    editor.edit_department(0, "病理")
    editor.edit_position(0, "採血")
    editor.set_experience("3")
    assert editor.draft.departments == ["病理", ""]

    assert asyncio.run(editor.submit()) is True

    assert api.calls[-1] == (
        "create_staff",
        {"name": "田中", "departments": ["病理"], "availablePositions": ["採血"], "experience": 3},
    )
    created = editor.staff_list[-1]
    assert created.name == "田中" and created.id is not None
    assert editor.draft == StaffDraft(name="", departments=[""], available_positions=[""], experience=0)
    assert editor.editing_id is None


def test_create_failure_changes_nothing_and_surfaces_error() -> None:
    editor = _mounted(FakeApi([SATO], fail={"create_staff"}))
    editor.set_name("田中")
    draft = editor.draft

    assert asyncio.run(editor.submit()) is False
    assert editor.staff_list == [SATO]
    assert editor.draft == draft
    assert editor.error == MSG_CREATE_FAILED


def test_blank_name_rejected_without_network_call() -> None:
    api = FakeApi()
    editor = _mounted(api)
    editor.set_name("  ")
    assert asyncio.run(editor.submit()) is False
    assert editor.error == MSG_NAME_REQUIRED
    assert not [c for c in api.calls if c[0] == "create_staff"]


# --- Update ----------------------------------------------------------------


def test_update_scenario_puts_and_refetches() -> None:
    saito = StaffRecord(id="42", name="斎藤", departments=["検査"], available_positions=["受付"], experience=8)
    api = FakeApi([saito, SUZUKI])
    editor = _mounted(api)
    editor.start_edit(saito)
    editor.set_name("佐藤")
    fetches_before = sum(1 for c in api.calls if c[0] == "list_staff")

    assert asyncio.run(editor.submit()) is True

    _, body = [c for c in api.calls if c[0] == "update_staff"][-1]
    assert body == {
        "id": "42", "name": "佐藤", "departments": ["検査"],
        "availablePositions": ["受付"], "experience": 8,
    }
    assert sum(1 for c in api.calls if c[0] == "list_staff") == fetches_before + 1
    assert [s.name for s in editor.staff_list] == ["佐藤", "鈴木"]
    assert editor.editing_id is None
    assert editor.draft == StaffDraft.empty()
    assert editor.error is None


def test_update_with_failed_refetch_keeps_stale_list() -> None:
    """The update succeeds, but the reload fails: old list stays, error is set."""
    api = FakeApi([SATO])
    editor = _mounted(api)
    editor.start_edit(SATO)
    editor.set_name("伊藤")
    api.fail = {"list_staff"}

    assert asyncio.run(editor.submit()) is True

    assert editor.staff_list == [SATO]
    assert editor.editing_id is None
    assert editor.draft == StaffDraft.empty()
    assert editor.error == MSG_LOAD_STAFF_FAILED


def test_update_failure_keeps_edit_mode() -> None:
    editor = _mounted(FakeApi([SATO], fail={"update_staff"}))
    editor.start_edit(SATO)
    editor.set_name("変更")

    assert asyncio.run(editor.submit()) is False
    assert editor.editing_id == "42"
    assert editor.draft.name == "変更"
    assert editor.staff_list == [SATO]
    assert editor.error == MSG_UPDATE_FAILED


# --- Edit mode -------------------------------------------------------------


def test_start_edit_seeds_sentinels_and_focuses_form() -> None:
    focused: list[bool] = []
    editor = StaffEditor(FakeApi(), on_focus_form=lambda: focused.append(True))

    editor.start_edit(SUZUKI)

    assert editor.editing_id == "43"
    assert editor.draft.departments == ["病理", "総務", ""]
    assert editor.draft.available_positions == [""]
    assert focused == [True]
    assert editor.can_cancel


def test_cancel_discards_draft_without_network() -> None:
    api = FakeApi([SATO])
    editor = StaffEditor(api)
    editor.start_edit(SATO)
    editor.set_name("変更")

    editor.cancel()

    assert editor.editing_id is None
    assert editor.draft == StaffDraft.empty()
    assert api.calls == []
    assert not editor.can_cancel
