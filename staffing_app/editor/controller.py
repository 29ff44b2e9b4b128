"""Async controller owning the state of the staff editing screen.

:class:`StaffEditor` holds the loaded staff list, the position catalog, the
department filter, the draft and the id being edited. All network work goes
through a client with the :class:`~staffing_app.editor.client.StaffApiClient`
interface.

Failure policy:
    A failed call never changes the list or the draft. The failure is stored
    in :attr:`StaffEditor.error` as a user-facing (Japanese) message and
    logged. Nothing is retried.

List refresh:
    Create appends the record returned by the server; Update re-fetches the
    whole list (the PUT response body is not relied upon).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Protocol

from .client import StaffApiError
from .draft import StaffDraft
from .records import PositionOption, StaffRecord
from .rows import department_options, filter_by_department, is_blank

logger = logging.getLogger(__name__)

MSG_LOAD_STAFF_FAILED = "スタッフ一覧を取得できませんでした。"
MSG_LOAD_POSITIONS_FAILED = "ポジション一覧を取得できませんでした。"
MSG_CREATE_FAILED = "スタッフを登録できませんでした。"
MSG_UPDATE_FAILED = "スタッフを更新できませんでした。"
MSG_NAME_REQUIRED = "スタッフ名を入力してください。"


class StaffApi(Protocol):
    async def list_staff(self) -> list[StaffRecord]: ...

    async def list_positions(self) -> list[PositionOption]: ...

    async def create_staff(self, payload: dict[str, Any]) -> StaffRecord: ...

    async def update_staff(self, staff_id: str, payload: dict[str, Any]) -> None: ...


class StaffEditor:
    """State and operations of the staff list/edit screen.

    Args:
        api: Client used for all persistence calls.
        on_focus_form: Called when entering edit mode so a UI can bring the
            form into view (e.g. smooth-scroll to its header).
    """

    def __init__(self, api: StaffApi, *, on_focus_form: Callable[[], None] | None = None) -> None:
        self.api = api
        self.on_focus_form = on_focus_form
        self.staff_list: list[StaffRecord] = []
        self.position_options: list[PositionOption] = []
        self.selected_department: str = ""
        self.editing_id: str | None = None
        self.draft: StaffDraft = StaffDraft.empty()
        self.error: str | None = None

    # --- Loading -----------------------------------------------------------

    async def mount(self) -> None:
        """Fetch staff and positions concurrently; order of completion is free."""
        await asyncio.gather(self.fetch_staff(), self.fetch_positions())

    async def fetch_staff(self) -> bool:
        try:
            self.staff_list = await self.api.list_staff()
        except StaffApiError as exc:
            self._fail(MSG_LOAD_STAFF_FAILED, exc)
            return False
        return True

    async def fetch_positions(self) -> bool:
        try:
            self.position_options = await self.api.list_positions()
        except StaffApiError as exc:
            self._fail(MSG_LOAD_POSITIONS_FAILED, exc)
            return False
        return True

    # --- List & filter -----------------------------------------------------

    @property
    def department_options(self) -> list[str]:
        """Filter choices: distinct departments of the loaded staff."""
        return department_options(self.staff_list)

    @property
    def filtered_staff(self) -> list[StaffRecord]:
        return filter_by_department(self.staff_list, self.selected_department)

    def select_department(self, department: str) -> None:
        self.selected_department = department or ""

    @property
    def position_names(self) -> list[str]:
        return [p.name for p in self.position_options]

    # --- Draft edits -------------------------------------------------------

    def set_name(self, name: str) -> None:
        self.draft = self.draft.with_name(name)

    def set_experience(self, raw: Any) -> None:
        self.draft = self.draft.with_experience(raw)

    def edit_department(self, index: int, value: str) -> None:
        self.draft = self.draft.with_department(index, value)

    def edit_position(self, index: int, value: str) -> None:
        self.draft = self.draft.with_position(index, value)

    # --- Edit mode ---------------------------------------------------------

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def can_cancel(self) -> bool:
        return self.is_editing

    def start_edit(self, record: StaffRecord) -> None:
        """Load ``record`` into the draft and switch to edit mode."""
        self.editing_id = record.id
        self.draft = StaffDraft.from_record(record)
        self.error = None
        if self.on_focus_form is not None:
            self.on_focus_form()

    def cancel(self) -> None:
        """Drop the draft and leave edit mode; no network call."""
        self.reset()

    def reset(self) -> None:
        self.editing_id = None
        self.draft = StaffDraft.empty()

    # --- Submit ------------------------------------------------------------

    async def submit(self) -> bool:
        """Create or update from the current draft.

        Returns:
            ``True`` on success, ``False`` when the draft was rejected locally
            or the API call failed (see :attr:`error`).
        """
        if is_blank(self.draft.name):
            self.error = MSG_NAME_REQUIRED
            return False

        payload = self.draft.to_payload()

        if self.editing_id is not None:
            try:
                await self.api.update_staff(self.editing_id, payload)
            except StaffApiError as exc:
                self._fail(MSG_UPDATE_FAILED, exc)
                return False
            logger.info("Updated staff id=%s", self.editing_id)
            self.error = None
            self.reset()
            # a failed refresh keeps the stale list and reports via ``error``
            await self.fetch_staff()
            return True

        try:
            created = await self.api.create_staff(payload)
        except StaffApiError as exc:
            self._fail(MSG_CREATE_FAILED, exc)
            return False
        logger.info("Created staff id=%s", created.id)
        self.staff_list = [*self.staff_list, created]
        self.error = None
        self.reset()
        return True

    def _fail(self, message: str, exc: StaffApiError) -> None:
        logger.warning("%s (%s)", message, exc)
        self.error = message
