"""Drive the staff editor against a remote staff API.

This management command wraps :class:`~staffing_app.editor.StaffEditor` so the
list/filter/create/update flow of the staff screen can be used from a shell
against any server exposing ``/api/staff`` and ``/api/positions``.

Actions:
    ``list``   – print staff, optionally filtered with ``--filter``.
    ``create`` – register a new member from ``--name``, ``--department``
                 (repeatable), ``--position`` (repeatable), ``--experience``.
    ``update`` – load ``--id`` into the draft, apply the given options and
                 save. Given ``--department``/``--position`` values replace
                 the existing lists; omitted ones are kept.

Options:
    ``--base-url`` overrides ``settings.STAFF_API_BASE_URL``.

User-facing CLI strings are Japanese. Failures raise ``CommandError`` with
the editor's error message.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from staffing_app.editor import StaffApiClient, StaffEditor, StaffRecord


def build_client(base_url: str) -> StaffApiClient:
    """Create the API client; separated so tests can swap the transport."""
    return StaffApiClient(base_url, timeout=settings.STAFF_API_TIMEOUT)


def _replace_rows(editor: StaffEditor, kind: str, values: list[str]) -> None:
    """Blank every existing row, then type ``values`` into the trailing row."""
    edit = editor.edit_department if kind == "departments" else editor.edit_position
    rows = editor.draft.departments if kind == "departments" else editor.draft.available_positions
    for index in range(len(rows)):
        edit(index, "")
    for value in values:
        rows = editor.draft.departments if kind == "departments" else editor.draft.available_positions
        edit(len(rows) - 1, value)


def _format(record: StaffRecord) -> str:
    return (
        f"{record.id}\t{record.name}\t"
        f"配属先: {', '.join(record.departments)}\t"
        f"配置可能ポジション: {', '.join(record.available_positions)}\t"
        f"経験年数: {record.experience}"
    )


class Command(BaseCommand):
    help = "リモートのスタッフAPIに対して一覧・登録・更新を行います。"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("action", choices=["list", "create", "update"])
        parser.add_argument("--base-url", help="APIのベースURL（既定: STAFF_API_BASE_URL）")
        parser.add_argument("--filter", default="", help="一覧を部門で絞り込み")
        parser.add_argument("--id", dest="staff_id", help="更新するスタッフのID")
        parser.add_argument("--name", help="スタッフ名")
        parser.add_argument("--department", action="append", dest="departments", help="配属先（複数指定可）")
        parser.add_argument("--position", action="append", dest="positions", help="配置可能ポジション（複数指定可）")
        parser.add_argument("--experience", help="経験年数")

    def handle(self, *args: Any, **options: Any) -> None:
        base_url = options.get("base_url") or settings.STAFF_API_BASE_URL
        asyncio.run(self._run(base_url, options))

    async def _run(self, base_url: str, options: dict[str, Any]) -> None:
        async with build_client(base_url) as api:
            editor = StaffEditor(api)
            await editor.mount()
            if editor.error:
                raise CommandError(editor.error)

            action = options["action"]
            if action == "list":
                editor.select_department(options.get("filter") or "")
                for record in editor.filtered_staff:
                    self.stdout.write(_format(record))
                return

            if action == "update":
                record = self._find(editor, options.get("staff_id"))
                editor.start_edit(record)

            self._apply(editor, options)

            if not await editor.submit():
                raise CommandError(editor.error or "保存に失敗しました。")

            if action == "create":
                self.stdout.write(self.style.SUCCESS(f"登録しました: {_format(editor.staff_list[-1])}"))
            else:
                self.stdout.write(self.style.SUCCESS(f"更新しました: ID {options['staff_id']}"))

    def _find(self, editor: StaffEditor, staff_id: str | None) -> StaffRecord:
        if not staff_id:
            raise CommandError("更新には --id を指定してください。")
        for record in editor.staff_list:
            if record.id == str(staff_id):
                return record
        raise CommandError(f"ID {staff_id} のスタッフが見つかりません。")

    def _apply(self, editor: StaffEditor, options: dict[str, Any]) -> None:
        if options.get("name") is not None:
            editor.set_name(options["name"])
        if options.get("experience") is not None:
            editor.set_experience(options["experience"])
        if options.get("departments") is not None:
            _replace_rows(editor, "departments", options["departments"])
        if options.get("positions") is not None:
            known = set(editor.position_names)
            for name in options["positions"]:
                if name not in known:
                    self.stderr.write(self.style.WARNING(f"⚠️  ポジション「{name}」はカタログにありません。"))
            _replace_rows(editor, "positions", options["positions"])
