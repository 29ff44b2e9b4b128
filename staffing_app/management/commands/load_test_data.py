"""Seed the database with a sample position catalog and staff members.

Existing staff and positions are deleted first. Intended for local
development only.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from staffing_app.models import Position, Staff

POSITIONS = [
    ("採血", ["検査", "病理"]),
    ("受付", ["総務"]),
    ("検体処理", ["病理"]),
    ("生理検査", ["検査"]),
]

STAFF = [
    ("田中", ["病理"], ["採血", "検体処理"], 3),
    ("佐藤", ["検査"], ["採血", "生理検査"], 8),
    ("鈴木", ["総務", "検査"], ["受付"], 1),
    ("高橋", [], [], 0),
]


class Command(BaseCommand):
    help = "ポジションとスタッフのテストデータを登録します。"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("⚙️  既存のテストデータを削除しています…")
        Staff.objects.all().delete()
        Position.objects.all().delete()

        self.stdout.write("📋 ポジションを登録しています…")
        for name, departments in POSITIONS:
            Position.objects.create(name=name, departments=departments)

        self.stdout.write("👥 スタッフを登録しています…")
        for name, departments, positions, experience in STAFF:
            Staff.objects.create(
                name=name,
                departments=departments,
                available_positions=positions,
                experience=experience,
            )

        self.stdout.write(self.style.SUCCESS(
            f"✅ テストデータを登録しました（ポジション {len(POSITIONS)} 件、スタッフ {len(STAFF)} 件）。"
        ))
