"""Remove all staff and position data from the application's database.

**WARNING:** this permanently deletes every ``Staff`` and ``Position`` row and
should only be run in a non-production environment.
"""

from django.core.management.base import BaseCommand

from staffing_app.models import Position, Staff


class Command(BaseCommand):
    help = "スタッフとポジションのデータを削除します。"

    def handle(self, *args, **kwargs):
        """Delete all staff members, then the position catalog."""
        Staff.objects.all().delete()
        Position.objects.all().delete()

        self.stdout.write(self.style.WARNING("🧹 テストデータを削除しました。"))
