from django.db import migrations, models

import staffing_app.models.staff


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Position",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True, verbose_name="ポジション名")),
                ("departments", models.JSONField(blank=True, default=list, verbose_name="関連部門")),
            ],
            options={
                "verbose_name": "ポジション",
                "verbose_name_plural": "ポジション一覧",
                "ordering": ("name",),
            },
        ),
        migrations.CreateModel(
            name="Staff",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="スタッフ名")),
                (
                    "departments",
                    models.JSONField(
                        blank=True,
                        default=list,
                        validators=[staffing_app.models.staff.validate_string_list],
                        verbose_name="配属先",
                    ),
                ),
                (
                    "available_positions",
                    models.JSONField(
                        blank=True,
                        default=list,
                        validators=[staffing_app.models.staff.validate_string_list],
                        verbose_name="配置可能ポジション",
                    ),
                ),
                ("experience", models.PositiveIntegerField(default=0, verbose_name="経験年数")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="作成日時")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="更新日時")),
            ],
            options={
                "verbose_name": "スタッフ",
                "verbose_name_plural": "スタッフ一覧",
                "ordering": ("id",),
            },
        ),
    ]
