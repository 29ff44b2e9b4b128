"""App configuration for the staffing application.

Defines :class:`StaffingAppConfig`, the Django ``AppConfig`` that registers
the app and configures default model primary keys.

Key points:
    * ``name`` is fixed to ``"staffing_app"`` to keep the app label and import
      paths stable.
    * ``default_auto_field`` is ``BigAutoField``; API payloads expose the
      primary key as a string.
"""

from __future__ import annotations

from django.apps import AppConfig


# --- AppConfig -------------------------------------------------------------

class StaffingAppConfig(AppConfig):
    """App registration and defaults for ``staffing_app``."""

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "staffing_app"
    verbose_name: str = "スタッフ管理"
