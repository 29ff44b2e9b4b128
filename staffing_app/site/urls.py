"""Staff screen URL configuration.

Internal documentation is **English**; page texts are **Japanese**.

Routes
------
- ``""`` → redirect to the staff screen
- ``"staff-edit/"`` → Staff list, filter and edit form (スタッフ編集)
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern
from django.views.generic import RedirectView

from .views.staff_edit import StaffEditView

app_name = "site"

urlpatterns: list[URLPattern] = [
    path("", RedirectView.as_view(pattern_name="site:staff_edit", permanent=False), name="home"),

    # スタッフ編集
    path("staff-edit/", StaffEditView.as_view(), name="staff_edit"),
]
