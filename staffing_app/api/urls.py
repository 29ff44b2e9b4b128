"""JSON API URL configuration.

Routes
------
- ``"staff"`` → list (GET), create (POST), update (PUT)
- ``"positions"`` → position catalog (GET)

Paths have no trailing slash, matching the screen's client.
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern

from .views import PositionsApiView, StaffApiView

app_name = "api"

urlpatterns: list[URLPattern] = [
    path("staff", StaffApiView.as_view(), name="staff"),
    path("positions", PositionsApiView.as_view(), name="positions"),
]
