"""Project URL configuration for ``staffing_manager``.

Routes:
* Django admin under ``/admin/``.
* JSON API (``/api/staff``, ``/api/positions``) from ``staffing_app.api.urls``.
* Server-rendered staff screen at root (``staffing_app.site.urls``).
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import URLPattern, URLResolver, include, path

# --- URL patterns ----------------------------------------------------------

urlpatterns: list[URLPattern | URLResolver] = [
    path("admin/", admin.site.urls),
    path("api/", include("staffing_app.api.urls")),  # JSON API
    path("", include("staffing_app.site.urls")),     # staff screen
]
