"""Django settings for ``staffing_manager``.

Values that differ between environments are read from the process
environment; defaults target local development with SQLite.

Project-specific settings:
    * ``STAFF_API_BASE_URL`` – remote API root used by the ``staff_editor``
      management command.
    * ``STAFF_API_TIMEOUT`` – HTTP timeout (seconds) for that client.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR: Path = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret common truthy spellings of an environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# --- Core ------------------------------------------------------------------

SECRET_KEY: str = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG: bool = _env_bool("DJANGO_DEBUG", default=True)
ALLOWED_HOSTS: list[str] = [
    h.strip() for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()
]

INSTALLED_APPS: list[str] = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "staffing_app",
]

MIDDLEWARE: list[str] = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF: str = "staffing_manager.urls"
WSGI_APPLICATION: str = "staffing_manager.wsgi.application"

TEMPLATES: list[dict] = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES: dict = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("STAFFING_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD: str = "django.db.models.BigAutoField"

LANGUAGE_CODE: str = "ja"
TIME_ZONE: str = "Asia/Tokyo"
USE_I18N: bool = True
USE_TZ: bool = True

STATIC_URL: str = "static/"

# --- Staff API client ------------------------------------------------------

STAFF_API_BASE_URL: str = os.environ.get("STAFF_API_BASE_URL", "http://127.0.0.1:8000")
STAFF_API_TIMEOUT: float = float(os.environ.get("STAFF_API_TIMEOUT", "10"))

# --- Logging ---------------------------------------------------------------

LOGGING: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "staffing_app": {
            "handlers": ["console"],
            "level": os.environ.get("STAFFING_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
