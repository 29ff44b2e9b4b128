# file: staffing_app/tests/conftest.py
"""Common pytest fixtures for staffing_app tests.

Provides model accessors (resolved dynamically via ``apps.get_model``) and
minimal data builders used across test modules.

Fixtures:
    - ``Staff``, ``Position``: Model classes.
    - ``position_catalog``: Three positions with department hints.
    - ``staff_pair``: Two staff members in different departments.
"""

from __future__ import annotations

from typing import Any

import pytest
from django.apps import apps

APP: str = "staffing_app"


@pytest.fixture
def Staff() -> Any:
    """Return the Staff model class."""
    return apps.get_model(APP, "Staff")


@pytest.fixture
def Position() -> Any:
    """Return the Position model class."""
    return apps.get_model(APP, "Position")


@pytest.fixture
def position_catalog(Position: Any) -> list[Any]:
    """Create a small position catalog ordered by insertion."""
    return [
        Position.objects.create(name="採血", departments=["検査", "病理"]),
        Position.objects.create(name="受付", departments=["総務"]),
        Position.objects.create(name="検体処理"),
    ]


@pytest.fixture
def staff_pair(Staff: Any) -> tuple[Any, Any]:
    """Create two staff members: 田中 (病理) and 佐藤 (検査, 病理)."""
    tanaka = Staff.objects.create(
        name="田中", departments=["病理"], available_positions=["採血"], experience=3
    )
    sato = Staff.objects.create(
        name="佐藤", departments=["検査", "病理"], available_positions=["受付"], experience=8
    )
    return tanaka, sato
