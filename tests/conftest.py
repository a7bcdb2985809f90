"""Shared fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from car_dealer.domain.classified import Classified, ClassifiedImage


@pytest.fixture
def make_classified() -> Callable[..., Classified]:
    """Factory for classifieds with sensible defaults; override any field by keyword."""

    def _make(id: int = 1, **overrides: Any) -> Classified:
        fields: dict[str, Any] = {
            "id": id,
            "title": f"2020 Volkswagen Golf {id}",
            "description": "One owner, full service history.",
            "year": 2020,
            "price": 1_500_000,
            "odo_reading": 30_000,
            "make_id": 1,
            "model_id": 1,
            "images": (ClassifiedImage(src=f"https://img.example/{id}.jpg", alt=f"Car {id}"),),
        }
        fields.update(overrides)
        return Classified(**fields)

    return _make
