"""Shared fixtures for behaviour-driven console tests."""

from __future__ import annotations

import dataclasses

import pytest


@dataclasses.dataclass
class Interaction:
    """Record what a console interaction wrote, returned and raised."""

    written: str
    result: object = None
    error: Exception | None = None


@pytest.fixture
def interaction() -> dict[str, Interaction]:
    """Collect the outcome of a prompt within a scenario."""
    return {}
