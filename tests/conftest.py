"""Shared pytest fixtures for ossid tests.

This module provides common fixtures used across multiple test modules.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ossid.ids import IdentifierService, reset_identifier_service
from tests.factories import FixedClock


@pytest.fixture(autouse=True)
def _fresh_shared_service() -> Iterator[None]:
    """Give every test its own process-wide IdentifierService."""
    reset_identifier_service()
    yield
    reset_identifier_service()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def service() -> IdentifierService:
    """IdentifierService on the system clock."""
    return IdentifierService()


@pytest.fixture
def clocked_service(fixed_clock: FixedClock) -> IdentifierService:
    """IdentifierService driven by ``fixed_clock``."""
    return IdentifierService(clock=fixed_clock)
