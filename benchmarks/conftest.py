"""Benchmark fixtures and configuration."""

import pytest

from ossid.ids import IdentifierService
from ossid.models import ExampleRecord


@pytest.fixture
def bench_service() -> IdentifierService:
    """Dedicated service so benchmarks do not share state with tests."""
    return IdentifierService()


@pytest.fixture
def sample_id(bench_service: IdentifierService) -> str:
    return bench_service.generate()


@pytest.fixture
def sample_record() -> ExampleRecord:
    return ExampleRecord.create("benchmark", 100)
