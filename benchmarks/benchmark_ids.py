"""Benchmarks for identifier operations and the example record.

Run with: uv run pytest benchmarks/benchmark_ids.py --benchmark-only -v
"""

from typing import Any

from ossid.ids import IdentifierService
from ossid.models import ExampleRecord, example_function


class TestIdentifierOperations:
    """Benchmarks for IdentifierService."""

    def test_generate(self, benchmark: Any, bench_service: IdentifierService) -> None:
        result = benchmark(bench_service.generate)
        assert len(result) == 26

    def test_is_valid(
        self, benchmark: Any, bench_service: IdentifierService, sample_id: str
    ) -> None:
        assert benchmark(bench_service.is_valid, sample_id) is True

    def test_is_valid_rejects(self, benchmark: Any, bench_service: IdentifierService) -> None:
        assert benchmark(bench_service.is_valid, "invalid-id") is False

    def test_extract_timestamp(
        self, benchmark: Any, bench_service: IdentifierService, sample_id: str
    ) -> None:
        result = benchmark(bench_service.extract_timestamp, sample_id)
        assert result.tzinfo is not None

    def test_compare(
        self, benchmark: Any, bench_service: IdentifierService, sample_id: str
    ) -> None:
        other = bench_service.generate()
        assert benchmark(bench_service.compare, sample_id, other) == -1


class TestExampleRecord:
    """Benchmarks for the example record and function."""

    def test_example_function(self, benchmark: Any) -> None:
        assert benchmark(example_function, "benchmark test input").startswith("processed:")

    def test_create(self, benchmark: Any) -> None:
        record = benchmark(ExampleRecord.create, "benchmark", 100)
        assert record.value == 100

    def test_process(self, benchmark: Any, sample_record: ExampleRecord) -> None:
        assert "has value 100" in benchmark(sample_record.process)

    def test_validate_record(self, benchmark: Any, sample_record: ExampleRecord) -> None:
        assert benchmark(sample_record.validate_record) is None
