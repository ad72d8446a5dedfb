"""Basic ossid usage example.

Walks through the example function, record creation and validation, and the
identifier operations (generate, timestamp, age, compare).

Run:
    uv run python -m ossid.examples.basic_usage
    uv run ossid demo
"""

from __future__ import annotations

import time

from ossid import __version__
from ossid.errors import InvalidFormatError, RecordValidationError
from ossid.ids import compare_ids, extract_timestamp, generate_id, get_id_age
from ossid.models import ExampleRecord, example_function, preview_id
from ossid.observability.logging import get_logger

logger = get_logger(__name__)


def _show_example_function() -> None:
    print("1. Basic Function Usage:")
    for value in ("hello world", ""):
        print(f"   Input: {value!r}")
        print(f"   Output: {example_function(value)!r}\n")


def _show_record() -> None:
    print("2. Record Usage with ID Generation:")
    record = ExampleRecord.create("demo", 42)
    print(f"   Created: Name={record.name}, Value={record.value}, ID={record.id}")
    print(f"   process(): {record.process()!r}\n")


def _show_id_operations() -> None:
    print("2b. ID Operations:")
    identifier = generate_id()
    print(f"   Generated ID: {identifier}")
    try:
        timestamp = extract_timestamp(identifier)
        age = get_id_age(identifier)
    except InvalidFormatError as exc:
        logger.error("ossid.demo.invalid_id", error=exc.to_dict())
        return
    print(f"   ID Timestamp: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"   ID Age: {age}\n")


def _show_validation() -> None:
    print("3. Validation Examples:")
    try:
        ExampleRecord.create("valid", 100).validate_record()
        print("   ✓ Valid example passed validation")
    except RecordValidationError as exc:
        print(f"   Validation error: {exc}")

    invalid = (
        ("empty name", ExampleRecord.create("", 50)),
        ("negative value", ExampleRecord.create("test", -10)),
    )
    for label, record in invalid:
        try:
            record.validate_record()
        except RecordValidationError as exc:
            print(f"   ✗ Invalid example ({label}): {exc}")


def _show_comparison() -> None:
    print("\n4. ID Comparison:")
    first = generate_id()
    time.sleep(0.001)
    second = generate_id()
    order = compare_ids(first, second)
    if order < 0:
        print(f"   {preview_id(first)} was created before {preview_id(second)}")
    elif order > 0:
        print(f"   {preview_id(first)} was created after {preview_id(second)}")
    else:
        print(f"   {preview_id(first)} and {preview_id(second)} were created at the same time")


def main() -> None:
    """Print a tour of the package to stdout."""
    print("=== ossid Package Example ===")
    print(f"Package Version: {__version__}\n")
    _show_example_function()
    _show_record()
    _show_id_operations()
    _show_validation()
    _show_comparison()
    print("\n=== Example Complete ===")


if __name__ == "__main__":
    main()
