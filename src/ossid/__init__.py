"""ossid: time-sortable unique identifiers.

Generate, validate, date and compare ULID identifiers.

Example:
    >>> from ossid import compare_ids, extract_timestamp, generate_id
    >>> first = generate_id()
    >>> extract_timestamp(first).year >= 2024
    True
"""

from ossid.constants import VERSION as __version__
from ossid.errors import InvalidFormatError, OssidError, RecordValidationError
from ossid.ids import (
    IdentifierService,
    compare_ids,
    extract_timestamp,
    generate_id,
    get_id_age,
    get_identifier_service,
    is_valid_id,
    reset_identifier_service,
)
from ossid.models import ExampleRecord, example_function
from ossid.types import Identifier, Ordering

__all__ = [
    "__version__",
    "ExampleRecord",
    "Identifier",
    "IdentifierService",
    "InvalidFormatError",
    "Ordering",
    "OssidError",
    "RecordValidationError",
    "compare_ids",
    "example_function",
    "extract_timestamp",
    "generate_id",
    "get_id_age",
    "get_identifier_service",
    "is_valid_id",
    "reset_identifier_service",
]
