"""Example models built on top of the identifier service.

OssidBaseModel is the shared Pydantic configuration:
- Immutability (frozen=True) for thread-safety and predictability
- Strict validation (extra="forbid") to catch typos and invalid fields

ExampleRecord shows how a data holder embeds an identifier and checks it
during its own validation. Construction accepts any content so invalid
records can be built and then inspected with ``validate_record()``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ossid.constants import ID_PREVIEW_LENGTH
from ossid.errors import RecordValidationError
from ossid.ids import generate_id, is_valid_id
from ossid.types import Identifier


class OssidBaseModel(BaseModel):
    """Base model for all ossid models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )


class ExampleRecord(OssidBaseModel):
    """A named value carrying a unique identifier.

    Attributes:
        id: Unique record identifier (ULID format)
        name: Human-readable name
        value: Integer payload

    Example:
        >>> record = ExampleRecord.create("demo", 42)
        >>> len(record.id)
        26
        >>> record.validate_record()
    """

    id: Identifier = Field(..., description="Unique record identifier (ULID)")
    name: str = Field(..., description="Record name")
    value: int = Field(..., description="Record value")

    @classmethod
    def create(cls, name: str, value: int) -> ExampleRecord:
        """Create a record with a freshly generated identifier."""
        return cls(id=generate_id(), name=name, value=value)

    def process(self) -> str:
        """Describe the record, showing a truncated identifier."""
        return f"{self.name} (ID: {preview_id(self.id)}) has value {self.value}"

    def validate_record(self) -> None:
        """Check the record, raising on the first failing rule.

        Raises:
            RecordValidationError: If the id is empty or not a valid ULID,
                the name is empty, or the value is negative
        """
        if not self.id:
            raise RecordValidationError("id", "ID cannot be empty")
        if not is_valid_id(self.id):
            raise RecordValidationError("id", f"ID is not a valid ULID: {self.id}")
        if not self.name:
            raise RecordValidationError("name", "name cannot be empty")
        if self.value < 0:
            raise RecordValidationError("value", "value cannot be negative")


def preview_id(identifier: Identifier) -> str:
    """Shorten an identifier for display: first characters plus an ellipsis."""
    return identifier[:ID_PREVIEW_LENGTH] + "..."


def example_function(text: str) -> str:
    """Upper-case the input behind a ``processed:`` prefix.

    Example:
        >>> example_function("hello")
        'processed: HELLO'
        >>> example_function("")
        'empty input'
    """
    if text == "":
        return "empty input"
    return f"processed: {text.upper()}"
