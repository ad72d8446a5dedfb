"""ULID-based identifier service.

ULIDs (Universally Unique Lexicographically Sortable Identifiers) provide:
- 128-bit compatibility with UUID
- Lexicographic sorting by creation time (millisecond precision)
- Canonically encoded as 26-character string (Crockford's Base32)

Generation is delegated to python-ulid's ``ULIDGenerator``: identifiers
requested within the same millisecond increment the previous random part, so
generation order and lexicographic order agree inside a process.

Example:
    >>> from ossid.ids import compare_ids, generate_id, is_valid_id
    >>> first = generate_id()
    >>> second = generate_id()
    >>> is_valid_id(first)
    True
    >>> compare_ids(first, second)
    -1
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from ulid import ULID, LaxMonotonicPolicy, ULIDGenerator

from ossid.constants import ID_LENGTH, ID_PATTERN
from ossid.errors import InvalidFormatError
from ossid.observability.logging import get_logger
from ossid.types import Identifier, Ordering

logger = get_logger(__name__)

_ID_RE = re.compile(ID_PATTERN)


def _invalid_reason(token: Any) -> str | None:
    """Return why ``token`` is not a valid identifier, or None if it is."""
    if not isinstance(token, str):
        return f"expected str, got {type(token).__name__}"
    if len(token) != ID_LENGTH:
        return f"expected {ID_LENGTH} characters, got {len(token)}"
    if _ID_RE.match(token) is None:
        return "contains characters outside the Crockford Base32 alphabet or overflows the timestamp"
    return None


class IdentifierService:
    """Generates and interprets ULID identifiers.

    Instances are thread-safe: the underlying ``ULIDGenerator`` serializes
    generation behind its own lock, so concurrent ``generate()`` calls never
    collide.

    Args:
        clock: Callable returning the current Unix time in milliseconds.
            Defaults to the system wall clock.
        randomness: Callable returning 10 random bytes for a given timestamp.
            Defaults to ``os.urandom``.
    """

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        randomness: Callable[[int], bytes] | None = None,
    ) -> None:
        # Lax: an exhausted millisecond draws fresh randomness instead of raising.
        self._generator = ULIDGenerator(
            clock=clock,
            randomness=randomness,
            policy=LaxMonotonicPolicy(),
        )

    def generate(self) -> Identifier:
        """Generate a new identifier.

        Returns:
            A 26-character ULID string. Within one millisecond each identifier
            is the previous one plus one.
        """
        return str(self._generator.generate())

    def is_valid(self, token: Any) -> bool:
        """Return True if ``token`` is a structurally valid identifier.

        Never raises: non-string input simply yields False.
        """
        return _invalid_reason(token) is None

    def parse(self, token: Any) -> ULID:
        """Parse ``token`` into a ULID.

        Raises:
            InvalidFormatError: If the token is not a valid identifier
        """
        reason = _invalid_reason(token)
        if reason is not None:
            logger.debug("ossid.ids.invalid_format", reason=reason)
            raise InvalidFormatError(token, reason)
        try:
            return ULID.from_str(token)
        except ValueError as exc:
            raise InvalidFormatError(token, str(exc)) from exc

    def extract_timestamp(self, token: Any) -> datetime:
        """Extract the creation time embedded in an identifier.

        Returns:
            A timezone-aware datetime in UTC, millisecond precision

        Raises:
            InvalidFormatError: If the token is not a valid identifier
        """
        return self.parse(token).datetime

    def age(self, token: Any, now: datetime | None = None) -> timedelta:
        """Return how long ago the identifier was created.

        Identifiers whose timestamp lies in the future (clock skew between
        hosts) have an age of zero.

        Args:
            token: Identifier to inspect
            now: Timezone-aware reference time; defaults to the current UTC time

        Raises:
            InvalidFormatError: If the token is not a valid identifier
            ValueError: If ``now`` is a naive datetime
        """
        if now is not None and now.utcoffset() is None:
            raise ValueError("now must be a timezone-aware datetime")
        created = self.extract_timestamp(token)
        reference = now or datetime.now(timezone.utc)
        return max(reference - created, timedelta(0))

    def compare(self, a: Any, b: Any) -> Ordering:
        """Compare two identifiers chronologically.

        Orders by embedded millisecond timestamp; identifiers from the same
        millisecond are ordered by their raw string value.

        Returns:
            -1 if ``a`` is older, 1 if ``a`` is newer, 0 if they are equal

        Raises:
            InvalidFormatError: If either token is invalid (``a`` is checked first)
        """
        ulid_a = self.parse(a)
        ulid_b = self.parse(b)
        key_a = (ulid_a.milliseconds, a)
        key_b = (ulid_b.milliseconds, b)
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0


_service: IdentifierService | None = None
_service_lock = threading.Lock()


def get_identifier_service() -> IdentifierService:
    """Get the process-wide IdentifierService, creating it on first use."""
    global _service
    with _service_lock:
        if _service is None:
            _service = IdentifierService()
        return _service


def reset_identifier_service() -> None:
    """Drop the process-wide IdentifierService. Useful for testing."""
    global _service
    with _service_lock:
        _service = None


def generate_id() -> Identifier:
    """Generate a new ULID string using the shared service."""
    return get_identifier_service().generate()


def is_valid_id(token: Any) -> bool:
    """Return True if ``token`` is a valid ULID string."""
    return get_identifier_service().is_valid(token)


def extract_timestamp(token: Any) -> datetime:
    """Extract the UTC creation timestamp from a ULID string.

    Raises:
        InvalidFormatError: If the ULID string is invalid

    Example:
        >>> ulid = generate_id()
        >>> extract_timestamp(ulid).tzinfo == timezone.utc
        True
    """
    return get_identifier_service().extract_timestamp(token)


def get_id_age(token: Any) -> timedelta:
    """Return the elapsed time since the ULID was generated (never negative)."""
    return get_identifier_service().age(token)


def compare_ids(a: Any, b: Any) -> Ordering:
    """Compare two ULID strings chronologically, returning -1, 0 or 1."""
    return get_identifier_service().compare(a, b)
