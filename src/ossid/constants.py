"""Constants for ossid.

This module defines the identifier format constants used across the codebase.
"""

# Package version
VERSION = "0.1.0"

# ULID layout
ID_LENGTH = 26
"""Number of characters in a canonical ULID string."""

TIMESTAMP_BITS = 48
MAX_TIMESTAMP_MS = (1 << TIMESTAMP_BITS) - 1
"""Largest millisecond timestamp a ULID can carry."""

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
"""Crockford's Base32 alphabet (excludes I, L, O, U)."""

ID_PATTERN = r"^[0-7][0-9A-HJKMNP-TV-Z]{25}$"
"""Canonical ULID pattern.

26 characters encode 130 bits but a ULID holds 128, so the first character
can only be 0-7; anything higher overflows the timestamp segment.
"""

# Display
ID_PREVIEW_LENGTH = 8
"""Characters shown when an identifier is truncated for display."""
