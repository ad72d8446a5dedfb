"""Type aliases for ossid.

This module defines type aliases to document the semantic meaning of
string and integer types.
"""

from typing import Literal, TypeAlias

Identifier: TypeAlias = str
"""Unique, time-sortable identifier (ULID format)"""

Ordering: TypeAlias = Literal[-1, 0, 1]
"""Result of a chronological comparison between two identifiers"""
