"""Observability module for ossid.

Structured logging with console output for development and JSON output for
production.

Example:
    >>> from ossid.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("ossid.ids.generated", count=1)
"""

from ossid.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
