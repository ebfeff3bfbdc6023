"""Correlation IDs for the log entries of one session run.

A host opens a correlation scope around each unit of work it drives (one
replayed script, one request) so every entry the core logs in between
carries the same identifier. The scope restores the previous ID on exit,
so nested or back-to-back runs never inherit each other's ID.

Usage:
    with correlation_scope() as correlation_id:
        runner.run(script)

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "no scope open"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the ID of the innermost open scope, or "" outside any scope."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Tag every log entry inside the block with one correlation ID.

    Args:
        correlation_id: ID supplied by the caller. A fresh UUID4 is
            generated when omitted or empty.

    Yields:
        The correlation ID in effect inside the block.
    """
    scoped_id = correlation_id or generate_correlation_id()
    token = _correlation_id.set(scoped_id)
    try:
        yield scoped_id
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the scope's correlation_id to an entry.

    Entries logged outside a scope, and entries that already carry a
    correlation_id, are left as they are.
    """
    correlation_id = get_correlation_id()
    if correlation_id and "correlation_id" not in event_dict:
        event_dict["correlation_id"] = correlation_id
    return event_dict
