"""Structlog configuration for ballotbox hosts.

Two renderings share one processor chain: JSON lines for production and
colored console output for development. Either way entries go to stderr,
leaving stdout to the host (run_session.py prints its report there).

A production entry looks like:
    {
        "event": "add_voter_rejected",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "correlation_id": "uuid",
        "service": "SessionWorkflowService",
        "error_type": "InvalidPhaseError",
        ...
    }
"""

import logging
import os
import sys
from typing import cast

import structlog
from structlog.typing import Processor

from ballotbox.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to INFO."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Install the ballotbox processor chain.

    Call once at host startup, before the workflow is built.

    Args:
        environment: 'production' renders JSON; anything else renders for
            the console.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
