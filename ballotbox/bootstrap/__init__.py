"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so hosts can obtain a
ready workflow without assembling ports and adapters themselves.
"""

from ballotbox.bootstrap.logging import configure_structlog, correlation_scope
from ballotbox.bootstrap.session import (
    create_session_workflow,
    get_session_config,
    get_session_workflow,
    reset_session_dependencies,
    set_session_config,
    set_session_workflow,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_scope",
    "create_session_workflow",
    "get_session_config",
    "get_session_workflow",
    "reset_session_dependencies",
    "set_session_config",
    "set_session_workflow",
]
