"""Infrastructure adapters implementing the application ports for hosts."""

from ballotbox.infrastructure.adapters.allowlist_administrator_gate import (
    AllowlistAdministratorGate,
)
from ballotbox.infrastructure.adapters.structlog_session_event_emitter import (
    StructlogSessionEventEmitter,
)

__all__: list[str] = [
    "AllowlistAdministratorGate",
    "StructlogSessionEventEmitter",
]
