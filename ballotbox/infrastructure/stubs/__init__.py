"""Test stubs for the application ports.

WARNING: These stubs are NOT for production use.
"""

from ballotbox.infrastructure.stubs.administrator_gate_stub import (
    AdministratorGateStub,
)
from ballotbox.infrastructure.stubs.session_event_emitter_stub import (
    RecordingSessionEventEmitter,
)

__all__: list[str] = [
    "AdministratorGateStub",
    "RecordingSessionEventEmitter",
]
