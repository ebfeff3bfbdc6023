"""Application ports - abstract interfaces for external collaborators.

Ports define the seams the voting core consumes. Infrastructure supplies
the implementations (adapters for hosts, stubs for tests).
"""

from ballotbox.application.ports.administrator_gate import (
    AdministratorGateProtocol,
)
from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.ports.tie_break import TieBreakStrategyProtocol

__all__: list[str] = [
    "AdministratorGateProtocol",
    "SessionEventEmitterProtocol",
    "TieBreakStrategyProtocol",
]
