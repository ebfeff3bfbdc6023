"""
Application layer - Use cases and orchestration for ballotbox.

This layer contains:
- Port definitions (administrator gate, event emitter, tie-break)
- Application services (voter registry, proposal ledger, tally engine,
  session workflow)
- DTOs shared with hosts

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, config, bootstrap
"""

from ballotbox.application.ports import (
    AdministratorGateProtocol,
    SessionEventEmitterProtocol,
    TieBreakStrategyProtocol,
)

__all__: list[str] = [
    "AdministratorGateProtocol",
    "SessionEventEmitterProtocol",
    "TieBreakStrategyProtocol",
]
