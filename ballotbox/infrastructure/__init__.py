"""
Infrastructure layer - External adapters for ballotbox.

This layer contains:
- structlog observability (configuration, correlation IDs)
- Adapters implementing the application ports for hosts
- Stubs implementing the application ports for tests

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

from ballotbox.infrastructure.adapters import (
    AllowlistAdministratorGate,
    StructlogSessionEventEmitter,
)

__all__: list[str] = ["AllowlistAdministratorGate", "StructlogSessionEventEmitter"]
