"""Administrator Gate Port.

The voting core does not authenticate anyone. It consumes a single
boolean capability check, supplied by the host, to decide whether a
caller may run administrative operations (phase transitions and voter
management).
"""

from __future__ import annotations

from typing import Protocol


class AdministratorGateProtocol(Protocol):
    """Protocol for the externally verified administrator capability.

    Example:
        gate = AllowlistAdministratorGate(["owner"])
        gate.is_administrator("owner")  # True
    """

    def is_administrator(self, caller_id: str) -> bool:
        """Check whether the caller holds administrative capability.

        Args:
            caller_id: Identity of the caller, as verified by the host.

        Returns:
            True if the caller may run administrative operations.
        """
        ...
