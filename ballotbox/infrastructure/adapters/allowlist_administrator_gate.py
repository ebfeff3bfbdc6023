"""Allowlist administrator gate adapter.

Implements AdministratorGateProtocol over a fixed set of identities the
host has already authenticated as administrators (for example, the session
owner loaded from configuration).
"""

from __future__ import annotations

from collections.abc import Iterable

from ballotbox.application.ports.administrator_gate import (
    AdministratorGateProtocol,
)


class AllowlistAdministratorGate(AdministratorGateProtocol):
    """Administrator capability backed by an immutable allowlist."""

    def __init__(self, administrator_ids: Iterable[str]) -> None:
        """Initialize the gate.

        Args:
            administrator_ids: Identities holding administrative capability.
        """
        self._administrator_ids = frozenset(administrator_ids)

    @property
    def administrator_ids(self) -> frozenset[str]:
        """Identities holding administrative capability."""
        return self._administrator_ids

    def is_administrator(self, caller_id: str) -> bool:
        """Check whether the caller is on the allowlist."""
        return caller_id in self._administrator_ids
