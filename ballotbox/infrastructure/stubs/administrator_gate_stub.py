"""Administrator gate stub for testing.

WARNING: This stub is NOT for production use.
Production implementation is in
ballotbox/infrastructure/adapters/allowlist_administrator_gate.py.
"""

from __future__ import annotations

from ballotbox.application.ports.administrator_gate import (
    AdministratorGateProtocol,
)


class AdministratorGateStub(AdministratorGateProtocol):
    """Configurable stub for AdministratorGateProtocol.

    Usage:
        gate = AdministratorGateStub(administrators={"owner"})
        gate.grant("deputy")
        gate.revoke("owner")
        assert gate.checked == ["owner"]   # after one is_administrator call

        gate = AdministratorGateStub.allow_all()
    """

    def __init__(self, administrators: set[str] | None = None) -> None:
        """Initialize the stub.

        Args:
            administrators: Identities treated as administrators.
        """
        self._administrators: set[str] = set(administrators or ())
        self._allow_all = False
        self.checked: list[str] = []

    @classmethod
    def allow_all(cls) -> AdministratorGateStub:
        """Create a stub that treats every caller as an administrator."""
        stub = cls()
        stub._allow_all = True
        return stub

    def grant(self, caller_id: str) -> None:
        """Give a caller administrative capability."""
        self._administrators.add(caller_id)

    def revoke(self, caller_id: str) -> None:
        """Take administrative capability away from a caller."""
        self._administrators.discard(caller_id)

    def is_administrator(self, caller_id: str) -> bool:
        """Record the check and answer it."""
        self.checked.append(caller_id)
        return self._allow_all or caller_id in self._administrators
