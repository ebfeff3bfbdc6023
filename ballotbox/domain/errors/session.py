"""Session workflow errors.

Every failure of the voting core is synchronous and caller-correctable:
the operation had no effect and nothing is retried internally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ballotbox.domain.exceptions import BallotBoxError

if TYPE_CHECKING:
    from ballotbox.domain.models.session_phase import WorkflowPhase


class SessionWorkflowError(BallotBoxError):
    """Base class for every rejected voting-session operation."""


class UnauthorizedError(SessionWorkflowError):
    """Raised when a caller without administrative capability attempts an
    administrative operation.

    Attributes:
        caller_id: Identity of the rejected caller.
        operation: Name of the attempted operation.
    """

    def __init__(self, caller_id: str, operation: str) -> None:
        """Initialize unauthorized error.

        Args:
            caller_id: Identity of the rejected caller.
            operation: Name of the attempted operation.
        """
        self.caller_id = caller_id
        self.operation = operation
        super().__init__(
            f"Caller {caller_id} is not an administrator and cannot {operation}"
        )


class InvalidPhaseError(SessionWorkflowError):
    """Raised when an operation is not legal in the current phase.

    Attributes:
        operation: Name of the attempted operation.
        current_phase: Phase the session is in.
        allowed_phases: Phases in which the operation is legal.
    """

    def __init__(
        self,
        operation: str,
        current_phase: WorkflowPhase,
        allowed_phases: list[WorkflowPhase] | None = None,
    ) -> None:
        """Initialize invalid phase error.

        Args:
            operation: Name of the attempted operation.
            current_phase: Phase the session is in.
            allowed_phases: Phases in which the operation is legal (optional).
        """
        self.operation = operation
        self.current_phase = current_phase
        self.allowed_phases = allowed_phases or []

        allowed_str = (
            f" Allowed in: {[p.value for p in self.allowed_phases]}"
            if self.allowed_phases
            else ""
        )
        super().__init__(
            f"Cannot {operation} during {current_phase.value}.{allowed_str}"
        )


class NoVotersToRestartError(SessionWorkflowError):
    """Raised when a restart that removes voters finds an empty voter list."""

    def __init__(self) -> None:
        """Initialize no voters to restart error."""
        super().__init__("Cannot restart by removing voters: the voter list is empty")
