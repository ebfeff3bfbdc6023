"""Workflow phase model for the voting session state machine.

State Machine:
    REGISTERING_VOTERS -> PROPOSALS_REGISTRATION_OPEN
    PROPOSALS_REGISTRATION_OPEN -> PROPOSALS_REGISTRATION_CLOSED
    PROPOSALS_REGISTRATION_CLOSED -> VOTING_OPEN
    VOTING_OPEN -> VOTING_CLOSED
    VOTING_CLOSED -> TALLIED
    TALLIED -> REGISTERING_VOTERS (restart, the only backward edge)

No phase may be skipped. Every other transition is rejected.
"""

from __future__ import annotations

from enum import Enum


class WorkflowPhase(Enum):
    """Phase of a voting session.

    States:
        REGISTERING_VOTERS: Whitelist is open for administration
        PROPOSALS_REGISTRATION_OPEN: Registered voters may submit proposals
        PROPOSALS_REGISTRATION_CLOSED: Proposal list is frozen
        VOTING_OPEN: Registered voters may cast or change votes
        VOTING_CLOSED: Ballots are frozen, awaiting tally
        TALLIED: Winner computed (terminal until restart)
    """

    REGISTERING_VOTERS = "REGISTERING_VOTERS"
    PROPOSALS_REGISTRATION_OPEN = "PROPOSALS_REGISTRATION_OPEN"
    PROPOSALS_REGISTRATION_CLOSED = "PROPOSALS_REGISTRATION_CLOSED"
    VOTING_OPEN = "VOTING_OPEN"
    VOTING_CLOSED = "VOTING_CLOSED"
    TALLIED = "TALLIED"

    def is_terminal(self) -> bool:
        """Check if this phase ends the session (only restart leaves it)."""
        return self is WorkflowPhase.TALLIED

    def next_phase(self) -> WorkflowPhase | None:
        """Get the forward successor of this phase.

        Returns:
            The next phase in the linear order, or None for TALLIED.
        """
        return FORWARD_TRANSITIONS.get(self)

    def valid_transitions(self) -> frozenset[WorkflowPhase]:
        """Get every phase reachable from this one in a single step."""
        return PHASE_TRANSITION_MATRIX.get(self, frozenset())


# Linear order of a session
PHASE_ORDER: tuple[WorkflowPhase, ...] = (
    WorkflowPhase.REGISTERING_VOTERS,
    WorkflowPhase.PROPOSALS_REGISTRATION_OPEN,
    WorkflowPhase.PROPOSALS_REGISTRATION_CLOSED,
    WorkflowPhase.VOTING_OPEN,
    WorkflowPhase.VOTING_CLOSED,
    WorkflowPhase.TALLIED,
)

FORWARD_TRANSITIONS: dict[WorkflowPhase, WorkflowPhase] = dict(
    zip(PHASE_ORDER[:-1], PHASE_ORDER[1:])
)

PHASE_TRANSITION_MATRIX: dict[WorkflowPhase, frozenset[WorkflowPhase]] = {
    phase: frozenset({successor}) for phase, successor in FORWARD_TRANSITIONS.items()
}
# Restart
PHASE_TRANSITION_MATRIX[WorkflowPhase.TALLIED] = frozenset(
    {WorkflowPhase.REGISTERING_VOTERS}
)


class RestartMode(Enum):
    """How voters are handled when a tallied session restarts.

    Values:
        REMOVE_VOTERS: Hard-delete every listed voter, emptying the registry.
            Rejected when the voter list is already empty.
        RESET_VOTERS: Keep the whitelist; clear the vote of every
            registered voter. Unregistered voters are left untouched.
    """

    REMOVE_VOTERS = "REMOVE_VOTERS"
    RESET_VOTERS = "RESET_VOTERS"
