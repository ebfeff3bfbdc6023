"""Session script DTOs.

A session script is a JSON document listing workflow operations in the
order a host should apply them. It lets a whole voting round be replayed
from a file, which is how the reference host script drives a session.

Example:
    {
        "steps": [
            {"action": "add_voter", "caller": "owner", "voter": "alice"},
            {"action": "start_proposals_registration", "caller": "owner"},
            {"action": "add_proposal", "caller": "alice", "description": "P1"}
        ]
    }
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ballotbox.application.dtos.session_snapshot import SessionSnapshot
from ballotbox.domain.models.session_phase import RestartMode


class SessionAction(str, Enum):
    """Workflow operations a script step can invoke."""

    ADD_VOTER = "add_voter"
    REMOVE_VOTER = "remove_voter"
    UNREGISTER_VOTER = "unregister_voter"
    REGISTER_VOTER = "register_voter"
    START_PROPOSALS_REGISTRATION = "start_proposals_registration"
    END_PROPOSALS_REGISTRATION = "end_proposals_registration"
    START_VOTING_SESSION = "start_voting_session"
    END_VOTING_SESSION = "end_voting_session"
    TALLY_VOTES = "tally_votes"
    RESTART_SESSION = "restart_session"
    ADD_PROPOSAL = "add_proposal"
    CAST_VOTE = "cast_vote"
    CHANGE_VOTE = "change_vote"


# Argument each action needs besides the caller
_REQUIRED_ARGUMENT: dict[SessionAction, str] = {
    SessionAction.ADD_VOTER: "voter",
    SessionAction.REMOVE_VOTER: "voter",
    SessionAction.UNREGISTER_VOTER: "voter",
    SessionAction.REGISTER_VOTER: "voter",
    SessionAction.RESTART_SESSION: "restart_mode",
    SessionAction.ADD_PROPOSAL: "description",
    SessionAction.CAST_VOTE: "proposal_id",
    SessionAction.CHANGE_VOTE: "proposal_id",
}


class SessionStep(BaseModel):
    """One operation of a session script.

    Attributes:
        action: Operation to invoke.
        caller: Identity performing the operation.
        voter: Target voter for registry operations.
        proposal_id: Target proposal for cast_vote and change_vote.
        description: Proposal text for add_proposal.
        restart_mode: Voter handling for restart_session.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: SessionAction
    caller: str = Field(..., min_length=1)
    voter: str | None = Field(default=None, min_length=1)
    proposal_id: int | None = None
    description: str | None = None
    restart_mode: RestartMode | None = None

    @model_validator(mode="after")
    def validate_arguments(self) -> SessionStep:
        """Validate the argument the action needs is present."""
        required = _REQUIRED_ARGUMENT.get(self.action)
        if required is not None and getattr(self, required) is None:
            raise ValueError(f"{self.action.value} requires '{required}'")
        return self


class SessionScript(BaseModel):
    """Ordered list of workflow operations.

    Attributes:
        steps: Operations to apply, in order.
        stop_on_error: Stop at the first rejected step when True; otherwise
            record the rejection and continue.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    steps: list[SessionStep] = Field(default_factory=list)
    stop_on_error: bool = True


class StepOutcome(BaseModel):
    """Result of applying one script step."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    action: SessionAction
    succeeded: bool
    result: int | str | None = None
    error_type: str | None = None
    error: str | None = None


class SessionReport(BaseModel):
    """Everything a replayed script produced.

    Attributes:
        correlation_id: ID carried by every log entry of the run.
        outcomes: One outcome per applied step.
        session: Snapshot of the session after the last applied step.
    """

    model_config = ConfigDict(frozen=True)

    correlation_id: str = Field(..., min_length=1)
    outcomes: list[StepOutcome]
    session: SessionSnapshot

    @property
    def succeeded(self) -> bool:
        """Check whether every applied step succeeded."""
        return all(outcome.succeeded for outcome in self.outcomes)
