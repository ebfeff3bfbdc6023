"""Session snapshot DTOs.

Pydantic read models of a whole session, for hosts that need to hand the
state to another process (JSON over whatever transport they choose).
Snapshots are built under the session lock and never alias live state.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ballotbox.domain.models.proposal import Proposal
from ballotbox.domain.models.session_state import SessionState
from ballotbox.domain.models.voter import Voter


class VoterView(BaseModel):
    """Read model of one whitelisted voter."""

    model_config = ConfigDict(frozen=True)

    voter_id: str = Field(..., description="Opaque voter identity")
    is_registered: bool = Field(..., description="Eligible to propose and vote")
    has_voted: bool = Field(..., description="Holds a counted vote")
    voted_proposal_id: int | None = Field(
        default=None,
        description="Voted proposal, null when the voter has not voted",
    )

    @classmethod
    def from_voter(cls, voter: Voter) -> VoterView:
        """Build the view from a domain voter."""
        return cls(**voter.to_dict())


class ProposalView(BaseModel):
    """Read model of one proposal."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Sequential proposal id")
    description: str
    vote_count: int = Field(..., ge=0)

    @classmethod
    def from_proposal(cls, proposal: Proposal) -> ProposalView:
        """Build the view from a domain proposal."""
        return cls(**proposal.to_dict())


class SessionSnapshot(BaseModel):
    """Consistent read model of a session.

    Attributes:
        phase: Current workflow phase value.
        winning_proposal_id: Winner of the last tally, 0 when none.
        voters: Whitelisted voters in whitelist order.
        proposals: Proposals in id order.
        total_votes: Sum of vote counts.
    """

    model_config = ConfigDict(frozen=True)

    phase: str
    winning_proposal_id: int = Field(..., ge=0)
    voters: list[VoterView] = Field(default_factory=list)
    proposals: list[ProposalView] = Field(default_factory=list)
    total_votes: int = Field(default=0, ge=0)

    @classmethod
    def from_state(cls, state: SessionState) -> SessionSnapshot:
        """Build a snapshot; the caller must hold state.lock."""
        return cls(
            phase=state.phase.value,
            winning_proposal_id=state.winning_proposal_id,
            voters=[
                VoterView.from_voter(state.voters[voter_id])
                for voter_id in state.voter_ids
            ],
            proposals=[ProposalView.from_proposal(p) for p in state.proposals],
            total_votes=state.total_votes,
        )
