"""Voting session event payloads.

The workflow reports what happened through these payloads; delivering
or persisting them is the job of whichever emitter is injected.

Event types follow the lowercase.dot.notation convention.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ballotbox.domain.models.session_phase import RestartMode, WorkflowPhase

PHASE_CHANGED_EVENT_TYPE: str = "session.phase_changed"
SESSION_TALLIED_EVENT_TYPE: str = "session.tallied"
VOTER_REGISTERED_EVENT_TYPE: str = "voter.registered"
VOTER_UNREGISTERED_EVENT_TYPE: str = "voter.unregistered"
VOTER_REMOVED_EVENT_TYPE: str = "voter.removed"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "proposal.registered"
PROPOSAL_DRAW_EVENT_TYPE: str = "proposal.draw"
VOTE_CAST_EVENT_TYPE: str = "vote.cast"
VOTE_CHANGED_EVENT_TYPE: str = "vote.changed"
VOTE_RETRACTED_EVENT_TYPE: str = "vote.retracted"


@dataclass(frozen=True, eq=True)
class PhaseChangedPayload:
    """Session moved from one phase to another.

    Attributes:
        previous_phase: Phase before the transition.
        new_phase: Phase after the transition.
        triggered_by: Administrator who triggered the transition.
        restart_mode: Voter handling, set only for a restart.
    """

    event_type: ClassVar[str] = PHASE_CHANGED_EVENT_TYPE

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase
    triggered_by: str
    restart_mode: RestartMode | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "previous_phase": self.previous_phase.value,
            "new_phase": self.new_phase.value,
            "triggered_by": self.triggered_by,
            "restart_mode": self.restart_mode.value if self.restart_mode else None,
        }


@dataclass(frozen=True, eq=True)
class SessionTalliedPayload:
    """Tally completed and the winner was stored."""

    event_type: ClassVar[str] = SESSION_TALLIED_EVENT_TYPE

    winning_proposal_id: int
    winning_vote_count: int
    total_votes: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "winning_proposal_id": self.winning_proposal_id,
            "winning_vote_count": self.winning_vote_count,
            "total_votes": self.total_votes,
        }


@dataclass(frozen=True, eq=True)
class VoterRegisteredPayload:
    """Voter added to the whitelist or registered again.

    Attributes:
        voter_id: The registered voter.
        newly_whitelisted: True when the voter was just added to the whitelist.
    """

    event_type: ClassVar[str] = VOTER_REGISTERED_EVENT_TYPE

    voter_id: str
    newly_whitelisted: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "voter_id": self.voter_id,
            "newly_whitelisted": self.newly_whitelisted,
        }


@dataclass(frozen=True, eq=True)
class VoterUnregisteredPayload:
    """Voter lost eligibility but stays whitelisted."""

    event_type: ClassVar[str] = VOTER_UNREGISTERED_EVENT_TYPE

    voter_id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"voter_id": self.voter_id}


@dataclass(frozen=True, eq=True)
class VoterRemovedPayload:
    """Voter hard-deleted from the whitelist."""

    event_type: ClassVar[str] = VOTER_REMOVED_EVENT_TYPE

    voter_id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"voter_id": self.voter_id}


@dataclass(frozen=True, eq=True)
class ProposalRegisteredPayload:
    """New proposal appended to the ledger."""

    event_type: ClassVar[str] = PROPOSAL_REGISTERED_EVENT_TYPE

    proposal_id: int
    proposer_id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"proposal_id": self.proposal_id, "proposer_id": self.proposer_id}


@dataclass(frozen=True, eq=True)
class ProposalDrawPayload:
    """Tally observed two proposals sharing the leading vote count."""

    event_type: ClassVar[str] = PROPOSAL_DRAW_EVENT_TYPE

    leader_id: int
    challenger_id: int
    vote_count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "leader_id": self.leader_id,
            "challenger_id": self.challenger_id,
            "vote_count": self.vote_count,
        }


@dataclass(frozen=True, eq=True)
class VoteCastPayload:
    """Voter cast a counted vote."""

    event_type: ClassVar[str] = VOTE_CAST_EVENT_TYPE

    voter_id: str
    proposal_id: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"voter_id": self.voter_id, "proposal_id": self.proposal_id}


@dataclass(frozen=True, eq=True)
class VoteChangedPayload:
    """Voter moved a counted vote to another proposal."""

    event_type: ClassVar[str] = VOTE_CHANGED_EVENT_TYPE

    voter_id: str
    previous_proposal_id: int
    new_proposal_id: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "voter_id": self.voter_id,
            "previous_proposal_id": self.previous_proposal_id,
            "new_proposal_id": self.new_proposal_id,
        }


@dataclass(frozen=True, eq=True)
class VoteRetractedPayload:
    """Counted vote reversed because the voter was unregistered."""

    event_type: ClassVar[str] = VOTE_RETRACTED_EVENT_TYPE

    voter_id: str
    proposal_id: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"voter_id": self.voter_id, "proposal_id": self.proposal_id}


SessionEvent = Union[
    PhaseChangedPayload,
    SessionTalliedPayload,
    VoterRegisteredPayload,
    VoterUnregisteredPayload,
    VoterRemovedPayload,
    ProposalRegisteredPayload,
    ProposalDrawPayload,
    VoteCastPayload,
    VoteChangedPayload,
    VoteRetractedPayload,
]
