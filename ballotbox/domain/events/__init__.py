"""Domain events emitted by the voting session."""

from ballotbox.domain.events.session import (
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_DRAW_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    SESSION_TALLIED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTE_CHANGED_EVENT_TYPE,
    VOTE_RETRACTED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    VOTER_REMOVED_EVENT_TYPE,
    VOTER_UNREGISTERED_EVENT_TYPE,
    PhaseChangedPayload,
    ProposalDrawPayload,
    ProposalRegisteredPayload,
    SessionEvent,
    SessionTalliedPayload,
    VoteCastPayload,
    VoteChangedPayload,
    VoteRetractedPayload,
    VoterRegisteredPayload,
    VoterRemovedPayload,
    VoterUnregisteredPayload,
)

__all__: list[str] = [
    "PHASE_CHANGED_EVENT_TYPE",
    "PROPOSAL_DRAW_EVENT_TYPE",
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "SESSION_TALLIED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "VOTE_CHANGED_EVENT_TYPE",
    "VOTE_RETRACTED_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "VOTER_REMOVED_EVENT_TYPE",
    "VOTER_UNREGISTERED_EVENT_TYPE",
    "PhaseChangedPayload",
    "ProposalDrawPayload",
    "ProposalRegisteredPayload",
    "SessionEvent",
    "SessionTalliedPayload",
    "VoteCastPayload",
    "VoteChangedPayload",
    "VoteRetractedPayload",
    "VoterRegisteredPayload",
    "VoterRemovedPayload",
    "VoterUnregisteredPayload",
]
