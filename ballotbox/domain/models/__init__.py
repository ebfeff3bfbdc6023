"""Domain models for the voting session."""

from ballotbox.domain.models.proposal import (
    FIRST_PROPOSAL_ID,
    NO_PROPOSAL_ID,
    Proposal,
)
from ballotbox.domain.models.session_phase import (
    PHASE_ORDER,
    PHASE_TRANSITION_MATRIX,
    RestartMode,
    WorkflowPhase,
)
from ballotbox.domain.models.session_state import SessionState
from ballotbox.domain.models.tally_result import ProposalDraw, TallyResult
from ballotbox.domain.models.voter import Voter

__all__: list[str] = [
    "FIRST_PROPOSAL_ID",
    "NO_PROPOSAL_ID",
    "PHASE_ORDER",
    "PHASE_TRANSITION_MATRIX",
    "Proposal",
    "ProposalDraw",
    "RestartMode",
    "SessionState",
    "TallyResult",
    "Voter",
    "WorkflowPhase",
]
