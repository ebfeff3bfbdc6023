"""Application DTOs.

Pydantic models shared with hosts: a serializable session snapshot and
the session script format replayed by the reference host.
"""

from ballotbox.application.dtos.session_script import (
    SessionAction,
    SessionReport,
    SessionScript,
    SessionStep,
    StepOutcome,
)
from ballotbox.application.dtos.session_snapshot import (
    ProposalView,
    SessionSnapshot,
    VoterView,
)

__all__: list[str] = [
    "ProposalView",
    "SessionAction",
    "SessionReport",
    "SessionScript",
    "SessionSnapshot",
    "SessionStep",
    "StepOutcome",
    "VoterView",
]
