"""Domain errors for ballotbox.

Provides specific exception classes for every rejected operation.
All exceptions inherit from BallotBoxError.
"""

from ballotbox.domain.errors.proposal import (
    DescriptionTooLongError,
    EmptyDescriptionError,
    NoSuchProposalError,
    NoWinnerError,
)
from ballotbox.domain.errors.session import (
    InvalidPhaseError,
    NoVotersToRestartError,
    SessionWorkflowError,
    UnauthorizedError,
)
from ballotbox.domain.errors.voter import (
    AlreadyRegisteredError,
    AlreadyUnregisteredError,
    AlreadyVotedError,
    InvalidVoterIdError,
    NotAVoterError,
    NotRegisteredError,
    NoVoteToChangeError,
    VoterError,
)

__all__: list[str] = [
    "AlreadyRegisteredError",
    "AlreadyUnregisteredError",
    "AlreadyVotedError",
    "DescriptionTooLongError",
    "EmptyDescriptionError",
    "InvalidPhaseError",
    "InvalidVoterIdError",
    "NoSuchProposalError",
    "NoVoteToChangeError",
    "NoVotersToRestartError",
    "NoWinnerError",
    "NotAVoterError",
    "NotRegisteredError",
    "SessionWorkflowError",
    "UnauthorizedError",
    "VoterError",
]
