"""Voter registry errors."""

from __future__ import annotations

from ballotbox.domain.errors.session import SessionWorkflowError


class VoterError(SessionWorkflowError):
    """Base class for errors about a specific voter.

    Attributes:
        voter_id: Identity the error is about.
    """

    def __init__(self, voter_id: str, message: str) -> None:
        """Initialize voter error.

        Args:
            voter_id: Identity the error is about.
            message: Human-readable error description.
        """
        self.voter_id = voter_id
        super().__init__(message)


class NotAVoterError(VoterError):
    """Raised when an identity is not on the whitelist."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"{voter_id} is not a voter")


class NotRegisteredError(VoterError):
    """Raised when a whitelisted voter is currently unregistered."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"Voter {voter_id} is not registered")


class AlreadyRegisteredError(VoterError):
    """Raised when adding or registering a voter that is already registered."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"Voter {voter_id} is already registered")


class AlreadyUnregisteredError(VoterError):
    """Raised when unregistering a voter that is already unregistered."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"Voter {voter_id} is already unregistered")


class AlreadyVotedError(VoterError):
    """Raised when a voter who holds a counted vote votes again.

    Attributes:
        voted_proposal_id: Proposal the existing vote is counted for.
    """

    def __init__(self, voter_id: str, voted_proposal_id: int | None) -> None:
        self.voted_proposal_id = voted_proposal_id
        super().__init__(
            voter_id,
            f"Voter {voter_id} has already voted for proposal {voted_proposal_id}",
        )


class NoVoteToChangeError(VoterError):
    """Raised when a voter without a counted vote tries to change it."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"Voter {voter_id} has no vote to change")


class InvalidVoterIdError(VoterError):
    """Raised when adding a voter whose identity is empty or blank."""

    def __init__(self, voter_id: str) -> None:
        super().__init__(voter_id, f"Voter identity {voter_id!r} must not be blank")
