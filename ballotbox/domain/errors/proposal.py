"""Proposal ledger and tally errors."""

from __future__ import annotations

from ballotbox.domain.errors.session import SessionWorkflowError


class NoSuchProposalError(SessionWorkflowError):
    """Raised for the reserved id 0 or an id beyond the registered proposals.

    Attributes:
        proposal_id: The rejected id.
        proposal_count: Number of proposals registered at the time.
    """

    def __init__(self, proposal_id: int, proposal_count: int) -> None:
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        super().__init__(
            f"No proposal with id {proposal_id} "
            f"({proposal_count} proposal(s) registered)"
        )


class NoWinnerError(SessionWorkflowError):
    """Raised when the winner is requested but no proposal won."""

    def __init__(self) -> None:
        super().__init__("No winning proposal: no proposal received a vote")


class EmptyDescriptionError(SessionWorkflowError):
    """Raised when a proposal is submitted without a description."""

    def __init__(self) -> None:
        super().__init__("Proposal description cannot be empty")


class DescriptionTooLongError(SessionWorkflowError):
    """Raised when a proposal description exceeds the configured maximum.

    Attributes:
        length: Length of the rejected description.
        max_length: Configured maximum length.
    """

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Proposal description is {length} characters, "
            f"maximum is {max_length}"
        )
