"""Unit tests for the voting session error hierarchy."""

import pytest

from ballotbox.domain.errors import (
    AlreadyRegisteredError,
    AlreadyUnregisteredError,
    AlreadyVotedError,
    DescriptionTooLongError,
    EmptyDescriptionError,
    InvalidPhaseError,
    InvalidVoterIdError,
    NoSuchProposalError,
    NotAVoterError,
    NotRegisteredError,
    NoVotersToRestartError,
    NoVoteToChangeError,
    NoWinnerError,
    SessionWorkflowError,
    UnauthorizedError,
    VoterError,
)
from ballotbox.domain.exceptions import BallotBoxError
from ballotbox.domain.models.session_phase import WorkflowPhase


class TestHierarchy:
    """Every rejection can be caught with one except clause."""

    @pytest.mark.parametrize(
        "error",
        [
            UnauthorizedError("mallory", "tally_votes"),
            InvalidPhaseError("cast_vote", WorkflowPhase.TALLIED),
            NoVotersToRestartError(),
            NotAVoterError("x"),
            NotRegisteredError("x"),
            AlreadyRegisteredError("x"),
            AlreadyUnregisteredError("x"),
            AlreadyVotedError("x", 1),
            NoVoteToChangeError("x"),
            InvalidVoterIdError(""),
            NoSuchProposalError(0, 2),
            NoWinnerError(),
            EmptyDescriptionError(),
            DescriptionTooLongError(11, 10),
        ],
    )
    def test_is_session_workflow_error(self, error: SessionWorkflowError) -> None:
        """All workflow errors derive from SessionWorkflowError and BallotBoxError."""
        assert isinstance(error, SessionWorkflowError)
        assert isinstance(error, BallotBoxError)
        assert str(error)

    def test_voter_errors_carry_identity(self) -> None:
        """Voter errors expose the identity they are about."""
        for error in (
            NotAVoterError("dave"),
            NotRegisteredError("dave"),
            AlreadyRegisteredError("dave"),
            AlreadyUnregisteredError("dave"),
            NoVoteToChangeError("dave"),
        ):
            assert isinstance(error, VoterError)
            assert error.voter_id == "dave"
            assert "dave" in str(error)


class TestMessages:
    """Tests for error attributes and messages."""

    def test_unauthorized(self) -> None:
        """UnauthorizedError names the caller and the operation."""
        error = UnauthorizedError("mallory", "add_voter")

        assert error.caller_id == "mallory"
        assert error.operation == "add_voter"
        assert "mallory" in str(error) and "add_voter" in str(error)

    def test_invalid_phase_lists_allowed_phases(self) -> None:
        """InvalidPhaseError reports current and allowed phases."""
        error = InvalidPhaseError(
            "cast_vote",
            WorkflowPhase.VOTING_CLOSED,
            [WorkflowPhase.VOTING_OPEN],
        )

        assert error.current_phase is WorkflowPhase.VOTING_CLOSED
        assert error.allowed_phases == [WorkflowPhase.VOTING_OPEN]
        assert str(error) == (
            "Cannot cast_vote during VOTING_CLOSED. Allowed in: ['VOTING_OPEN']"
        )

    def test_invalid_phase_without_allowed_phases(self) -> None:
        """The allowed list is optional."""
        error = InvalidPhaseError("tally_votes", WorkflowPhase.TALLIED)

        assert error.allowed_phases == []
        assert str(error) == "Cannot tally_votes during TALLIED."

    def test_already_voted_reports_existing_vote(self) -> None:
        """AlreadyVotedError keeps the proposal the vote counts for."""
        error = AlreadyVotedError("alice", 2)

        assert error.voted_proposal_id == 2
        assert "proposal 2" in str(error)

    def test_no_such_proposal(self) -> None:
        """NoSuchProposalError keeps the rejected id and ledger size."""
        error = NoSuchProposalError(5, 3)

        assert (error.proposal_id, error.proposal_count) == (5, 3)
        assert "5" in str(error)

    def test_description_too_long(self) -> None:
        """DescriptionTooLongError keeps both lengths."""
        error = DescriptionTooLongError(101, 100)

        assert (error.length, error.max_length) == (101, 100)
