"""Proposal ledger service.

Owns the ordered proposal list of a session and every change to vote
counts. The ledger never keeps a separate id counter: the next id is
always `len(proposals) + 1`, so ids and list positions cannot drift apart
and a rejected submission never consumes an id.

Phase and administrator checks are the workflow's job; the ledger only
enforces voter eligibility and proposal existence.
"""

from __future__ import annotations

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.services.base import EventEmittingMixin
from ballotbox.domain.errors.proposal import (
    DescriptionTooLongError,
    EmptyDescriptionError,
    NoSuchProposalError,
)
from ballotbox.domain.errors.voter import (
    AlreadyVotedError,
    NotAVoterError,
    NotRegisteredError,
    NoVoteToChangeError,
)
from ballotbox.domain.events.session import (
    ProposalRegisteredPayload,
    VoteCastPayload,
    VoteChangedPayload,
)
from ballotbox.domain.models.proposal import FIRST_PROPOSAL_ID, Proposal
from ballotbox.domain.models.session_state import SessionState
from ballotbox.domain.models.voter import Voter


class ProposalLedgerService(EventEmittingMixin):
    """Append-only proposal ledger with per-proposal vote counters.

    Invariants:
    - proposals[i].id == i + 1
    - sum(vote_count) == number of voters with has_voted

    Attributes:
        max_description_length: Longest accepted proposal description.
    """

    def __init__(
        self,
        state: SessionState,
        event_emitter: SessionEventEmitterProtocol,
        max_description_length: int,
    ) -> None:
        """Initialize the ledger over the shared session state.

        Args:
            state: Shared session state.
            event_emitter: Receives proposal and vote notifications.
            max_description_length: Longest accepted proposal description.
        """
        self._state = state
        self._emitter = event_emitter
        self.max_description_length = max_description_length
        self._init_logger()

    def add_proposal(self, proposer_id: str, description: str) -> int:
        """Register a proposal from an eligible voter.

        Args:
            proposer_id: Voter submitting the proposal.
            description: Proposal text.

        Returns:
            Id assigned to the new proposal.

        Raises:
            NotAVoterError: Proposer is not whitelisted.
            NotRegisteredError: Proposer is whitelisted but unregistered.
            EmptyDescriptionError: Description is empty or blank.
            DescriptionTooLongError: Description exceeds the maximum length.
        """
        self._require_eligible_voter(proposer_id)
        if not description or not description.strip():
            raise EmptyDescriptionError()
        if len(description) > self.max_description_length:
            raise DescriptionTooLongError(len(description), self.max_description_length)

        proposal = Proposal(id=self._state.next_proposal_id, description=description)
        self._state.proposals.append(proposal)

        self._emit(ProposalRegisteredPayload(proposal_id=proposal.id, proposer_id=proposer_id))
        return proposal.id

    def cast_vote(self, voter_id: str, proposal_id: int) -> Proposal:
        """Count a first vote from an eligible voter.

        Args:
            voter_id: Voter casting the vote.
            proposal_id: Proposal voted for.

        Returns:
            The proposal with its updated count.

        Raises:
            NotAVoterError: Voter is not whitelisted.
            NotRegisteredError: Voter is whitelisted but unregistered.
            AlreadyVotedError: Voter already holds a counted vote.
            NoSuchProposalError: proposal_id is 0 or out of range.
        """
        voter = self._require_eligible_voter(voter_id)
        if voter.has_voted:
            raise AlreadyVotedError(voter_id, voter.voted_proposal_id)
        index = self._require_proposal_index(proposal_id)

        updated = self._state.proposals[index].with_vote_added()
        self._state.proposals[index] = updated
        self._state.voters[voter_id] = voter.with_vote(proposal_id)

        self._emit(VoteCastPayload(voter_id=voter_id, proposal_id=proposal_id))
        return updated

    def change_vote(self, voter_id: str, new_proposal_id: int) -> Proposal:
        """Move a counted vote to another proposal.

        The total number of counted votes is unchanged.

        Args:
            voter_id: Voter changing the vote.
            new_proposal_id: Proposal receiving the vote.

        Returns:
            The new target proposal with its updated count.

        Raises:
            NotAVoterError: Voter is not whitelisted.
            NotRegisteredError: Voter is whitelisted but unregistered.
            NoVoteToChangeError: Voter holds no counted vote.
            NoSuchProposalError: new_proposal_id is 0 or out of range.
        """
        voter = self._require_eligible_voter(voter_id)
        if not voter.has_voted or voter.voted_proposal_id is None:
            raise NoVoteToChangeError(voter_id)
        new_index = self._require_proposal_index(new_proposal_id)
        previous_id = voter.voted_proposal_id
        previous_index = self._require_proposal_index(previous_id)

        # Both counters are computed before either is stored
        proposals = self._state.proposals
        if previous_index == new_index:
            updated = proposals[new_index]
        else:
            decremented = proposals[previous_index].with_vote_removed()
            updated = proposals[new_index].with_vote_added()
            proposals[previous_index] = decremented
            proposals[new_index] = updated
        self._state.voters[voter_id] = voter.with_vote(new_proposal_id)

        self._emit(
            VoteChangedPayload(
                voter_id=voter_id,
                previous_proposal_id=previous_id,
                new_proposal_id=new_proposal_id,
            )
        )
        return updated

    def retract_vote(self, voter_id: str) -> int:
        """Remove a voter's vote from its proposal's count.

        The voter record is left as is; the caller clears has_voted.

        Args:
            voter_id: Voter whose vote is reversed.

        Returns:
            Id of the proposal that lost the vote.

        Raises:
            NotAVoterError: Voter is not whitelisted.
            NoVoteToChangeError: Voter holds no counted vote.
        """
        voter = self._state.voters.get(voter_id)
        if voter is None:
            raise NotAVoterError(voter_id)
        if not voter.has_voted or voter.voted_proposal_id is None:
            raise NoVoteToChangeError(voter_id)

        index = self._require_proposal_index(voter.voted_proposal_id)
        self._state.proposals[index] = self._state.proposals[index].with_vote_removed()
        return voter.voted_proposal_id

    def get_proposal(self, proposal_id: int) -> Proposal:
        """Get one proposal by id.

        Raises:
            NoSuchProposalError: proposal_id is 0 or out of range.
        """
        return self._state.proposals[self._require_proposal_index(proposal_id)]

    def get_all(self) -> list[Proposal]:
        """Get every proposal in id order."""
        return list(self._state.proposals)

    def reset_all(self) -> None:
        """Discard every proposal; the next proposal gets id 1 again."""
        self._state.proposals.clear()

    def _require_proposal_index(self, proposal_id: int) -> int:
        """Translate a proposal id into its list position.

        Raises:
            NoSuchProposalError: proposal_id is 0 or out of range.
        """
        count = len(self._state.proposals)
        if not FIRST_PROPOSAL_ID <= proposal_id <= count:
            raise NoSuchProposalError(proposal_id, count)
        return proposal_id - FIRST_PROPOSAL_ID

    def _require_eligible_voter(self, voter_id: str) -> Voter:
        """Get a whitelisted, registered voter.

        Raises:
            NotAVoterError: Voter is not whitelisted.
            NotRegisteredError: Voter is whitelisted but unregistered.
        """
        voter = self._state.voters.get(voter_id)
        if voter is None:
            raise NotAVoterError(voter_id)
        if not voter.is_registered:
            raise NotRegisteredError(voter_id)
        return voter
