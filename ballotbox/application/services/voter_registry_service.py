"""Voter registry service.

Tracks which identities are whitelisted, which of them are currently
registered, and whether they voted. "Whitelisted" and "registered" are
separate states: unregistering keeps the whitelist entry, removing
deletes it along with the voter's whole history.

Phase and administrator checks are the workflow's job.
"""

from __future__ import annotations

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.services.base import EventEmittingMixin
from ballotbox.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from ballotbox.domain.errors.session import NoVotersToRestartError
from ballotbox.domain.errors.voter import (
    AlreadyRegisteredError,
    AlreadyUnregisteredError,
    InvalidVoterIdError,
    NotAVoterError,
)
from ballotbox.domain.events.session import (
    VoteRetractedPayload,
    VoterRegisteredPayload,
    VoterRemovedPayload,
    VoterUnregisteredPayload,
)
from ballotbox.domain.models.session_phase import WorkflowPhase
from ballotbox.domain.models.session_state import SessionState
from ballotbox.domain.models.voter import Voter


class VoterRegistryService(EventEmittingMixin):
    """Whitelist and registration bookkeeping for a session."""

    def __init__(
        self,
        state: SessionState,
        event_emitter: SessionEventEmitterProtocol,
        ledger: ProposalLedgerService,
    ) -> None:
        """Initialize the registry over the shared session state.

        Args:
            state: Shared session state.
            event_emitter: Receives voter notifications.
            ledger: Ledger used to reverse the vote of an unregistered voter.
        """
        self._state = state
        self._emitter = event_emitter
        self._ledger = ledger
        self._init_logger()

    def is_voter(self, voter_id: str) -> bool:
        """Check whether an identity is whitelisted.

        Independent of registration and voting status.
        """
        return voter_id in self._state.voters

    def get(self, voter_id: str) -> Voter:
        """Get a whitelisted voter.

        Raises:
            NotAVoterError: Identity is not whitelisted.
        """
        voter = self._state.voters.get(voter_id)
        if voter is None:
            raise NotAVoterError(voter_id)
        return voter

    def list_voters(self) -> list[Voter]:
        """Get every whitelisted voter in whitelist order."""
        return [self._state.voters[voter_id] for voter_id in self._state.voter_ids]

    def add(self, voter_id: str) -> Voter:
        """Whitelist and register a new voter.

        Raises:
            InvalidVoterIdError: Identity is empty or blank.
            AlreadyRegisteredError: Identity is already whitelisted.
        """
        if not voter_id.strip():
            raise InvalidVoterIdError(voter_id)
        if voter_id in self._state.voters:
            raise AlreadyRegisteredError(voter_id)

        voter = Voter(voter_id=voter_id)
        self._state.voters[voter_id] = voter
        self._state.voter_ids.append(voter_id)

        self._emit(VoterRegisteredPayload(voter_id=voter_id, newly_whitelisted=True))
        return voter

    def remove(self, voter_id: str) -> None:
        """Hard-delete a voter from the whitelist and the ordered list.

        The identity may be added again later as a fresh voter.

        Raises:
            NotAVoterError: Identity is not whitelisted.
        """
        if voter_id not in self._state.voters:
            raise NotAVoterError(voter_id)

        del self._state.voters[voter_id]
        self._state.voter_ids.remove(voter_id)

        self._emit(VoterRemovedPayload(voter_id=voter_id))

    def unregister(self, voter_id: str) -> Voter:
        """Make a whitelisted voter ineligible, reversing any pre-tally vote.

        Raises:
            NotAVoterError: Identity is not whitelisted.
            AlreadyUnregisteredError: Voter is already unregistered.
        """
        voter = self.get(voter_id)
        if not voter.is_registered:
            raise AlreadyUnregisteredError(voter_id)

        retracted_id: int | None = None
        if voter.has_voted and self._state.phase is not WorkflowPhase.TALLIED:
            retracted_id = self._ledger.retract_vote(voter_id)
            voter = voter.without_vote()
        voter = voter.with_registration(False)
        self._state.voters[voter_id] = voter

        if retracted_id is not None:
            self._emit(VoteRetractedPayload(voter_id=voter_id, proposal_id=retracted_id))
        self._emit(VoterUnregisteredPayload(voter_id=voter_id))
        return voter

    def register(self, voter_id: str) -> Voter:
        """Make an unregistered, whitelisted voter eligible again.

        A vote reversed by an earlier unregistration is not restored.

        Raises:
            NotAVoterError: Identity was never whitelisted.
            AlreadyRegisteredError: Voter is already registered.
        """
        voter = self.get(voter_id)
        if voter.is_registered:
            raise AlreadyRegisteredError(voter_id)

        voter = voter.with_registration(True)
        self._state.voters[voter_id] = voter

        self._emit(VoterRegisteredPayload(voter_id=voter_id, newly_whitelisted=False))
        return voter

    def reset_votes(self) -> int:
        """Clear the vote of every registered voter, keeping the whitelist.

        Unregistered voters are left untouched.

        Returns:
            Number of voters whose vote was cleared.
        """
        cleared = 0
        for voter_id in self._state.voter_ids:
            voter = self._state.voters[voter_id]
            if voter.is_registered and voter.has_voted:
                self._state.voters[voter_id] = voter.without_vote()
                cleared += 1
        return cleared

    def remove_all(self) -> int:
        """Hard-delete every listed voter, emptying the registry.

        Returns:
            Number of voters removed.

        Raises:
            NoVotersToRestartError: The voter list is already empty.
        """
        if not self._state.voter_ids:
            raise NoVotersToRestartError()

        removed = list(self._state.voter_ids)
        self._state.voters.clear()
        self._state.voter_ids.clear()

        for voter_id in removed:
            self._emit(VoterRemovedPayload(voter_id=voter_id))
        return len(removed)
