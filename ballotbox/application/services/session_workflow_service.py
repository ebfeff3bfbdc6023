"""Session workflow service.

The finite-state machine of a voting session, and the only entry point a
host uses. Every operation:

1. Takes the session lock (operations are serialized, reads see a
   consistent snapshot)
2. Checks administrator capability where required
3. Checks the current phase
4. Delegates to the voter registry or the proposal ledger

Entering TALLIED runs the tally engine and stores the winner. Restarting
from TALLIED is the only backward transition.

Phase legality:
    add_voter, remove_voter          REGISTERING_VOTERS
    unregister_voter, register_voter every phase except TALLIED
    add_proposal                     PROPOSALS_REGISTRATION_OPEN
    cast_vote, change_vote           VOTING_OPEN
    reads                            any phase
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from ballotbox.application.dtos.session_snapshot import SessionSnapshot
from ballotbox.application.ports.administrator_gate import (
    AdministratorGateProtocol,
)
from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.ports.tie_break import TieBreakStrategyProtocol
from ballotbox.application.services.base import EventEmittingMixin
from ballotbox.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from ballotbox.application.services.tally_engine_service import TallyEngineService
from ballotbox.application.services.voter_registry_service import (
    VoterRegistryService,
)
from ballotbox.domain.errors.proposal import NoWinnerError
from ballotbox.domain.errors.session import (
    InvalidPhaseError,
    SessionWorkflowError,
    UnauthorizedError,
)
from ballotbox.domain.events.session import (
    PhaseChangedPayload,
    SessionTalliedPayload,
)
from ballotbox.domain.models.proposal import NO_PROPOSAL_ID, Proposal
from ballotbox.domain.models.session_phase import RestartMode, WorkflowPhase
from ballotbox.domain.models.session_state import SessionState
from ballotbox.domain.models.tally_result import TallyResult
from ballotbox.domain.models.voter import Voter

# Phases in which eligibility may be toggled (a vote can still be reversed)
_ELIGIBILITY_PHASES: tuple[WorkflowPhase, ...] = tuple(
    phase for phase in WorkflowPhase if phase is not WorkflowPhase.TALLIED
)


class SessionWorkflowService(EventEmittingMixin):
    """State machine composing the voter registry, ledger and tally engine.

    All components share one SessionState instance.

    Example:
        workflow = SessionWorkflowService(
            state=SessionState.create(),
            administrator_gate=AllowlistAdministratorGate(["owner"]),
            event_emitter=StructlogSessionEventEmitter(),
            max_description_length=1_000,
        )
        workflow.add_voter("owner", "alice")
        workflow.start_proposals_registration("owner")
    """

    def __init__(
        self,
        state: SessionState,
        administrator_gate: AdministratorGateProtocol,
        event_emitter: SessionEventEmitterProtocol,
        max_description_length: int,
        tie_break: TieBreakStrategyProtocol | None = None,
    ) -> None:
        """Initialize the workflow and its components over one state.

        Args:
            state: Shared session state (exclusively owned by this workflow).
            administrator_gate: Capability check for administrative calls.
            event_emitter: Receives every session notification.
            max_description_length: Longest accepted proposal description.
            tie_break: Draw resolution policy for the tally engine.
        """
        self._state = state
        self._gate = administrator_gate
        self._emitter = event_emitter
        self._ledger = ProposalLedgerService(
            state, event_emitter, max_description_length=max_description_length
        )
        self._voters = VoterRegistryService(state, event_emitter, self._ledger)
        self._tally = TallyEngineService(event_emitter, tie_break=tie_break)
        self._init_logger()

    # ------------------------------------------------------------------
    # Phase transitions
    # ------------------------------------------------------------------

    @property
    def phase(self) -> WorkflowPhase:
        """Current workflow phase."""
        with self._state.lock:
            return self._state.phase

    def start_proposals_registration(self, caller_id: str) -> WorkflowPhase:
        """Open proposal registration."""
        return self._advance(
            caller_id,
            "start_proposals_registration",
            WorkflowPhase.REGISTERING_VOTERS,
        )

    def end_proposals_registration(self, caller_id: str) -> WorkflowPhase:
        """Close proposal registration."""
        return self._advance(
            caller_id,
            "end_proposals_registration",
            WorkflowPhase.PROPOSALS_REGISTRATION_OPEN,
        )

    def start_voting_session(self, caller_id: str) -> WorkflowPhase:
        """Open voting."""
        return self._advance(
            caller_id,
            "start_voting_session",
            WorkflowPhase.PROPOSALS_REGISTRATION_CLOSED,
        )

    def end_voting_session(self, caller_id: str) -> WorkflowPhase:
        """Close voting."""
        return self._advance(caller_id, "end_voting_session", WorkflowPhase.VOTING_OPEN)

    def tally_votes(self, caller_id: str) -> TallyResult:
        """Compute and store the winner, entering TALLIED.

        Returns:
            The tally result (winner id 0 when no proposal received a vote).

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Voting is not closed.
        """
        with self._operation("tally_votes", caller_id=caller_id) as log:
            self._require_administrator(caller_id, "tally_votes")
            self._require_phase("tally_votes", WorkflowPhase.VOTING_CLOSED)

            result = self._tally.compute_winner(self._state.proposals)
            self._state.winning_proposal_id = result.winning_proposal_id
            self._change_phase(WorkflowPhase.TALLIED, caller_id)
            self._emit(
                SessionTalliedPayload(
                    winning_proposal_id=result.winning_proposal_id,
                    winning_vote_count=result.winning_vote_count,
                    total_votes=result.total_votes,
                )
            )
            log.info(
                "session_tallied",
                winning_proposal_id=result.winning_proposal_id,
                winning_vote_count=result.winning_vote_count,
                draw_count=len(result.draws),
            )
            return result

    def restart_session(self, caller_id: str, mode: RestartMode) -> WorkflowPhase:
        """Start a new round from a tallied session.

        Proposals are discarded (the next id is 1 again) and the winner is
        reset to 0. Voters are handled according to mode.

        Args:
            caller_id: Administrator restarting the session.
            mode: REMOVE_VOTERS empties the whitelist, RESET_VOTERS keeps it
                and clears the vote of every registered voter.

        Returns:
            REGISTERING_VOTERS.

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Session is not tallied.
            NoVotersToRestartError: REMOVE_VOTERS with an empty voter list.
        """
        with self._operation(
            "restart_session", caller_id=caller_id, mode=mode.value
        ) as log:
            self._require_administrator(caller_id, "restart_session")
            self._require_phase("restart_session", WorkflowPhase.TALLIED)

            # remove_all rejects an empty list before anything is touched
            if mode is RestartMode.REMOVE_VOTERS:
                affected = self._voters.remove_all()
            else:
                affected = self._voters.reset_votes()
            self._ledger.reset_all()
            self._state.winning_proposal_id = NO_PROPOSAL_ID
            self._change_phase(
                WorkflowPhase.REGISTERING_VOTERS, caller_id, restart_mode=mode
            )
            log.info("session_restarted", voters_affected=affected)
            return self._state.phase

    # ------------------------------------------------------------------
    # Voter registry
    # ------------------------------------------------------------------

    def add_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Whitelist and register a voter.

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Not in REGISTERING_VOTERS.
            InvalidVoterIdError: Identity is empty or blank.
            AlreadyRegisteredError: Identity is already whitelisted.
        """
        with self._operation("add_voter", caller_id=caller_id, voter_id=voter_id) as log:
            self._require_administrator(caller_id, "add_voter")
            self._require_phase("add_voter", WorkflowPhase.REGISTERING_VOTERS)
            voter = self._voters.add(voter_id)
            log.info("voter_added")
            return voter

    def remove_voter(self, caller_id: str, voter_id: str) -> None:
        """Hard-delete a voter from the whitelist.

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Not in REGISTERING_VOTERS.
            NotAVoterError: Identity is not whitelisted.
        """
        with self._operation(
            "remove_voter", caller_id=caller_id, voter_id=voter_id
        ) as log:
            self._require_administrator(caller_id, "remove_voter")
            self._require_phase("remove_voter", WorkflowPhase.REGISTERING_VOTERS)
            self._voters.remove(voter_id)
            log.info("voter_removed")

    def unregister_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Make a voter ineligible, reversing a vote cast before tally.

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Session is tallied.
            NotAVoterError: Identity is not whitelisted.
            AlreadyUnregisteredError: Voter is already unregistered.
        """
        with self._operation(
            "unregister_voter", caller_id=caller_id, voter_id=voter_id
        ) as log:
            self._require_administrator(caller_id, "unregister_voter")
            self._require_phase("unregister_voter", *_ELIGIBILITY_PHASES)
            voter = self._voters.unregister(voter_id)
            log.info("voter_unregistered")
            return voter

    def register_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Make a whitelisted, unregistered voter eligible again.

        Raises:
            UnauthorizedError: Caller is not an administrator.
            InvalidPhaseError: Session is tallied.
            NotAVoterError: Identity was never whitelisted.
            AlreadyRegisteredError: Voter is already registered.
        """
        with self._operation(
            "register_voter", caller_id=caller_id, voter_id=voter_id
        ) as log:
            self._require_administrator(caller_id, "register_voter")
            self._require_phase("register_voter", *_ELIGIBILITY_PHASES)
            voter = self._voters.register(voter_id)
            log.info("voter_registered")
            return voter

    def is_voter(self, voter_id: str) -> bool:
        """Check whether an identity is whitelisted."""
        with self._state.lock:
            return self._voters.is_voter(voter_id)

    def get_voter(self, voter_id: str) -> Voter:
        """Get a whitelisted voter.

        Raises:
            NotAVoterError: Identity is not whitelisted.
        """
        with self._state.lock:
            return self._voters.get(voter_id)

    def get_voters(self) -> list[Voter]:
        """Get every whitelisted voter in whitelist order."""
        with self._state.lock:
            return self._voters.list_voters()

    # ------------------------------------------------------------------
    # Proposal ledger
    # ------------------------------------------------------------------

    def add_proposal(self, caller_id: str, description: str) -> int:
        """Register a proposal from an eligible voter.

        Returns:
            Id assigned to the proposal.

        Raises:
            InvalidPhaseError: Proposal registration is not open.
            NotAVoterError: Caller is not whitelisted.
            NotRegisteredError: Caller is unregistered.
            EmptyDescriptionError: Description is empty or blank.
            DescriptionTooLongError: Description is too long.
        """
        with self._operation("add_proposal", caller_id=caller_id) as log:
            self._require_phase(
                "add_proposal", WorkflowPhase.PROPOSALS_REGISTRATION_OPEN
            )
            proposal_id = self._ledger.add_proposal(caller_id, description)
            log.info("proposal_added", proposal_id=proposal_id)
            return proposal_id

    def cast_vote(self, caller_id: str, proposal_id: int) -> Proposal:
        """Cast the caller's single vote.

        Raises:
            InvalidPhaseError: Voting is not open.
            NotAVoterError: Caller is not whitelisted.
            NotRegisteredError: Caller is unregistered.
            AlreadyVotedError: Caller already voted.
            NoSuchProposalError: proposal_id is 0 or out of range.
        """
        with self._operation(
            "cast_vote", caller_id=caller_id, proposal_id=proposal_id
        ) as log:
            self._require_phase("cast_vote", WorkflowPhase.VOTING_OPEN)
            proposal = self._ledger.cast_vote(caller_id, proposal_id)
            log.info("vote_cast", vote_count=proposal.vote_count)
            return proposal

    def change_vote(self, caller_id: str, new_proposal_id: int) -> Proposal:
        """Move the caller's vote to another proposal.

        Raises:
            InvalidPhaseError: Voting is not open.
            NotAVoterError: Caller is not whitelisted.
            NotRegisteredError: Caller is unregistered.
            NoVoteToChangeError: Caller has not voted.
            NoSuchProposalError: new_proposal_id is 0 or out of range.
        """
        with self._operation(
            "change_vote", caller_id=caller_id, proposal_id=new_proposal_id
        ) as log:
            self._require_phase("change_vote", WorkflowPhase.VOTING_OPEN)
            proposal = self._ledger.change_vote(caller_id, new_proposal_id)
            log.info("vote_changed", vote_count=proposal.vote_count)
            return proposal

    def get_proposal(self, proposal_id: int) -> Proposal:
        """Get one proposal.

        Raises:
            NoSuchProposalError: proposal_id is 0 or out of range.
        """
        with self._state.lock:
            return self._ledger.get_proposal(proposal_id)

    def get_proposals(self) -> list[Proposal]:
        """Get every proposal in id order."""
        with self._state.lock:
            return self._ledger.get_all()

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def winning_proposal_id(self) -> int:
        """Winner of the last tally, 0 when none."""
        with self._state.lock:
            return self._state.winning_proposal_id

    def get_winner(self) -> Proposal:
        """Get the winning proposal.

        Raises:
            NoWinnerError: Not tallied yet, or no proposal received a vote.
        """
        with self._state.lock:
            if self._state.winning_proposal_id == NO_PROPOSAL_ID:
                raise NoWinnerError()
            return self._ledger.get_proposal(self._state.winning_proposal_id)

    def snapshot(self) -> SessionSnapshot:
        """Get a consistent, serializable view of the whole session."""
        with self._state.lock:
            return SessionSnapshot.from_state(self._state)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _operation(
        self, operation: str, **context: object
    ) -> Iterator[structlog.BoundLogger]:
        """Serialize an operation and log its rejection."""
        log = self._log_operation(operation, **context)
        with self._state.lock:
            try:
                yield log
            except SessionWorkflowError as exc:
                log.info(
                    f"{operation}_rejected",
                    error_type=type(exc).__name__,
                    reason=str(exc),
                )
                raise

    def _advance(
        self, caller_id: str, operation: str, required: WorkflowPhase
    ) -> WorkflowPhase:
        with self._operation(operation, caller_id=caller_id):
            self._require_administrator(caller_id, operation)
            self._require_phase(operation, required)
            next_phase = required.next_phase()
            # Only TALLIED lacks a successor and it is never `required` here
            assert next_phase is not None
            self._change_phase(next_phase, caller_id)
            return next_phase

    def _change_phase(
        self,
        new_phase: WorkflowPhase,
        caller_id: str,
        restart_mode: RestartMode | None = None,
    ) -> None:
        previous = self._state.phase
        if new_phase not in previous.valid_transitions():
            raise InvalidPhaseError(f"move to {new_phase.value}", previous)
        self._state.phase = new_phase
        self._log.info(
            "phase_changed",
            previous_phase=previous.value,
            new_phase=new_phase.value,
        )
        self._emit(
            PhaseChangedPayload(
                previous_phase=previous,
                new_phase=new_phase,
                triggered_by=caller_id,
                restart_mode=restart_mode,
            )
        )

    def _require_administrator(self, caller_id: str, operation: str) -> None:
        if not self._gate.is_administrator(caller_id):
            raise UnauthorizedError(caller_id, operation)

    def _require_phase(self, operation: str, *allowed: WorkflowPhase) -> None:
        if self._state.phase not in allowed:
            raise InvalidPhaseError(operation, self._state.phase, list(allowed))
