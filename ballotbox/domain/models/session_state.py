"""Session state holder.

The SessionState is the single authoritative record of a voting round:
phase, winner, voter registry and proposal ledger. Every component of the
workflow receives the same instance by reference; nothing else holds
voting state.

Concurrency:
    The state owns a re-entrant lock. Whoever mutates the state must hold
    it for the whole operation, and readers take it to obtain a consistent
    snapshot. Records stored here are frozen, so snapshots handed out
    under the lock cannot be altered afterwards.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from ballotbox.domain.models.proposal import NO_PROPOSAL_ID, Proposal
from ballotbox.domain.models.session_phase import WorkflowPhase
from ballotbox.domain.models.voter import Voter


@dataclass
class SessionState:
    """Mutable state of a single voting session.

    Invariants:
    - voter_ids lists exactly the keys of voters, in whitelist order
    - proposals[i].id == i + 1
    - winning_proposal_id is NO_PROPOSAL_ID until the session is tallied

    Attributes:
        phase: Current workflow phase.
        winning_proposal_id: Winner of the last tally (0 means none).
        voters: Whitelist, keyed by voter identity.
        voter_ids: Whitelisted identities in insertion order.
        proposals: Ordered proposal ledger.
        lock: Serializes access to the state.
    """

    phase: WorkflowPhase = WorkflowPhase.REGISTERING_VOTERS
    winning_proposal_id: int = NO_PROPOSAL_ID
    voters: dict[str, Voter] = field(default_factory=dict)
    voter_ids: list[str] = field(default_factory=list)
    proposals: list[Proposal] = field(default_factory=list)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @classmethod
    def create(cls, seed_voters: Iterable[str] = ()) -> SessionState:
        """Create a fresh session with pre-seeded, registered voters.

        Args:
            seed_voters: Identities to whitelist before the session starts.

        Returns:
            New SessionState in REGISTERING_VOTERS.

        Raises:
            ValueError: If an identity is seeded twice.
        """
        state = cls()
        for voter_id in seed_voters:
            if voter_id in state.voters:
                raise ValueError(f"Duplicate seed voter: {voter_id}")
            state.voters[voter_id] = Voter(voter_id=voter_id)
            state.voter_ids.append(voter_id)
        return state

    @property
    def next_proposal_id(self) -> int:
        """Id the next registered proposal will receive."""
        return len(self.proposals) + 1

    @property
    def total_votes(self) -> int:
        """Sum of vote counts across all proposals."""
        return sum(proposal.vote_count for proposal in self.proposals)

    @property
    def voted_count(self) -> int:
        """Number of voters currently holding a counted vote."""
        return sum(1 for voter in self.voters.values() if voter.has_voted)
