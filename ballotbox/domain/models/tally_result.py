"""Tally result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ballotbox.domain.models.proposal import NO_PROPOSAL_ID


@dataclass(frozen=True, eq=True)
class ProposalDraw:
    """Equality observed between the current leader and a challenger.

    Attributes:
        leader_id: Proposal leading when the draw was observed.
        challenger_id: Later proposal with the same vote count.
        vote_count: The shared vote count.
    """

    leader_id: int
    challenger_id: int
    vote_count: int


@dataclass(frozen=True, eq=True)
class TallyResult:
    """Outcome of a tally scan.

    Attributes:
        winning_proposal_id: Winner id, NO_PROPOSAL_ID when nobody won.
        winning_vote_count: Votes held by the winner (0 when none).
        draws: Draws observed during the scan, in scan order.
        total_votes: Votes counted across every proposal.
    """

    winning_proposal_id: int
    winning_vote_count: int = 0
    draws: tuple[ProposalDraw, ...] = ()
    total_votes: int = 0

    @property
    def has_winner(self) -> bool:
        """Check whether a proposal won."""
        return self.winning_proposal_id != NO_PROPOSAL_ID

    @classmethod
    def no_winner(
        cls, total_votes: int = 0, draws: tuple[ProposalDraw, ...] = ()
    ) -> TallyResult:
        """Create the result for an empty or all-zero ledger."""
        return cls(
            winning_proposal_id=NO_PROPOSAL_ID, draws=draws, total_votes=total_votes
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "winning_proposal_id": self.winning_proposal_id,
            "winning_vote_count": self.winning_vote_count,
            "draws": [
                {
                    "leader_id": draw.leader_id,
                    "challenger_id": draw.challenger_id,
                    "vote_count": draw.vote_count,
                }
                for draw in self.draws
            ],
            "total_votes": self.total_votes,
        }
