"""Proposal domain model.

Proposal ids are 1-based and mirror the position in the session's ordered
proposal list (`id == index + 1`). Id 0 is reserved to mean "no proposal",
which is also how a tally without a winner is reported.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

# Reserved id: never a real proposal, used as "no winner"
NO_PROPOSAL_ID: int = 0

FIRST_PROPOSAL_ID: int = 1


@dataclass(frozen=True, eq=True)
class Proposal:
    """A proposal submitted during proposal registration.

    Attributes:
        id: Sequential id, starting at 1 in registration order.
        description: Free-text description supplied by the proposer.
        vote_count: Number of counted votes (never negative).
    """

    id: int
    description: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.id < FIRST_PROPOSAL_ID:
            raise ValueError(
                f"Proposal id must be >= {FIRST_PROPOSAL_ID}, got {self.id}"
            )
        if self.vote_count < 0:
            raise ValueError(
                f"Proposal {self.id} vote_count cannot be negative, "
                f"got {self.vote_count}"
            )

    def with_vote_added(self) -> Proposal:
        """Return a copy with one more vote."""
        return replace(self, vote_count=self.vote_count + 1)

    def with_vote_removed(self) -> Proposal:
        """Return a copy with one vote less.

        Raises:
            ValueError: If the proposal has no vote to remove.
        """
        return replace(self, vote_count=self.vote_count - 1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "description": self.description,
            "vote_count": self.vote_count,
        }
