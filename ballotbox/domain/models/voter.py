"""Voter domain model.

A voter is an opaque identity known to the whitelist. Being whitelisted
does not imply being eligible: `is_registered` gates proposing and voting,
and can be toggled without losing the whitelist entry.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, eq=True)
class Voter:
    """A whitelisted voter.

    Invariants:
    - has_voted implies voted_proposal_id is a real proposal id (>= 1)
    - not has_voted implies voted_proposal_id is None

    Attributes:
        voter_id: Opaque unique identity of the voter.
        is_registered: Whether the voter may currently propose and vote.
        has_voted: Whether the voter holds a counted vote this session.
        voted_proposal_id: Id of the voted proposal, None when not voted.
    """

    voter_id: str
    is_registered: bool = True
    has_voted: bool = False
    voted_proposal_id: int | None = None

    def __post_init__(self) -> None:
        """Validate vote bookkeeping consistency."""
        if not self.voter_id:
            raise ValueError("voter_id must be a non-empty identity")
        if self.has_voted and (
            self.voted_proposal_id is None or self.voted_proposal_id < 1
        ):
            raise ValueError(
                f"Voter {self.voter_id} has voted but voted_proposal_id "
                f"is {self.voted_proposal_id!r}"
            )
        if not self.has_voted and self.voted_proposal_id is not None:
            raise ValueError(
                f"Voter {self.voter_id} has not voted but voted_proposal_id "
                f"is {self.voted_proposal_id!r}"
            )

    def with_vote(self, proposal_id: int) -> Voter:
        """Return a copy recording a vote for proposal_id."""
        return replace(self, has_voted=True, voted_proposal_id=proposal_id)

    def without_vote(self) -> Voter:
        """Return a copy with no recorded vote."""
        return replace(self, has_voted=False, voted_proposal_id=None)

    def with_registration(self, is_registered: bool) -> Voter:
        """Return a copy with the given registration flag."""
        return replace(self, is_registered=is_registered)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "voter_id": self.voter_id,
            "is_registered": self.is_registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }
