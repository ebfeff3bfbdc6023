"""Tie-Break Strategy Port.

When the tally sees a proposal with exactly the leader's vote count, it
reports the draw and asks the strategy which of the two leads from then
on. The tie-break policy is still open, so it stays behind this port.
"""

from __future__ import annotations

from typing import Protocol

from ballotbox.domain.models.proposal import Proposal


class TieBreakStrategyProtocol(Protocol):
    """Protocol for resolving a draw between the leader and a challenger."""

    def choose(self, leader: Proposal, challenger: Proposal) -> Proposal:
        """Pick the proposal that leads after a draw.

        Args:
            leader: Proposal leading so far (lower id).
            challenger: Later proposal with the same vote count.

        Returns:
            Either leader or challenger.
        """
        ...
