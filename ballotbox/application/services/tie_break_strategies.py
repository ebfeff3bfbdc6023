"""Tie-break strategies for the tally engine.

The tie-break policy of the voting process has not been settled. The only
strategy shipped keeps the earlier-registered proposal, which is the
behavior sessions have always had; other policies plug in through
TieBreakStrategyProtocol.
"""

from __future__ import annotations

from ballotbox.domain.models.proposal import Proposal


class KeepEarliestTieBreak:
    """Keep the current leader (the lower id) on a draw."""

    def choose(self, leader: Proposal, challenger: Proposal) -> Proposal:
        """Return the leader unchanged."""
        return leader
