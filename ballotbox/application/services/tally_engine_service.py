"""Tally engine service.

Scans the proposal ledger in id order and names the winner. The scan is
deterministic: the same ledger and the same tie-break strategy always
produce the same result.

Algorithm:
1. Leader starts at the first proposal
2. A strictly higher count replaces the leader
3. An equal count is a draw: record it, let the strategy decide
4. No proposals, or a leader with zero votes, means no winner (id 0)
5. Draws are emitted only once the scan completes

Only the workflow's transition into TALLIED calls compute_winner.
"""

from __future__ import annotations

from collections.abc import Sequence

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.ports.tie_break import TieBreakStrategyProtocol
from ballotbox.application.services.base import EventEmittingMixin
from ballotbox.application.services.tie_break_strategies import KeepEarliestTieBreak
from ballotbox.domain.events.session import ProposalDrawPayload
from ballotbox.domain.models.proposal import Proposal
from ballotbox.domain.models.tally_result import ProposalDraw, TallyResult


class TallyEngineService(EventEmittingMixin):
    """Winner selection over an ordered proposal ledger."""

    def __init__(
        self,
        event_emitter: SessionEventEmitterProtocol,
        tie_break: TieBreakStrategyProtocol | None = None,
    ) -> None:
        """Initialize the tally engine.

        Args:
            event_emitter: Receives draw notifications.
            tie_break: Draw resolution policy. Defaults to KeepEarliestTieBreak.
        """
        self._emitter = event_emitter
        self._tie_break = tie_break or KeepEarliestTieBreak()
        self._init_logger()

    @property
    def tie_break(self) -> TieBreakStrategyProtocol:
        """The draw resolution policy in use."""
        return self._tie_break

    def compute_winner(self, proposals: Sequence[Proposal]) -> TallyResult:
        """Find the winning proposal.

        Args:
            proposals: Ledger in id order.

        Returns:
            TallyResult naming the winner, or id 0 when nobody won.

        Raises:
            ValueError: If the tie-break strategy returns neither candidate.
        """
        total_votes = sum(proposal.vote_count for proposal in proposals)
        if not proposals:
            self._log.debug("tally_empty_ledger")
            return TallyResult.no_winner()

        leader = proposals[0]
        draws: list[ProposalDraw] = []
        for challenger in proposals[1:]:
            if challenger.vote_count > leader.vote_count:
                leader = challenger
            elif challenger.vote_count == leader.vote_count:
                draws.append(
                    ProposalDraw(
                        leader_id=leader.id,
                        challenger_id=challenger.id,
                        vote_count=leader.vote_count,
                    )
                )
                leader = self._resolve_draw(leader, challenger)

        for draw in draws:
            self._emit(
                ProposalDrawPayload(
                    leader_id=draw.leader_id,
                    challenger_id=draw.challenger_id,
                    vote_count=draw.vote_count,
                )
            )

        if leader.vote_count == 0:
            self._log.debug("tally_no_votes", proposal_count=len(proposals))
            return TallyResult.no_winner(total_votes=total_votes, draws=tuple(draws))

        self._log.debug(
            "tally_computed",
            winning_proposal_id=leader.id,
            winning_vote_count=leader.vote_count,
            draw_count=len(draws),
        )
        return TallyResult(
            winning_proposal_id=leader.id,
            winning_vote_count=leader.vote_count,
            draws=tuple(draws),
            total_votes=total_votes,
        )

    def _resolve_draw(self, leader: Proposal, challenger: Proposal) -> Proposal:
        chosen = self._tie_break.choose(leader, challenger)
        if chosen.id not in (leader.id, challenger.id):
            raise ValueError(
                f"Tie-break returned proposal {chosen.id}, expected "
                f"{leader.id} or {challenger.id}"
            )
        return chosen
