"""Session script runner.

Applies a SessionScript to a workflow one step at a time and records what
happened to each step. Rejections are ordinary outcomes of a script (they
are the workflow's caller-correctable errors), so they are recorded, not
re-raised; anything else propagates.
"""

from __future__ import annotations

from collections.abc import Callable

from ballotbox.application.dtos.session_script import (
    SessionAction,
    SessionScript,
    SessionStep,
    StepOutcome,
)
from ballotbox.application.services.base import LoggingMixin
from ballotbox.application.services.session_workflow_service import (
    SessionWorkflowService,
)
from ballotbox.domain.errors.session import SessionWorkflowError
from ballotbox.domain.models.proposal import Proposal
from ballotbox.domain.models.session_phase import WorkflowPhase
from ballotbox.domain.models.tally_result import TallyResult
from ballotbox.domain.models.voter import Voter

StepResult = int | str | None


class SessionScriptRunner(LoggingMixin):
    """Replays session scripts against one workflow."""

    def __init__(self, workflow: SessionWorkflowService) -> None:
        """Initialize the runner.

        Args:
            workflow: Workflow the steps are applied to.
        """
        self._workflow = workflow
        self._init_logger(component="host")
        self._handlers: dict[SessionAction, Callable[[SessionStep], object]] = {
            SessionAction.ADD_VOTER: lambda s: workflow.add_voter(s.caller, s.voter),
            SessionAction.REMOVE_VOTER: lambda s: workflow.remove_voter(s.caller, s.voter),
            SessionAction.UNREGISTER_VOTER: lambda s: workflow.unregister_voter(
                s.caller, s.voter
            ),
            SessionAction.REGISTER_VOTER: lambda s: workflow.register_voter(
                s.caller, s.voter
            ),
            SessionAction.START_PROPOSALS_REGISTRATION: lambda s: (
                workflow.start_proposals_registration(s.caller)
            ),
            SessionAction.END_PROPOSALS_REGISTRATION: lambda s: (
                workflow.end_proposals_registration(s.caller)
            ),
            SessionAction.START_VOTING_SESSION: lambda s: workflow.start_voting_session(
                s.caller
            ),
            SessionAction.END_VOTING_SESSION: lambda s: workflow.end_voting_session(
                s.caller
            ),
            SessionAction.TALLY_VOTES: lambda s: workflow.tally_votes(s.caller),
            SessionAction.RESTART_SESSION: lambda s: workflow.restart_session(
                s.caller, s.restart_mode
            ),
            SessionAction.ADD_PROPOSAL: lambda s: workflow.add_proposal(
                s.caller, s.description
            ),
            SessionAction.CAST_VOTE: lambda s: workflow.cast_vote(s.caller, s.proposal_id),
            SessionAction.CHANGE_VOTE: lambda s: workflow.change_vote(
                s.caller, s.proposal_id
            ),
        }

    def run(self, script: SessionScript) -> list[StepOutcome]:
        """Apply every step of a script.

        Args:
            script: Validated session script.

        Returns:
            One outcome per applied step. With stop_on_error, the list ends
            at the first rejected step.
        """
        outcomes: list[StepOutcome] = []
        for index, step in enumerate(script.steps):
            log = self._log_operation("run_step", index=index, action=step.action.value)
            try:
                result = self._handlers[step.action](step)
            except SessionWorkflowError as exc:
                log.info("step_rejected", error_type=type(exc).__name__)
                outcomes.append(
                    StepOutcome(
                        index=index,
                        action=step.action,
                        succeeded=False,
                        error_type=type(exc).__name__,
                        error=str(exc),
                    )
                )
                if script.stop_on_error:
                    break
                continue

            outcomes.append(
                StepOutcome(
                    index=index,
                    action=step.action,
                    succeeded=True,
                    result=_summarize(result),
                )
            )

        self._log.info(
            "script_completed",
            steps_applied=len(outcomes),
            steps_rejected=sum(1 for outcome in outcomes if not outcome.succeeded),
        )
        return outcomes


def _summarize(result: object) -> StepResult:
    """Reduce an operation's return value to a JSON-friendly scalar."""
    if isinstance(result, WorkflowPhase):
        return result.value
    if isinstance(result, TallyResult):
        return result.winning_proposal_id
    if isinstance(result, Proposal):
        return result.id
    if isinstance(result, Voter):
        return result.voter_id
    if isinstance(result, int):
        return result
    return None
