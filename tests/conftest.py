"""
Pytest configuration and shared fixtures for ballotbox tests.

Testing Standards:
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Port dependencies use the stubs from ballotbox.infrastructure.stubs
"""

from collections.abc import Callable, Iterator

import pytest
import structlog

from ballotbox.application.services.session_workflow_service import (
    SessionWorkflowService,
)
from ballotbox.domain.models.session_phase import PHASE_ORDER, WorkflowPhase
from ballotbox.domain.models.session_state import SessionState
from ballotbox.infrastructure.stubs import (
    AdministratorGateStub,
    RecordingSessionEventEmitter,
)

ADMIN = "owner"
VOTERS = ("alice", "bob", "carol")

_ADVANCE_OPERATIONS: dict[WorkflowPhase, str] = {
    WorkflowPhase.REGISTERING_VOTERS: "start_proposals_registration",
    WorkflowPhase.PROPOSALS_REGISTRATION_OPEN: "end_proposals_registration",
    WorkflowPhase.PROPOSALS_REGISTRATION_CLOSED: "start_voting_session",
    WorkflowPhase.VOTING_OPEN: "end_voting_session",
    WorkflowPhase.VOTING_CLOSED: "tally_votes",
}


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballotbox import __version__

    return __version__


@pytest.fixture
def emitter() -> RecordingSessionEventEmitter:
    """Recording event emitter."""
    return RecordingSessionEventEmitter()


@pytest.fixture
def gate() -> AdministratorGateStub:
    """Gate recognizing only the test administrator."""
    return AdministratorGateStub(administrators={ADMIN})


@pytest.fixture
def state() -> SessionState:
    """Fresh session with three seeded voters."""
    return SessionState.create(VOTERS)


@pytest.fixture
def workflow(
    state: SessionState,
    gate: AdministratorGateStub,
    emitter: RecordingSessionEventEmitter,
) -> SessionWorkflowService:
    """Workflow over the shared state, gate and emitter fixtures."""
    return SessionWorkflowService(
        state=state,
        administrator_gate=gate,
        event_emitter=emitter,
        max_description_length=100,
    )


@pytest.fixture
def advance_to() -> Callable[[SessionWorkflowService, WorkflowPhase], None]:
    """Drive a workflow forward (as the administrator) until it reaches a phase."""

    def _advance(workflow: SessionWorkflowService, target: WorkflowPhase) -> None:
        if PHASE_ORDER.index(target) < PHASE_ORDER.index(workflow.phase):
            raise ValueError(f"Cannot advance from {workflow.phase} to {target}")
        while workflow.phase is not target:
            getattr(workflow, _ADVANCE_OPERATIONS[workflow.phase])(ADMIN)

    return _advance
