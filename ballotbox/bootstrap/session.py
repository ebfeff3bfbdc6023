"""Bootstrap wiring for voting session dependencies."""

from __future__ import annotations

from structlog import get_logger

from ballotbox.application.ports.administrator_gate import (
    AdministratorGateProtocol,
)
from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.application.ports.tie_break import TieBreakStrategyProtocol
from ballotbox.application.services.session_workflow_service import (
    SessionWorkflowService,
)
from ballotbox.config.session_config import SessionConfig
from ballotbox.domain.models.session_state import SessionState
from ballotbox.infrastructure.adapters.allowlist_administrator_gate import (
    AllowlistAdministratorGate,
)
from ballotbox.infrastructure.adapters.structlog_session_event_emitter import (
    StructlogSessionEventEmitter,
)

_session_config: SessionConfig | None = None
_session_workflow: SessionWorkflowService | None = None


def create_session_workflow(
    config: SessionConfig | None = None,
    event_emitter: SessionEventEmitterProtocol | None = None,
    administrator_gate: AdministratorGateProtocol | None = None,
    tie_break: TieBreakStrategyProtocol | None = None,
) -> SessionWorkflowService:
    """Build a fresh workflow over a newly seeded session.

    Args:
        config: Session configuration (default: read from environment).
        event_emitter: Event sink (default: StructlogSessionEventEmitter).
        administrator_gate: Capability check (default: allowlist built from
            config.administrator_ids).
        tie_break: Draw resolution policy (default: keep the earliest).

    Returns:
        Workflow in REGISTERING_VOTERS with the configured voters seeded.
    """
    config = config or get_session_config()
    workflow = SessionWorkflowService(
        state=SessionState.create(config.seed_voters),
        administrator_gate=administrator_gate
        or AllowlistAdministratorGate(config.administrator_ids),
        event_emitter=event_emitter or StructlogSessionEventEmitter(),
        tie_break=tie_break,
        max_description_length=config.max_description_length,
    )
    get_logger(__name__).info(
        "session_workflow_created",
        seed_voter_count=len(config.seed_voters),
        administrator_count=len(config.administrator_ids),
    )
    return workflow


def get_session_config() -> SessionConfig:
    """Get session config, reading the environment on first use."""
    global _session_config
    if _session_config is None:
        _session_config = SessionConfig.from_environment()
    return _session_config


def get_session_workflow() -> SessionWorkflowService:
    """Get the process-wide session workflow, creating it on first use."""
    global _session_workflow
    if _session_workflow is None:
        _session_workflow = create_session_workflow()
    return _session_workflow


def set_session_config(config: SessionConfig) -> None:
    """Set custom session config for testing."""
    global _session_config
    _session_config = config


def set_session_workflow(workflow: SessionWorkflowService) -> None:
    """Set custom session workflow for testing."""
    global _session_workflow
    _session_workflow = workflow


def reset_session_dependencies() -> None:
    """Reset session dependency singletons."""
    global _session_config
    global _session_workflow

    _session_config = None
    _session_workflow = None
