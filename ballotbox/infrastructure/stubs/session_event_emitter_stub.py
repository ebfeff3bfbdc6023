"""Session event emitter stub for testing.

Records every emitted event in memory so tests can assert on exactly
what the workflow reported, and in which order.

WARNING: This stub is NOT for production use.
Production implementation is in
ballotbox/infrastructure/adapters/structlog_session_event_emitter.py.
"""

from __future__ import annotations

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.domain.events.session import SessionEvent


class RecordingSessionEventEmitter(SessionEventEmitterProtocol):
    """In-memory recorder for SessionEventEmitterProtocol.

    Usage:
        emitter = RecordingSessionEventEmitter()
        workflow = SessionWorkflowService(state, gate, emitter, 1_000)
        workflow.add_voter("owner", "alice")
        assert emitter.event_types == ["voter.registered"]

        # Simulate a broken observer
        failing = RecordingSessionEventEmitter.failing()
    """

    def __init__(self) -> None:
        """Initialize an empty recorder."""
        self._events: list[SessionEvent] = []
        self._fail_with: Exception | None = None

    @classmethod
    def failing(
        cls, error: Exception | None = None
    ) -> RecordingSessionEventEmitter:
        """Create a stub whose emit always raises.

        Args:
            error: Exception to raise (default: RuntimeError).

        Returns:
            Configured stub instance.
        """
        stub = cls()
        stub._fail_with = error or RuntimeError("observer unavailable")
        return stub

    def emit(self, event: SessionEvent) -> None:
        """Record the event, or raise when configured to fail."""
        if self._fail_with is not None:
            raise self._fail_with
        self._events.append(event)

    @property
    def events(self) -> list[SessionEvent]:
        """Every recorded event, oldest first."""
        return list(self._events)

    @property
    def event_types(self) -> list[str]:
        """Event types of every recorded event, oldest first."""
        return [event.event_type for event in self._events]

    def events_of_type(self, event_type: str) -> list[SessionEvent]:
        """Recorded events with the given event type."""
        return [event for event in self._events if event.event_type == event_type]

    def clear(self) -> None:
        """Forget every recorded event."""
        self._events.clear()
