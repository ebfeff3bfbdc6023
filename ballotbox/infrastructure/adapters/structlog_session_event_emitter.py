"""Structlog session event emitter adapter.

Implements SessionEventEmitterProtocol by writing every session event as
one structured log entry. With the production structlog configuration the
entries are JSON lines, so any log shipper can act as the observer.
"""

from __future__ import annotations

import structlog

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.domain.events.session import SessionEvent


class StructlogSessionEventEmitter(SessionEventEmitterProtocol):
    """Session events delivered as structured log entries.

    Entry shape:
        {"event": "session_event", "event_type": "vote.cast",
         "session_id": "...", "voter_id": "alice", "proposal_id": 2}
    """

    def __init__(self, session_id: str | None = None) -> None:
        """Initialize the emitter.

        Args:
            session_id: Optional label bound to every entry, for hosts that
                run several sessions one after another.
        """
        self._log = structlog.get_logger(__name__).bind(component="session_events")
        if session_id is not None:
            self._log = self._log.bind(session_id=session_id)

    def emit(self, event: SessionEvent) -> None:
        """Write the event as a structured log entry."""
        self._log.info("session_event", event_type=event.event_type, **event.to_dict())
