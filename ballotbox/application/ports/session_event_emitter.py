"""Session Event Emitter Port.

Notifications are fire-and-forget: the workflow hands each event to the
emitter once the operation has fully applied. An emitter failure is logged
by the workflow and never undoes the operation that produced the event.
"""

from __future__ import annotations

from typing import Protocol

from ballotbox.domain.events.session import SessionEvent


class SessionEventEmitterProtocol(Protocol):
    """Protocol for delivering session events to an external observer."""

    def emit(self, event: SessionEvent) -> None:
        """Deliver one session event.

        Must not block on I/O for long; the caller holds the session lock.

        Args:
            event: Payload describing what happened.
        """
        ...
