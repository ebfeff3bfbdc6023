"""Base service logging mixin.

This module provides the LoggingMixin class for standardized structured
logging across all application services, plus the fire-and-forget event
delivery helper the voting services share.

Usage:
    from ballotbox.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()  # Initialize structured logger

        def do_something(self) -> None:
            log = self._log_operation("do_something", item_id="123")
            log.info("operation_started")
            # ... do work ...
            log.info("operation_completed")
"""

import structlog

from ballotbox.application.ports.session_event_emitter import (
    SessionEventEmitterProtocol,
)
from ballotbox.domain.events.session import SessionEvent


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "voting")

    Each operation gets:
    - operation: The name of the operation being performed
    - Any additional context passed to _log_operation()

    The correlation ID is added to every entry by the structlog
    processor chain configured at startup, not bound here.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "voting") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation context.

        Example:
            log = self._log_operation("cast_vote", voter_id="alice")
            log.info("vote_cast", proposal_id=2)
        """
        return self._log.bind(operation=operation, **context)


class EventEmittingMixin(LoggingMixin):
    """Mixin for services that report session events.

    Events are delivered after the state change has been applied. A
    failing emitter is logged as event_emission_failed and the completed
    operation stands.
    """

    _emitter: SessionEventEmitterProtocol

    def _emit(self, event: SessionEvent) -> None:
        """Hand an event to the injected emitter.

        Args:
            event: Payload describing the applied change.
        """
        try:
            self._emitter.emit(event)
        except Exception as exc:
            self._log.warning(
                "event_emission_failed",
                event_type=event.event_type,
                error=str(exc),
                error_type=type(exc).__name__,
            )
