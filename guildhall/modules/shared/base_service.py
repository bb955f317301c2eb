"""
Base Service Foundation

Purpose
-------
Provides the foundational class for Guildhall services. Services orchestrate
domain models, publish the domain events those models buffer, and own all
logging around domain operations.

Design Notes
------------
This base class provides:
- Structured logging with operation context
- Safe config access
- Event emission helpers, including draining aggregate events
- Error logging at a level derived from the exception's severity

What this class does NOT do:
- Enforce game rules (domain models do that)
- Persist anything

Usage
-----
    class GuildService(BaseService):
        def __init__(self, event_bus, logger=None):
            super().__init__(event_bus, logger or get_logger(__name__))

        def enroll(self, guild_id, player):
            # Service logic here, using self.log, self.get_config, self.emit_event
            pass
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from guildhall.core.config.config import Config
from guildhall.core.logging.logger import get_logger
from guildhall.domain.exceptions import ErrorSeverity, get_error_severity

if TYPE_CHECKING:
    from logging import Logger

    from guildhall.core.event.bus import EventBus
    from guildhall.domain.models.base import Entity


_SEVERITY_LEVELS = {
    ErrorSeverity.DEBUG: logging.DEBUG,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class BaseService:
    """
    Base class for all Guildhall services.

    Args:
        event_bus: Event bus that receives published domain events
        logger: Structured logger instance (defaults to the subclass module logger)
    """

    def __init__(
        self,
        event_bus: EventBus,
        logger: Optional[Logger] = None,
    ) -> None:
        self._events = event_bus
        self.log = logger or get_logger(type(self).__module__)

    def get_config(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Read a static configuration value.

        Args:
            key: Attribute name on Config (e.g. "DEFAULT_GUILD_MAX_MEMBERS")
            default: Value returned when Config has no such attribute

        Returns:
            Configuration value
        """
        return getattr(Config, key, default)

    def emit_event(
        self,
        event_type: str,
        data: Dict[str, Any],
        context: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Publish an event on the bus.

        Args:
            event_type: Type/name of the event
            data: Event payload data
            context: Optional additional payload fields

        Returns:
            Number of listeners that handled the event
        """
        return self._events.publish(event_type, {**data, **(context or {})})

    def publish_domain_events(self, entity: Entity) -> int:
        """
        Drain the entity's buffered domain events and publish each one.

        Args:
            entity: Entity or aggregate root holding pending events

        Returns:
            Number of events published
        """
        events = entity.clear_domain_events()
        for event in events:
            self.emit_event(
                event.event_name,
                event.payload,
                context={"occurred_at": event.occurred_at.isoformat()},
            )
        return len(events)

    def log_operation(self, operation: str, **context: Any) -> None:
        """
        Log a service operation with structured context.

        Args:
            operation: Name of the operation being performed
            **context: Additional context data
        """
        self.log.info(
            f"Service operation: {operation}",
            extra={"service_operation": operation, **context},
        )

    def log_error(
        self,
        operation: str,
        error: Exception,
        **context: Any,
    ) -> None:
        """
        Log a service error at the level matching the error's severity.

        Domain exceptions carry their own severity; anything else is logged
        as an error with traceback.

        Args:
            operation: Name of the operation that failed
            error: The exception that occurred
            **context: Additional context data
        """
        severity = get_error_severity(error)
        level = _SEVERITY_LEVELS.get(severity, logging.ERROR)
        self.log.log(
            level,
            f"Service error during {operation}: {str(error)}",
            extra={
                "service_operation": operation,
                "error_type": type(error).__name__,
                "error_code": getattr(error, "error_code", None),
                "error_message": str(error),
                **context,
            },
            exc_info=level >= logging.ERROR,
        )
