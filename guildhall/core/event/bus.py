"""
Guildhall EventBus: synchronous pub/sub for domain events.

Purpose
-------
Decouples the service layer from whatever reacts to roster and combat
changes. Services drain domain events from aggregates and publish them here.

Responsibilities
----------------
- Register/unregister listeners (exact names or wildcard patterns)
- Publish events to every matching listener in subscription order
- Error isolation (one failing listener never blocks others)
- Structured logging of subscriptions, deliveries and failures

Non-Responsibilities
--------------------
- Async or background delivery
- Persistence or replay of events

Design Decisions
----------------
- **Instance-based**: tests build a fresh EventBus each time
- **Synchronous**: listeners run inline, so a publish completes before the
  service call returns
- **Error isolation**: exceptions raised by a listener are logged with
  traceback and counted, never re-raised

Dependencies
------------
- guildhall.core.logging.logger (structured logging)
- guildhall.core.event.router (EventRouter)
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from guildhall.core.event.router import EventRouter
from guildhall.core.logging.logger import get_logger

logger = get_logger(__name__)

EventPayload = Dict[str, Any]
CallbackType = Callable[[EventPayload], Any]


@dataclass(frozen=True)
class EventListener:
    """A registered listener."""

    identifier: str
    pattern: str
    callback: CallbackType

    @property
    def name(self) -> str:
        return getattr(self.callback, "__qualname__", None) or repr(self.callback)


class EventBus:
    """
    Synchronous in-process EventBus.

    Not thread-safe; meant to be owned by one service graph.

    Examples
    --------
    >>> bus = EventBus()
    >>> listener_id = bus.subscribe("guild.*", lambda payload: print(payload["guild_id"]))
    >>> bus.publish("guild.member_added", {"guild_id": 1})
    1
    1
    >>> bus.unsubscribe("guild.*", listener_id)
    True
    """

    def __init__(self, router: Optional[EventRouter] = None) -> None:
        self._router = router or EventRouter()
        self._listeners: List[EventListener] = []
        self._ids = itertools.count(1)
        self._published = 0
        self._errors = 0

    # ------------------------------------------------------------------ #
    # Subscription API
    # ------------------------------------------------------------------ #

    def subscribe(self, event_name: str, callback: CallbackType) -> str:
        """
        Subscribe a callback to an event name or wildcard pattern.

        Parameters
        ----------
        event_name:
            Event name like "guild.member_added" or pattern like "guild.*".
        callback:
            Callable taking the event payload dict.

        Returns
        -------
        str:
            Listener identifier, used to unsubscribe.

        Raises
        ------
        ValueError:
            If event_name is empty or callback is not callable.
        """
        if not event_name:
            raise ValueError("Event name must be a non-empty string")
        if not callable(callback):
            raise ValueError(f"Event listener for '{event_name}' must be callable")

        listener = EventListener(
            identifier=f"listener-{next(self._ids)}",
            pattern=event_name,
            callback=callback,
        )
        self._listeners.append(listener)

        logger.debug(
            "EventBus: subscribed listener",
            extra={
                "event_name": event_name,
                "listener_id": listener.identifier,
                "listener": listener.name,
            },
        )
        return listener.identifier

    def unsubscribe(self, event_name: str, identifier: str) -> bool:
        """Remove a listener. Returns False if no such subscription exists."""
        for index, listener in enumerate(self._listeners):
            if listener.pattern == event_name and listener.identifier == identifier:
                del self._listeners[index]
                logger.debug(
                    "EventBus: unsubscribed listener",
                    extra={"event_name": event_name, "listener_id": identifier},
                )
                return True
        return False

    def clear(self) -> None:
        """Remove every listener."""
        previous = len(self._listeners)
        self._listeners.clear()
        logger.debug(
            "EventBus: cleared all listeners",
            extra={"previous_listener_count": previous},
        )

    # ------------------------------------------------------------------ #
    # Publish API
    # ------------------------------------------------------------------ #

    def publish(self, event_name: str, data: Optional[EventPayload] = None) -> int:
        """
        Deliver an event to every matching listener.

        Returns
        -------
        int:
            Number of listeners that ran without raising.
        """
        payload: EventPayload = dict(data or {})
        self._published += 1

        # Snapshot so listeners may (un)subscribe while being called
        listeners = [
            listener
            for listener in self._listeners
            if self._router.matches(event_name, listener.pattern)
        ]

        if not listeners:
            logger.debug(
                "EventBus: no listeners for event",
                extra={"event_name": event_name},
            )
            return 0

        delivered = 0
        for listener in listeners:
            try:
                listener.callback(payload)
            except Exception as exc:
                self._errors += 1
                logger.error(
                    f"EventBus: listener failed for '{event_name}'",
                    extra={
                        "event_name": event_name,
                        "listener_id": listener.identifier,
                        "listener": listener.name,
                        "error_type": type(exc).__name__,
                    },
                    exc_info=True,
                )
            else:
                delivered += 1

        logger.debug(
            "EventBus: published event",
            extra={
                "event_name": event_name,
                "listener_count": len(listeners),
                "delivered": delivered,
            },
        )
        return delivered

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    def listener_count(self, event_name: Optional[str] = None) -> int:
        """
        Number of listeners, or of listeners that would receive *event_name*.

        Examples
        --------
        >>> bus.listener_count()
        3
        >>> bus.listener_count("guild.member_added")
        2
        """
        if event_name is None:
            return len(self._listeners)
        return sum(
            1
            for listener in self._listeners
            if self._router.matches(event_name, listener.pattern)
        )

    def get_all_events(self) -> List[str]:
        """Sorted list of subscribed event names and patterns."""
        return sorted({listener.pattern for listener in self._listeners})

    def get_metrics_summary(self) -> Dict[str, int]:
        return {
            "total_events_published": self._published,
            "total_errors": self._errors,
            "total_listeners": len(self._listeners),
        }
