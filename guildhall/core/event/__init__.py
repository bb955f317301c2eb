"""
Event System for Guildhall.

Purpose
-------
Synchronous publish/subscribe used by the service layer to announce domain
events drained from aggregates.
"""

from .bus import CallbackType, EventBus, EventListener, EventPayload
from .router import EventRouter

__all__ = [
    "EventBus",
    "EventRouter",
    "EventListener",
    "EventPayload",
    "CallbackType",
]
