"""
Base domain model classes for Guildhall.

Purpose
-------
Provide foundational abstractions for self-validating domain models that
encapsulate business rules and state transitions.

Responsibilities
----------------
- Define base Entity class with identity and equality semantics
- Define base ValueObject class for value types compared by attributes
- Define base AggregateRoot class for consistency boundaries
- Provide the validation helpers every model uses for its field rules
- Track domain events for event-driven consumers

Non-Responsibilities
--------------------
- Persistence (out of scope)
- Publishing events (handled by services via the EventBus)
- Logging (handled by the service layer)

Design Patterns
---------------
- **Entity**: Objects with identity that persist over time
- **Value Object**: Objects defined by their attributes
- **Aggregate Root**: Consistency boundary for domain operations
- **Domain Events**: Communicate state changes to other parts of the system

Usage Example
-------------
>>> class Totem(Entity):
...     def __init__(self, name: str, charges: int):
...         super().__init__()
...         self.name = validate_length(name, 1, 20, "name")
...         validate_non_negative(charges, "charges")
...         self.charges = charges
...
...     def discharge(self) -> None:
...         self.charges -= 1
...         self.add_domain_event("totem.discharged", {"remaining": self.charges})
"""

from __future__ import annotations

import re
import uuid
from collections import deque
from abc import ABC
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Deque, Dict, Hashable, List, Optional, Type

from guildhall.domain.constants import MAX_PENDING_EVENTS
from guildhall.domain.exceptions import DomainValidationError


# ============================================================================
# DOMAIN EVENTS
# ============================================================================


@dataclass
class DomainEvent:
    """
    Represents a domain event that has occurred.

    Attributes
    ----------
    event_name : str
        Event name (e.g., "guild.member_added")
    payload : Dict[str, Any]
        Event payload with relevant data
    occurred_at : datetime
        When the event occurred (UTC)
    """

    event_name: str
    payload: Dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


# ============================================================================
# VALUE OBJECT
# ============================================================================


class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are defined by their attributes, not by identity.
    Two value objects with the same attributes are considered equal.

    Subclasses should:
    1. Define and validate all attributes in __init__
    2. Only expose setters that re-run the relevant validation
    """

    def __eq__(self, other: object) -> bool:
        """Value objects are equal if all attributes are equal."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))


# ============================================================================
# ENTITY
# ============================================================================


class Entity(ABC):
    """
    Base class for entities with identity.

    Entities are defined by their identity (ID), not their attributes.
    Two entities with the same ID are considered the same entity, even if
    their attributes differ. When no ID is supplied an opaque unique one is
    generated, so two separately constructed entities never compare equal.

    Subclasses should:
    1. Call super().__init__(entity_id) in constructor
    2. Define business methods that modify state
    3. Emit domain events for significant state changes
    4. Validate invariants before state changes

    Pending events are kept in a buffer of at most MAX_PENDING_EVENTS; when
    nothing drains it, the oldest events are dropped first.
    """

    def __init__(self, entity_id: Optional[Hashable] = None) -> None:
        """
        Initialize entity with identity.

        Parameters
        ----------
        entity_id : Optional[Hashable]
            Unique identifier for this entity (generated when omitted)
        """
        self._id = entity_id if entity_id is not None else uuid.uuid4().hex
        self._domain_events: Deque[DomainEvent] = deque(maxlen=MAX_PENDING_EVENTS)

    @property
    def id(self) -> Any:
        """Get entity ID (immutable)."""
        return self._id

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they are the same kind and have the same ID."""
        if not isinstance(other, Entity) or type(other) is not type(self):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def add_domain_event(self, event_name: str, payload: Dict[str, Any]) -> None:
        """
        Add a domain event to be published.

        Parameters
        ----------
        event_name : str
            Event name (e.g., "guild.member_added")
        payload : Dict[str, Any]
            Event payload with relevant data
        """
        event = DomainEvent(event_name=event_name, payload=payload)
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """
        Clear and return all domain events.

        Called by the service layer after it has published the events.

        Returns
        -------
        List[DomainEvent]
            All domain events that occurred since last clear
        """
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def get_pending_events(self) -> List[DomainEvent]:
        """Get domain events without clearing them."""
        return list(self._domain_events)


# ============================================================================
# AGGREGATE ROOT
# ============================================================================


class AggregateRoot(Entity):
    """
    Base class for aggregate roots.

    An aggregate is a cluster of domain objects that are treated as a single
    unit for data changes. The aggregate root is the entry point for all
    operations on the aggregate.

    Subclasses should:
    1. Expose business methods that maintain aggregate invariants
    2. Protect internal collections (return snapshots, not the list itself)
    3. Emit domain events for significant state transitions
    4. Check every precondition before mutating anything
    """

    pass


# ============================================================================
# DOMAIN MODEL VALIDATION
# ============================================================================


def _fail(
    default_message: str,
    field_name: str,
    value: Any,
    message: Optional[str],
    error_code: Optional[str],
    error_cls: Type[DomainValidationError],
) -> None:
    raise error_cls(
        message or default_message,
        field=field_name,
        error_code=error_code,
        value=value,
    )


def validate_positive(
    value: float,
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
    error_cls: Type[DomainValidationError] = DomainValidationError,
) -> None:
    """
    Validate that a value is positive.

    Raises
    ------
    DomainValidationError
        If value is not positive
    """
    if value is None or value <= 0:
        _fail(
            f"{field_name} must be positive, got {value}",
            field_name, value, message, error_code, error_cls,
        )


def validate_non_negative(
    value: float,
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
    error_cls: Type[DomainValidationError] = DomainValidationError,
) -> None:
    """
    Validate that a value is non-negative.

    Raises
    ------
    DomainValidationError
        If value is negative
    """
    if value is None or value < 0:
        _fail(
            f"{field_name} must be non-negative, got {value}",
            field_name, value, message, error_code, error_cls,
        )


def validate_range(
    value: float,
    min_val: float,
    max_val: float,
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
    error_cls: Type[DomainValidationError] = DomainValidationError,
) -> None:
    """
    Validate that a value is within a range.

    Parameters
    ----------
    value : float
        Value to validate
    min_val : float
        Minimum allowed value (inclusive)
    max_val : float
        Maximum allowed value (inclusive)
    field_name : str
        Name of the field (for error messages)
    message : Optional[str]
        Fixed message to raise instead of the generated one
    error_code : Optional[str]
        Stable error code (defaults to ``INVALID_<FIELD>``)
    error_cls : Type[DomainValidationError]
        Exception type to raise

    Raises
    ------
    DomainValidationError
        If value is outside the range
    """
    if value is None or not (min_val <= value <= max_val):
        _fail(
            f"{field_name} must be between {min_val} and {max_val}, got {value}",
            field_name, value, message, error_code, error_cls,
        )


def validate_length(
    value: Optional[str],
    min_len: int,
    max_len: int,
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
    strip: bool = True,
) -> str:
    """
    Validate a required string's length and return the stored form.

    Parameters
    ----------
    value : Optional[str]
        String to validate
    min_len, max_len : int
        Inclusive length bounds
    field_name : str
        Name of the field (for error messages)
    message : Optional[str]
        Fixed message to raise instead of the generated one
    error_code : Optional[str]
        Stable error code
    strip : bool
        Measure (and return) the trimmed string. When False the raw string
        is measured, but whitespace-only values are still rejected.

    Returns
    -------
    str
        The string to store (trimmed when ``strip`` is set)

    Raises
    ------
    DomainValidationError
        If value is missing, whitespace-only or outside the length bounds
    """
    default = (
        f"{field_name} must be between {min_len} and {max_len} characters"
    )
    if not isinstance(value, str) or not value.strip():
        _fail(default, field_name, value, message, error_code, DomainValidationError)

    candidate = value.strip() if strip else value
    if not (min_len <= len(candidate) <= max_len):
        _fail(default, field_name, value, message, error_code, DomainValidationError)
    return candidate


def validate_pattern(
    value: str,
    pattern: str,
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
) -> None:
    """
    Validate that a string fully matches a regular expression.

    Raises
    ------
    DomainValidationError
        If value does not match ``pattern``
    """
    if re.fullmatch(pattern, value) is None:
        _fail(
            f"{field_name} has invalid characters",
            field_name, value, message, error_code, DomainValidationError,
        )


def validate_not_future(
    value: Optional[date],
    field_name: str,
    message: Optional[str] = None,
    error_code: Optional[str] = None,
) -> date:
    """
    Validate that a date is present and not after today.

    ``datetime`` values are reduced to their calendar date.

    Returns
    -------
    date
        The validated calendar date

    Raises
    ------
    DomainValidationError
        If value is missing or in the future
    """
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date) or value > date.today():
        _fail(
            f"{field_name} cannot be missing or in the future",
            field_name, value, message, error_code, DomainValidationError,
        )
    return value
