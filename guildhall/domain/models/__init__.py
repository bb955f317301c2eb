"""
Domain models package for Guildhall.

Purpose
-------
Self-validating domain models. These models encapsulate game rules,
validation, and state transitions; services orchestrate them.

Base Classes
------------
- Entity: Objects with identity
- ValueObject: Types compared by their attributes
- AggregateRoot: Consistency boundaries
- DomainEvent: State change notifications
"""

# Base domain model classes
from .base import (
    AggregateRoot,
    DomainEvent,
    Entity,
    ValueObject,
    validate_length,
    validate_non_negative,
    validate_not_future,
    validate_pattern,
    validate_positive,
    validate_range,
)

# Domain models
from .position import Position
from .pet import Pet
from .player import Player
from .enemy import Enemy
from .race import PlayerRace
from .guild import Guild

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    "AggregateRoot",
    "DomainEvent",
    # Validators
    "validate_positive",
    "validate_non_negative",
    "validate_range",
    "validate_length",
    "validate_pattern",
    "validate_not_future",
    # Domain models
    "Position",
    "Pet",
    "Player",
    "Enemy",
    "PlayerRace",
    "Guild",
]
