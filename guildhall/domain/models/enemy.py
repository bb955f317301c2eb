"""
Enemy Domain Model for Guildhall.

Purpose
-------
Hostile entity with health, a damage range and a position on the map.

Business Rules
--------------
- name: 1 to 50 characters once trimmed
- health: never negative; the enemy is dead exactly when health is 0
- damage: min_damage > 0 and max_damage >= min_damage
- movement: a step is a delta; it is taken only if the target is on the map
  and the step is no longer than MAX_MOVE_DISTANCE, otherwise nothing moves

Domain Events
-------------
- enemy.damaged: When damage is received
- enemy.died: When health drops to 0 through damage
"""

from __future__ import annotations

import math
import random
from typing import Optional

from guildhall.domain.constants import (
    ENEMY_MAX_NAME_LENGTH,
    ENEMY_MIN_NAME_LENGTH,
    MAX_MOVE_DISTANCE,
)
from guildhall.domain.exceptions import DomainValidationError
from guildhall.domain.models.base import (
    Entity,
    validate_length,
    validate_non_negative,
    validate_positive,
)
from guildhall.domain.models.position import Position


class Enemy(Entity):
    """Enemy entity with combat state and a map position."""

    INVALID_NAME = (
        "[ERROR] The name cannot be null or empty, and it must be within the "
        "predefined minimum and maximum character limits."
    )
    INVALID_HEALTH = "[ERROR] The health must be greater than or equal to 0."
    INVALID_MIN_DAMAGE = "[ERROR] The minimum damage must be greater than 0."
    INVALID_MAX_DAMAGE = (
        "[ERROR] The maximum damage must be greater than or equal to the minimum damage."
    )
    INVALID_DAMAGE_AMOUNT = "[ERROR] The damage received must be greater than or equal to 0."
    INVALID_POSITION = "[ERROR] The position cannot be null."

    def __init__(
        self,
        name: str,
        health: int,
        min_damage: int,
        max_damage: int,
        x: int,
        y: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Create an enemy at (*x*, *y*).

        Parameters
        ----------
        rng : Optional[random.Random]
            Source for attack rolls; a private generator is used when omitted

        Raises
        ------
        DomainValidationError
            If name, health or the damage range is invalid
        InvalidCoordinateError
            If (*x*, *y*) is off the map
        """
        super().__init__()
        self._name = ""
        self._health = 0
        self._min_damage = 1
        self._max_damage = 1
        self._is_dead = True

        self.name = name
        self.health = health
        self.set_damage(min_damage, max_damage)
        self._position = Position(x, y)
        self._rng = rng or random.Random()

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_length(
            value, ENEMY_MIN_NAME_LENGTH, ENEMY_MAX_NAME_LENGTH, "name",
            message=self.INVALID_NAME, error_code="ENEMY_INVALID_NAME",
        )

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        """Override health directly. This is the only way back from 0."""
        validate_non_negative(
            value, "health",
            message=self.INVALID_HEALTH, error_code="ENEMY_INVALID_HEALTH",
        )
        self._health = value
        self._is_dead = value == 0

    @property
    def min_damage(self) -> int:
        return self._min_damage

    @property
    def max_damage(self) -> int:
        return self._max_damage

    @property
    def position(self) -> Position:
        return self._position

    @position.setter
    def position(self, value: Position) -> None:
        if not isinstance(value, Position):
            raise DomainValidationError(
                self.INVALID_POSITION,
                field="position",
                error_code="ENEMY_INVALID_POSITION",
                value=value,
            )
        self._position = value

    @property
    def is_dead(self) -> bool:
        return self._is_dead

    # ========================================================================
    # BUSINESS LOGIC
    # ========================================================================

    def set_damage(self, min_damage: int, max_damage: int) -> None:
        """
        Replace the damage range.

        Both bounds are checked before either is stored.

        Raises
        ------
        DomainValidationError
            If min_damage <= 0 or max_damage < min_damage
        """
        validate_positive(
            min_damage, "min_damage",
            message=self.INVALID_MIN_DAMAGE, error_code="ENEMY_INVALID_MIN_DAMAGE",
        )
        if max_damage is None or max_damage < min_damage:
            raise DomainValidationError(
                self.INVALID_MAX_DAMAGE,
                field="max_damage",
                error_code="ENEMY_INVALID_MAX_DAMAGE",
                value=max_damage,
            )
        self._min_damage = min_damage
        self._max_damage = max_damage

    def move(self, dx: int, dy: int) -> bool:
        """
        Try to move by (*dx*, *dy*).

        Returns
        -------
        bool
            True if the enemy moved; False if the target is off the map or
            the step is longer than MAX_MOVE_DISTANCE (position unchanged)
        """
        target_x = self._position.x + dx
        target_y = self._position.y + dy
        if math.hypot(dx, dy) > MAX_MOVE_DISTANCE:
            return False
        if not Position.is_within_bounds(target_x, target_y):
            return False
        self._position = Position(target_x, target_y)
        return True

    def attack(self) -> int:
        """Roll damage uniformly in [min_damage, max_damage]."""
        return self._rng.randint(self._min_damage, self._max_damage)

    def receive_damage(self, amount: int) -> None:
        """
        Take *amount* damage. Health never drops below 0.

        Raises
        ------
        DomainValidationError
            If amount is negative
        """
        validate_non_negative(
            amount, "amount",
            message=self.INVALID_DAMAGE_AMOUNT, error_code="ENEMY_INVALID_DAMAGE_AMOUNT",
        )
        was_dead = self._is_dead
        self._health = max(0, self._health - amount)
        self._is_dead = self._health == 0

        self.add_domain_event(
            "enemy.damaged",
            {"enemy_id": self.id, "amount": amount, "health": self._health},
        )
        if self._is_dead and not was_dead:
            self.add_domain_event("enemy.died", {"enemy_id": self.id, "name": self._name})

    def __repr__(self) -> str:
        return (
            f"Enemy(name={self._name!r}, health={self._health}, "
            f"damage={self._min_damage}-{self._max_damage}, position={self._position!r})"
        )
