"""
Player Domain Model for Guildhall.

Purpose
-------
Entity representing a player character: identity, progression stats,
combat percentages, an honor title and an optional pet.

Responsibilities
----------------
- Enforce the field rules for every player attribute
- Own (at most) one Pet, created together with the player
- Provide read-only access for aggregates such as Guild

Non-Responsibilities
--------------------
- Guild membership bookkeeping (handled by Guild)
- Persistence and presentation

Usage Example
-------------
>>> hero = Player.with_pet(
...     "Aldric", 12, date(2024, 1, 5), 3400, 120, 1.5, 12.5, 8.0, "Knight of Dawn",
...     "Ember", 4, date(2024, 2, 1), 80, 60, False,
... )
>>> hero.has_pet
True
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from guildhall.domain.constants import (
    HONOR_TITLE_PATTERN,
    MIN_LEVEL,
    PLAYER_MAX_HONOR_TITLE_LENGTH,
    PLAYER_MAX_LEVEL,
    PLAYER_MAX_NAME_LENGTH,
    PLAYER_MAX_PCT,
    PLAYER_MIN_NAME_LENGTH,
)
from guildhall.domain.models.base import (
    Entity,
    validate_length,
    validate_non_negative,
    validate_not_future,
    validate_pattern,
    validate_range,
)
from guildhall.domain.models.pet import Pet


class Player(Entity):
    """
    Player entity.

    Players compare by identity: two separately constructed players are
    different members even when every attribute matches.

    Business Rules
    --------------
    - name: 5 to 50 characters once trimmed
    - level: 1 to 99
    - creation_date: required, not in the future
    - experience, gold, health_regen_per_sec: non-negative
    - critical_pct, dodge_pct: 0.0 to 100.0
    - honor_title: 1 to 30 characters once trimmed, English letters and spaces only
    - pet: optional, fixed at construction
    """

    INVALID_NAME = (
        "[ERROR] The name cannot be null, empty, consist solely of spaces, and it "
        "must be within the predefined minimum and maximum character limits."
    )
    INVALID_LEVEL = "[ERROR] The level must be between 1 and the predefined maximum."
    INVALID_CREATION_DATE = "[ERROR] The creation date cannot be null or in the future."
    INVALID_EXPERIENCE = "[ERROR] The experience must be greater than or equal to 0."
    INVALID_GOLD = "[ERROR] The gold must be greater than or equal to 0."
    INVALID_HEALTH_REGEN_PER_SEC = (
        "[ERROR] The health regeneration per second must be greater than or equal to 0."
    )
    INVALID_CRITICAL_PCT = "[ERROR] The critical percentage must be between 0.0 and 100.0."
    INVALID_DODGE_PCT = "[ERROR] The dodge percentage must be between 0.0 and 100.0."
    INVALID_HONOR_TITLE = (
        "[ERROR] The honor title cannot be null, empty, consist solely of spaces, "
        "cannot exceed the predefined maximum character limit, and can only contain "
        "characters from the English alphabet and whitespaces."
    )

    def __init__(
        self,
        name: str,
        level: int,
        creation_date: date,
        experience: int,
        gold: int,
        health_regen_per_sec: float,
        critical_pct: float,
        dodge_pct: float,
        honor_title: str,
    ) -> None:
        """
        Create a player without a pet.

        Raises
        ------
        DomainValidationError
            If any attribute breaks its rule (see class docstring)
        """
        super().__init__()

        self._name = validate_length(
            name, PLAYER_MIN_NAME_LENGTH, PLAYER_MAX_NAME_LENGTH, "name",
            message=self.INVALID_NAME, error_code="PLAYER_INVALID_NAME",
        )
        validate_range(
            level, MIN_LEVEL, PLAYER_MAX_LEVEL, "level",
            message=self.INVALID_LEVEL, error_code="PLAYER_INVALID_LEVEL",
        )
        self._level = level
        self._creation_date = validate_not_future(
            creation_date, "creation_date",
            message=self.INVALID_CREATION_DATE,
            error_code="PLAYER_INVALID_CREATION_DATE",
        )
        validate_non_negative(
            experience, "experience",
            message=self.INVALID_EXPERIENCE, error_code="PLAYER_INVALID_EXPERIENCE",
        )
        self._experience = experience
        validate_non_negative(
            gold, "gold", message=self.INVALID_GOLD, error_code="PLAYER_INVALID_GOLD",
        )
        self._gold = gold
        validate_non_negative(
            health_regen_per_sec, "health_regen_per_sec",
            message=self.INVALID_HEALTH_REGEN_PER_SEC,
            error_code="PLAYER_INVALID_HEALTH_REGEN_PER_SEC",
        )
        self._health_regen_per_sec = float(health_regen_per_sec)
        validate_range(
            critical_pct, 0.0, PLAYER_MAX_PCT, "critical_pct",
            message=self.INVALID_CRITICAL_PCT, error_code="PLAYER_INVALID_CRITICAL_PCT",
        )
        self._critical_pct = float(critical_pct)
        validate_range(
            dodge_pct, 0.0, PLAYER_MAX_PCT, "dodge_pct",
            message=self.INVALID_DODGE_PCT, error_code="PLAYER_INVALID_DODGE_PCT",
        )
        self._dodge_pct = float(dodge_pct)
        self._honor_title = self._checked_honor_title(honor_title)
        self._pet: Optional[Pet] = None

    @classmethod
    def with_pet(
        cls,
        name: str,
        level: int,
        creation_date: date,
        experience: int,
        gold: int,
        health_regen_per_sec: float,
        critical_pct: float,
        dodge_pct: float,
        honor_title: str,
        pet_name: str,
        pet_level: int,
        pet_birthdate: date,
        pet_loyalty: int,
        pet_stamina: int,
        pet_aggressive: bool,
    ) -> Player:
        """
        Create a player together with the pet it owns.

        The pet is validated after the player's own fields; a bad pet
        attribute raises and no player is returned.
        """
        player = cls(
            name,
            level,
            creation_date,
            experience,
            gold,
            health_regen_per_sec,
            critical_pct,
            dodge_pct,
            honor_title,
        )
        player._pet = Pet(
            pet_name, pet_level, pet_birthdate, pet_loyalty, pet_stamina, pet_aggressive
        )
        return player

    def _checked_honor_title(self, honor_title: str) -> str:
        title = validate_length(
            honor_title, 1, PLAYER_MAX_HONOR_TITLE_LENGTH, "honor_title",
            message=self.INVALID_HONOR_TITLE, error_code="PLAYER_INVALID_HONOR_TITLE",
        )
        validate_pattern(
            title, HONOR_TITLE_PATTERN, "honor_title",
            message=self.INVALID_HONOR_TITLE, error_code="PLAYER_INVALID_HONOR_TITLE",
        )
        return title

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    @property
    def creation_date(self) -> date:
        return self._creation_date

    @property
    def experience(self) -> int:
        return self._experience

    @property
    def gold(self) -> int:
        return self._gold

    @property
    def health_regen_per_sec(self) -> float:
        return self._health_regen_per_sec

    @property
    def critical_pct(self) -> float:
        return self._critical_pct

    @property
    def dodge_pct(self) -> float:
        return self._dodge_pct

    @property
    def honor_title(self) -> str:
        return self._honor_title

    @property
    def pet(self) -> Optional[Pet]:
        """The owned pet, or None."""
        return self._pet

    @property
    def has_pet(self) -> bool:
        return self._pet is not None

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, level={self._level}, has_pet={self.has_pet})"
