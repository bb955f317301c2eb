"""
Pet value object for Guildhall.

Purpose
-------
Companion creature owned by exactly one Player. A Pet is built once, from
validated attributes, and never changes afterwards.

Business Rules
--------------
- name: 3 to 20 characters once trimmed, never blank
- level: 1 to 60
- birthdate: required, not in the future
- loyalty, stamina: 0 to 100
"""

from __future__ import annotations

from datetime import date

from guildhall.domain.constants import (
    MIN_LEVEL,
    PET_MAX_LEVEL,
    PET_MAX_LOYALTY,
    PET_MAX_NAME_LENGTH,
    PET_MAX_STAMINA,
    PET_MIN_NAME_LENGTH,
)
from guildhall.domain.models.base import (
    ValueObject,
    validate_length,
    validate_not_future,
    validate_range,
)


class Pet(ValueObject):
    """
    Immutable pet attributes.

    Attributes
    ----------
    name : str
        Trimmed pet name
    level : int
        Pet level (1-60)
    birthdate : date
        Birth date, never in the future
    loyalty : int
        Loyalty towards the owner (0-100)
    stamina : int
        Stamina (0-100)
    aggressive : bool
        Whether the pet attacks on sight
    """

    INVALID_NAME = (
        "[ERROR] The name cannot be null or empty, and it must be within the "
        "predefined minimum and maximum character limits."
    )
    INVALID_LEVEL = "[ERROR] The level must be between 1 and the predefined maximum."
    INVALID_BIRTHDATE = "[ERROR] The birthdate cannot be null or in the future."
    INVALID_LOYALTY = "[ERROR] Loyalty must be within 0 and 100."
    INVALID_STAMINA = "[ERROR] Stamina must be within 0 and 100."

    def __init__(
        self,
        name: str,
        level: int,
        birthdate: date,
        loyalty: int,
        stamina: int,
        aggressive: bool,
    ) -> None:
        self._name = validate_length(
            name, PET_MIN_NAME_LENGTH, PET_MAX_NAME_LENGTH, "name",
            message=self.INVALID_NAME, error_code="PET_INVALID_NAME",
        )
        validate_range(
            level, MIN_LEVEL, PET_MAX_LEVEL, "level",
            message=self.INVALID_LEVEL, error_code="PET_INVALID_LEVEL",
        )
        self._level = level
        self._birthdate = validate_not_future(
            birthdate, "birthdate",
            message=self.INVALID_BIRTHDATE, error_code="PET_INVALID_BIRTHDATE",
        )
        validate_range(
            loyalty, 0, PET_MAX_LOYALTY, "loyalty",
            message=self.INVALID_LOYALTY, error_code="PET_INVALID_LOYALTY",
        )
        self._loyalty = loyalty
        validate_range(
            stamina, 0, PET_MAX_STAMINA, "stamina",
            message=self.INVALID_STAMINA, error_code="PET_INVALID_STAMINA",
        )
        self._stamina = stamina
        self._aggressive = bool(aggressive)

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    @property
    def birthdate(self) -> date:
        return self._birthdate

    @property
    def loyalty(self) -> int:
        return self._loyalty

    @property
    def stamina(self) -> int:
        return self._stamina

    @property
    def is_aggressive(self) -> bool:
        return self._aggressive

    def __repr__(self) -> str:
        return f"Pet(name={self._name!r}, level={self._level})"
