"""
Unit Tests for Pet Value Object
===============================

Test Coverage
-------------
- Valid construction and trimming of the name
- Field rules for name, level, birthdate, loyalty and stamina
"""

from datetime import date, timedelta

import pytest

from guildhall.domain.exceptions import DomainValidationError
from guildhall.domain.models import Pet

BORN = date(2023, 5, 1)


def _pet(**overrides):
    fields = dict(
        name="Ember", level=5, birthdate=BORN, loyalty=70, stamina=80, aggressive=False
    )
    fields.update(overrides)
    return Pet(**fields)


@pytest.mark.unit
@pytest.mark.domain
class TestPetCreation:
    """Test valid Pet construction."""

    def test_create_valid_pet(self):
        """Test that all attributes are stored."""
        # Arrange & Act
        pet = _pet(aggressive=True)

        # Assert
        assert pet.name == "Ember"
        assert pet.level == 5
        assert pet.birthdate == BORN
        assert pet.loyalty == 70
        assert pet.stamina == 80
        assert pet.is_aggressive is True

    def test_name_is_trimmed(self):
        """Test that surrounding whitespace is dropped before storing."""
        pet = _pet(name="  Ash  ")

        assert pet.name == "Ash"

    def test_boundaries_accepted(self):
        """Test inclusive bounds on every numeric field."""
        low = _pet(name="Abc", level=1, loyalty=0, stamina=0)
        high = _pet(name="A" * 20, level=60, loyalty=100, stamina=100)

        assert (low.level, low.loyalty, low.stamina) == (1, 0, 0)
        assert (high.level, high.loyalty, high.stamina) == (60, 100, 100)

    def test_born_today_is_valid(self):
        """Test that today's date is not considered future."""
        pet = _pet(birthdate=date.today())

        assert pet.birthdate == date.today()


@pytest.mark.unit
@pytest.mark.domain
class TestPetValidation:
    """Test Pet field rules."""

    @pytest.mark.parametrize("name", [None, "", "   ", "Ab", "  Ab  ", "A" * 21])
    def test_invalid_name(self, name):
        """Test name must be 3-20 characters once trimmed."""
        with pytest.raises(DomainValidationError) as exc_info:
            _pet(name=name)

        assert exc_info.value.error_code == "PET_INVALID_NAME"
        assert exc_info.value.message == Pet.INVALID_NAME

    @pytest.mark.parametrize("level", [0, 61, None])
    def test_invalid_level(self, level):
        """Test level must be 1-60."""
        with pytest.raises(DomainValidationError) as exc_info:
            _pet(level=level)

        assert exc_info.value.error_code == "PET_INVALID_LEVEL"

    @pytest.mark.parametrize("birthdate", [None, date.today() + timedelta(days=1)])
    def test_invalid_birthdate(self, birthdate):
        """Test birthdate is required and cannot be in the future."""
        with pytest.raises(DomainValidationError) as exc_info:
            _pet(birthdate=birthdate)

        assert exc_info.value.error_code == "PET_INVALID_BIRTHDATE"

    @pytest.mark.parametrize("field", ["loyalty", "stamina"])
    @pytest.mark.parametrize("value", [-1, 101])
    def test_invalid_percent_stats(self, field, value):
        """Test loyalty and stamina must be 0-100."""
        with pytest.raises(DomainValidationError) as exc_info:
            _pet(**{field: value})

        assert exc_info.value.error_code == f"PET_INVALID_{field.upper()}"
        assert exc_info.value.details["field"] == field
