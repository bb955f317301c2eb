"""
Unit Tests for Player Domain Model
==================================

Purpose
-------
Test the field rules and pet ownership of the Player entity without any
service or infrastructure involvement.

Test Coverage
-------------
- Player initialization and trimming
- Field validation for every attribute
- Honor title character set
- Pet ownership through Player.with_pet
- Identity-based equality

Testing Strategy
----------------
- Unit tests (fast, no I/O)
- AAA pattern (Arrange, Act, Assert)
- Test one behavior per test
"""

from datetime import date, timedelta

import pytest

from guildhall.domain.exceptions import DomainValidationError
from guildhall.domain.models import Pet, Player

CREATED = date(2023, 3, 14)


def _player(**overrides):
    fields = dict(
        name="Aldric",
        level=10,
        creation_date=CREATED,
        experience=1500,
        gold=300,
        health_regen_per_sec=2.5,
        critical_pct=15.0,
        dodge_pct=10.0,
        honor_title="Knight of Dawn",
    )
    fields.update(overrides)
    return Player(**fields)


# ============================================================================
# PLAYER CREATION TESTS
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestPlayerCreation:
    """Test valid Player construction."""

    def test_player_initialization(self):
        """Test that all attributes are stored."""
        # Arrange & Act
        player = _player()

        # Assert
        assert player.name == "Aldric"
        assert player.level == 10
        assert player.creation_date == CREATED
        assert player.experience == 1500
        assert player.gold == 300
        assert player.health_regen_per_sec == 2.5
        assert player.critical_pct == 15.0
        assert player.dodge_pct == 10.0
        assert player.honor_title == "Knight of Dawn"

    def test_player_without_pet_by_default(self):
        """Test that the plain constructor creates a pet-less player."""
        player = _player()

        assert player.pet is None
        assert player.has_pet is False

    def test_name_and_title_are_trimmed(self):
        """Test surrounding whitespace is removed before storing."""
        player = _player(name="  Aldric  ", honor_title="  Warden  ")

        assert player.name == "Aldric"
        assert player.honor_title == "Warden"

    def test_boundary_values_accepted(self):
        """Test inclusive bounds on level and percentages."""
        low = _player(level=1, experience=0, gold=0, health_regen_per_sec=0,
                      critical_pct=0.0, dodge_pct=0.0)
        high = _player(level=99, critical_pct=100.0, dodge_pct=100.0)

        assert low.level == 1
        assert high.level == 99
        assert high.critical_pct == 100.0

    def test_created_today_is_valid(self):
        """Test that today's date is accepted."""
        player = _player(creation_date=date.today())

        assert player.creation_date == date.today()


# ============================================================================
# PLAYER VALIDATION TESTS
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestPlayerValidation:
    """Test Player field rules."""

    @pytest.mark.parametrize("name", [None, "", "     ", "Abcd", "  Abcd  ", "A" * 51])
    def test_invalid_name(self, name):
        """Test name must be 5-50 characters once trimmed."""
        # Arrange & Act & Assert
        with pytest.raises(DomainValidationError) as exc_info:
            _player(name=name)

        assert exc_info.value.error_code == "PLAYER_INVALID_NAME"
        assert "name cannot be null" in str(exc_info.value)

    @pytest.mark.parametrize("level", [0, 100, None])
    def test_invalid_level(self, level):
        """Test level must be 1-99."""
        with pytest.raises(DomainValidationError) as exc_info:
            _player(level=level)

        assert exc_info.value.error_code == "PLAYER_INVALID_LEVEL"

    @pytest.mark.parametrize("creation_date", [None, date.today() + timedelta(days=1)])
    def test_invalid_creation_date(self, creation_date):
        """Test creation date is required and not in the future."""
        with pytest.raises(DomainValidationError) as exc_info:
            _player(creation_date=creation_date)

        assert exc_info.value.error_code == "PLAYER_INVALID_CREATION_DATE"

    @pytest.mark.parametrize(
        "field,code",
        [
            ("experience", "PLAYER_INVALID_EXPERIENCE"),
            ("gold", "PLAYER_INVALID_GOLD"),
            ("health_regen_per_sec", "PLAYER_INVALID_HEALTH_REGEN_PER_SEC"),
        ],
    )
    def test_negative_counters_rejected(self, field, code):
        """Test experience, gold and regeneration cannot be negative."""
        with pytest.raises(DomainValidationError) as exc_info:
            _player(**{field: -1})

        assert exc_info.value.error_code == code

    @pytest.mark.parametrize("field", ["critical_pct", "dodge_pct"])
    @pytest.mark.parametrize("value", [-0.1, 100.1])
    def test_percentages_out_of_range(self, field, value):
        """Test percentages must be 0.0-100.0."""
        with pytest.raises(DomainValidationError) as exc_info:
            _player(**{field: value})

        assert exc_info.value.error_code == f"PLAYER_INVALID_{field.upper()}"

    @pytest.mark.parametrize(
        "title",
        [None, "", "   ", "Knight 2", "Dawn-Bringer", "Señor", "A" * 31],
    )
    def test_invalid_honor_title(self, title):
        """Test honor title is 1-30 English letters and spaces."""
        with pytest.raises(DomainValidationError) as exc_info:
            _player(honor_title=title)

        assert exc_info.value.error_code == "PLAYER_INVALID_HONOR_TITLE"

    def test_honor_title_at_max_length(self):
        """Test a 30 character title is accepted."""
        player = _player(honor_title="A" * 30)

        assert len(player.honor_title) == 30


# ============================================================================
# PET OWNERSHIP TESTS
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestPlayerPet:
    """Test Player.with_pet."""

    def test_with_pet_creates_owned_pet(self):
        """Test the pet is built from the given attributes."""
        # Act
        player = Player.with_pet(
            "Aldric", 10, CREATED, 1500, 300, 2.5, 15.0, 10.0, "Knight of Dawn",
            "Ember", 5, date(2023, 5, 1), 70, 80, True,
        )

        # Assert
        assert player.has_pet is True
        assert isinstance(player.pet, Pet)
        assert player.pet.name == "Ember"
        assert player.pet.is_aggressive is True

    def test_invalid_pet_attribute_rejects_player(self):
        """Test a bad pet attribute raises the pet's validation error."""
        with pytest.raises(DomainValidationError) as exc_info:
            Player.with_pet(
                "Aldric", 10, CREATED, 1500, 300, 2.5, 15.0, 10.0, "Knight of Dawn",
                "Ember", 5, date(2023, 5, 1), 101, 80, True,
            )

        assert exc_info.value.error_code == "PET_INVALID_LOYALTY"

    def test_invalid_player_attribute_checked_first(self):
        """Test player fields are validated before the pet."""
        with pytest.raises(DomainValidationError) as exc_info:
            Player.with_pet(
                "Al", 10, CREATED, 1500, 300, 2.5, 15.0, 10.0, "Knight of Dawn",
                "E", 5, date(2023, 5, 1), 70, 80, True,
            )

        assert exc_info.value.error_code == "PLAYER_INVALID_NAME"


# ============================================================================
# IDENTITY TESTS
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
class TestPlayerIdentity:
    """Test identity-based equality."""

    def test_identical_attributes_are_distinct_players(self):
        """Test two separately built players are never equal."""
        first = _player()
        second = _player()

        assert first != second
        assert first.id != second.id

    def test_player_equals_itself(self):
        """Test a player is equal to itself and hashes consistently."""
        player = _player()

        assert player == player
        assert len({player, player}) == 1
