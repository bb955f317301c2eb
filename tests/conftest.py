"""
Pytest Configuration and Fixtures for Guildhall Tests
======================================================

Purpose
-------
Centralized test fixtures and configuration for the Guildhall test suite.
Provides reusable fixtures for domain models, the event bus and services.

Responsibilities
----------------
- Domain model factories for test data (players, pets, guilds, enemies)
- A fresh EventBus per test
- Mocks for collaborators of the service layer
- Helpers for asserting on buffered domain events

Architecture Notes
------------------
- All tests are unit tests: no I/O, no network
- Fixtures are function-scoped so every test starts from a clean slate
- Guild ids come from a process-wide counter; tests compare ids relative to
  each other instead of asserting absolute values
"""

from __future__ import annotations

import os
import random
from datetime import date
from typing import Callable, Optional

import pytest

from guildhall.core.config import Config
from guildhall.core.event.bus import EventBus
from guildhall.core.logging.logger import clear_log_context, get_logger
from guildhall.domain.models import Enemy, Guild, Player
from guildhall.modules.guild.service import GuildService

logger = get_logger(__name__)

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest environment.

    Config was already loaded when guildhall was imported above, so it is
    re-read after the test environment is set.
    """
    os.environ.setdefault("ENVIRONMENT", "testing")
    Config.load()


@pytest.fixture(autouse=True)
def _reset_log_context():
    """Keep LogContext fields from leaking between tests."""
    yield
    clear_log_context()


# ============================================================================
# DOMAIN MODEL FACTORIES
# ============================================================================

PLAYER_CREATED = date(2023, 3, 14)
PET_BORN = date(2023, 5, 1)
GUILD_FOUNDED = date(2022, 9, 1)


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """
    Factory for players.

    Uses: Tests that need several distinct players; pass with_pet=False for a
    player without a pet.
    """

    def _make(
        name: str = "Aldric",
        level: int = 10,
        with_pet: bool = True,
        pet_name: str = "Ember",
    ) -> Player:
        stats = (name, level, PLAYER_CREATED, 1500, 300, 2.5, 15.0, 10.0, "Knight of Dawn")
        if not with_pet:
            return Player(*stats)
        return Player.with_pet(*stats, pet_name, 5, PET_BORN, 70, 80, False)

    return _make


@pytest.fixture
def player_with_pet(make_player) -> Player:
    """Player owning a pet; eligible for guild membership."""
    return make_player("Aldric", 10)


@pytest.fixture
def player_without_pet(make_player) -> Player:
    """Player with no pet; rejected by guild roster operations."""
    return make_player("Brannoc", 20, with_pet=False)


@pytest.fixture
def make_guild() -> Callable[..., Guild]:
    """Factory for guilds with sensible defaults."""

    def _make(
        name: str = "Iron Wolves",
        level: int = 3,
        description: str = "Northern raiders",
        creation_date: date = GUILD_FOUNDED,
        recruiting: bool = True,
        max_members: int = 3,
    ) -> Guild:
        return Guild(name, level, description, creation_date, recruiting, max_members)

    return _make


@pytest.fixture
def guild(make_guild) -> Guild:
    """Recruiting guild with three slots."""
    return make_guild()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for attack rolls."""
    return random.Random(1234)


@pytest.fixture
def goblin(seeded_rng) -> Enemy:
    """Goblin with 100 health and 10-20 damage at the map origin."""
    return Enemy("Goblin", 100, 10, 20, 0, 0, rng=seeded_rng)


# ============================================================================
# SERVICE FIXTURES
# ============================================================================


@pytest.fixture
def event_bus() -> EventBus:
    """
    Fresh EventBus.

    Scope: function
    Uses: Tests that publish or observe events
    """
    return EventBus()


@pytest.fixture
def mock_event_bus(mocker):
    """
    Mock EventBus for service tests that only check what was published.

    Scope: function
    """
    mock_bus = mocker.MagicMock(spec=EventBus)
    mock_bus.publish.return_value = 0
    return mock_bus


@pytest.fixture
def mock_logger(mocker):
    """Mock Logger for asserting what services log."""
    return mocker.MagicMock()


@pytest.fixture
def guild_service(event_bus) -> GuildService:
    """GuildService wired to a real, fresh EventBus."""
    return GuildService(event_bus)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def assert_domain_event_emitted(domain_model, event_name: str) -> bool:
    """
    Assert that a domain model emitted a specific event.

    Usage:
        guild.add_member(player)
        assert assert_domain_event_emitted(guild, "guild.member_added")
    """
    events = domain_model.get_pending_events()
    return any(event.event_name == event_name for event in events)


def get_domain_event_payload(domain_model, event_name: str) -> Optional[dict]:
    """
    Get the payload of a specific domain event.

    Usage:
        guild.add_member(player)
        payload = get_domain_event_payload(guild, "guild.member_added")
        assert payload["num_members"] == 1
    """
    events = domain_model.get_pending_events()
    for event in events:
        if event.event_name == event_name:
            return event.payload
    return None
