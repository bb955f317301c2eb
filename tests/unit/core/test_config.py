"""
Unit Tests for static configuration
===================================

Test Coverage
-------------
- Environment parsing and fallback
- Safe parsers: defaults, invalid values, bounds
- Load metrics
- Config summary and safe reload
"""

import os

import pytest

from guildhall.core.config import Config, Environment

_KEYS = (
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_JSON",
    "LOG_COLORS",
    "LOG_TO_FILE",
    "LOG_BACKUP_COUNT",
    "LOGS_DIR",
    "DEFAULT_GUILD_MAX_MEMBERS",
)


@pytest.fixture
def restore_config():
    """Put Config class attributes back after a test reloads them."""
    saved = {key: getattr(Config, key) for key in _KEYS}
    yield
    for key, value in saved.items():
        setattr(Config, key, value)


@pytest.mark.unit
class TestEnvironment:
    """Test Environment parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("production", Environment.PRODUCTION),
            ("PRODUCTION", Environment.PRODUCTION),
            ("testing", Environment.TESTING),
            ("staging", Environment.STAGING),
            ("nonsense", Environment.DEVELOPMENT),
        ],
    )
    def test_from_string(self, raw, expected):
        """Test known names parse and unknown ones fall back to development."""
        assert Environment.from_string(raw) is expected


@pytest.mark.unit
class TestSafeParsers:
    """Test the _safe_* helpers."""

    def test_int_default_when_unset(self, monkeypatch):
        """Test a missing variable yields the default."""
        monkeypatch.delenv("GUILDHALL_TEST_INT", raising=False)

        assert Config._safe_int("GUILDHALL_TEST_INT", 7) == 7

    def test_int_from_env(self, monkeypatch):
        """Test a valid integer is parsed."""
        monkeypatch.setenv("GUILDHALL_TEST_INT", "12")

        assert Config._safe_int("GUILDHALL_TEST_INT", 7) == 12

    @pytest.mark.parametrize("raw", ["twelve", "0", "101"])
    def test_int_invalid_falls_back(self, monkeypatch, raw):
        """Test non-numeric and out-of-bounds values fall back with a recorded error."""
        monkeypatch.setenv("GUILDHALL_TEST_INT", raw)

        value = Config._safe_int("GUILDHALL_TEST_INT", 7, min_val=1, max_val=100)

        assert value == 7
        assert "GUILDHALL_TEST_INT" in Config.get_metrics().validation_errors

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("YES", True), ("1", True), ("on", True),
         ("false", False), ("no", False), ("0", False), ("Off", False)],
    )
    def test_bool_values(self, monkeypatch, raw, expected):
        """Test recognized boolean spellings."""
        monkeypatch.setenv("GUILDHALL_TEST_BOOL", raw)

        assert Config._safe_bool("GUILDHALL_TEST_BOOL", not expected) is expected

    def test_bool_invalid_falls_back(self, monkeypatch):
        """Test an unrecognized boolean falls back to the default."""
        monkeypatch.setenv("GUILDHALL_TEST_BOOL", "maybe")

        assert Config._safe_bool("GUILDHALL_TEST_BOOL", True) is True

    def test_str_tracks_source(self, monkeypatch):
        """Test the metrics remember whether a value came from the environment."""
        monkeypatch.setenv("GUILDHALL_TEST_STR", "hello")

        assert Config._safe_str("GUILDHALL_TEST_STR", "default") == "hello"
        assert Config.get_metrics().env_vars_loaded["GUILDHALL_TEST_STR"] is True


@pytest.mark.unit
class TestConfigLoad:
    """Test loading, summary and reload."""

    def test_test_session_environment_applied(self):
        """Test the environment chosen for the test session reached Config."""
        # Assert
        assert "ENVIRONMENT" in os.environ
        assert Config.ENVIRONMENT == os.environ["ENVIRONMENT"]

    def test_load_reads_environment(self, monkeypatch, restore_config):
        """Test load() picks up every key."""
        # Arrange
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("DEFAULT_GUILD_MAX_MEMBERS", "12")

        # Act
        Config.load()

        # Assert
        assert Config.ENVIRONMENT == "staging"
        assert Config.DEBUG is True
        assert Config.LOG_JSON is False
        assert Config.DEFAULT_GUILD_MAX_MEMBERS == 12

    def test_log_json_unset_means_auto(self, monkeypatch, restore_config):
        """Test LOG_JSON stays None when not configured."""
        monkeypatch.delenv("LOG_JSON", raising=False)

        Config.load()

        assert Config.LOG_JSON is None

    def test_guild_capacity_out_of_range_uses_default(self, monkeypatch, restore_config):
        """Test an unusable roster size falls back to 50."""
        monkeypatch.setenv("DEFAULT_GUILD_MAX_MEMBERS", "0")

        Config.load()

        assert Config.DEFAULT_GUILD_MAX_MEMBERS == 50

    @pytest.mark.parametrize(
        "env,checks",
        [
            ("production", (True, False, False)),
            ("development", (False, True, False)),
            ("testing", (False, False, True)),
        ],
    )
    def test_environment_checks(self, restore_config, env, checks):
        """Test is_production / is_development / is_testing."""
        Config.ENVIRONMENT = env

        assert (Config.is_production(), Config.is_development(), Config.is_testing()) == checks

    def test_config_summary(self, restore_config):
        """Test the summary exposes non-sensitive values."""
        Config.DEFAULT_GUILD_MAX_MEMBERS = 33

        summary = Config.get_config_summary()

        assert summary["default_guild_max_members"] == 33
        assert set(summary) >= {"environment", "debug", "log_level", "logs_dir"}

    def test_reload_safe_configs(self, monkeypatch, restore_config):
        """Test safe values are re-read."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEFAULT_GUILD_MAX_MEMBERS", "8")

        Config.reload_safe_configs()

        assert Config.LOG_LEVEL == "DEBUG"
        assert Config.DEFAULT_GUILD_MAX_MEMBERS == 8

    def test_metrics_summary(self):
        """Test the load summary counts loaded keys."""
        summary = Config.get_metrics().get_summary()

        assert summary["total_configs"] >= len(_KEYS)
        assert summary["last_reload"] is not None
