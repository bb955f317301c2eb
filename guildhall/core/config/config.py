"""
Static configuration management for Guildhall.

Purpose
-------
Provides centralized static configuration loaded from environment variables
with sensible defaults, type validation, and bounds checking.

Responsibilities
----------------
- Load configuration from environment variables with .env support
- Provide type-safe access to all static configuration values
- Validate settings on startup
- Track which values came from the environment and which from defaults

Non-Responsibilities
--------------------
- Business rule limits (fixed in guildhall.domain.constants)
- Runtime configuration changes (except safe reload)

Architecture Notes
------------------
- Singleton pattern via class methods (no instantiation)
- Auto-loads on module import via Config.validate()
- Invalid values never raise; they fall back to the default with a warning
- Directory paths relative to project root for portability

Environment Variables
---------------------
- ENVIRONMENT: Environment type (default: development)
- DEBUG: Debug mode flag (default: False)
- LOG_LEVEL: Logging level (default: INFO)
- LOG_JSON: Force JSON console logs on/off (default: only in production)
- LOG_COLORS: Colored console logs on a TTY (default: True)
- LOG_TO_FILE: Also write a daily rotating JSON log file (default: False)
- LOG_BACKUP_COUNT: Rotated log files to keep (default: 1)
- LOGS_DIR: Directory for log files (default: <project>/logs)
- DEFAULT_GUILD_MAX_MEMBERS: Roster size used when none is given (default: 50)
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ============================================================================
# Enums and Constants
# ============================================================================


class Environment(Enum):
    """Deployment environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Parse environment string safely with fallback.

        Example
        -------
        >>> Environment.from_string("production") == Environment.PRODUCTION
        True
        >>> Environment.from_string("invalid") == Environment.DEVELOPMENT
        True
        """
        try:
            return cls(value.lower())
        except ValueError:
            # Structured logger is not initialized yet during bootstrap
            import logging
            logging.getLogger(__name__).warning(
                f"Unknown environment '{value}', defaulting to development"
            )
            return cls.DEVELOPMENT


# ============================================================================
# Configuration Metrics Tracker
# ============================================================================


class _ConfigLoadMetrics:
    """
    Internal metrics tracker for configuration loading.

    Tracks which configuration values came from environment variables
    versus defaults, and any validation errors encountered.
    """

    def __init__(self):
        self.env_vars_loaded: Dict[str, bool] = {}
        self.validation_errors: Dict[str, str] = {}
        self.defaults_used: Dict[str, Any] = {}
        self.last_reload: Optional[str] = None

    def record_env_load(self, key: str, from_env: bool, value: Any, default: Any):
        """Record whether a config value came from environment."""
        self.env_vars_loaded[key] = from_env
        if not from_env:
            self.defaults_used[key] = default

    def record_validation_error(self, key: str, error: str):
        """Record a validation error."""
        self.validation_errors[key] = error

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration loading summary."""
        return {
            "total_configs": len(self.env_vars_loaded),
            "from_environment": sum(1 for v in self.env_vars_loaded.values() if v),
            "from_defaults": sum(1 for v in self.env_vars_loaded.values() if not v),
            "validation_errors": len(self.validation_errors),
            "defaults_used": list(self.defaults_used.keys()),
            "last_reload": self.last_reload,
        }


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config:
    """
    Centralized static configuration for Guildhall.

    Usage
    -----
    >>> if Config.is_production():
    ...     logger.info("Running in production mode")
    >>> summary = Config.get_config_summary()
    >>> logger.info("Config loaded", extra=summary)
    """

    # =========================================================================
    # Internal State
    # =========================================================================

    _metrics: Optional[_ConfigLoadMetrics] = None
    _enable_metrics: bool = True
    _validated: bool = False

    # =========================================================================
    # Environment Configuration
    # =========================================================================

    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # =========================================================================
    # Logging Output
    # =========================================================================

    LOG_JSON: Optional[bool] = None
    LOG_COLORS: bool = True
    LOG_TO_FILE: bool = False
    LOG_BACKUP_COUNT: int = 1

    # =========================================================================
    # Directory Configuration
    # =========================================================================

    PROJECT_ROOT = Path(__file__).resolve().parents[3]
    LOGS_DIR = PROJECT_ROOT / "logs"

    # =========================================================================
    # Game Defaults
    # =========================================================================

    DEFAULT_GUILD_MAX_MEMBERS: int = 50

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @classmethod
    def _init_metrics(cls):
        """Initialize metrics tracking if enabled."""
        if cls._enable_metrics and cls._metrics is None:
            cls._metrics = _ConfigLoadMetrics()

    @classmethod
    def _safe_int(
        cls,
        key: str,
        default: int,
        min_val: Optional[int] = None,
        max_val: Optional[int] = None,
    ) -> int:
        """
        Safely parse integer from environment with validation.

        Parameters
        ----------
        key:
            Environment variable name.
        default:
            Default value if not set or invalid.
        min_val:
            Minimum allowed value (inclusive).
        max_val:
            Maximum allowed value (inclusive).

        Returns
        -------
        int
            Validated integer value.

        Example
        -------
        >>> Config._safe_int("DEFAULT_GUILD_MAX_MEMBERS", 50, min_val=1)
        50
        """
        cls._init_metrics()

        raw_value = os.getenv(key)

        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        try:
            value = int(raw_value)
        except ValueError:
            error = f"{key}='{raw_value}' is not a valid integer, using default {default}"
            import logging
            logging.getLogger(__name__).warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if min_val is not None and value < min_val:
            error = f"{key}={value} is below minimum {min_val}, using default {default}"
            import logging
            logging.getLogger(__name__).warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if max_val is not None and value > max_val:
            error = f"{key}={value} exceeds maximum {max_val}, using default {default}"
            import logging
            logging.getLogger(__name__).warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)

        return value

    @classmethod
    def _safe_bool(cls, key: str, default: Optional[bool]) -> Optional[bool]:
        """
        Safely parse boolean from environment.

        Recognizes: true/false, yes/no, 1/0, on/off (case-insensitive).

        Example
        -------
        >>> Config._safe_bool("DEBUG", False)
        False
        """
        cls._init_metrics()

        raw_value = os.getenv(key)

        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        normalized = raw_value.lower().strip()
        true_values = {"true", "yes", "1", "on"}
        false_values = {"false", "no", "0", "off"}

        if normalized in true_values:
            value = True
        elif normalized in false_values:
            value = False
        else:
            error = f"{key}='{raw_value}' is not a valid boolean, using default {default}"
            import logging
            logging.getLogger(__name__).warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)

        return value

    @classmethod
    def _safe_str(cls, key: str, default: str) -> str:
        """
        Safely get string from environment.

        Example
        -------
        >>> Config._safe_str("ENVIRONMENT", "development")
        'development'
        """
        cls._init_metrics()

        value = os.getenv(key, default)
        from_env = key in os.environ

        if cls._metrics:
            cls._metrics.record_env_load(key, from_env, value, default)

        return value

    # =========================================================================
    # Configuration Loading
    # =========================================================================

    @classmethod
    def load(cls) -> None:
        """
        Load all configuration from environment variables with validation.

        Called automatically on module import, but can be called again to
        re-read the environment (tests use this after monkeypatching).
        """
        cls._init_metrics()

        # Environment Configuration
        cls.ENVIRONMENT = cls._safe_str("ENVIRONMENT", "development")
        cls.DEBUG = cls._safe_bool("DEBUG", False)
        cls.LOG_LEVEL = cls._safe_str("LOG_LEVEL", "INFO")

        # Logging Output
        cls.LOG_JSON = cls._safe_bool("LOG_JSON", None)
        cls.LOG_COLORS = cls._safe_bool("LOG_COLORS", True)
        cls.LOG_TO_FILE = cls._safe_bool("LOG_TO_FILE", False)
        cls.LOG_BACKUP_COUNT = cls._safe_int("LOG_BACKUP_COUNT", 1, min_val=0, max_val=30)
        cls.LOGS_DIR = Path(cls._safe_str("LOGS_DIR", str(cls.PROJECT_ROOT / "logs")))

        # Game Defaults
        cls.DEFAULT_GUILD_MAX_MEMBERS = cls._safe_int(
            "DEFAULT_GUILD_MAX_MEMBERS", 50, min_val=1, max_val=10_000
        )

        if cls._metrics:
            from datetime import datetime, timezone
            cls._metrics.last_reload = datetime.now(timezone.utc).isoformat()

    @classmethod
    def validate(cls) -> None:
        """
        Load and validate configuration once.

        Raises
        ------
        ValueError:
            Only in production, if a setting is unusable.
        """
        if cls._validated:
            return

        import logging
        logger = logging.getLogger(__name__)
        cls._init_metrics()

        try:
            cls.load()

            Environment.from_string(cls.ENVIRONMENT)

            valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            if cls.LOG_LEVEL.upper() not in valid_log_levels:
                logger.warning(f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}', using INFO")
                cls.LOG_LEVEL = "INFO"

            if cls.LOG_TO_FILE:
                cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

            if cls.is_production() and cls.DEBUG:
                logger.warning("DEBUG mode enabled in production!")

            cls._validated = True

            if cls._metrics and cls._metrics.validation_errors:
                logger.warning(
                    f"Configuration warnings: {cls._metrics.validation_errors}"
                )

        except Exception as e:
            logger.warning(f"Config validation warning (safe for tests): {e}")
            if cls.ENVIRONMENT.lower() == "production":
                logger.error("Configuration validation failed in production!")
                raise

    # =========================================================================
    # Environment Checks
    # =========================================================================

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def is_testing(cls) -> bool:
        """Check if running in testing environment."""
        return cls.ENVIRONMENT.lower() == "testing"

    # =========================================================================
    # Metrics & Summary
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Optional[_ConfigLoadMetrics]:
        """Get configuration loading metrics."""
        return cls._metrics

    @classmethod
    def get_config_summary(cls) -> Dict[str, Any]:
        """
        Get configuration summary for debugging.

        Example
        -------
        >>> Config.get_config_summary()["environment"]
        'development'
        """
        return {
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "log_json": cls.LOG_JSON,
            "log_to_file": cls.LOG_TO_FILE,
            "logs_dir": str(cls.LOGS_DIR),
            "default_guild_max_members": cls.DEFAULT_GUILD_MAX_MEMBERS,
        }

    @classmethod
    def reload_safe_configs(cls) -> None:
        """
        Reload values that can change without restarting.

        Only the log level, debug flag and game defaults are re-read.
        """
        import logging
        logger = logging.getLogger(__name__)
        logger.info("Reloading safe configuration values...")

        cls.LOG_LEVEL = cls._safe_str("LOG_LEVEL", cls.LOG_LEVEL)
        cls.DEBUG = cls._safe_bool("DEBUG", cls.DEBUG)
        cls.DEFAULT_GUILD_MAX_MEMBERS = cls._safe_int(
            "DEFAULT_GUILD_MAX_MEMBERS", cls.DEFAULT_GUILD_MAX_MEMBERS, min_val=1, max_val=10_000
        )

        logger.info("Safe configuration values reloaded successfully")


# Auto-validate on import
Config.validate()
