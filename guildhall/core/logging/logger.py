"""
Guildhall Logging Subsystem

Purpose
-------
Provide the single logging setup for Guildhall, offering:

- Structured JSON logs for aggregation and analysis.
- LogContext-based propagation of operation context via ContextVars.
- Correlation IDs for tracing one service call through every log line.
- Component-aware metadata derived from logger names and explicit context.
- Console output (JSON in production, colored human text in dev) and an
  optional daily rotating JSON file.

Responsibilities
----------------
- Initialize and configure the global logging stack.
- Enrich all log records with contextual fields:
  - guild_id, player
  - correlation_id
  - component, operation
- Provide simple helper APIs:
  - get_logger()
  - LogContext (sync + async context manager)
  - set_log_context() / clear_log_context()

Design Decisions
----------------
- JSONFormatter is the canonical representation.
- ContextFilter is attached to the handlers, so records propagated from
  child loggers are enriched too.
- Extra fields passed via `logger.info("msg", extra={...})` are merged into JSON.
- Domain models never log; services and the event bus do.

Dependencies
------------
- guildhall.core.config.config.Config
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from guildhall.core.config.config import Config


# ============================================================================
# Operation Context (ContextVars)
# ============================================================================

_request_context: ContextVar[Dict[str, Any]] = ContextVar(
    "request_context",
    default={},
)

_INITIALIZED_ATTR = "_guildhall_logging_initialized"


# ============================================================================
# Config / Environment
# ============================================================================


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration for the logging subsystem."""

    CONSOLE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    DAILY_BASENAME: str = "guildhall_daily.json.log"

    @property
    def environment(self) -> str:
        env = getattr(Config, "ENVIRONMENT", "development")
        return str(env).lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def logs_dir(self) -> Path:
        return Path(Config.LOGS_DIR).resolve()

    @property
    def log_level(self) -> int:
        level_name = getattr(Config, "LOG_LEVEL", "INFO")
        if not isinstance(level_name, str):
            level_name = "INFO"
        return getattr(logging, level_name.upper(), logging.INFO)

    @property
    def use_json(self) -> bool:
        json_flag = getattr(Config, "LOG_JSON", None)
        if json_flag is None:
            return self.is_production
        return bool(json_flag)

    @property
    def use_colors(self) -> bool:
        if self.is_production or self.use_json:
            return False
        colors_flag = getattr(Config, "LOG_COLORS", True)
        return bool(colors_flag) and sys.stdout.isatty()

    @property
    def to_file(self) -> bool:
        return bool(getattr(Config, "LOG_TO_FILE", False))

    @property
    def backup_count(self) -> int:
        return int(getattr(Config, "LOG_BACKUP_COUNT", 1))


LOGGER_CONFIG = LoggerConfig()


# ============================================================================
# Filters & Formatters
# ============================================================================


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        context: Dict[str, Any] = _request_context.get({})

        record.guild_id = context.get("guild_id", "N/A")
        record.player = context.get("player", "N/A")
        record.correlation_id = context.get("correlation_id") or "N/A"
        record.component = context.get("component") or record.name.split(".", 1)[0]
        record.operation = context.get("operation") or "N/A"

        return True


class ColoredFormatter(logging.Formatter):
    COLORS: Dict[str, str] = {
        "DEBUG": "\033[90m",
        "INFO": "\033[94m",
        "WARNING": "\033[93m",
        "ERROR": "\033[91m",
        "CRITICAL": "\033[91m\033[1m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        original = record.levelname
        prefix = self.COLORS.get(original, "")
        reset = self.COLORS["RESET"] if prefix else ""

        if prefix:
            record.levelname = f"{prefix}{original}{reset}"

        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    STANDARD_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    CONTEXT_ATTRS = {
        "guild_id",
        "player",
        "correlation_id",
        "component",
        "operation",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        created_dt = datetime.fromtimestamp(record.created, tz=timezone.utc)

        log_data: Dict[str, Any] = {
            "timestamp": created_dt.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for attr in self.CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value not in (None, "N/A"):
                log_data[attr] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra: Dict[str, Any] = {}
        for key, val in record.__dict__.items():
            if key in self.STANDARD_ATTRS or key in self.CONTEXT_ATTRS:
                continue
            if key.startswith("_"):
                continue
            if key in {"levelname", "name", "message", "asctime"}:
                continue
            extra[key] = val

        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, ensure_ascii=False, default=str)


# ============================================================================
# Global Setup
# ============================================================================

_installed_handlers: List[logging.Handler] = []


def _build_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOGGER_CONFIG.log_level)

    if LOGGER_CONFIG.use_json:
        handler.setFormatter(JSONFormatter())
    elif LOGGER_CONFIG.use_colors:
        handler.setFormatter(
            ColoredFormatter(
                fmt=LOGGER_CONFIG.CONSOLE_FORMAT,
                datefmt=LOGGER_CONFIG.DATE_FORMAT,
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt=LOGGER_CONFIG.CONSOLE_FORMAT,
                datefmt=LOGGER_CONFIG.DATE_FORMAT,
            )
        )

    handler.addFilter(ContextFilter())
    return handler


def _build_daily_file_handler() -> logging.Handler:
    LOGGER_CONFIG.logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = LOGGER_CONFIG.logs_dir / LOGGER_CONFIG.DAILY_BASENAME

    handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=LOGGER_CONFIG.backup_count,
        encoding="utf-8",
        utc=True,
    )
    handler.setLevel(LOGGER_CONFIG.log_level)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(ContextFilter())
    return handler


def setup_logging() -> None:
    """Install Guildhall handlers on the root logger. Safe to call repeatedly."""
    root = logging.getLogger()

    if getattr(root, _INITIALIZED_ATTR, False):
        return

    root.setLevel(LOGGER_CONFIG.log_level)

    handlers: List[logging.Handler] = [_build_console_handler()]
    if LOGGER_CONFIG.to_file:
        handlers.append(_build_daily_file_handler())

    for handler in handlers:
        root.addHandler(handler)
        _installed_handlers.append(handler)

    setattr(root, _INITIALIZED_ATTR, True)

    log = logging.getLogger(__name__)
    log.debug(
        "Logging initialized",
        extra={
            "environment": LOGGER_CONFIG.environment,
            "log_level": logging.getLevelName(LOGGER_CONFIG.log_level),
            "json": LOGGER_CONFIG.use_json,
            "colors": LOGGER_CONFIG.use_colors,
            "to_file": LOGGER_CONFIG.to_file,
        },
    )


def shutdown_logging() -> None:
    """Flush and remove the handlers installed by setup_logging()."""
    root = logging.getLogger()
    log = logging.getLogger(__name__)

    if not getattr(root, _INITIALIZED_ATTR, False):
        return

    log.debug("Shutting down logging subsystem.")

    while _installed_handlers:
        handler = _installed_handlers.pop()
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            log.exception("Error while closing logging handler.")
        root.removeHandler(handler)

    setattr(root, _INITIALIZED_ATTR, False)


# ============================================================================
# Public API
# ============================================================================


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


class LogContext:
    """
    Scope contextual fields onto every log record emitted inside the block.

    Example
    -------
    >>> with LogContext(guild_id=3, operation="enroll"):
    ...     logger.info("Enrolling member")
    """

    def __init__(
        self,
        guild_id: Optional[int] = None,
        player: Optional[str] = None,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        correlation_id: Optional[str] = None,
        **extra: Any,
    ) -> None:

        effective = correlation_id or self._generate_correlation_id()

        self.context: Dict[str, Any] = {
            "guild_id": str(guild_id) if guild_id is not None else "N/A",
            "player": player or "N/A",
            "component": component,
            "operation": operation,
            "correlation_id": effective,
            **extra,
        }

        self._token: Optional[Token[Dict[str, Any]]] = None

    @property
    def correlation_id(self) -> str:
        return self.context["correlation_id"]

    @staticmethod
    def _generate_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    def __enter__(self) -> "LogContext":
        self._token = _request_context.set(self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _request_context.reset(self._token)
            self._token = None

    async def __aenter__(self) -> "LogContext":
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


def set_log_context(
    guild_id: Optional[int] = None,
    player: Optional[str] = None,
    component: Optional[str] = None,
    operation: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra: Any,
) -> None:

    current = _request_context.get({}).copy()

    if guild_id is not None:
        current["guild_id"] = str(guild_id)
    if player is not None:
        current["player"] = player
    if component is not None:
        current["component"] = component
    if operation is not None:
        current["operation"] = operation
    if correlation_id:
        current["correlation_id"] = correlation_id

    current.update(extra)
    _request_context.set(current)


def get_log_context() -> Dict[str, Any]:
    """Copy of the fields currently in scope."""
    return dict(_request_context.get({}))


def clear_log_context() -> None:
    _request_context.set({})


# Initialize logging automatically
setup_logging()
