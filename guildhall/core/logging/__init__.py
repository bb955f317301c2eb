"""
Guildhall Logging Infrastructure

Exports the structured logging subsystem, log context helpers,
and configuration interface.

This module provides:
- JSON or colored console logging, plus an optional rotating JSON file
- ContextVar-based contextual logging (`LogContext`)
- Setup and teardown helpers for the global logging system
"""

from guildhall.core.logging.logger import (
    ContextFilter,
    JSONFormatter,
    LogContext,
    LoggerConfig,
    clear_log_context,
    get_log_context,
    get_logger,
    set_log_context,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    "LogContext",
    "set_log_context",
    "get_log_context",
    "clear_log_context",
    "LoggerConfig",
    "ContextFilter",
    "JSONFormatter",
]
