"""
Domain exceptions for Guildhall.

Purpose
-------
Define the structured, domain-specific exception hierarchy for Guildhall game
models. These exceptions are raised by domain models for business rule
violations and by services for lookup failures.

Design Notes
------------
- All domain exceptions inherit from `GuildhallDomainException`.
- Each exception carries:
  - `message`: fixed human-readable description of the violated rule
  - `details`: additional structured context (dict-like)
  - `severity`: `ErrorSeverity` value for logging/alerting
  - `is_retryable`: whether the operation can be retried
  - `error_code`: short, stable identifier, one per violated rule
- The taxonomy mirrors how callers react:
  - validation errors (bad field value)
  - precondition errors (missing argument or missing dependency)
  - roster conflicts (duplicate member, member not found, guild full)
- Helper functions (`get_error_severity`, `should_alert`) centralize common
  exception handling patterns.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging and alerting."""

    DEBUG = "debug"
    INFO = "info"  # Normal operation (e.g., validation failures)
    WARNING = "warning"  # Caller bug (e.g., missing member)
    ERROR = "error"
    CRITICAL = "critical"


class GuildhallDomainException(Exception):
    """
    Base exception for all Guildhall domain-level errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error (dict-like)
        severity: Error severity level for logging handlers
        is_retryable: Whether the operation can be retried
        error_code: Optional code for programmatic handling

    Example:
        >>> raise GuildhallDomainException(
        ...     "Roster locked",
        ...     {"guild_id": 3}
        ... )
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR
    DEFAULT_RETRYABLE: bool = False

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        is_retryable: Optional[bool] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message: str = message
        self.details: Dict[str, Any] = details or {}
        self.severity: ErrorSeverity = severity or self.DEFAULT_SEVERITY
        self.is_retryable: bool = (
            is_retryable if is_retryable is not None else self.DEFAULT_RETRYABLE
        )
        self.error_code: str = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"severity={self.severity.value!r}, "
            f"is_retryable={self.is_retryable!r}"
            ")"
        )


# ============================================================================
# VALIDATION ERRORS
# ============================================================================


class DomainValidationError(GuildhallDomainException):
    """
    Raised when a field value violates a domain rule.

    Args:
        message: Fixed message describing the violated rule
        field: Name of the field that failed validation (if applicable)
        error_code: Stable code for the rule (defaults to ``INVALID_<FIELD>``)
        value: Offending value, recorded in ``details``
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        error_code: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.field = field
        if error_code is None and field is not None:
            error_code = f"INVALID_{field.upper()}"
        details: Dict[str, Any] = {}
        if field is not None:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details=details, error_code=error_code)


class InvalidCoordinateError(DomainValidationError):
    """Raised when a coordinate falls outside the map bounds."""


class InvalidMaxMembersError(DomainValidationError):
    """Raised when a guild is created with a non-positive member capacity."""


# ============================================================================
# PRECONDITION ERRORS
# ============================================================================


class PreconditionError(GuildhallDomainException):
    """
    Raised when an argument or one of its dependencies is missing.

    These indicate a caller bug rather than bad player input.
    """

    DEFAULT_SEVERITY = ErrorSeverity.WARNING


class MemberNullError(PreconditionError):
    """Raised when a roster operation receives no member."""

    MESSAGE = "[ERROR] The member cannot be null."

    def __init__(self) -> None:
        super().__init__(self.MESSAGE, error_code="MEMBER_NULL")


class MemberNoPetError(PreconditionError):
    """Raised when a roster operation receives a member without a pet."""

    MESSAGE = "[ERROR] The member does not have a pet."

    def __init__(self, member_name: Optional[str] = None) -> None:
        self.member_name = member_name
        super().__init__(
            self.MESSAGE,
            details={"member": member_name},
            error_code="MEMBER_NO_PET",
        )


# ============================================================================
# ROSTER CONFLICTS
# ============================================================================


class RosterConflictError(GuildhallDomainException):
    """Raised when a roster operation conflicts with the current roster state."""

    DEFAULT_SEVERITY = ErrorSeverity.INFO


class GuildFullError(RosterConflictError):
    """
    Raised when adding a member to a guild that has no free slot.

    Args:
        guild_id: Guild that is full
        max_members: Capacity of the guild
    """

    MESSAGE = "[ERROR] The number of members cannot exceed the predefined maximum."

    def __init__(self, guild_id: int, max_members: int) -> None:
        self.guild_id = guild_id
        self.max_members = max_members
        super().__init__(
            self.MESSAGE,
            details={"guild_id": guild_id, "max_members": max_members},
            error_code="GUILD_FULL",
        )


class MemberAlreadyExistsError(RosterConflictError):
    """Raised when adding a member that already occupies a slot."""

    MESSAGE = "[ERROR] The member already exists in the guild."

    def __init__(self, guild_id: int, member_name: str) -> None:
        self.guild_id = guild_id
        self.member_name = member_name
        super().__init__(
            self.MESSAGE,
            details={"guild_id": guild_id, "member": member_name},
            error_code="MEMBER_ALREADY_EXISTS",
        )


class MemberNotFoundError(RosterConflictError):
    """Raised when removing a member that is not on the roster."""

    MESSAGE = "[ERROR] The member does not exist in the guild."

    def __init__(self, guild_id: int, member_name: str) -> None:
        self.guild_id = guild_id
        self.member_name = member_name
        super().__init__(
            self.MESSAGE,
            details={"guild_id": guild_id, "member": member_name},
            error_code="MEMBER_NOT_FOUND",
        )


# ============================================================================
# LOOKUP ERRORS
# ============================================================================


class GuildNotFoundError(GuildhallDomainException):
    """
    Raised when a service is asked for a guild id it does not track.

    Args:
        guild_id: The missing guild id
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(self, guild_id: int) -> None:
        self.guild_id = guild_id
        super().__init__(
            f"Guild not found: {guild_id}",
            details={"guild_id": guild_id},
            error_code="GUILD_NOT_FOUND",
        )


# Utility functions for exception handling patterns


def get_error_severity(exc: Exception) -> ErrorSeverity:
    """
    Get the severity level of an exception for logging.

    Args:
        exc: Exception to check

    Returns:
        ErrorSeverity level.
    """
    if isinstance(exc, GuildhallDomainException):
        return exc.severity
    return ErrorSeverity.ERROR


def should_alert(exc: Exception) -> bool:
    """
    Determine if an exception should trigger alerting.

    Args:
        exc: Exception to check

    Returns:
        True if severity is ERROR or CRITICAL, False otherwise.
    """
    severity = get_error_severity(exc)
    return severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
