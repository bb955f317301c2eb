"""
Domain exceptions package for Guildhall.

Purpose
-------
Centralized domain exception definitions. Every business rule violation
raised by the domain models maps to exactly one exception type and one
stable ``error_code``.
"""

from .errors import (
    DomainValidationError,
    ErrorSeverity,
    GuildFullError,
    GuildhallDomainException,
    GuildNotFoundError,
    InvalidCoordinateError,
    InvalidMaxMembersError,
    MemberAlreadyExistsError,
    MemberNoPetError,
    MemberNotFoundError,
    MemberNullError,
    PreconditionError,
    RosterConflictError,
    get_error_severity,
    should_alert,
)

__all__ = [
    # Exception classes
    "GuildhallDomainException",
    "DomainValidationError",
    "InvalidCoordinateError",
    "InvalidMaxMembersError",
    "PreconditionError",
    "MemberNullError",
    "MemberNoPetError",
    "RosterConflictError",
    "GuildFullError",
    "MemberAlreadyExistsError",
    "MemberNotFoundError",
    "GuildNotFoundError",
    "ErrorSeverity",
    # Utilities
    "get_error_severity",
    "should_alert",
]
