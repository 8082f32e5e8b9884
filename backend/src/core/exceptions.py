"""
Exception hierarchy for the Takedown roster manager.
Provides specific exceptions for different error scenarios with context.
"""

from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ErrorContext:
    """Context information for errors."""
    operation: str
    filepath: Optional[str] = None
    line_number: Optional[int] = None
    parameters: Optional[Dict[str, Any]] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error context to dictionary."""
        return {
            'operation': self.operation,
            'filepath': self.filepath,
            'line_number': self.line_number,
            'parameters': self.parameters,
            'timestamp': self.timestamp.isoformat(),
        }


class TakedownException(Exception):
    """
    Base exception class for all Takedown-specific errors.
    Provides rich context and error categorization.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.original_error = original_error
        self.error_code = error_code
        self.recoverable = recoverable
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'recoverable': self.recoverable,
            'timestamp': self.timestamp.isoformat(),
            'context': self.context.to_dict() if self.context else None,
            'original_error': str(self.original_error) if self.original_error else None
        }

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        base_msg = self.message
        if self.context and self.context.filepath:
            base_msg += f" (File: {self.context.filepath})"
        if self.error_code:
            base_msg += f" [Code: {self.error_code}]"
        return base_msg


# =============================================================================
# Validation and Configuration Exceptions
# =============================================================================

class ValidationError(TakedownException):
    """Raised when a domain invariant is violated."""

    def __init__(
        self,
        field: str,
        value: Any,
        constraint: str,
        context: Optional[ErrorContext] = None
    ):
        message = f"Validation failed for field '{field}': {constraint}. Got: {value}"
        super().__init__(
            message=message,
            context=context,
            error_code="VALIDATION_ERROR",
            recoverable=True
        )
        self.field = field
        self.value = value
        self.constraint = constraint


class ConfigurationError(TakedownException):
    """Raised when configuration is invalid or missing. Never recoverable."""

    def __init__(
        self,
        setting: str,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        full_message = f"Configuration error for '{setting}': {message}"
        super().__init__(
            message=full_message,
            context=context,
            original_error=original_error,
            error_code="CONFIG_ERROR",
            recoverable=False
        )
        self.setting = setting


# =============================================================================
# Roster File Exceptions
# =============================================================================

class RosterException(TakedownException):
    """Base class for roster file errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "ROSTER_ERROR",
        recoverable: bool = True
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code=error_code,
            recoverable=recoverable
        )


class RosterFileNotFoundError(RosterException):
    """Raised when a roster file does not exist."""

    def __init__(self, filepath: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message=f"Roster file not found: {filepath}",
            context=context,
            error_code="ROSTER_FILE_NOT_FOUND"
        )
        self.filepath = filepath


class RosterFileError(RosterException):
    """Raised when a roster file cannot be read or written."""

    def __init__(
        self,
        filepath: Optional[str],
        reason: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message=f"Roster file error for '{filepath}': {reason}",
            context=context,
            original_error=original_error,
            error_code="ROSTER_FILE_ERROR"
        )
        self.filepath = filepath
        self.reason = reason


class MemberParseError(RosterException):
    """Raised when a serialized member record cannot be decoded."""

    def __init__(
        self,
        type_tag: str,
        field: str,
        value: Optional[str],
        reason: str,
        line_number: Optional[int] = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"Failed to load {type_tag.lower()}: field '{field}' {reason}"
        if value is not None:
            message += f" (got '{value}')"
        super().__init__(
            message=message,
            context=context,
            error_code="MEMBER_PARSE_ERROR"
        )
        self.type_tag = type_tag
        self.field = field
        self.value = value
        self.reason = reason
        self.line_number = line_number


class UnknownMemberTypeError(RosterException):
    """Raised when a record carries a type tag that names no member kind."""

    def __init__(
        self,
        type_tag: str,
        valid_tags: Optional[List[str]] = None,
        line_number: Optional[int] = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"Invalid member type: '{type_tag}'"
        if valid_tags:
            message += f". Valid types: {', '.join(valid_tags)}"
        super().__init__(
            message=message,
            context=context,
            error_code="UNKNOWN_MEMBER_TYPE"
        )
        self.type_tag = type_tag
        self.valid_tags = valid_tags
        self.line_number = line_number


# =============================================================================
# Domain-Level Exceptions
# =============================================================================

class DomainException(TakedownException):
    """Base class for domain logic errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "DOMAIN_ERROR",
        recoverable: bool = True
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code=error_code,
            recoverable=recoverable
        )


class MemberNotFoundError(DomainException):
    """Raised when a member is not part of the team it is looked up in."""

    def __init__(self, member_name: str, team_name: Optional[str] = None, context: Optional[ErrorContext] = None):
        message = f"Member '{member_name}' not found"
        if team_name:
            message += f" on team '{team_name}'"
        super().__init__(
            message=message,
            context=context,
            error_code="MEMBER_NOT_FOUND",
            recoverable=False
        )
        self.member_name = member_name
        self.team_name = team_name
