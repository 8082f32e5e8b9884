"""
Core package for the Takedown roster manager.
Contains exceptions, utilities, and common functionality.
"""

from .exceptions import *
from .error_handler import ErrorHandler, error_handler, with_domain_error_handling
from .utils import *

__all__ = [
    # Base exceptions
    "TakedownException",
    "ErrorContext",
    "ValidationError",
    "ConfigurationError",

    # Roster file exceptions
    "RosterException",
    "RosterFileNotFoundError",
    "RosterFileError",
    "MemberParseError",
    "UnknownMemberTypeError",

    # Domain exceptions
    "DomainException",
    "MemberNotFoundError",

    # Error handler
    "ErrorHandler",
    "error_handler",
    "with_domain_error_handling",

    # Utilities
    "LoggerFactory",
    "StringHelper",
    "DataValidator",
    "DATA_DIR"
]
