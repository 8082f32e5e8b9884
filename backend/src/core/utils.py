"""
Core utilities for the Takedown roster manager.
Common functionality used across the entire application.
"""

import math
import re
import logging
from pathlib import Path
from typing import Any, Optional, Iterable

# Constants
DATA_DIR = Path(__file__).parent.parent / "domain" / "data"


class LoggerFactory:
    """Centralized logger configuration."""

    _configured = False

    @classmethod
    def setup_logging(
        cls,
        level: str = "INFO",
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
        force: bool = False
    ):
        """Setup application-wide logging configuration."""
        if cls._configured and not force:
            return

        if format_string is None:
            format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = [logging.StreamHandler()]
        if log_file:
            handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

        logging.basicConfig(
            level=getattr(logging, level.upper()),
            format=format_string,
            handlers=handlers,
            force=force
        )
        cls._configured = True

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a configured logger instance."""
        LoggerFactory.setup_logging()
        return logging.getLogger(name)


class StringHelper:
    """Collection of string related functionality."""

    _INTERIOR_CAPITAL = re.compile(r'(?<!^)(?=[A-Z])')

    @staticmethod
    def to_display_header(identifier: str) -> str:
        """
        Convert a word-joined capitalized identifier into a display label.

        "YearsOfExperience" -> "Years Of Experience"
        """
        return StringHelper._INTERIOR_CAPITAL.sub(' ', identifier)

    @staticmethod
    def format_number(value: float) -> str:
        """Format a float without a trailing '.0' when it is integral."""
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))


class DataValidator:
    """Common data validation utilities. Raise ValueError with a short reason."""

    @staticmethod
    def validate_non_empty(value: str, name: str) -> str:
        """Validate that a text value is not blank."""
        if value is None or not value.strip():
            raise ValueError(f"{name} must not be empty")
        return value

    @staticmethod
    def validate_non_negative_int(value: Any, name: str) -> int:
        """Validate and convert a non-negative integer."""
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer")
        if number < 0:
            raise ValueError(f"{name} must not be negative")
        return number

    @staticmethod
    def validate_float(value: Any, name: str) -> float:
        """Validate and convert a finite float."""
        try:
            number = float(str(value).strip())
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be a number")
        if not math.isfinite(number):
            raise ValueError(f"{name} must be a finite number")
        return number

    @staticmethod
    def validate_choice(value: str, choices: Iterable[str], name: str) -> str:
        """Validate that a token is one of the allowed choices."""
        choices = list(choices)
        if value not in choices:
            raise ValueError(f"{name} must be one of {', '.join(choices)}")
        return value


# Export commonly used utilities
__all__ = [
    'LoggerFactory',
    'StringHelper',
    'DataValidator',
    'DATA_DIR'
]
