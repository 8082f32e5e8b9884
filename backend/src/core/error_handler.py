"""
Centralized error handling for the Takedown roster manager.
Provides decorators, context managers, and utilities for consistent error management.
"""

import logging
import functools
from typing import Any, Callable, Optional, Dict, TypeVar
from contextlib import contextmanager
from datetime import datetime

from .exceptions import (
    TakedownException, ErrorContext, RosterFileError, DomainException
)

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


class ErrorHandler:
    """
    Centralized error handling with context wrapping, error boundaries and failure statistics.
    """

    def __init__(self):
        self.failure_history: Dict[str, Dict[str, Any]] = {}

    def with_error_context(self, operation: str, filepath_arg: Optional[str] = None):
        """
        Decorator that adds error context to exceptions.

        Args:
            operation: Name of the operation
            filepath_arg: Keyword or first positional argument holding the file path
        """
        def decorator(func: F) -> F:
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)
                except TakedownException as e:
                    if not e.context:
                        e.context = ErrorContext(
                            operation=operation,
                            filepath=_resolve_filepath(filepath_arg, args, kwargs),
                            parameters=kwargs or None
                        )
                    raise
                except OSError as e:
                    filepath = _resolve_filepath(filepath_arg, args, kwargs)
                    context = ErrorContext(
                        operation=operation,
                        filepath=filepath,
                        parameters=kwargs or None
                    )
                    self._record_failure(operation, e)
                    raise RosterFileError(
                        filepath=filepath,
                        reason=e.strerror or str(e),
                        context=context,
                        original_error=e
                    ) from e

            return wrapper
        return decorator

    @contextmanager
    def error_boundary(self, operation: str):
        """
        Context manager for error boundaries: Takedown errors are logged,
        recorded against the operation and re-raised.

        Args:
            operation: Name of the operation
        """
        try:
            yield
        except TakedownException as e:
            logger.error(f"Error boundary triggered for {operation}: {e}")
            self._record_failure(operation, e)
            raise

    def _record_failure(self, operation_id: str, error: Exception):
        """Record operation failure for diagnostics."""
        if operation_id not in self.failure_history:
            self.failure_history[operation_id] = {
                'failures': 0,
                'last_failure': None,
                'last_error': None
            }

        history = self.failure_history[operation_id]
        history['failures'] += 1
        history['last_failure'] = datetime.now()
        history['last_error'] = type(error).__name__

    def get_failure_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get failure statistics."""
        return self.failure_history.copy()

    def reset_stats(self):
        """Reset failure statistics."""
        self.failure_history.clear()


def _resolve_filepath(filepath_arg: Optional[str], args: tuple, kwargs: Dict[str, Any]) -> Optional[str]:
    if filepath_arg is None:
        return None
    if filepath_arg in kwargs:
        value = kwargs[filepath_arg]
    else:
        # Bound methods receive self first; take the first str-like argument after it.
        value = next((arg for arg in args if isinstance(arg, (str, bytes)) or hasattr(arg, '__fspath__')), None)
    return str(value) if value is not None else None


# Global error handler instance
error_handler = ErrorHandler()


def with_domain_error_handling(operation: Optional[str] = None):
    """
    Decorator for domain operations: Takedown errors pass through untouched,
    anything else is logged and wrapped in a DomainException.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except TakedownException:
                raise
            except Exception as e:
                operation_id = operation or f"{func.__module__}.{func.__name__}"
                logger.error(f"Unexpected error in domain operation {operation_id}: {e}")
                error_handler._record_failure(operation_id, e)
                raise DomainException(
                    message=f"Unexpected error in {operation_id}",
                    original_error=e,
                    context=ErrorContext(operation=operation_id, parameters=kwargs or None)
                ) from e

        return wrapper

    return decorator
