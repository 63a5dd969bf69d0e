"""
Structured Logging Utilities

Provides logging setup for the process plus utilities for adding
request-scoped structured context to log messages.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'backend.log'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(level: str = 'INFO', log_dir: Optional[str] = None) -> Optional[Path]:
    """
    Configure the root logger with a console handler and, when a log
    directory is given, a rotating file handler (10MB per file, 5 backups).

    Calling it again replaces the handlers it installed earlier.

    Args:
        level: Log level name
        log_dir: Directory for backend.log, or None for console only

    Returns:
        Path of the log file, or None when logging to console only
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, '_configured_by_app', False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)
    console_handler._configured_by_app = True
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir:
        log_path = Path(log_dir).expanduser()
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / LOG_FILE_NAME

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(log_level)
        file_handler._configured_by_app = True
        root_logger.addHandler(file_handler)

    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Persona created", extra={
            "person_id": person.id,
            "operation": "create_person",
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = get_logging_context()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(
            request_id="abc-123",
            method="POST",
            path="/api/v1/personas"
        )
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


# Argument names picked up as structured context by log_operation
_CONTEXT_KEYS = ("area_id", "person_id", "email")


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Identifiers passed by keyword or positionally (area_id, person_id, email)
    are added to the log context.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("delete_area")
        def delete(self, area_id: int):
            ...
    """
    def decorator(func):
        signature = inspect.signature(func)

        def _context_for(args, kwargs) -> Dict[str, Any]:
            context: Dict[str, Any] = {"operation": operation_name}
            try:
                bound = signature.bind_partial(*args, **kwargs).arguments
            except TypeError:
                bound = kwargs
            for key in _CONTEXT_KEYS:
                if key in bound:
                    context[key] = bound[key]
            return context

        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context_for(args, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}: {e}", extra=context)
                raise

        return wrapper

    return decorator
