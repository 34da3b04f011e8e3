"""
Structured Logging Utilities

Configures the root logger and provides a logger wrapper that attaches
request-scoped context to every message.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from contextvars import ContextVar, Token

from config.app_config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Install stdout and optional rotating file handlers on the root logger.

    Calling it again replaces the handlers it installed earlier instead of
    stacking duplicates.

    Args:
        level: Log level name (defaults to CONFERENCE_LOG_LEVEL)
        log_file: Path of a rotating log file, 10MB per file with 5 backups
            (defaults to CONFERENCE_LOG_FILE, if set)

    Returns:
        The configured root logger
    """
    level = level or LOG_LEVEL
    if log_file is None:
        log_file = LOG_FILE

    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        if getattr(handler, '_conference_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    handlers.append(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(log_formatter)
        handler.setLevel(level)
        handler._conference_handler = True
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    root_logger.info(f"Logging initialized at {level}" + (f": {log_file}" if log_file else ""))
    return root_logger


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.debug("Session.track not loaded", extra={
            "entity": "Session",
            "relation": "track"
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
        context = _logging_context.get().copy()
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

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs) -> Token:
    """
    Set logging context for the current request.

    This context will be automatically included in all log messages
    emitted through a StructuredLogger within the current context.

    Returns:
        Token that reset_logging_context() uses to restore the previous context

    Example:
        token = set_logging_context(operation="Get session")
        try:
            ...
        finally:
            reset_logging_context(token)
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    return _logging_context.set(context)


def reset_logging_context(token: Token):
    """Restore the context that was active before set_logging_context()."""
    _logging_context.reset(token)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})
