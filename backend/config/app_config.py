"""
Runtime Configuration

Reads the application's settings from environment variables once, at import
time, and exposes them as module-level constants.

Variables:
- CONFERENCE_LOG_LEVEL: root log level name (defaults to INFO)
- CONFERENCE_LOG_FILE: optional path for a rotating log file
"""
import os
from pathlib import Path

from exceptions import ConfigurationError

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_log_level() -> str:
    """
    Resolve the log level name.

    Raises:
        ConfigurationError: If CONFERENCE_LOG_LEVEL is not a known level name
    """
    level = os.environ.get('CONFERENCE_LOG_LEVEL', 'INFO').strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid CONFERENCE_LOG_LEVEL '{level}', expected one of {', '.join(VALID_LOG_LEVELS)}",
            invalid_keys=['CONFERENCE_LOG_LEVEL']
        )
    return level


def get_log_file() -> Path | None:
    """Path of the rotating log file, or None to log to stdout only."""
    log_file = os.environ.get('CONFERENCE_LOG_FILE', '').strip()
    return Path(log_file) if log_file else None


LOG_LEVEL = get_log_level()
LOG_FILE = get_log_file()
