"""Logging configuration and utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional
from config.settings import Settings, settings

LOG_FORMAT = '%(asctime)s - %(name)s - [%(interface)s] - %(levelname)s - %(message)s'

class InterfaceContextFilter(logging.Filter):
    """Filter to add the monitored interface to log records."""

    def __init__(self):
        super().__init__()
        self.interface = None

    def set_interface_context(self, interface: str):
        """Set the interface context for this filter."""
        self.interface = interface

    def filter(self, record):
        """Add interface context to the log record."""
        record.interface = self.interface or '-'
        return True

def _level_from(app_settings: Settings) -> int:
    return getattr(logging, str(app_settings.get('logging.level', 'INFO')).upper(), logging.INFO)

def _create_file_handler(app_settings: Settings, level: int,
                         formatter: logging.Formatter) -> Optional[logging.Handler]:
    log_file = app_settings.get('logging.file', '')
    if not log_file:
        return None

    log_dir = os.path.dirname(log_file)
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=app_settings.get('logging.max_bytes', 10485760),
        backupCount=app_settings.get('logging.backup_count', 5)
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(InterfaceContextFilter())
    return file_handler

def get_logger(name: str, interface: Optional[str] = None) -> logging.Logger:
    """Get configured logger instance with optional interface context."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Configure logger
        level = _level_from(settings)
        logger.setLevel(level)
        # stdout is reserved for stats output
        logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT)

        # Console handler (diagnostics go to stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(InterfaceContextFilter())
        logger.addHandler(console_handler)

        # File handler, only once the settings are known to be usable
        if not settings.errors():
            file_handler = _create_file_handler(settings, level, formatter)
            if file_handler:
                logger.addHandler(file_handler)

    if interface:
        update_logger_interface_context(logger, interface)

    return logger

def update_logger_interface_context(logger: logging.Logger, interface: str):
    """Update the interface context for an existing logger."""
    for handler in logger.handlers:
        for filter_obj in handler.filters:
            if isinstance(filter_obj, InterfaceContextFilter):
                filter_obj.set_interface_context(interface)
                break

def _netstats_loggers():
    for name in list(logging.root.manager.loggerDict):
        if name.startswith('src.') or name in ('netstats', '__main__'):
            yield logging.getLogger(name)

def configure_logging(app_settings: Settings):
    """
    Apply logging settings to every netstats logger created so far.

    Loggers are created at import time from the default settings; this
    re-applies the level and replaces the file handler once a configuration
    file given on the command line has been loaded and validated.
    """
    level = _level_from(app_settings)
    formatter = logging.Formatter(LOG_FORMAT)

    for logger in _netstats_loggers():
        logger.setLevel(level)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.handlers.RotatingFileHandler):
                logger.removeHandler(handler)
                handler.close()
            else:
                handler.setLevel(level)

        if logger.handlers:
            file_handler = _create_file_handler(app_settings, level, formatter)
            if file_handler:
                logger.addHandler(file_handler)

def set_interface_context(interface: str):
    """Set the interface context on every netstats logger created so far."""
    for logger in _netstats_loggers():
        update_logger_interface_context(logger, interface)

def set_log_level(level: str):
    """Set the level of every netstats logger created so far."""
    numeric_level = getattr(logging, level.upper())
    for logger in _netstats_loggers():
        logger.setLevel(numeric_level)
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
