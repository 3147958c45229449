"""Logging utility for bash-keys"""

import logging
from datetime import datetime
from functools import wraps
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "bashkeys"


## Main Log Manager


class LogManager:
    """Manages logging configuration and provides logger instances.

    Only a stderr handler is installed: normal runs stay quiet (WARNING and
    above) and nothing is written to disk.
    """

    def __init__(self, log_level: str = "WARNING"):
        self.log_level = _resolve_level(log_level)
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.root_logger.setLevel(logging.DEBUG)
        self.root_logger.propagate = False
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup the stderr console handler."""

        self.root_logger.handlers.clear()

        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )

        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

        self.root_logger.addHandler(console_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get a logger under the bashkeys namespace."""

        if not name:
            return logging.getLogger(ROOT_LOGGER_NAME)
        if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
            return logging.getLogger(name)
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    def set_level(self, level: str) -> None:
        """Set logging level at runtime"""

        self.log_level = _resolve_level(level)

        for handler in self.root_logger.handlers:
            handler.setLevel(self.log_level)


def _resolve_level(level: str) -> int:
    """Translate a level name such as 'debug' into its numeric value."""
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Invalid logging level: {level}")
    return value


## Decorators for Logging


def log_call(func):
    """Decorator to log function calls and their duration."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        func_name = f"{func.__module__}.{func.__qualname__}"
        logger.debug(f"-> Entering {func_name}")
        start_time = datetime.now()

        try:
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Exiting {func_name} (Duration: {duration:.3f}s)")
            return result

        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Error in {func_name} after {duration:.3f}s: {e}", exc_info=True)
            raise

    return wrapper


## Module-level LogManager Instance and Helper Functions

_log_manager: Optional[LogManager] = None


def init_logging(log_level: str = "WARNING") -> LogManager:
    """Initialize logging system and return LogManager instance."""

    global _log_manager

    if _log_manager is None:
        _log_manager = LogManager(log_level)
    else:
        _log_manager.set_level(log_level)

    return _log_manager


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance."""

    global _log_manager
    if _log_manager is None:
        _log_manager = init_logging()

    return _log_manager.get_logger(name)


def set_level(level: str) -> None:
    """Change the console log level (module-level wrapper)."""

    get_logger()
    _log_manager.set_level(level)
