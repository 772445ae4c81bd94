"""
Logging Configuration
Sets up the global logger for the application and lets the GUI console
subscribe to the same records.
"""
import logging
import sys
from typing import Callable, Optional, Union

PACKAGE_LOGGER = "runedrakraft"

# Format: Time - Module - Level - Message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


class CallbackHandler(logging.Handler):
    """Forwards formatted records to a callable, e.g. the window console."""

    def __init__(self, sink: Callable[[str, str], None], level: int = logging.INFO) -> None:
        super().__init__(level)
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(record.levelname.lower(), record.getMessage())
        except Exception:
            self.handleError(record)


def resolve_level(level: Union[int, str]) -> int:
    """Accept either a numeric level or a name like 'debug'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'runedrakraft' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug")
        log_file: Optional path to save logs to a file.
    """
    level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs during reload/restart
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger


def attach_sink(sink: Callable[[str, str], None], level: int = logging.INFO) -> CallbackHandler:
    """Subscribe `sink(level_name, message)` to package log records."""
    handler = CallbackHandler(sink, level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    # Records below the logger's own level never reach handlers
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler
