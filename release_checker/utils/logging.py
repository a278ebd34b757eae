"""
Logging utility for Release Checker.

Provides a centralized way to configure and obtain loggers. The library never
configures logging on its own; host applications call ``setup_logging`` once
at startup if they want the bundled handlers.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

# --- Global Log Settings (Defaults, can be overridden by Config) ---
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = (
    "%(asctime)s - %(levelname)-8s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_FILE_SIZE_MB = 5
LOG_BACKUP_COUNT = 3

_logging_configured = False
_installed_handlers: List[logging.Handler] = []


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    max_bytes: int = MAX_LOG_FILE_SIZE_MB * 1024 * 1024,
    backup_count: int = LOG_BACKUP_COUNT,
    log_to_console: bool = True,
):
    """
    Configures root logging with an optional rotating file handler and console handler.
    Calling it again replaces the handlers it installed before; handlers added
    by the host application are left in place.
    """
    global _logging_configured

    log_level_upper = level.upper()
    numeric_level = getattr(logging, log_level_upper, logging.INFO)
    formatter = logging.Formatter(log_format, date_format)
    root_logger = logging.getLogger()

    root_logger.setLevel(numeric_level)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except (OSError, ValueError) as e:
            print(f"WARNING: Failed to close log handler {handler!r}: {e}", file=sys.stderr)

    if log_file:
        log_file_path = Path(log_file)
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            _installed_handlers.append(file_handler)
        except OSError as e:
            print(
                f"ERROR: Failed to set up file logging for {log_file_path}: {e}",
                file=sys.stderr,
            )
            log_to_console = True

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    noisy_libraries = {
        "urllib3.connectionpool": logging.WARNING,
        "aiohttp": logging.WARNING,
        "asyncio": logging.INFO,  # Debug is often too verbose for asyncio
    }
    for lib_name, lib_level in noisy_libraries.items():
        logging.getLogger(lib_name).setLevel(lib_level)

    _logging_configured = True
    logging.getLogger(__name__).info(
        "-" * 20 + " Logging System Initialized " + "-" * 20
    )
    logging.getLogger(__name__).info(
        f"Python Version: {sys.version.split()[0]}, Platform: {sys.platform}"
    )


def is_logging_configured() -> bool:
    return _logging_configured


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a logger instance with the specified name.
    If name is None, returns the root logger.
    """
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Returns the absolute path to the currently configured log file, if any."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None
