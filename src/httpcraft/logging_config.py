"""
Logging configuration for httpcraft.

Everything logs under the "httpcraft" logger. Console records go to stderr
so they never land in the middle of the menu on stdout; the optional log
file rotates under ~/.httpcraft/logs.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def default_log_path(log_dir: str | None = None) -> Path:
    """Log file location, under log_dir when given."""
    if log_dir:
        return Path(log_dir) / "httpcraft.log"
    return Path.home() / ".httpcraft" / "logs" / "httpcraft.log"


def setup_logging(
    level: str = "WARNING",
    log_dir: str | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the httpcraft logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ...)
        log_dir: Directory for the log file
        enable_console: Log to stderr
        enable_file: Also log everything down to DEBUG to a rotating file

    Returns:
        The httpcraft logger
    """
    logger = logging.getLogger("httpcraft")
    console_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(logging.DEBUG if enable_file else console_level)
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if enable_console:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(console_level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if enable_file:
        log_path = default_log_path(log_dir)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(log_path, maxBytes=1048576, backupCount=3, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(
    debug: bool = False,
    log_to_file: bool = False,
    level: str = "WARNING",
    log_dir: str | None = None,
) -> logging.Logger:
    """Configure logging from the CLI flags; --debug overrides the level."""
    return setup_logging(
        level="DEBUG" if debug else level,
        log_dir=log_dir,
        enable_file=log_to_file,
    )
