"""
Logging utilities for the Tax Locator CLI tool.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "tax_locator"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging for the CLI application.

    Log records go to stderr so that results printed on stdout (including
    ``--json`` output) stay machine readable.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to an additional log file (optional)
        format_string: Custom format string for log messages

    Returns:
        The configured ``tax_locator`` logger
    """
    level_num = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level_num)
    logger.handlers.clear()
    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level_num, formatter))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_path), level_num, formatter))

    # urllib3 logs every connection at DEBUG; only show it when we do too.
    logging.getLogger("urllib3").setLevel(logging.DEBUG if level_num <= logging.DEBUG else logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger nested under the ``tax_locator`` logger (pass ``__name__``)."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
