"""
Logging infrastructure.

Log records always go to stderr so stdout carries nothing but the report.
Text reports get rich console formatting; JSON reports get plain
one-line records so a consumer piping both streams can still parse them.
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from manualcheck.config.schema import ManualCheckConfig

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(config: ManualCheckConfig) -> logging.Handler:
    """Build the stderr handler matching the report format."""
    if config.output.format == "json":
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return handler

    handler = RichHandler(
        console=Console(stderr=True, no_color=not config.output.color),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def setup_logging(config: ManualCheckConfig) -> logging.Logger:
    """
    Set up logging infrastructure.

    Safe to call repeatedly: handlers from an earlier call are closed
    before new ones are attached.

    Args:
        config: Application configuration

    Returns:
        Package logger
    """
    logger = logging.getLogger("manualcheck")
    logger.setLevel(config.log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = _console_handler(config)
    console_handler.setLevel(config.log_level)
    logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.log_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        name: Component name (will be prefixed with 'manualcheck.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"manualcheck.{name}")
