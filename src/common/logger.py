"""Logging utilities backed by rich.

All output of the plugin goes through one rich console so that diagnostic
log records and the upgrade notes themselves interleave correctly.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("No UPGRADE.md for acme/widgets")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .env import env

# Global console instances for consistent output
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    return RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(level.upper() if level else env.log_level())

    handler = _rich_handler(show_time=show_time, show_path=show_path)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    # Records still reach the root logger so pytest's caplog sees them
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Apply a logging level to every rich logger once at the CLI entry point.

    Args:
        level: Default logging level, overridden by LOG_LEVEL when set
        log_file: Optional file path to also log to a file
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for logger in logging.Logger.manager.loggerDict.values():
        if not isinstance(logger, logging.Logger):
            continue
        if any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr.

    Example:
        >>> error("Notes file not found")
        ✗ Notes file not found
    """
    error_console.print(f"[red]✗[/red] {message}")
