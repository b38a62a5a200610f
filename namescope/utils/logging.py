"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
namescope package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the namescope package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("namescope")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "namescope" or name.startswith("namescope."):
        return logging.getLogger(name)
    return logging.getLogger(f"namescope.{name}")


class NamescopeLogger:
    """
    Domain-specific logging for identifier allocation.

    Wraps a module logger with helpers for the events the scope tree
    and the declaration locator report.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_claim(self, scope: object, raw: str, chosen: str, is_global: bool) -> None:
        """
        Log a successful claim.

        The scope is only rendered when DEBUG is enabled.

        Args:
            scope: Claiming scope
            raw: Name requested by the caller
            chosen: Identifier actually reserved
            is_global: Whether the claim propagated to ancestors
        """
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        kind = "global" if is_global else "local"
        self.logger.debug(f"Claimed {kind} name '{chosen}' for '{raw}' in {scope}")

    def log_collision(self, scope: object, candidate: str, replacement: str) -> None:
        """
        Log a collision that forced a new candidate.

        Args:
            scope: Claiming scope
            candidate: Candidate that was already taken
            replacement: Next candidate to try
        """
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        self.logger.debug(f"Name '{candidate}' taken in {scope}, trying '{replacement}'")

    def log_exhausted(self, name: str, attempts: int) -> None:
        """
        Log exhaustion of the unique-name search.

        Args:
            name: Base name being uniquified
            attempts: Number of candidates tried
        """
        self.logger.error(f"No unique name left for root '{name}' after {attempts} attempts")

    def log_locate(self, file_hint: str, line: int, declaration: str) -> None:
        """
        Log a resolved declaration.

        Args:
            file_hint: File hint supplied by the caller
            line: Line hint supplied by the caller
            declaration: Name of the declaration found
        """
        self.logger.info(f"Located declaration '{declaration}' in {file_hint} at or after line {line}")


# Initialize logging on module import
setup_logging()
