# utils/logger.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Logging utility for formula analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Mapping, Optional


class LogLevel(Enum):
    """Log levels for formula analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class AletheiaLogger:
    """Centralized logger for formula analysis with structured output."""

    def __init__(self, name: str = "aletheia", level: LogLevel = LogLevel.INFO):
        """Initialize the Aletheia logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(AletheiaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula analysis events
    def formula_parsed(self, source: str, rendered: str):
        """Log a successful whole-term parse."""
        self.debug(f"✅ Parsed {source!r} as {rendered}")

    def parse_failed(self, source: str, reason: str):
        """Log a rejected formula."""
        self.debug(f"❌ Rejected {source!r}: {reason}")

    def tautology_refused(self, count: int, limit: int):
        """Log a tautology check refused by the proposition cap."""
        self.debug(
            f"⚠️  Tautology check refused: {count} propositions exceed the limit of {limit}"
        )

    def counterexample_found(self, assignment: Mapping[str, bool]):
        """Log the first falsifying assignment."""
        rendered = ", ".join(
            f"{name}={'T' if value else 'F'}" for name, value in assignment.items()
        )
        self.debug(f"    🔍 Falsified by {{{rendered}}}")


class AletheiaFormatter(logging.Formatter):
    """Custom formatter for Aletheia logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[AletheiaLogger] = None


def get_logger(name: str = "aletheia") -> AletheiaLogger:
    """Get or create the global Aletheia logger instance.

    Args:
        name: Logger name (default: "aletheia")

    Returns:
        AletheiaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = AletheiaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
