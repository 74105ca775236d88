# utils/__init__.py
# This file is part of Aletheia - A Propositional Tautology Checker
#
# Utility module exports

from .logger import (
    AletheiaLogger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "AletheiaLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
