# utils/__init__.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Utility module exports

from .logger import (
    LogLevel,
    TruthTableLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "TruthTableLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
