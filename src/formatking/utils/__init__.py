"""
Utility modules for Format King.

This package contains utility functions and classes for:
- Exception handling
- Logging configuration
"""

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    FormatKingException,
    InvalidDelimiterError,
    MalformedJsonError,
    NoTableFoundError,
    ParseError,
    ViewSelectionError,
)
from .logging import (
    ColoredFormatter,
    PerformanceLogger,
    setup_logging,
)

__all__ = [
    # Exceptions
    "FormatKingException",
    "ParseError",
    "EmptyInputError",
    "NoTableFoundError",
    "MalformedJsonError",
    "InvalidDelimiterError",
    "ViewSelectionError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "PerformanceLogger",
    "ColoredFormatter",
]
