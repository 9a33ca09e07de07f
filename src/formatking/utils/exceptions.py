"""
Exception hierarchy for Format King.

This module defines the exceptions raised while detecting, parsing,
viewing and exporting tabular text.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class FormatKingException(Exception):
    """Base exception for all Format King errors.

    All custom exceptions in the package inherit from this class.
    Provides common functionality for error details and timestamps.
    """

    def __init__(self, message: str, details: Optional[Dict] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        """String representation of the exception."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> Dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ParseError(FormatKingException):
    """Parsing-related errors.

    Base class for all errors raised while turning raw text into tables.
    """

    def __init__(self, message: str = "Parse failed", **kwargs: Any) -> None:
        """Initialize the parse error.

        Args:
            message: Human-readable error message
            **kwargs: Additional details to store
        """
        super().__init__(message, kwargs)


class EmptyInputError(ParseError):
    """No text was given.

    Raised when the input is empty or whitespace only.
    """

    def __init__(self, message: str = "Please enter some data first", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoTableFoundError(ParseError):
    """Nothing usable was found in the input.

    Raised when every detector and the delimited-text fallback produced
    zero rows.
    """

    def __init__(self, message: str = "No data found", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MalformedJsonError(ParseError):
    """JSON trial parse failed.

    Raised internally by the JSON-array detector and always treated as
    "does not match"; it never reaches callers of the classifier.
    """

    def __init__(
        self, message: str = "Malformed JSON", position: Optional[int] = None, **kwargs: Any
    ) -> None:
        """Initialize the malformed JSON error.

        Args:
            message: Human-readable error message
            position: Optional character offset of the failure
            **kwargs: Additional details
        """
        if position is not None:
            kwargs["position"] = position
        super().__init__(message, **kwargs)
        self.position = position


class InvalidDelimiterError(ParseError):
    """A manually chosen delimiter is not usable.

    Raised when a delimiter setting is neither "auto", a known name, nor a
    single character.
    """

    def __init__(
        self, message: str = "Invalid delimiter", delimiter: Optional[str] = None, **kwargs: Any
    ) -> None:
        if delimiter is not None:
            kwargs["delimiter"] = repr(delimiter)
        super().__init__(message, **kwargs)
        self.delimiter = delimiter


class ViewSelectionError(FormatKingException):
    """A table index or sort column does not exist.

    Raised when there is no previous state to leave unchanged.
    """

    def __init__(
        self, message: str = "Invalid selection", index: Optional[int] = None, **kwargs: Any
    ) -> None:
        """Initialize the view selection error.

        Args:
            message: Human-readable error message
            index: Optional offending table or column index
            **kwargs: Additional details
        """
        details = kwargs
        if index is not None:
            details["index"] = index
        super().__init__(message, details)
        self.index = index


class ConfigurationError(FormatKingException):
    """Configuration error.

    Raised when the application configuration is invalid or incomplete.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the configuration error.

        Args:
            message: Human-readable error message
            config_key: Optional configuration key that caused the error
            **kwargs: Additional details
        """
        details = kwargs
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
