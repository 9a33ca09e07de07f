"""
Logging configuration for Format King.

This module provides utilities for setting up logging across the
package with consistent formatting and levels.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Optional, Union

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - " "[%(filename)s:%(lineno)d] - %(message)s"
)
CLI_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output.

    Adds color codes to log levels for better visibility in terminals.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        result = super().format(record)

        # Reset levelname for other formatters
        record.levelname = levelname

        return result


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    colored: bool = True,
) -> logging.Logger:
    """Setup logging configuration for Format King.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (logs to console only if None)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)
        colored: Use colored output for console logging

    Returns:
        Configured root logger

    Example:
        >>> logger = setup_logging(level="DEBUG", log_file=Path("formatking.log"))
        >>> logger.info("Application started")
    """
    root_logger = logging.getLogger()

    # Clear existing handlers
    root_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(numeric_level)

    if format_string is None:
        format_string = DEFAULT_FORMAT

    # Console handler; stderr keeps piped table output clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    console_formatter: Union[ColoredFormatter, logging.Formatter]
    if colored and sys.stderr.isatty():
        console_formatter = ColoredFormatter(format_string, datefmt="%H:%M:%S")
    else:
        console_formatter = logging.Formatter(format_string, datefmt="%H:%M:%S")

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(numeric_level)

        # Use detailed format for file logs
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger


class PerformanceLogger:
    """Context manager for logging operation performance.

    Example:
        >>> with PerformanceLogger("Classifying input", logger, level="DEBUG"):
        ...     table_set = classify_and_parse(text)
        # Output: "Classifying input completed in 0.01s"
    """

    def __init__(
        self, operation: str, logger: Optional[logging.Logger] = None, level: str = "INFO"
    ):
        """Initialize the performance logger.

        Args:
            operation: Description of the operation
            logger: Logger instance (uses root logger if None)
            level: Log level for the message
        """
        self.operation = operation
        self.logger = logger or logging.getLogger()
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.start_time: Optional[float] = None

    def __enter__(self) -> "PerformanceLogger":
        """Enter the context and start timing."""
        self.start_time = time.perf_counter()
        self.logger.log(self.level, "%s started", self.operation)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context and log elapsed time."""
        if self.start_time is None:
            return
        elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.log(self.level, "%s completed in %.2fs", self.operation, elapsed)
        else:
            self.logger.log(
                self.level, "%s failed after %.2fs: %s", self.operation, elapsed, exc_val
            )
