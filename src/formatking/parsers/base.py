"""
Base parser module for Format King.

This module defines the abstract base class shared by every structured
format: a conservative detector paired with the parser that owns the
input once the detector matches.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from formatking.core.config import DetectionConfig
from formatking.core.models import SourceFormat, Table

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all table format parsers.

    Subclasses implement :meth:`detect`, which must look for structural
    evidence of the format rather than the mere presence of a character,
    and :meth:`parse`, which turns matching text into tables.

    Attributes:
        config: Detection thresholds
        source_format: Format this parser handles

    Example:
        >>> class MyParser(BaseParser):
        ...     source_format = SourceFormat.DELIMITED
        ...
        ...     def detect(self, text: str) -> bool:
        ...         return text.startswith("#table")
        ...
        ...     def parse(self, text: str) -> List[Table]:
        ...         return [Table(name="Table 1", headers=["a"], data=[["1"]])]
    """

    source_format: SourceFormat

    def __init__(self, config: Optional[DetectionConfig] = None):
        """Initialize the parser.

        Args:
            config: Detection thresholds (defaults used if None)
        """
        self.config = config or DetectionConfig()

    @property
    def name(self) -> str:
        """Get the parser name (its source format value)."""
        return self.source_format.value

    @abstractmethod
    def detect(self, text: str) -> bool:
        """Return True if *text* carries the structural anchors of this format.

        Args:
            text: Trimmed raw input

        Returns:
            True if this parser should own the input
        """

    @abstractmethod
    def parse(self, text: str) -> List[Table]:
        """Parse *text* into tables.

        Args:
            text: Trimmed raw input already accepted by :meth:`detect`

        Returns:
            Parsed tables in input order; empty if nothing usable was found
        """

    def safe_detect(self, text: str) -> bool:
        """Run :meth:`detect`, treating any exception as "does not match"."""
        try:
            return self.detect(text)
        except Exception as e:  # detector failures never propagate
            logger.debug("%s detector raised %s: %s", self.name, type(e).__name__, e)
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.name!r})"
