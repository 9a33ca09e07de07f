"""
Base exporter classes for Format King.

This module provides the base infrastructure for writing the current
view to CSV, JSON and HTML files.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from formatking.core.models import TableSet
from formatking.utils.exceptions import FormatKingException
from formatking.view.state import DocumentState

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "data"


class BaseExporter(ABC):
    """Base class for all exporters.

    Subclasses render a :class:`DocumentState` to text; the base class
    takes care of file naming and writing.
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """Initialize the exporter.

        Args:
            output_dir: Directory to write output files. If None, uses current directory.
        """
        self.output_dir = Path(output_dir) if output_dir else Path("")

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Get the file extension for this exporter (e.g., 'csv', 'json')."""
        pass

    @abstractmethod
    def render(self, state: DocumentState, table_set: Optional[TableSet] = None) -> str:
        """Render the state to the exporter's text format.

        Args:
            state: View to render
            table_set: Tables the view was selected from, for formats that
                lay out multiple tables separately

        Returns:
            Rendered document
        """
        pass

    def export_state(
        self,
        state: DocumentState,
        output_file: str = DEFAULT_EXPORT_NAME,
        table_set: Optional[TableSet] = None,
    ) -> Path:
        """Render the state and write it to a file.

        Args:
            state: View to export
            output_file: Name of output file (extension added if missing)
            table_set: Tables the view was selected from

        Returns:
            Path to the created file

        Raises:
            ExportValidationError: If the state has no columns
            ExportWriteError: If writing to file fails
        """
        if not state.headers:
            raise ExportValidationError("No table to export")

        suffix = f".{self.file_extension}"
        if not output_file.endswith(suffix):
            output_file = f"{output_file}{suffix}"

        output_path = self._get_output_path(output_file)
        content = self.render(state, table_set)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ExportWriteError(
                f"Failed to write {self.file_extension.upper()} file: {e}",
                details={"path": str(output_path)},
            ) from e

        logger.info("Exported %d rows to %s", len(state.filtered_data), output_path)
        return output_path

    def _get_output_path(self, filename: str) -> Path:
        """Get the full output path for a filename.

        Args:
            filename: Name of the output file

        Returns:
            Full path to the output file
        """
        return self.output_dir / filename


class ExportError(FormatKingException):
    """Base exception for export-related errors."""
    pass


class ExportValidationError(ExportError):
    """Exception raised when export data validation fails."""
    pass


class ExportWriteError(ExportError):
    """Exception raised when writing to output file fails."""
    pass
