"""
Export module for Format King.

This module provides exporters for writing the current view to various
output formats (CSV, JSON, HTML).

Main classes:
    - CSVExporter: Export to CSV format
    - JSONExporter: Export to a JSON array of objects
    - HTMLExporter: Export to inline-styled HTML tables
    - BaseExporter: Base class for custom exporters

Example:
    >>> from formatking.export import CSVExporter, to_csv
    >>>
    >>> # Render in memory
    >>> text = to_csv(state.headers, state.filtered_data)
    >>>
    >>> # Write to a file
    >>> CSVExporter(output_dir="exports").export_state(state, "people")
"""

from formatking.export.base import BaseExporter, ExportError, ExportValidationError, ExportWriteError
from formatking.export.csv_exporter import CSVExporter, to_csv
from formatking.export.html_exporter import HTMLExporter, to_rich_html
from formatking.export.json_exporter import JSONExporter, to_json

__all__ = [
    # Base classes
    "BaseExporter",
    "ExportError",
    "ExportValidationError",
    "ExportWriteError",
    # Exporters
    "CSVExporter",
    "JSONExporter",
    "HTMLExporter",
    # Renderers
    "to_csv",
    "to_json",
    "to_rich_html",
    # Helper
    "get_exporter",
]


def get_exporter(format_name: str, output_dir=None) -> BaseExporter:
    """Get an exporter instance for the specified format.

    Args:
        format_name: Export format name (csv, json, html)
        output_dir: Directory to write output files

    Returns:
        Exporter instance

    Raises:
        ValueError: If format is not supported
    """
    format_map = {
        "csv": CSVExporter,
        "json": JSONExporter,
        "html": HTMLExporter,
        "htm": HTMLExporter,
    }

    format_lower = format_name.lower()

    if format_lower not in format_map:
        raise ValueError(
            f"Unknown format '{format_name}'. "
            "Supported formats: csv, json, html"
        )

    exporter_class = format_map[format_lower]
    return exporter_class(output_dir=output_dir)
