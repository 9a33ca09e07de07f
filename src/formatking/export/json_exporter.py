"""
JSON exporter for Format King.

This module writes the shown rows of a view as a JSON array of objects
keyed by column header.
"""

import json
from typing import Dict, List, Optional, Sequence

from formatking.core.models import TableSet
from formatking.export.base import BaseExporter, ExportWriteError
from formatking.view.state import DocumentState


def rows_to_records(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[Dict[str, str]]:
    """Map each row to a header-keyed dict.

    With duplicate headers the later column wins. Missing cells map to
    an empty string.
    """
    records = []
    for row in rows:
        record: Dict[str, str] = {}
        for i, header in enumerate(headers):
            record[header] = row[i] if i < len(row) else ""
        records.append(record)
    return records


def to_json(headers: Sequence[str], rows: Sequence[Sequence[str]], indent: int = 2) -> str:
    """Serialize rows as a pretty-printed JSON array of objects.

    Example:
        >>> print(to_json(["a"], [["1"]]))
        [
          {
            "a": "1"
          }
        ]
    """
    return json.dumps(rows_to_records(headers, rows), indent=indent, ensure_ascii=False)


class JSONExporter(BaseExporter):
    """Exporter for JSON format.

    Example:
        >>> exporter = JSONExporter(output_dir="exports")
        >>> exporter.export_state(state, "people.json")
        PosixPath('exports/people.json')
    """

    def __init__(self, output_dir=None, indent: int = 2):
        """Initialize the JSON exporter.

        Args:
            output_dir: Directory to write output files
            indent: Indentation level
        """
        super().__init__(output_dir)
        self.indent = indent

    @property
    def file_extension(self) -> str:
        """Get file extension for JSON files."""
        return "json"

    def render(self, state: DocumentState, table_set: Optional[TableSet] = None) -> str:
        try:
            return to_json(state.headers, state.filtered_data, indent=self.indent)
        except (TypeError, ValueError) as e:
            raise ExportWriteError(f"Failed to serialize to JSON: {e}") from e
