"""
CSV exporter for Format King.

Cells are quoted only when they hold a comma, a double quote or a
newline, and lines are joined with ``\\n`` without a trailing newline,
so the output pastes cleanly into spreadsheets and back into the
delimited parser.
"""

from typing import List, Optional, Sequence

from formatking.core.models import TableSet
from formatking.export.base import BaseExporter
from formatking.view.state import DocumentState


def escape_csv_cell(cell: str) -> str:
    if "," in cell or '"' in cell or "\n" in cell:
        return '"' + cell.replace('"', '""') + '"'
    return cell


def to_csv(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Serialize headers and rows as CSV text.

    Example:
        >>> to_csv(["name", "note"], [["Alice", "a, b"]])
        'name,note\\nAlice,"a, b"'
    """
    lines: List[str] = [",".join(escape_csv_cell(h) for h in headers)]
    lines.extend(",".join(escape_csv_cell(cell) for cell in row) for row in rows)
    return "\n".join(lines)


class CSVExporter(BaseExporter):
    """Exporter for CSV format.

    Writes the headers and the currently shown rows of a view.

    Example:
        >>> from formatking.export import CSVExporter
        >>>
        >>> exporter = CSVExporter(output_dir="exports")
        >>> exporter.export_state(state, "people")
        PosixPath('exports/people.csv')
    """

    @property
    def file_extension(self) -> str:
        """Get file extension for CSV files."""
        return "csv"

    def render(self, state: DocumentState, table_set: Optional[TableSet] = None) -> str:
        return to_csv(state.headers, state.filtered_data)
