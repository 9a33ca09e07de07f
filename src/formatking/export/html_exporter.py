"""
Rich HTML exporter for Format King.

Produces tables with inline styles (Calibri, blue header row, alternating
row shading) that word processors and note-taking apps keep when the
HTML is pasted into them. Multiple tables are laid out one after the
other, each under a ``TABLE: <name>`` title.
"""

import html
from typing import List, Optional, Sequence, Union

from formatking.core.models import TableSet
from formatking.export.base import BaseExporter
from formatking.view.state import DocumentState

TABLE_STYLE = (
    "border-collapse: collapse; font-family: Calibri, Arial, sans-serif; "
    "font-size: 11pt; width: 100%; margin-bottom: 20px;"
)
HEADER_CELL_STYLE = (
    "border: 1px solid #5B9BD5; background-color: #5B9BD5; color: white; "
    "font-weight: bold; padding: 8px 12px; text-align: left;"
)
CELL_STYLE = "border: 1px solid #DDDDDD; padding: 8px 12px; text-align: left;"
ALT_ROW_STYLE = CELL_STYLE + " background-color: #F2F2F2;"
TABLE_TITLE_STYLE = (
    "font-family: Calibri, Arial, sans-serif; font-size: 14pt; font-weight: bold; "
    "color: #2E75B6; padding: 10px 0; border-bottom: 3px solid #2E75B6; margin-bottom: 10px;"
)

TABLE_SEPARATOR = "<br><br>"


def escape_html(text: str) -> str:
    return html.escape(text, quote=False)


def render_table_html(
    headers: Sequence[str], rows: Sequence[Sequence[str]], name: Optional[str] = None
) -> str:
    """Render one styled table, optionally preceded by a ``TABLE:`` title."""
    header_row = "<tr>" + "".join(
        f'<th style="{HEADER_CELL_STYLE}">{escape_html(h)}</th>' for h in headers
    ) + "</tr>"

    body_rows: List[str] = []
    for index, row in enumerate(rows):
        style = CELL_STYLE if index % 2 == 0 else ALT_ROW_STYLE
        cells = "".join(f'<td style="{style}">{escape_html(cell)}</td>' for cell in row)
        body_rows.append(f"<tr>{cells}</tr>")

    parts = []
    if name:
        parts.append(f'<div style="{TABLE_TITLE_STYLE}">TABLE: {escape_html(name)}</div>')
    parts.append(
        f'<table style="{TABLE_STYLE}">'
        f"<thead>{header_row}</thead>"
        f"<tbody>{''.join(body_rows)}</tbody>"
        "</table>"
    )
    return "\n".join(parts)


def render_multi_table_html(table_set: TableSet) -> str:
    """Render every table of the set as a standalone HTML document."""
    tables_html = TABLE_SEPARATOR.join(
        render_table_html(table.headers, table.data, table.name) for table in table_set
    )
    return f"<html>\n<body>\n{tables_html}\n</body>\n</html>"


def to_rich_html(
    source: Union[DocumentState, TableSet], table_set: Optional[TableSet] = None
) -> str:
    """Render a view or a whole table set as styled HTML.

    Separate titled tables are produced for a table set holding more than
    one table, and for the all-tables view of such a set. Anything else
    renders as a single untitled table of the shown rows.

    Args:
        source: View state or table set to render
        table_set: Tables the view was selected from

    Returns:
        HTML text
    """
    if isinstance(source, TableSet):
        if len(source) > 1:
            return render_multi_table_html(source)
        if len(source) == 1:
            return render_table_html(source[0].headers, source[0].data)
        return render_table_html([], [])

    if table_set is not None and len(table_set) > 1 and source.is_all_tables:
        return render_multi_table_html(table_set)
    return render_table_html(source.headers, source.filtered_data)


class HTMLExporter(BaseExporter):
    """Exporter for inline-styled HTML tables.

    Example:
        >>> exporter = HTMLExporter(output_dir="exports")
        >>> exporter.export_state(state, "report", table_set=table_set)
        PosixPath('exports/report.html')
    """

    @property
    def file_extension(self) -> str:
        """Get file extension for HTML files."""
        return "html"

    def render(self, state: DocumentState, table_set: Optional[TableSet] = None) -> str:
        return to_rich_html(state, table_set)
