"""Core data models for Format King."""

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SourceFormat(str, Enum):
    """Text encoding a table set was parsed from."""

    BOX = "box"
    MARKDOWN = "markdown"
    JSON = "json"
    FIXED_WIDTH = "fixed_width"
    DELIMITED = "delimited"


def column_name(position: int) -> str:
    """Synthesized header for a 0-based column position."""
    return f"Column {position + 1}"


class Table(BaseModel):
    """A named table of string cells.

    Every row holds exactly ``len(headers)`` cells. Short rows are
    right-padded with empty strings; rows wider than the header list widen
    it with synthesized ``Column N`` headers so that no cell is dropped.

    Attributes:
        name: Display name (from a ``TABLE:`` marker, a title line, or synthesized)
        headers: Column headers in order; duplicates are allowed
        data: Rows of cells
    """

    name: str
    headers: List[str] = Field(default_factory=list)
    data: List[List[str]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def align_rows(cls, values: Any) -> Any:
        """Pad rows and widen headers so every row matches the header count."""
        if not isinstance(values, dict):
            return values

        headers = [str(h) for h in values.get("headers") or []]
        rows = [[str(c) for c in row] for row in values.get("data") or []]

        width = max([len(headers)] + [len(row) for row in rows])
        headers.extend(column_name(i) for i in range(len(headers), width))
        for row in rows:
            row.extend([""] * (width - len(row)))

        return {**values, "headers": headers, "data": rows}

    @property
    def row_count(self) -> int:
        """Number of data rows."""
        return len(self.data)

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return len(self.headers)

    def to_dataframe(self):
        """Convert table to a pandas DataFrame."""
        import pandas as pd

        return pd.DataFrame(self.data, columns=self.headers)


class TableSet(BaseModel):
    """Tables produced by one detection and parse pass over one input.

    Behaves as a read-only sequence of :class:`Table`.

    Attributes:
        tables: Parsed tables in input order
        source_format: Parser that produced the tables
        delimiter: Delimiter used, for delimited-text parses only
    """

    tables: List[Table] = Field(default_factory=list)
    source_format: SourceFormat
    delimiter: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.tables)

    def __iter__(self) -> Iterator[Table]:  # type: ignore[override]
        return iter(self.tables)

    def __getitem__(self, index: int) -> Table:
        return self.tables[index]

    @property
    def total_rows(self) -> int:
        """Sum of data rows across all tables."""
        return sum(table.row_count for table in self.tables)

    def summary(self) -> Dict[str, Any]:
        """Short description used in CLI output and logs."""
        return {
            "format": self.source_format.value,
            "tables": len(self.tables),
            "rows": self.total_rows,
        }
