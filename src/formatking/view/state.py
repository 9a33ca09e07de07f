"""
Document state and view operations for Format King.

A :class:`DocumentState` is an immutable snapshot of what is on screen:
the selected table's headers and rows, the rows left after filtering,
and the active sort. Every operation returns a new state; callers thread
it forward.
"""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from formatking.core.models import Table, TableSet
from formatking.reconcile.reconciler import build_all_tables_view
from formatking.utils.exceptions import ViewSelectionError
from formatking.view.sorting import sort_rows

logger = logging.getLogger(__name__)

ALL_TABLES = -1


class SortDirection(str, Enum):
    """Direction of the active sort."""

    ASC = "asc"
    DESC = "desc"


class DocumentState(BaseModel):
    """The currently viewed table.

    Attributes:
        headers: Column headers of the view
        data: All rows of the view in source order
        filtered_data: Rows currently shown (after filter and sort)
        sort_column: Column the rows are sorted by, or None
        sort_direction: Direction of the active sort
        search_term: Active filter term ("" for none)
        view_index: Selection that produced this state (-1 for all tables)
    """

    headers: List[str] = Field(default_factory=list)
    data: List[List[str]] = Field(default_factory=list)
    filtered_data: List[List[str]] = Field(default_factory=list)
    sort_column: Optional[int] = None
    sort_direction: SortDirection = SortDirection.ASC
    search_term: str = ""
    view_index: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_table(cls, table: Table, view_index: int = 0) -> "DocumentState":
        """Fresh state showing every row of *table*, unsorted and unfiltered."""
        return cls(
            headers=list(table.headers),
            data=[list(row) for row in table.data],
            filtered_data=[list(row) for row in table.data],
            view_index=view_index,
        )

    @property
    def is_all_tables(self) -> bool:
        return self.view_index == ALL_TABLES

    def to_dataframe(self):
        """Convert the shown rows to a pandas DataFrame."""
        import pandas as pd

        return pd.DataFrame(self.filtered_data, columns=self.headers)


def select_view(
    table_set: TableSet, index: int, state: Optional[DocumentState] = None
) -> DocumentState:
    """Select the all-tables view (``-1``) or a single table by index.

    Both selections reset sort and search.

    Args:
        table_set: Parsed tables
        index: ``ALL_TABLES`` or a 0-based table index
        state: Current state, returned unchanged for an out-of-range index

    Returns:
        The new state

    Raises:
        ViewSelectionError: If *index* is out of range and there is no current state
    """
    if index == ALL_TABLES:
        logger.debug("Selecting all %d tables", len(table_set))
        return DocumentState.from_table(build_all_tables_view(table_set), ALL_TABLES)

    if 0 <= index < len(table_set):
        logger.debug("Selecting table %d (%s)", index, table_set[index].name)
        return DocumentState.from_table(table_set[index], index)

    if state is not None:
        logger.debug("Ignoring out-of-range table index %d", index)
        return state

    raise ViewSelectionError(
        f"Table index {index} is out of range (0-{len(table_set) - 1})",
        index=index,
    )


def default_view_index(table_set: TableSet) -> int:
    """All tables for multi-table input, otherwise the first table."""
    return ALL_TABLES if len(table_set) > 1 else 0


def load_table_set(table_set: TableSet) -> DocumentState:
    """Initial state for a freshly parsed table set."""
    return select_view(table_set, default_view_index(table_set))


def sort_by(state: DocumentState, column_index: int) -> DocumentState:
    """Sort the shown rows by a column.

    Sorting the active column again flips the direction; a new column
    starts ascending.

    Raises:
        ViewSelectionError: If *column_index* is not a column of the view
    """
    if not 0 <= column_index < len(state.headers):
        raise ViewSelectionError(
            f"Column index {column_index} is out of range (0-{len(state.headers) - 1})",
            index=column_index,
        )

    if state.sort_column == column_index:
        direction = SortDirection.DESC if state.sort_direction == SortDirection.ASC else SortDirection.ASC
    else:
        direction = SortDirection.ASC

    rows = sort_rows(state.filtered_data, column_index, descending=direction == SortDirection.DESC)
    return state.model_copy(
        update={
            "filtered_data": rows,
            "sort_column": column_index,
            "sort_direction": direction,
        }
    )


def apply_filter(state: DocumentState, search_term: str) -> DocumentState:
    """Keep rows with any cell containing *search_term*, ignoring case.

    The result keeps source order and clears the active sort. An empty
    term shows every row.
    """
    needle = (search_term or "").lower()
    if needle:
        rows = [list(row) for row in state.data if any(needle in cell.lower() for cell in row)]
    else:
        rows = [list(row) for row in state.data]

    logger.debug("Filter %r matched %d of %d rows", search_term, len(rows), len(state.data))
    return state.model_copy(
        update={
            "filtered_data": rows,
            "sort_column": None,
            "sort_direction": SortDirection.ASC,
            "search_term": search_term or "",
        }
    )
