"""Numeric-aware sort keys for table columns."""

from typing import List, Sequence, Tuple, Union

from formatking.parsers.patterns import NUMERIC_CELL_RE

SortKey = Tuple[int, Union[float, str]]


def is_numeric_cell(cell: str) -> bool:
    """Return True if the whole (stripped) cell is a decimal number."""
    return NUMERIC_CELL_RE.fullmatch(cell.strip()) is not None


def sort_key(cell: str) -> SortKey:
    """Key ordering numeric cells first by value, then text case-insensitively.

    >>> sorted(["10", "b", "2", "A"], key=sort_key)
    ['2', '10', 'A', 'b']
    """
    if is_numeric_cell(cell):
        return (0, float(cell.strip()))
    return (1, cell.lower())


def sort_rows(rows: Sequence[List[str]], column_index: int, descending: bool = False) -> List[List[str]]:
    """Stable sort of *rows* by one column; missing cells sort as ``""``."""
    return sorted(
        rows,
        key=lambda row: sort_key(row[column_index] if column_index < len(row) else ""),
        reverse=descending,
    )
