"""
Tests for formatking.view module.
"""

import unittest

from formatking.core.models import SourceFormat, Table, TableSet
from formatking.utils.exceptions import ViewSelectionError
from formatking.view import (
    ALL_TABLES,
    DocumentState,
    SortDirection,
    apply_filter,
    default_view_index,
    is_numeric_cell,
    load_table_set,
    select_view,
    sort_by,
    sort_key,
)


def make_state(column, headers=None):
    headers = headers or ["value"]
    table = Table(name="t", headers=headers, data=[[cell] for cell in column])
    return DocumentState.from_table(table)


def column_values(state, index=0):
    return [row[index] for row in state.filtered_data]


class TestNumericCells(unittest.TestCase):
    def test_numeric(self):
        for cell in ("10", "-2", "+3.5", "3.", ".5", "1e3", "2.5E-2", "  42  "):
            self.assertTrue(is_numeric_cell(cell), cell)

    def test_not_numeric(self):
        for cell in ("", "3abc", "abc", "Infinity", "NaN", "inf", "0x1F", "1,000", "1e", "-"):
            self.assertFalse(is_numeric_cell(cell), cell)

    def test_sort_key_groups(self):
        self.assertLess(sort_key("999"), sort_key("a"))
        self.assertLess(sort_key("2"), sort_key("10"))
        self.assertEqual(sort_key("Abc"), sort_key("abc"))


class TestSelectView(unittest.TestCase):
    def setUp(self):
        self.table_set = TableSet(
            tables=[
                Table(name="users", headers=["id", "name"], data=[["1", "Ann"], ["2", "Bob"]]),
                Table(name="orders", headers=["id", "amount"], data=[["10", "9.99"]]),
            ],
            source_format=SourceFormat.BOX,
        )

    def test_single_table(self):
        state = select_view(self.table_set, 1)
        self.assertEqual(state.headers, ["id", "amount"])
        self.assertEqual(state.data, [["10", "9.99"]])
        self.assertEqual(state.filtered_data, state.data)
        self.assertIsNone(state.sort_column)
        self.assertEqual(state.sort_direction, SortDirection.ASC)
        self.assertEqual(state.search_term, "")
        self.assertEqual(state.view_index, 1)

    def test_all_tables(self):
        state = select_view(self.table_set, ALL_TABLES)
        self.assertTrue(state.is_all_tables)
        self.assertEqual(state.headers, ["Table", "id", "name", "amount"])
        self.assertEqual(len(state.data), self.table_set.total_rows)

    def test_selection_resets_sort_and_search(self):
        state = sort_by(apply_filter(select_view(self.table_set, 0), "ann"), 0)
        state = select_view(self.table_set, 0, state)
        self.assertIsNone(state.sort_column)
        self.assertEqual(state.search_term, "")
        self.assertEqual(len(state.filtered_data), 2)

    def test_selecting_same_index_twice_is_idempotent(self):
        first = select_view(self.table_set, 0)
        second = select_view(self.table_set, 0, first)
        self.assertEqual(first, second)

    def test_out_of_range_keeps_state(self):
        state = select_view(self.table_set, 0)
        self.assertIs(select_view(self.table_set, 5, state), state)
        self.assertIs(select_view(self.table_set, -2, state), state)

    def test_out_of_range_without_state(self):
        with self.assertRaises(ViewSelectionError) as cm:
            select_view(self.table_set, 2)
        self.assertEqual(cm.exception.index, 2)

    def test_default_view(self):
        self.assertEqual(default_view_index(self.table_set), ALL_TABLES)
        self.assertTrue(load_table_set(self.table_set).is_all_tables)

        single = TableSet(tables=[self.table_set[0]], source_format=SourceFormat.DELIMITED)
        self.assertEqual(default_view_index(single), 0)
        self.assertEqual(load_table_set(single).headers, ["id", "name"])

    def test_state_is_immutable(self):
        state = select_view(self.table_set, 0)
        with self.assertRaises(Exception):
            state.search_term = "x"


class TestSortBy(unittest.TestCase):
    def test_numeric_not_lexical(self):
        state = sort_by(make_state(["10", "2", "9"]), 0)
        self.assertEqual(column_values(state), ["2", "9", "10"])

    def test_numbers_before_text(self):
        state = sort_by(make_state(["banana", "10", "Apple", "9", ""]), 0)
        self.assertEqual(column_values(state), ["9", "10", "", "Apple", "banana"])

    def test_toggle_and_reset(self):
        state = DocumentState(
            headers=["a", "b"],
            data=[["1", "z"], ["3", "x"], ["2", "y"]],
            filtered_data=[["1", "z"], ["3", "x"], ["2", "y"]],
        )

        state = sort_by(state, 0)
        self.assertEqual(state.sort_direction, SortDirection.ASC)
        self.assertEqual(column_values(state), ["1", "2", "3"])

        state = sort_by(state, 0)
        self.assertEqual(state.sort_direction, SortDirection.DESC)
        self.assertEqual(column_values(state), ["3", "2", "1"])

        state = sort_by(state, 0)
        self.assertEqual(state.sort_direction, SortDirection.ASC)

        state = sort_by(sort_by(state, 0), 1)
        self.assertEqual(state.sort_column, 1)
        self.assertEqual(state.sort_direction, SortDirection.ASC)
        self.assertEqual(column_values(state, 1), ["x", "y", "z"])

    def test_descending_is_stable_for_equal_keys(self):
        state = DocumentState(
            headers=["k", "order"],
            data=[["a", "1"], ["b", "2"], ["A", "3"]],
            filtered_data=[["a", "1"], ["b", "2"], ["A", "3"]],
        )
        state = sort_by(sort_by(state, 0), 0)
        self.assertEqual(column_values(state, 1), ["2", "1", "3"])

    def test_sort_leaves_data_untouched(self):
        state = make_state(["3", "1", "2"])
        sorted_state = sort_by(state, 0)
        self.assertEqual([row[0] for row in sorted_state.data], ["3", "1", "2"])

    def test_bad_column(self):
        state = make_state(["1"])
        with self.assertRaises(ViewSelectionError):
            sort_by(state, 1)
        with self.assertRaises(ViewSelectionError):
            sort_by(state, -1)


class TestApplyFilter(unittest.TestCase):
    def setUp(self):
        self.state = DocumentState(
            headers=["name", "city"],
            data=[["Ann", "Paris"], ["Bob", "Berlin"], ["Cara", "Parma"]],
            filtered_data=[["Ann", "Paris"], ["Bob", "Berlin"], ["Cara", "Parma"]],
        )

    def test_case_insensitive_substring(self):
        state = apply_filter(self.state, "PAR")
        self.assertEqual(state.filtered_data, [["Ann", "Paris"], ["Cara", "Parma"]])
        self.assertEqual(state.search_term, "PAR")

    def test_empty_term_restores_rows(self):
        state = apply_filter(apply_filter(self.state, "bob"), "")
        self.assertEqual(state.filtered_data, self.state.data)

    def test_no_match(self):
        self.assertEqual(apply_filter(self.state, "zzz").filtered_data, [])

    def test_filter_clears_sort_and_keeps_data_order(self):
        state = sort_by(sort_by(self.state, 0), 0)
        state = apply_filter(state, "a")
        self.assertIsNone(state.sort_column)
        self.assertEqual([row[0] for row in state.filtered_data], ["Ann", "Cara"])

    def test_sort_after_filter_only_sorts_matches(self):
        state = sort_by(apply_filter(self.state, "par"), 1)
        self.assertEqual(column_values(state, 1), ["Paris", "Parma"])


class TestDataFrame(unittest.TestCase):
    def test_to_dataframe_uses_filtered_rows(self):
        state = apply_filter(make_state(["a", "b"], headers=["letter"]), "b")
        df = state.to_dataframe()
        self.assertEqual(list(df.columns), ["letter"])
        self.assertEqual(df["letter"].tolist(), ["b"])


if __name__ == "__main__":
    unittest.main()
