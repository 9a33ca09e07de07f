"""
Tests for formatking.reconcile module.
"""

import unittest

from formatking.core.models import SourceFormat, Table, TableSet
from formatking.reconcile import (
    ALL_TABLES_NAME,
    build_all_tables_view,
    get_common_headers,
    pad_row_to_headers,
)


class TestCommonHeaders(unittest.TestCase):
    def test_identical_headers_returned_verbatim(self):
        tables = [
            Table(name="a", headers=["id", "name", "id"], data=[]),
            Table(name="b", headers=["id", "name", "id"], data=[]),
        ]
        self.assertEqual(get_common_headers(tables), ["id", "name", "id"])

    def test_union_in_first_seen_order(self):
        tables = [
            Table(name="a", headers=["id", "name"], data=[]),
            Table(name="b", headers=["id", "amount", "name"], data=[]),
            Table(name="c", headers=["note"], data=[]),
        ]
        self.assertEqual(get_common_headers(tables), ["id", "name", "amount", "note"])

    def test_same_names_in_different_order_are_merged(self):
        tables = [
            Table(name="a", headers=["x", "y"], data=[]),
            Table(name="b", headers=["y", "x"], data=[]),
        ]
        self.assertEqual(get_common_headers(tables), ["x", "y"])

    def test_no_tables(self):
        self.assertEqual(get_common_headers([]), [])


class TestPadRowToHeaders(unittest.TestCase):
    def test_values_placed_by_header_name(self):
        row = pad_row_to_headers(["1", "Ann"], ["id", "name"], ["name", "amount", "id"])
        self.assertEqual(row, ["Ann", "", "1"])

    def test_unknown_headers_dropped(self):
        row = pad_row_to_headers(["1", "x"], ["id", "extra"], ["id", "name"])
        self.assertEqual(row, ["1", ""])

    def test_short_row(self):
        row = pad_row_to_headers(["1"], ["id", "name"], ["id", "name"])
        self.assertEqual(row, ["1", ""])

    def test_duplicate_common_header_uses_first_position(self):
        row = pad_row_to_headers(["7"], ["id"], ["id", "name", "id"])
        self.assertEqual(row, ["7", "", ""])

    def test_every_matched_value_preserved(self):
        headers = ["a", "b", "c"]
        common = ["c", "z", "b", "a"]
        row = pad_row_to_headers(["1", "2", "3"], headers, common)
        self.assertEqual(sorted(v for v in row if v), ["1", "2", "3"])
        self.assertEqual(row[1], "")


class TestAllTablesView(unittest.TestCase):
    def test_rows_tagged_with_table_name(self):
        table_set = TableSet(
            tables=[
                Table(name="users", headers=["id", "name"], data=[["1", "Ann"]]),
                Table(name="orders", headers=["id", "amount"], data=[["10", "9.99"], ["11", "5"]]),
            ],
            source_format=SourceFormat.BOX,
        )
        view = build_all_tables_view(table_set)

        self.assertEqual(view.name, ALL_TABLES_NAME)
        self.assertEqual(view.headers, ["Table", "id", "name", "amount"])
        self.assertEqual(
            view.data,
            [
                ["users", "1", "Ann", ""],
                ["orders", "10", "", "9.99"],
                ["orders", "11", "", "5"],
            ],
        )
        self.assertEqual(view.row_count, table_set.total_rows)

    def test_shared_headers_keep_duplicates(self):
        table_set = TableSet(
            tables=[
                Table(name="t1", headers=["a", "a"], data=[["1", "2"]]),
                Table(name="t2", headers=["a", "a"], data=[["3", "4"]]),
            ],
            source_format=SourceFormat.MARKDOWN,
        )
        view = build_all_tables_view(table_set)
        self.assertEqual(view.headers, ["Table", "a", "a"])
        # A repeated header maps to its first position only
        self.assertEqual(view.data, [["t1", "2", ""], ["t2", "4", ""]])


if __name__ == "__main__":
    unittest.main()
