"""
Tests for ASCII and Unicode box-table parsing.
"""

import unittest

from formatking.core.config import DetectionConfig
from formatking.parsers.box import BoxTableParser, clean_line, is_separator_line, split_data_line

ASCII_TABLE = """\
+----+-------+
| id | name  |
+----+-------+
|  1 | Alice |
|  2 | Bob   |
+----+-------+"""

NAMED_TABLES = """\
==========
TABLE: users
==========
+----+-------+
| id | name  |
+----+-------+
| 1  | Alice |
+----+-------+

==========
TABLE: orders
==========
+----+-------+--------+
| id | user  | amount |
+----+-------+--------+
| 10 | 1     | 9.99   |
| 11 | 2     | 5.00   |
+----+-------+--------+"""

UNICODE_TABLE = """\
┌──────┬─────┐
│ Name │ Age │
├──────┼─────┤
│ Ann  │ 30  │
│ Ben  │ 41  │
└──────┴─────┘"""


class TestBoxHelpers(unittest.TestCase):
    def test_clean_line_strips_trailing_commas(self):
        self.assertEqual(clean_line("  | a | b |,,  "), "| a | b |")

    def test_separator_lines(self):
        self.assertTrue(is_separator_line("+----+----+"))
        self.assertTrue(is_separator_line("+----+----"))
        self.assertTrue(is_separator_line("========"))
        self.assertTrue(is_separator_line("├──────┼─────┤"))
        self.assertTrue(is_separator_line("└──────┴─────"))
        self.assertFalse(is_separator_line("| a | b |"))

    def test_split_data_line(self):
        self.assertEqual(split_data_line("| a | b |"), ["a", "b"])
        self.assertEqual(split_data_line("│ a │ b │"), ["a", "b"])

    def test_split_data_line_missing_closing_border(self):
        self.assertEqual(split_data_line("| a | b"), ["a", "b"])

    def test_split_non_data_line(self):
        self.assertIsNone(split_data_line("hello"))


class TestBoxDetection(unittest.TestCase):
    def setUp(self):
        self.parser = BoxTableParser()

    def test_ascii(self):
        self.assertTrue(self.parser.detect(ASCII_TABLE))

    def test_indented_ascii(self):
        indented = "\n".join("   " + line for line in ASCII_TABLE.split("\n"))
        self.assertTrue(self.parser.detect(indented))

    def test_unicode(self):
        self.assertTrue(self.parser.detect(UNICODE_TABLE))

    def test_table_header_block(self):
        self.assertTrue(self.parser.detect("=====\nTABLE: things\nname\n"))

    def test_plain_text_does_not_match(self):
        self.assertFalse(self.parser.detect("a,b\n1,2"))
        self.assertFalse(self.parser.detect("| a | b |\n|---|---|\n| 1 | 2 |"))

    def test_border_without_data_lines_does_not_match(self):
        self.assertFalse(self.parser.detect("+----+\nplain"))


class TestBoxParsing(unittest.TestCase):
    def setUp(self):
        self.parser = BoxTableParser()

    def test_single_ascii_table(self):
        tables = self.parser.parse(ASCII_TABLE)
        self.assertEqual(len(tables), 1)
        self.assertEqual(tables[0].name, "Table 1")
        self.assertEqual(tables[0].headers, ["id", "name"])
        self.assertEqual(tables[0].data, [["1", "Alice"], ["2", "Bob"]])

    def test_named_tables(self):
        tables = self.parser.parse(NAMED_TABLES)
        self.assertEqual([t.name for t in tables], ["users", "orders"])
        self.assertEqual(tables[0].headers, ["id", "name"])
        self.assertEqual(tables[0].data, [["1", "Alice"]])
        self.assertEqual(tables[1].headers, ["id", "user", "amount"])
        self.assertEqual(tables[1].data, [["10", "1", "9.99"], ["11", "2", "5.00"]])

    def test_unicode_table(self):
        tables = self.parser.parse(UNICODE_TABLE)
        self.assertEqual(tables[0].headers, ["Name", "Age"])
        self.assertEqual(tables[0].data, [["Ann", "30"], ["Ben", "41"]])

    def test_marker_without_rows_is_not_flushed(self):
        text = "TABLE: empty\n+---+\n| a |\n+---+\nTABLE: full\n| b |\n| 1 |"
        tables = self.parser.parse(text)
        self.assertEqual([t.name for t in tables], ["full"])

    def test_unnamed_table_before_marker_gets_synthesized_name(self):
        text = "| a |\n| 1 |\nTABLE: second\n| b |\n| 2 |"
        tables = self.parser.parse(text)
        self.assertEqual([t.name for t in tables], ["Table 1", "second"])

    def test_trailing_comma_artifacts(self):
        text = "+---+---+,\n| a | b |,\n+---+---+,\n| 1 | 2 |,,\n+---+---+"
        tables = self.parser.parse(text)
        self.assertEqual(tables[0].data, [["1", "2"]])

    def test_header_only_table_uses_title(self):
        text = "Summary\n+-----+-----+\n| a   | b   |\n+-----+-----+"
        tables = self.parser.parse(text)
        self.assertEqual(len(tables), 1)
        self.assertEqual(tables[0].name, "Summary")
        self.assertEqual(tables[0].headers, ["a", "b"])
        self.assertEqual(tables[0].data, [])

    def test_title_lookahead_is_configurable(self):
        text = "Summary\n\n\n+-----+\n| a   |\n+-----+"
        self.assertEqual(self.parser.parse(text)[0].name, "Summary")

        short = BoxTableParser(DetectionConfig(title_lookahead=1))
        self.assertEqual(short.parse(text)[0].name, "Table 1")

    def test_no_data_lines(self):
        self.assertEqual(self.parser.parse("+---+\n+---+"), [])

    def test_short_rows_padded(self):
        text = "| a | b | c |\n| 1 | 2 |"
        table = self.parser.parse(text)[0]
        self.assertEqual(table.data, [["1", "2", ""]])


if __name__ == "__main__":
    unittest.main()
