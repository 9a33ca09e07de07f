"""
Tests for delimiter detection and delimited-text parsing.
"""

import unittest

from formatking.core.config import DetectionConfig
from formatking.parsers.delimited import (
    DelimitedTextParser,
    detect_delimiter,
    parse_delimited,
    resolve_delimiter,
    rows_to_table,
)
from formatking.utils.exceptions import InvalidDelimiterError


class TestDetectDelimiter(unittest.TestCase):
    def test_comma(self):
        self.assertEqual(detect_delimiter("a,b,c\n1,2,3\n4,5,6"), ",")

    def test_semicolon(self):
        self.assertEqual(detect_delimiter("a;b;c\n1;2;3"), ";")

    def test_tab(self):
        self.assertEqual(detect_delimiter("name\tage\nAnn\t30\nBob\t25"), "\t")

    def test_pipe(self):
        self.assertEqual(detect_delimiter("a|b\n1|2\n3|4"), "|")

    def test_consistent_delimiter_beats_frequent_but_erratic_one(self):
        # Commas appear inside free text on one line only
        text = "id;note\n1;hello, world, again, and more\n2;plain\n3;text"
        self.assertEqual(detect_delimiter(text), ";")

    def test_no_signal_defaults_to_comma(self):
        self.assertEqual(detect_delimiter("hello\nworld"), ",")
        self.assertEqual(detect_delimiter(""), ",")

    def test_tie_keeps_earlier_candidate(self):
        self.assertEqual(detect_delimiter("a,b;c\n1,2;3"), ",")

    def test_only_first_lines_are_sampled(self):
        text = "a;b\n1;2\n" + "x,y,z,w\n" * 10
        self.assertEqual(detect_delimiter(text, sample_lines=2), ";")


class TestResolveDelimiter(unittest.TestCase):
    def test_auto_detects(self):
        self.assertEqual(resolve_delimiter("auto", "a;b\n1;2"), ";")
        self.assertEqual(resolve_delimiter(None, "a|b\n1|2"), "|")

    def test_names(self):
        self.assertEqual(resolve_delimiter("comma"), ",")
        self.assertEqual(resolve_delimiter("Semicolon"), ";")
        self.assertEqual(resolve_delimiter("tab"), "\t")
        self.assertEqual(resolve_delimiter("pipe"), "|")

    def test_escaped_tab(self):
        self.assertEqual(resolve_delimiter("\\t"), "\t")

    def test_single_character(self):
        self.assertEqual(resolve_delimiter(":"), ":")

    def test_invalid(self):
        with self.assertRaises(InvalidDelimiterError) as cm:
            resolve_delimiter("::")
        self.assertEqual(cm.exception.delimiter, "::")


class TestParseDelimited(unittest.TestCase):
    def test_simple_rows(self):
        rows = parse_delimited("a,b\n1,2\n3,4", ",")
        self.assertEqual(rows, [["a", "b"], ["1", "2"], ["3", "4"]])

    def test_cells_are_trimmed(self):
        self.assertEqual(parse_delimited(" a , b \n 1 ,2", ","), [["a", "b"], ["1", "2"]])

    def test_quoted_delimiter_and_escaped_quote(self):
        text = 'name,note\n"Smith, J","say ""hi"""'
        rows = parse_delimited(text, ",")
        self.assertEqual(rows[1], ["Smith, J", 'say "hi"'])

    def test_quoted_newline_is_literal(self):
        rows = parse_delimited('a,b\n"line1\nline2",x', ",")
        self.assertEqual(rows, [["a", "b"], ["line1\nline2", "x"]])

    def test_crlf_line_endings(self):
        rows = parse_delimited("a,b\r\n1,2\r\n", ",")
        self.assertEqual(rows, [["a", "b"], ["1", "2"]])

    def test_lone_carriage_return_dropped(self):
        self.assertEqual(parse_delimited("a\rb,c", ","), [["ab", "c"]])

    def test_empty_rows_dropped(self):
        rows = parse_delimited("a,b\n,\n\n1,2", ",")
        self.assertEqual(rows, [["a", "b"], ["1", "2"]])

    def test_rows_may_differ_in_length(self):
        rows = parse_delimited("a,b,c\n1", ",")
        self.assertEqual(rows, [["a", "b", "c"], ["1"]])

    def test_other_delimiter_ignores_commas(self):
        rows = parse_delimited("a;b\n1,5;2", ";")
        self.assertEqual(rows, [["a", "b"], ["1,5", "2"]])


class TestRowsToTable(unittest.TestCase):
    def test_first_row_header(self):
        table = rows_to_table([["a", "b"], ["1", "2"]])
        self.assertEqual(table.name, "Table 1")
        self.assertEqual(table.headers, ["a", "b"])
        self.assertEqual(table.data, [["1", "2"]])

    def test_ragged_rows_padded_to_widest(self):
        table = rows_to_table([["a", "b"], ["1"], ["2", "3", "4"]])
        self.assertEqual(table.headers, ["a", "b", ""])
        self.assertEqual(table.data, [["1", "", ""], ["2", "3", "4"]])

    def test_synthesized_headers(self):
        table = rows_to_table([["1", "2"], ["3"]], first_row_header=False)
        self.assertEqual(table.headers, ["Column 1", "Column 2"])
        self.assertEqual(table.data, [["1", "2"], ["3", ""]])


class TestDelimitedTextParser(unittest.TestCase):
    def test_detect_accepts_anything(self):
        self.assertTrue(DelimitedTextParser().detect("whatever"))

    def test_parse_with_auto_delimiter(self):
        tables = DelimitedTextParser().parse("x\ty\n1\t2")
        self.assertEqual(len(tables), 1)
        self.assertEqual(tables[0].headers, ["x", "y"])

    def test_parse_without_header(self):
        tables = DelimitedTextParser(delimiter="comma", first_row_header=False).parse("1,2\n3,4")
        self.assertEqual(tables[0].headers, ["Column 1", "Column 2"])
        self.assertEqual(len(tables[0].data), 2)

    def test_parse_nothing(self):
        self.assertEqual(DelimitedTextParser().parse("\n\n"), [])

    def test_sample_lines_from_config(self):
        config = DetectionConfig(delimiter_sample_lines=1)
        tables = DelimitedTextParser(config).parse("a;b\n1,2,3,4\n5,6,7,8\n9,0,1,2")
        self.assertEqual(tables[0].headers, ["a", "b"])

    def test_csv_round_trip(self):
        from formatking.export.csv_exporter import to_csv

        headers = ["name", "note", "quote"]
        rows = [["Ann", "a, b", 'she said "hi"'], ["Bob", "multi\nline", ""]]

        parsed = parse_delimited(to_csv(headers, rows), ",")
        self.assertEqual(parsed[0], headers)
        self.assertEqual(parsed[1:], rows)


if __name__ == "__main__":
    unittest.main()
