"""
Test cases for page range parsing.
"""

import unittest

from pdf_rasterizer.exceptions import (
    InvalidRangeError,
    RangeFormatError,
    RangeOrderError,
    RangeValueError,
)
from pdf_rasterizer.ranges import parse_range
from pdf_rasterizer.types import PageRange


class TestParseRange(unittest.TestCase):
    """Test cases for parse_range."""

    def test_dash_separator(self):
        """Test parsing a dash range."""
        self.assertEqual(parse_range('1-5').pages, [1, 2, 3, 4, 5])

    def test_dot_dot_separator(self):
        """Test parsing a '..' range gives the same pages as '-'."""
        self.assertEqual(parse_range('1..5'), parse_range('1-5'))

    def test_returns_page_range(self):
        result = parse_range('3-4')
        self.assertIsInstance(result, PageRange)
        self.assertEqual(result.start, 3)
        self.assertEqual(result.end, 4)
        self.assertEqual(len(result), 2)
        self.assertEqual(result.max_page, 4)

    def test_single_page_range(self):
        self.assertEqual(parse_range('7-7').pages, [7])

    def test_surrounding_and_inner_whitespace(self):
        """Test whitespace around the expression and its parts is ignored."""
        self.assertEqual(parse_range('  2 .. 6 \n').pages, [2, 3, 4, 5, 6])
        self.assertEqual(parse_range(' 2 - 3 ').pages, [2, 3])

    def test_closed_interval_property(self):
        """Test a-b and a..b give the closed interval [a, b]."""
        for start, end in [(1, 1), (1, 2), (3, 9), (10, 25)]:
            for sep in ('-', '..'):
                pages = parse_range(f'{start}{sep}{end}').pages
                self.assertEqual(pages, list(range(start, end + 1)))
                self.assertEqual(len(pages), end - start + 1)

    def test_dot_dot_checked_before_dash(self):
        """Test '..' is preferred when both separators are present."""
        with self.assertRaises(RangeValueError):
            parse_range('1-2..5')

    def test_no_separator(self):
        with self.assertRaises(RangeFormatError) as cm:
            parse_range('15')
        self.assertIn('Use 1-5 or 1..5', str(cm.exception))

    def test_empty_string(self):
        with self.assertRaises(RangeFormatError):
            parse_range('')

    def test_too_many_parts(self):
        """Test '1-2-3' splits into three parts."""
        with self.assertRaises(RangeFormatError):
            parse_range('1-2-3')
        with self.assertRaises(RangeFormatError):
            parse_range('1..2..3')

    def test_missing_endpoint(self):
        with self.assertRaises(RangeFormatError):
            parse_range('3-')
        with self.assertRaises(RangeFormatError):
            parse_range('..3')

    def test_zero_page(self):
        with self.assertRaises(RangeValueError) as cm:
            parse_range('0-3')
        self.assertIn('greater than 0', str(cm.exception))
        with self.assertRaises(RangeValueError):
            parse_range('1-0')

    def test_non_numeric(self):
        with self.assertRaises(RangeValueError):
            parse_range('abc-5')
        with self.assertRaises(RangeValueError):
            parse_range('1..x')
        with self.assertRaises(RangeValueError):
            parse_range('1.5..3')

    def test_overflow(self):
        with self.assertRaises(RangeValueError):
            parse_range('1-99999999999')

    def test_start_greater_than_end(self):
        with self.assertRaises(RangeOrderError) as cm:
            parse_range('5-1')
        self.assertIn('must be <=', str(cm.exception))

    def test_errors_share_base_class(self):
        for expression in ('5', '0-1', '5-1'):
            with self.assertRaises(InvalidRangeError):
                parse_range(expression)


if __name__ == '__main__':
    unittest.main()
