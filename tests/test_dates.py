"""
Tests for date headers and the page year.
"""
import pytest

from shogi_results.dates import parse_date_range, parse_year
from shogi_results.errors import StructuralViolation


class TestParseDateRange:
    """Date header rows."""

    def test_single_day(self):
        assert parse_date_range("4月10日", 2018) == ("2018/04/10", "2018/04/10")

    def test_two_days(self):
        assert parse_date_range("4月10・11日", 2018) == ("2018/04/10", "2018/04/11")

    def test_pads_month_and_day(self):
        assert parse_date_range("1月2日", 2007) == ("2007/01/02", "2007/01/02")

    def test_ignores_weekday_and_whitespace(self):
        """Surrounding whitespace and a trailing weekday are tolerated."""
        assert parse_date_range("\n  12月31日(月)\n", 2018) == ("2018/12/31", "2018/12/31")

    @pytest.mark.parametrize("text", ["April 10", "", "4月", "10日"])
    def test_unrecognised_text_is_fatal(self, text):
        with pytest.raises(StructuralViolation):
            parse_date_range(text, 2018)


class TestParseYear:
    """Page heading year."""

    def test_year(self):
        assert parse_year("2018年4月") == 2018

    def test_leading_whitespace(self):
        assert parse_year("  2006年") == 2006

    def test_missing_year_is_fatal(self):
        with pytest.raises(StructuralViolation):
            parse_year("対局結果")
