"""
Tests for row classification by cell count.
"""
from shogi_results.rows import ContinuationRow, DateRow, MatchNameRow, classify_row

from conftest import continuation_row, date_row, name_row, row_node


class TestClassifyRow:
    """Row shapes of the results table."""

    def test_single_cell_is_date_row(self):
        assert isinstance(classify_row(row_node(date_row("4月10日"))), DateRow)

    def test_six_cells_is_match_name_row(self):
        row = classify_row(row_node(name_row("  A League \n")))
        assert isinstance(row, MatchNameRow)
        assert row.match_name() == "A League"

    def test_five_cells_is_continuation(self):
        assert isinstance(classify_row(row_node(continuation_row())), ContinuationRow)

    def test_other_counts_are_continuations(self):
        """Any count other than 1 or 6 continues the current match."""
        for n in (0, 2, 4, 7):
            tr = "<tr>" + "<td>x</td>" * n + "</tr>"
            assert isinstance(classify_row(row_node(tr)), ContinuationRow)

    def test_whitespace_between_cells_is_not_counted(self):
        tr = "<tr>\n  <th>4月10日</th>\n  <!-- date -->\n</tr>"
        assert isinstance(classify_row(row_node(tr)), DateRow)
