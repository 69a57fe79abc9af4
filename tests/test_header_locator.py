"""Unit tests for header row detection."""

import pytest

from leaderboard.grid import SheetGrid
from leaderboard.header_locator import (
    HeaderNotFoundError,
    cell_text,
    find_spending_header_below,
    is_points_header,
    is_spending_header,
    locate_header,
    locate_points_header,
    locate_spending_header,
)
from leaderboard.schemas import RankerConfig


class TestPredicates:
    """Tests for the points and spending header predicates."""

    @pytest.mark.parametrize(
        'cells',
        [
            ['Player', 'R01', 'R02'],
            ['#', 'PLAYER', 'Pts', 'Pts'],
            ['player', 'r12'],
        ],
    )
    def test_points_header_matches(self, cells):
        assert is_points_header(cells)

    @pytest.mark.parametrize(
        'cells',
        [
            ['Player', 'R1', 'R2'],  # round labels need two digits
            ['Name', 'R01', 'R02'],
            ['Player', 'Points'],
            ['Players', 'Pts'],  # exact 'player' cell required
        ],
    )
    def test_points_header_rejects(self, cells):
        assert not is_points_header(cells)

    @pytest.mark.parametrize(
        'cells',
        [
            ['Player', 'Spent ($m)'],
            ['PLAYER', 'Budget'],
            ['Players', 'R01 $m'],
        ],
    )
    def test_spending_header_matches(self, cells):
        """Joined text is searched, so substrings count."""
        assert is_spending_header(cells)

    @pytest.mark.parametrize('cells', [['Player', 'R01'], ['Team', 'Spent']])
    def test_spending_header_rejects(self, cells):
        assert not is_spending_header(cells)


class TestCellText:
    """Tests for cell-to-text conversion."""

    def test_values(self):
        assert cell_text(None) == ''
        assert cell_text('  Alice ') == 'Alice'
        assert cell_text(3.0) == '3'
        assert cell_text(2.5) == '2.5'
        assert cell_text(7) == '7'


class TestLocateHeader:
    """Tests for the bounded header scan."""

    def test_finds_header_below_title_rows(self):
        """Blank and title rows above the header are skipped."""
        grid = SheetGrid(
            [
                ['Summer League'],
                [],
                [None, ' Player ', 'R01', 'R02'],
                [None, 'Alice', 1, 2],
            ]
        )
        match = locate_header(grid, is_points_header)
        assert match is not None
        assert match.row_index == 3
        assert match.cells == ['Player', 'R01', 'R02']

    def test_first_match_wins(self):
        grid = SheetGrid([['Player', 'R01'], ['Alice', 1], ['Player', 'R01']])
        assert locate_header(grid, is_points_header).row_index == 1

    def test_scan_window_is_bounded(self):
        """Headers below row 30 are not found."""
        grid = SheetGrid([[]] * 30 + [['Player', 'R01']])
        assert locate_header(grid, is_points_header) is None

    def test_header_at_last_scanned_row(self):
        grid = SheetGrid([[]] * 29 + [['Player', 'R01']])
        assert locate_header(grid, is_points_header).row_index == 30

    def test_cell_limit_from_config(self):
        """Only the first header_max_cells non-empty cells are considered."""
        grid = SheetGrid([['Player', 'Round', 'R01']])
        config = RankerConfig(header_max_cells=2)
        assert locate_header(grid, is_points_header, config) is None
        assert locate_header(grid, is_points_header, RankerConfig()) is not None

    def test_empty_grid(self):
        assert locate_header(SheetGrid([]), is_points_header) is None


class TestPointsAndSpendingHeaders:
    """Tests for the table-specific header lookups."""

    def test_missing_points_header_is_fatal(self):
        grid = SheetGrid([['Name', 'Score'], ['Alice', 10]])
        with pytest.raises(HeaderNotFoundError):
            locate_points_header(grid)

    def test_header_not_found_is_value_error(self):
        assert issubclass(HeaderNotFoundError, ValueError)

    def test_spending_header_on_separate_row(self):
        grid = SheetGrid(
            [
                ['Player', 'R01'],
                ['Alice', 3],
                [],
                ['Player', 'R01 $m', 'Spent ($m)'],
                ['Alice', 1, 1],
            ]
        )
        assert locate_points_header(grid).row_index == 1
        assert locate_spending_header(grid).row_index == 4

    def test_spending_header_missing(self):
        grid = SheetGrid([['Player', 'R01'], ['Alice', 3]])
        assert locate_spending_header(grid) is None

    def test_spending_header_inferred_below_points(self):
        """The fallback scan needs no 'Player' cell."""
        grid = SheetGrid(
            [
                ['Player', 'R01', 'R02'],
                ['Alice', 1, 2],
                [],
                ['#', 'Manager', 'Spent'],
                [1, 'Alice', 12],
            ]
        )
        assert locate_spending_header(grid) is None
        match = find_spending_header_below(grid, points_header_row=1)
        assert match.row_index == 4

    def test_inferred_search_is_bounded(self):
        grid = SheetGrid([['Player', 'R01']] + [[]] * 5 + [['Budget']])
        assert find_spending_header_below(grid, 1, RankerConfig(spend_search_rows=5)) is None
        assert find_spending_header_below(grid, 1, RankerConfig(spend_search_rows=6)).row_index == 7

    def test_inferred_search_reads_non_empty_cells(self):
        """Blank columns don't count toward the cell window."""
        far_right = [None] * 45 + ['Spent']
        grid = SheetGrid([['Player', 'R01'], ['Alice', 3], [], far_right])
        assert find_spending_header_below(grid, 1).row_index == 4

    def test_inferred_search_cell_window(self):
        labels = [f'Note {i}' for i in range(40)]
        grid = SheetGrid([['Player', 'R01'], labels + ['Spent'], labels[:39] + ['Spent']])
        assert find_spending_header_below(grid, 1).row_index == 3
