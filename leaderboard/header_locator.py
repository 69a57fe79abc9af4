"""Header row detection near the top of a leaderboard sheet."""

import logging
from typing import Any, Callable, Optional

from .config import get_config
from .constants import (
    PLAYER_LABEL,
    POINTS_LABEL_PREFIX,
    ROUND_HEADER_PATTERN,
    SPEND_HEADER_KEYWORDS,
)
from .grid import CellGrid
from .models import HeaderMatch
from .schemas import RankerConfig

logger = logging.getLogger('leaderboard.header_locator')

HeaderPredicate = Callable[[list[str]], bool]


class HeaderNotFoundError(ValueError):
    """Raised when the points header can't be found in the scan window."""


def cell_text(value: Any) -> str:
    """
    Render a cell value as trimmed text.

    Whole floats lose their ".0" so numeric headers read like the sheet shows them.
    """
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def collect_row_cells(grid: CellGrid, row: int, limit: int) -> list[str]:
    """Collect up to `limit` non-empty cell texts from a row, in column order."""
    cells: list[str] = []
    for col in range(1, grid.cell_count(row) + 1):
        text = cell_text(grid.get_cell(row, col))
        if not text:
            continue
        cells.append(text)
        if len(cells) >= limit:
            break
    return cells


def is_points_header(cells: list[str]) -> bool:
    """Points header: a 'Player' cell plus 'Pts' or an R01-style round label."""
    lower = [c.lower() for c in cells]
    if PLAYER_LABEL not in lower:
        return False
    return POINTS_LABEL_PREFIX in lower or any(ROUND_HEADER_PATTERN.match(c) for c in lower)


def is_spending_header(cells: list[str]) -> bool:
    """Spending header: mentions 'player' and one of spent / $m / budget."""
    joined = ' '.join(cells).lower()
    return PLAYER_LABEL in joined and any(k in joined for k in SPEND_HEADER_KEYWORDS)


def mentions_spending(cells: list[str]) -> bool:
    """Looser check used below the points table, no 'player' required."""
    joined = ' '.join(cells).lower()
    return any(k in joined for k in SPEND_HEADER_KEYWORDS)


def locate_header(
    grid: CellGrid,
    predicate: HeaderPredicate,
    config: Optional[RankerConfig] = None,
) -> Optional[HeaderMatch]:
    """
    Find the first row near the top of the grid whose cells satisfy predicate.

    Args:
        grid: Sheet to scan
        predicate: Called with the row's trimmed, non-empty cell texts
        config: Scan limits (default: get_config())

    Returns:
        HeaderMatch for the first matching row, or None
    """
    config = config or get_config()
    last_row = min(config.header_scan_rows, grid.row_count)

    for row in range(1, last_row + 1):
        cells = collect_row_cells(grid, row, config.header_max_cells)
        if not cells:
            continue
        if predicate(cells):
            return HeaderMatch(row_index=row, cells=cells)

    return None


def locate_points_header(grid: CellGrid, config: Optional[RankerConfig] = None) -> HeaderMatch:
    """
    Find the points table header.

    Raises:
        HeaderNotFoundError: If no row in the scan window qualifies
    """
    match = locate_header(grid, is_points_header, config)
    if match is None:
        raise HeaderNotFoundError(
            "Could not find points header row (must contain 'Player' and 'Pts' or R01/R02...)"
        )
    logger.debug(f'Points header found on row {match.row_index}: {match.cells}')
    return match


def locate_spending_header(
    grid: CellGrid, config: Optional[RankerConfig] = None
) -> Optional[HeaderMatch]:
    """Find the spending table header, or None."""
    match = locate_header(grid, is_spending_header, config)
    if match is not None:
        logger.debug(f'Spending header found on row {match.row_index}: {match.cells}')
    return match


def find_spending_header_below(
    grid: CellGrid,
    points_header_row: int,
    config: Optional[RankerConfig] = None,
) -> Optional[HeaderMatch]:
    """
    Search the rows after the points header for a spending-like header.

    Each row is judged on its first `header_max_cells` non-empty cells,
    the same window `locate_header` uses.

    Args:
        grid: Sheet to scan
        points_header_row: Row index of the points header
        config: Scan limits (default: get_config())

    Returns:
        HeaderMatch for the first row mentioning spent / $m / budget, or None
    """
    config = config or get_config()
    last_row = min(points_header_row + config.spend_search_rows, grid.row_count)

    for row in range(points_header_row + 1, last_row + 1):
        cells = collect_row_cells(grid, row, config.header_max_cells)
        if cells and mentions_spending(cells):
            logger.debug(f'Spending header inferred on row {row}: {cells}')
            return HeaderMatch(row_index=row, cells=cells)

    return None
