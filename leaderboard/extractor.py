"""Points and spending table extraction from a located header row."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

from .config import get_config
from .constants import (
    NUMERIC_LABEL_PATTERN,
    PLAYER_LABEL,
    POINTS_LABEL_PREFIX,
    ROUND_LABEL_PATTERN,
    ROUND_PREFIX_PATTERN,
    ROUND_TERMINATORS,
    SPEND_PER_POINT_LABEL,
    SPEND_UNIT_LABEL,
    SPENT_LABEL,
)
from .grid import CellGrid
from .header_locator import (
    cell_text,
    find_spending_header_below,
    locate_points_header,
    locate_spending_header,
)
from .models import HeaderMatch, PlayerRecord, PointsTable, RoundColumn, SpendingTable, SpendRow
from .normalize import normalize_points_cell, to_number
from .schemas import RankerConfig

logger = logging.getLogger('leaderboard.extractor')


class ColumnRole(Enum):
    ROUND = 'round'
    STOP = 'stop'


@dataclass(frozen=True)
class ColumnRule:
    """A named header-text test; rules are evaluated in order, first match wins."""
    name: str
    matches: Callable[[str], bool]
    role: ColumnRole = ColumnRole.ROUND


POINTS_COLUMN_RULES: tuple[ColumnRule, ...] = (
    ColumnRule('round_label', lambda t: bool(ROUND_LABEL_PATTERN.match(t))),
    ColumnRule('round_prefix', lambda t: bool(ROUND_PREFIX_PATTERN.match(t))),
    ColumnRule('points_label', lambda t: t.lower().startswith(POINTS_LABEL_PREFIX)),
    ColumnRule('numeric_label', lambda t: bool(NUMERIC_LABEL_PATTERN.match(t))),
    ColumnRule(
        'totals_marker',
        lambda t: any(k in t.lower() for k in ROUND_TERMINATORS),
        ColumnRole.STOP,
    ),
    # Unconventional headers are still read as rounds
    ColumnRule('unlabelled_round', lambda t: True),
)

# Total-spend column: an explicit "Spent" header beats a "$m/pt" header
SPEND_TOTAL_RULES: tuple[ColumnRule, ...] = (
    ColumnRule('spent_total', lambda t: SPENT_LABEL in t.lower()),
    ColumnRule('spend_per_point', lambda t: SPEND_PER_POINT_LABEL in t.lower()),
)

SPEND_ROUND_RULE = ColumnRule(
    'spend_round',
    lambda t: SPEND_UNIT_LABEL in t.lower() or bool(ROUND_LABEL_PATTERN.match(t)),
)


def classify_header_cell(
    text: str, rules: tuple[ColumnRule, ...] = POINTS_COLUMN_RULES
) -> Optional[ColumnRule]:
    """Return the first rule matching the header text, or None."""
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def find_player_column(
    grid: CellGrid, header_row: int, last_col: int, default: int
) -> int:
    """
    Find the column whose header reads exactly 'Player' (any case).

    Falls back to `default` when the header has no such cell; malformed
    headers are read on a best-effort basis rather than rejected.
    """
    for col in range(1, last_col + 1):
        if cell_text(grid.get_cell(header_row, col)).lower() == PLAYER_LABEL:
            return col

    logger.info(f'No "Player" cell on header row {header_row}; assuming column {default}')
    return default


def iter_table_rows(grid: CellGrid, header_row: int, player_col: int) -> Iterator[tuple[int, str]]:
    """
    Yield (row, player name) for the data rows under a header.

    The table ends at the first row whose player cell is blank.
    """
    for row in range(header_row + 1, grid.row_count + 1):
        name = cell_text(grid.get_cell(row, player_col))
        if not name:
            break
        yield row, name


def detect_round_columns(
    grid: CellGrid, header_row: int, player_col: int
) -> list[RoundColumn]:
    """Classify the header cells right of the player column into round columns."""
    rounds = []
    for col in range(player_col + 1, grid.cell_count(header_row) + 1):
        text = cell_text(grid.get_cell(header_row, col))
        if not text:
            continue
        rule = classify_header_cell(text)
        if rule is None or rule.role is ColumnRole.STOP:
            logger.debug(f'Round columns end at column {col} ({text!r})')
            break
        rounds.append(RoundColumn(column=col, name=text))
    return rounds


def extract_points_table(
    grid: CellGrid, header: HeaderMatch, config: Optional[RankerConfig] = None
) -> PointsTable:
    """
    Read the points table under a located header.

    Args:
        grid: Sheet to read
        header: Points header match
        config: Fallback settings (default: get_config())

    Returns:
        PointsTable with one PlayerRecord per data row
    """
    config = config or get_config()
    header_row = header.row_index
    player_col = find_player_column(
        grid, header_row, grid.cell_count(header_row), config.fallback_player_column
    )

    rounds = detect_round_columns(grid, header_row, player_col)
    synthetic = not rounds
    if synthetic:
        logger.warning(
            f'No round columns recognised on row {header_row}; '
            f'reading {config.fallback_round_count} columns as R1..R{config.fallback_round_count}'
        )
        rounds = [
            RoundColumn(column=player_col + i, name=f'R{i}')
            for i in range(1, config.fallback_round_count + 1)
        ]

    players = []
    for row, name in iter_table_rows(grid, header_row, player_col):
        scores = [normalize_points_cell(grid.get_cell(row, rc.column)) for rc in rounds]
        players.append(PlayerRecord(name=name, scores=scores))

    logger.info(f'Read {len(players)} players across {len(rounds)} rounds')
    return PointsTable(
        header_row=header_row,
        player_column=player_col,
        rounds=rounds,
        players=players,
        synthetic_rounds=synthetic,
    )


def extract_spending_table(
    grid: CellGrid, header: HeaderMatch, config: Optional[RankerConfig] = None
) -> SpendingTable:
    """
    Read the spending table under a located header.

    Uses the total-spend column when there is one, otherwise sums the
    per-round spend columns.

    Args:
        grid: Sheet to read
        header: Spending header match
        config: Scan limits (default: get_config())

    Returns:
        SpendingTable with one SpendRow per data row
    """
    config = config or get_config()
    header_row = header.row_index
    last_col = min(config.spend_scan_columns, grid.cell_count(header_row))

    labels = {}
    for col in range(1, last_col + 1):
        text = cell_text(grid.get_cell(header_row, col))
        if text:
            labels[col] = text

    player_col = find_player_column(grid, header_row, last_col, config.fallback_player_column)

    total_col = None
    for rule in SPEND_TOTAL_RULES:
        total_col = next((col for col, text in labels.items() if rule.matches(text)), None)
        if total_col is not None:
            logger.debug(f'Total spend read from column {total_col} ({rule.name})')
            break

    round_cols = [
        RoundColumn(column=col, name=text)
        for col, text in labels.items()
        if SPEND_ROUND_RULE.matches(text)
    ]

    rows = []
    for row, name in iter_table_rows(grid, header_row, player_col):
        if total_col is not None:
            total = to_number(grid.get_cell(row, total_col))
        else:
            total = sum(to_number(grid.get_cell(row, rc.column)) for rc in round_cols)
        rows.append(SpendRow(name=name, total_spent=total, row_index=row))

    return SpendingTable(
        header_row=header_row,
        player_column=player_col,
        total_column=total_col,
        round_columns=round_cols,
        rows=rows,
    )


def resolve_spending_header(
    grid: CellGrid,
    points_header: HeaderMatch,
    warnings: list[str],
    config: Optional[RankerConfig] = None,
) -> Optional[HeaderMatch]:
    """
    Locate the spending header, inferring it below the points table if needed.

    Problems are appended to `warnings` and logged; none of them are fatal.
    """
    header = locate_spending_header(grid, config)
    if header is not None:
        return header

    message = (
        'Spending header row not found automatically. '
        'Attempting to infer spending table below the points table.'
    )
    logger.warning(message)
    warnings.append(message)

    header = find_spending_header_below(grid, points_header.row_index, config)
    if header is None:
        message = (
            'Could not automatically locate spending table header. '
            'All player spend totals will remain 0.'
        )
        logger.warning(message)
        warnings.append(message)
    return header


def extract_tables(
    grid: CellGrid, config: Optional[RankerConfig] = None
) -> tuple[PointsTable, Optional[SpendingTable], list[str]]:
    """
    Locate and read both tables of a leaderboard sheet.

    Args:
        grid: Sheet to read
        config: Scan limits and fallbacks (default: get_config())

    Returns:
        Tuple of (points_table, spending_table or None, warnings)

    Raises:
        HeaderNotFoundError: If the points header can't be found
    """
    config = config or get_config()
    warnings: list[str] = []

    points_header = locate_points_header(grid, config)
    points = extract_points_table(grid, points_header, config)

    spending = None
    spend_header = resolve_spending_header(grid, points_header, warnings, config)
    if spend_header is not None:
        spending = extract_spending_table(grid, spend_header, config)

    return points, spending, warnings
