"""Cell grid access for leaderboard spreadsheets."""

import logging
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

import openpyxl

logger = logging.getLogger('leaderboard.grid')


class CellGrid(Protocol):
    """Read-only, 1-based access to a sheet's cell values."""

    @property
    def row_count(self) -> int: ...

    def cell_count(self, row: int) -> int: ...

    def get_cell(self, row: int, col: int) -> Any: ...


class SheetGrid:
    """
    In-memory grid of raw cell values.

    Rows are addressed 1-based. Each row's cell count runs up to its last
    non-empty cell, and reads outside the grid return None.

    Example:
        grid = SheetGrid([['Player', 'R01'], ['Alice', 10]])
        grid.get_cell(2, 1)  # 'Alice'
    """

    def __init__(self, rows: Sequence[Sequence[Any]]):
        self._rows = [_trim_row(row) for row in rows]

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def cell_count(self, row: int) -> int:
        if 1 <= row <= len(self._rows):
            return len(self._rows[row - 1])
        return 0

    def get_cell(self, row: int, col: int) -> Any:
        if row < 1 or col < 1 or row > len(self._rows):
            return None
        values = self._rows[row - 1]
        if col > len(values):
            return None
        return values[col - 1]


def _trim_row(row: Sequence[Any]) -> tuple:
    values = list(row)
    while values and values[-1] is None:
        values.pop()
    return tuple(values)


def load_grid(filepath: str | Path, sheet_name: Optional[str] = None) -> SheetGrid:
    """
    Read one worksheet of an Excel workbook into a SheetGrid.

    Formula cells yield their cached values.

    Args:
        filepath: Path to the .xlsx file
        sheet_name: Name of the sheet to read (default: first worksheet)

    Returns:
        SheetGrid holding the sheet's values

    Raises:
        FileNotFoundError: If the workbook doesn't exist
        KeyError: If sheet_name isn't in the workbook
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f'Workbook not found: {filepath}')

    wb = openpyxl.load_workbook(filepath, data_only=True)
    try:
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()

    logger.debug(f'Loaded {len(rows)} rows from {filepath} [{ws.title}]')
    return SheetGrid(rows)
