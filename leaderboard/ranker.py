"""Main ranking pipeline that ties everything together."""

import logging
from pathlib import Path
from typing import Optional

from .assembler import assemble_players
from .extractor import extract_tables
from .grid import CellGrid
from .models import LeaderboardResult
from .ranking import rank_players
from .schemas import RankedEntry, RankerConfig
from .utils import save_json

logger = logging.getLogger('leaderboard.ranker')


def rank_leaderboard(grid: CellGrid, config: Optional[RankerConfig] = None) -> LeaderboardResult:
    """
    Extract and rank the leaderboard held in a grid.

    Args:
        grid: Sheet to read; never modified
        config: Scan limits and fallbacks (default: get_config())

    Returns:
        LeaderboardResult with ranked entries and recoverable warnings

    Raises:
        HeaderNotFoundError: If the points header can't be found
    """
    points, spending, warnings = extract_tables(grid, config)
    players = assemble_players(points, spending)
    entries = rank_players(players)

    tied = sum(1 for e in entries if e.tied)
    logger.info(f'Ranked {len(entries)} players ({tied} flagged as tied)')
    return LeaderboardResult(entries=entries, warnings=warnings)


def rank(grid: CellGrid, config: Optional[RankerConfig] = None) -> list[RankedEntry]:
    """Rank the leaderboard in a grid, returning only the entries."""
    return rank_leaderboard(grid, config).entries


def save_leaderboard(output_path: str | Path, entries: list[RankedEntry]) -> None:
    """Save ranked entries as a JSON array with camelCase keys."""
    save_json(output_path, entries)
    logger.info(f'Saved ranked leaderboard to {output_path}')
