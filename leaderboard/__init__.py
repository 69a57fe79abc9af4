from .models import (
    HeaderMatch,
    LeaderboardResult,
    PlayerRecord,
    PointsTable,
    RoundColumn,
    SpendingTable,
    SpendRow,
)
from .schemas import RankedEntry, RankerConfig
from .config import get_config, clear_config_cache
from .grid import CellGrid, SheetGrid, load_grid
from .normalize import normalize_points_cell, to_number
from .header_locator import (
    HeaderNotFoundError,
    locate_header,
    locate_points_header,
    locate_spending_header,
    is_points_header,
    is_spending_header,
)
from .extractor import extract_points_table, extract_spending_table, extract_tables
from .assembler import assemble_players
from .ranking import TieBreak, compare_players, compare_with_reason, countback_compare, rank_players
from .ranker import rank, rank_leaderboard, save_leaderboard
from .report import format_leaderboard
from .validators import validate_entries

__all__ = [
    # Models
    'HeaderMatch',
    'LeaderboardResult',
    'PlayerRecord',
    'PointsTable',
    'RoundColumn',
    'SpendingTable',
    'SpendRow',
    'RankedEntry',
    'RankerConfig',
    # Configuration
    'get_config',
    'clear_config_cache',
    # Grid access
    'CellGrid',
    'SheetGrid',
    'load_grid',
    # Normalization
    'normalize_points_cell',
    'to_number',
    # Header detection
    'HeaderNotFoundError',
    'locate_header',
    'locate_points_header',
    'locate_spending_header',
    'is_points_header',
    'is_spending_header',
    # Extraction
    'extract_points_table',
    'extract_spending_table',
    'extract_tables',
    'assemble_players',
    # Ranking
    'TieBreak',
    'compare_players',
    'compare_with_reason',
    'countback_compare',
    'rank_players',
    'rank',
    'rank_leaderboard',
    'save_leaderboard',
    # Output
    'format_leaderboard',
    'validate_entries',
]
