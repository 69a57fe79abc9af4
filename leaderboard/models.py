"""Data models for leaderboard extraction and ranking."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .schemas import RankedEntry

Number = Union[int, float]


@dataclass
class HeaderMatch:
    """A header row found near the top of the sheet."""
    row_index: int  # 1-based
    cells: List[str] = field(default_factory=list)  # trimmed, non-empty cell texts


@dataclass
class RoundColumn:
    """A column holding one round's points or spend."""
    column: int  # 1-based
    name: str


@dataclass
class PlayerRecord:
    """Container for one player's points, spend and tie status."""
    name: str
    scores: List[Number] = field(default_factory=list)
    total_spent: Number = 0
    spent_per_pt: float = 0.0
    tied: bool = False
    total_points: Number = field(init=False)

    def __post_init__(self):
        self.total_points = sum(self.scores)

    @property
    def match_key(self) -> str:
        """Name used when joining tables (case-insensitive)."""
        return self.name.strip().lower()


@dataclass
class PointsTable:
    """Points table as read from the sheet."""
    header_row: int
    player_column: int
    rounds: List[RoundColumn] = field(default_factory=list)
    players: List[PlayerRecord] = field(default_factory=list)
    synthetic_rounds: bool = False  # True when no round header was recognised


@dataclass
class SpendRow:
    """One row of the spending table."""
    name: str
    total_spent: Number
    row_index: int


@dataclass
class SpendingTable:
    """Spending table as read from the sheet."""
    header_row: int
    player_column: int
    total_column: Optional[int] = None
    round_columns: List[RoundColumn] = field(default_factory=list)
    rows: List[SpendRow] = field(default_factory=list)


@dataclass
class LeaderboardResult:
    """Ranked standings plus the recoverable problems met on the way."""
    entries: List[RankedEntry] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
