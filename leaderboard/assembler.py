"""Join points and spending tables into player records."""

import logging
import math
from typing import Optional

from .models import PlayerRecord, PointsTable, SpendingTable

logger = logging.getLogger('leaderboard.assembler')


def spend_per_point(total_spent: float, total_points: float) -> float:
    """Spend divided by points; infinite when the player has no points."""
    if total_points > 0:
        return total_spent / total_points
    return math.inf


def assemble_players(
    points: PointsTable, spending: Optional[SpendingTable] = None
) -> list[PlayerRecord]:
    """
    Attach spend totals to the points-table players.

    Spending rows are matched by case-insensitive, trimmed name. Rows with
    no points-table player are dropped; when the points table repeats a
    name, the first record gets the spend.

    Args:
        points: Extracted points table (its records are updated in place)
        spending: Extracted spending table, or None when none was found

    Returns:
        The points-table player records, in sheet order
    """
    players = points.players
    by_name: dict[str, PlayerRecord] = {}
    for player in players:
        by_name.setdefault(player.match_key, player)

    if spending is not None:
        for row in spending.rows:
            player = by_name.get(row.name.strip().lower())
            if player is None:
                logger.debug(f'Spending row {row.row_index} ({row.name!r}) has no points entry')
                continue
            player.total_spent = row.total_spent

    for player in players:
        player.spent_per_pt = spend_per_point(player.total_spent, player.total_points)

    return players
