"""Ranking engine: multi-stage comparator with countback tie-breaking.

Players are ordered by:
    1. total points, highest first
    2. total spend, lowest first
    3. countback over round scores
    4. name, case-insensitive

A pair still level after points is reported as tied unless countback
separates it. Spend-separated pairs stay flagged as tied.
"""

import math
from collections import Counter
from enum import Enum
from functools import cmp_to_key
from itertools import combinations, groupby
from typing import Iterable, Sequence

from .models import Number, PlayerRecord
from .schemas import RankedEntry


class TieBreak(Enum):
    """Which comparator stage decided the order of a pair."""
    POINTS = 'points'
    SPEND = 'spend'
    COUNTBACK = 'countback'
    NAME = 'name'


# Stages that leave the pair flagged as tied
UNRESOLVED_TIE_BREAKS = frozenset({TieBreak.SPEND, TieBreak.NAME})


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def countback_compare(a_scores: Sequence[Number], b_scores: Sequence[Number]) -> int:
    """
    Compare two score sequences by countback.

    Walks the distinct scores of both players from highest to lowest. At
    the first score the players hold a different number of times, the
    player holding it more often ranks higher.

    Returns:
        -1 if a ranks higher, 1 if b ranks higher, 0 if fully tied

    Example:
        countback_compare([3, 3, 1], [2, 4, 1])  # 1, b holds the 4
    """
    a_counts = Counter(a_scores)
    b_counts = Counter(b_scores)

    for score in sorted(set(a_counts) | set(b_counts), reverse=True):
        diff = a_counts[score] - b_counts[score]
        if diff:
            return -1 if diff > 0 else 1

    return 0


def compare_with_reason(a: PlayerRecord, b: PlayerRecord) -> tuple[int, TieBreak]:
    """
    Order two players and report which stage decided it.

    Returns:
        Tuple of (order, tie_break); order is negative when a ranks first
    """
    if a.total_points != b.total_points:
        return _sign(b.total_points - a.total_points), TieBreak.POINTS

    if a.total_spent != b.total_spent:
        return _sign(a.total_spent - b.total_spent), TieBreak.SPEND

    countback = countback_compare(a.scores, b.scores)
    if countback:
        return countback, TieBreak.COUNTBACK

    a_key = a.name.casefold()
    b_key = b.name.casefold()
    return (a_key > b_key) - (a_key < b_key), TieBreak.NAME


def compare_players(a: PlayerRecord, b: PlayerRecord) -> int:
    """Comparator for sorting: negative when a ranks ahead of b."""
    return compare_with_reason(a, b)[0]


def sort_players(players: Iterable[PlayerRecord]) -> list[PlayerRecord]:
    """Return the players in ranking order."""
    return sorted(players, key=cmp_to_key(compare_players))


def mark_ties(ordered: Sequence[PlayerRecord]) -> None:
    """
    Set each player's tied flag from the tie-break of every equal-points pair.

    A player is tied when some other player on the same points total is
    separated from it only by spend or by name.
    """
    for player in ordered:
        player.tied = False

    for _points, group in groupby(ordered, key=lambda p: p.total_points):
        for a, b in combinations(list(group), 2):
            _order, tie_break = compare_with_reason(a, b)
            if tie_break in UNRESOLVED_TIE_BREAKS:
                a.tied = True
                b.tied = True


def to_ranked_entry(player: PlayerRecord, rank: int) -> RankedEntry:
    """Freeze a player record into its output form."""
    spent_per_pt = 0.0 if math.isinf(player.spent_per_pt) else player.spent_per_pt
    return RankedEntry(
        rank=rank,
        name=player.name,
        total_points=player.total_points,
        total_spent=round(player.total_spent, 2),
        spent_per_pt=round(spent_per_pt, 3),
        tied=player.tied,
        scores=list(player.scores),
    )


def rank_players(players: Iterable[PlayerRecord]) -> list[RankedEntry]:
    """
    Sort players and assign sequential ranks.

    Equal players still get consecutive ranks (1, 2, ...); the tied flag
    is the only signal that a tie was left unresolved.

    Args:
        players: Assembled player records

    Returns:
        RankedEntry list in rank order
    """
    ordered = sort_players(players)
    mark_ties(ordered)
    return [to_ranked_entry(player, rank) for rank, player in enumerate(ordered, 1)]
