"""Console rendering of ranked standings."""

from .schemas import RankedEntry

NAME_WIDTH = 24


def format_leaderboard(entries: list[RankedEntry]) -> str:
    """
    Render the standings as a plain-text table.

    Tied players get a '*' after their name and YES in the Tied column.

    Example:
        Rank | Name                     | Points | Spent($m) | Tied
        -----|--------------------------|--------|-----------|-----
        1    | Alice                    | 15     | 0.0       | NO
    """
    lines = [
        'Rank | Name                     | Points | Spent($m) | Tied',
        '-----|--------------------------|--------|-----------|-----',
    ]
    for entry in entries:
        name = f'{entry.name}*' if entry.tied else entry.name
        lines.append(
            f'{str(entry.rank):<4} | {name:<{NAME_WIDTH}} | {str(entry.total_points):<6} | '
            f'{str(entry.total_spent):<9} | {"YES" if entry.tied else "NO"}'
        )
    return '\n'.join(lines)
