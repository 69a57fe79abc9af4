"""Sanity checks for ranked leaderboard output."""

from .schemas import RankedEntry


def validate_entry(entry: RankedEntry) -> list[str]:
    """
    Check that a ranked entry is internally consistent.

    Sanity checks:
    - Total points equal the sum of round scores (within rounding)
    - No negative point or spend totals

    Args:
        entry: RankedEntry to validate

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    score_sum = sum(entry.scores)
    if abs(score_sum - entry.total_points) > 1e-6:
        warnings.append(
            f'{entry.name} round scores sum to {score_sum} but total is {entry.total_points}'
        )

    if entry.total_points < 0:
        warnings.append(f'{entry.name} has a negative points total ({entry.total_points})')

    if entry.total_spent < 0:
        warnings.append(f'{entry.name} has a negative spend total ({entry.total_spent})')

    return warnings


def validate_entries(entries: list[RankedEntry]) -> list[str]:
    """
    Validate a full ranked leaderboard.

    Checks every entry, then the list as a whole:
    - Ranks run 1, 2, 3, ... in list order
    - No player name appears twice (case-insensitive); spend is only
      joined onto the first of the duplicates

    Args:
        entries: Ranked entries in rank order

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings: list[str] = []

    for entry in entries:
        warnings.extend(validate_entry(entry))

    for expected, entry in enumerate(entries, 1):
        if entry.rank != expected:
            warnings.append(f'{entry.name} has rank {entry.rank}, expected {expected}')
            break

    seen = set()
    duplicates = set()
    for entry in entries:
        key = entry.name.strip().lower()
        if key in seen:
            duplicates.add(entry.name)
        seen.add(key)

    if duplicates:
        warnings.append(f'Leaderboard has duplicate players: {", ".join(sorted(duplicates))}')

    return warnings
