#!/usr/bin/env python3
"""
Fantasy League Leaderboard Ranker CLI

Reads the leaderboard sheet of an Excel workbook, ranks players by points,
spend and countback, and saves the standings as JSON.

Usage:
    python rank_leaderboard.py
    python rank_leaderboard.py --input data/leaderboard.xlsx --output ranked_leaderboard.json
    python rank_leaderboard.py --input league.xlsx --sheet "Round 12" --quiet
"""

import argparse
import logging
import sys
from pathlib import Path

from leaderboard import (
    HeaderNotFoundError,
    format_leaderboard,
    load_grid,
    rank_leaderboard,
    save_leaderboard,
    validate_entries,
)
from leaderboard.logging_config import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank a fantasy league leaderboard spreadsheet")
    parser.add_argument(
        "--input", "-i",
        default="data/leaderboard.xlsx",
        help="Path to the leaderboard workbook",
    )
    parser.add_argument(
        "--output", "-o",
        default="ranked_leaderboard.json",
        help="Output path for the ranked leaderboard JSON",
    )
    parser.add_argument(
        "--sheet", "-s",
        default=None,
        help="Worksheet to read (defaults to the first sheet)",
    )
    parser.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for log files",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress the standings table",
    )

    args = parser.parse_args(argv)

    setup_logging(
        log_dir=Path(args.log_dir),
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=not args.no_log_file,
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"❌ Input file not found: {input_path}")
        return 1

    print(f"Parsing workbook {input_path}...")

    try:
        grid = load_grid(input_path, args.sheet)
    except KeyError:
        print(f"❌ Sheet not found in {input_path}: {args.sheet}")
        return 1

    try:
        result = rank_leaderboard(grid)
    except HeaderNotFoundError as e:
        print(f"❌ {e}")
        return 1

    save_leaderboard(args.output, result.entries)
    print(f"Saved ranked leaderboard to {args.output}")

    if not args.quiet:
        print("\n" + "=" * 60)
        print("FINAL RANKED LEADERBOARD")
        print("=" * 60)
        print(format_leaderboard(result.entries))

    for warning in result.warnings + validate_entries(result.entries):
        print(f"⚠️  {warning}")

    print("\nRanking complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
