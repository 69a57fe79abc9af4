"""Constants and header patterns for leaderboard extraction."""

import re

# Header label of the player-name column (compared lower-cased)
PLAYER_LABEL = 'player'

# "R01", "R02", ... as required by the points-header predicate
ROUND_HEADER_PATTERN = re.compile(r'^r\d{2}$', re.IGNORECASE)

# Round column labels: "R1" .. "R99"
ROUND_LABEL_PATTERN = re.compile(r'^r\d{1,2}$', re.IGNORECASE)

# Labels that merely start with a round number, e.g. "R1 (wk 3)"
ROUND_PREFIX_PATTERN = re.compile(r'^r\d', re.IGNORECASE)

NUMERIC_LABEL_PATTERN = re.compile(r'^\d+$')

POINTS_LABEL_PREFIX = 'pts'

# Header text that marks the end of the round columns
ROUND_TERMINATORS = ('total', 'points totals', 'spent', 'budget')

# Keywords identifying a spending header row
SPEND_HEADER_KEYWORDS = ('spent', '$m', 'budget')

SPENT_LABEL = 'spent'
SPEND_PER_POINT_LABEL = '$m/pt'
SPEND_UNIT_LABEL = '$m'

# Symbols stripped from spend cells before parsing
CURRENCY_SYMBOLS = ',£$'

# "DQ", "D$Q", "D Q", "D$ Q" once currency symbols are stripped
DQ_MARKER_PATTERN = re.compile(r'^d\s*\$?\s*q$', re.IGNORECASE)

DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')
