"""Cell value normalization for points and spend columns.

Both conversions are total: malformed cells degrade to 0 instead of
raising, so one bad cell never aborts a run.
"""

import math
from typing import Any

from .constants import CURRENCY_SYMBOLS, DECIMAL_PATTERN, DQ_MARKER_PATTERN
from .models import Number

_STRIP_SYMBOLS = str.maketrans('', '', CURRENCY_SYMBOLS)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a numeric cell
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _finite_or_zero(value: Number) -> Number:
    # NaN and inf cells count as 0, the same as "nan" text
    return value if math.isfinite(value) else 0


def parse_decimal(text: str) -> Number:
    """
    Parse a plain decimal string, returning 0 when it isn't one.

    Examples:
        "12" -> 12.0
        "-3.5" -> -3.5
        "abc" -> 0
        "inf" -> 0
    """
    text = text.strip()
    if not DECIMAL_PATTERN.match(text):
        return 0
    return _finite_or_zero(float(text))


def to_number(value: Any) -> Number:
    """
    Convert a spend (or general numeric) cell to a number.

    Examples:
        None -> 0
        12.5 -> 12.5
        float("nan") -> 0
        "£1,250" -> 1250.0
        "$3.2" -> 3.2
        "-" -> 0
        "D$Q" -> 0
        "d q" -> 0
    """
    if value is None:
        return 0
    if _is_number(value):
        return _finite_or_zero(value)

    text = str(value).translate(_STRIP_SYMBOLS).strip()
    if text in ('', '-') or DQ_MARKER_PATTERN.match(text):
        return 0
    return parse_decimal(text)


def normalize_points_cell(value: Any) -> Number:
    """
    Convert a round-points cell to a number.

    Dashes and disqualification markers count as 0.

    Examples:
        None -> 0
        "14" -> 14.0
        float("inf") -> 0
        "DQ" -> 0
        "dq (late)" -> 0
    """
    if value is None:
        return 0
    if _is_number(value):
        return _finite_or_zero(value)

    text = str(value).strip()
    upper = text.upper()
    if text == '-' or 'DQ' in upper or 'D$Q' in upper:
        return 0
    return parse_decimal(text)
