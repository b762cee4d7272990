"""
utils/validators.py — Input coercion at the HTTP boundary.

Validates:
- Land dimensions and grid divisions (leading integer of the input, invalid
  or non-positive input → 1, capped at a maximum)
- Tile coordinates (integers inside the grid)
- JSON request bodies (objects only)
- Custom crop colors (#RRGGBB)
"""

import math
import re

HEX_COLOR_RE = re.compile(r'^#[0-9A-Fa-f]{6}$')
LEADING_INT_RE = re.compile(r'^\s*([+-]?\d+)')


def coerce_dimension(value, minimum=1, maximum=None):
    """
    Coerce user input to a positive integer.

    Strings keep their leading integer ("12abc" → 12, "1e3" → 1, "12.7" → 12);
    numbers are truncated. Anything without a usable integer, or below
    `minimum`, becomes `minimum`. Values above `maximum` are clamped to it.
    """
    number = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if math.isfinite(value):
            number = int(value)
    elif isinstance(value, str):
        match = LEADING_INT_RE.match(value)
        if match:
            number = int(match.group(1))

    if number is None or number < minimum:
        number = minimum
    if maximum is not None and number > maximum:
        number = maximum
    return number


def parse_cell(row, col, rows, cols):
    """
    Parse tile coordinates from a request payload.

    Returns:
        ((row, col), None) on success, or (None, error_message) on failure.
    """
    if isinstance(row, bool) or isinstance(col, bool):
        return None, "إحداثيات المربع غير صالحة"
    try:
        row = int(row)
        col = int(col)
    except (TypeError, ValueError, OverflowError):
        return None, "إحداثيات المربع غير صالحة"

    if not (0 <= row < rows and 0 <= col < cols):
        return None, "المربع خارج حدود المخطط"
    return (row, col), None


def json_object(payload):
    """Request JSON body as a dict; anything else (list, number, None) is empty."""
    return payload if isinstance(payload, dict) else {}


def normalize_color(value, default='#4CAF50'):
    if not isinstance(value, str):
        return default
    value = value.strip()
    if HEX_COLOR_RE.match(value):
        return value.upper()
    return default
