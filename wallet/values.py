"""
Coercion of loosely typed warehouse values.
"""
import math
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

# 9999-12-31T23:59:59Z, the last second datetime can represent
MAX_TIMESTAMP = 253402300799


def to_int(value: Any, default: int = 0) -> int:
    """
    Coerce a warehouse value to an integer without going through float.

    Integers pass through, decimal strings are parsed exactly. Anything else
    (missing, floats, garbage) yields ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def parse_timestamp(value: Any) -> int | None:
    """
    Parse a block timestamp into seconds since epoch.

    Accepts epoch seconds (int, finite float or numeric string) and ISO 8601
    strings, naive ISO values are taken as UTC. Returns None when unparseable
    or outside the range a calendar date can be derived for.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = int(value)
    if isinstance(value, int):
        return value if 0 <= value <= MAX_TIMESTAMP else None
    if not isinstance(value, str) or not value.strip():
        return None

    value = value.strip()
    if value.isdigit():
        seconds = int(value)
        return seconds if seconds <= MAX_TIMESTAMP else None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00").replace(" ", "T", 1))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())
