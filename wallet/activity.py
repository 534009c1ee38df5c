from typing import Any, Iterable, Mapping

from wallet.entities import ActivityDay, ActivityHour
from wallet.values import to_int

HOURS_IN_DAY = 24
DAYS_IN_WEEK = 7


def densify(rows: Iterable[Mapping[str, Any]], key: str, size: int) -> list[int]:
    """
    Turn sparse ``(key, tx_count)`` rows into a dense list of counts.

    Keys outside ``0..size-1`` are dropped, repeated keys are summed and
    malformed or negative counts count as zero.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Pre-aggregated rows from the warehouse
    key : str
        Name of the bucket column
    size : int
        Domain size

    Returns
    -------
    list[int]
        ``size`` counts, index = bucket
    """
    counts = [0] * size
    for row in rows:
        bucket = to_int(row.get(key), default=-1)
        if not 0 <= bucket < size:
            continue
        counts[bucket] += max(to_int(row.get("tx_count")), 0)
    return counts


def bucketize_hours(rows: Iterable[Mapping[str, Any]]) -> list[ActivityHour]:
    counts = densify(rows, "hour", HOURS_IN_DAY)
    return [ActivityHour(hour=hour, tx_count=count) for hour, count in enumerate(counts)]


def bucketize_days(rows: Iterable[Mapping[str, Any]]) -> list[ActivityDay]:
    counts = densify(rows, "day", DAYS_IN_WEEK)
    return [ActivityDay(day=day, tx_count=count) for day, count in enumerate(counts)]


def max_count(buckets: Iterable[ActivityHour | ActivityDay]) -> int:
    """Largest bucket count, never below 1 so it can be used as a divisor."""
    return max([bucket.tx_count for bucket in buckets] + [1])
