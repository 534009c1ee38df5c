from datetime import date, datetime, timezone
from math import ceil
from typing import Any, Iterable, Mapping

from wallet.entities import Transaction, TransactionFilters, TransactionGroup
from wallet.formatting import format_date_only, parse_ether

PAGE_SIZE = 20


def parse_transactions(rows: Iterable[Mapping[str, Any]], address: str) -> list[Transaction]:
    """Parse warehouse rows, dropping the ones without hash or timestamp."""
    address = address.lower()
    transactions = (Transaction.from_row(row, address) for row in rows)
    return [tx for tx in transactions if tx is not None]


def _date_boundary(value: str | None) -> int | None:
    """Midnight UTC of a YYYY-MM-DD date in epoch seconds, None if unset or malformed."""
    if not value:
        return None
    try:
        day = date.fromisoformat(value.strip())
    except (ValueError, AttributeError):
        return None
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: TransactionFilters
) -> list[Transaction]:
    """
    Apply direction, date range and minimum amount filters.

    A malformed date or amount leaves that filter unset.

    Parameters
    ----------
    transactions : Iterable[Transaction]
        Transactions to filter
    filters : TransactionFilters
        Filters to apply

    Returns
    -------
    list[Transaction]
        Matching transactions in input order
    """
    filtered = list(transactions)

    if filters.type and filters.type != "all":
        filtered = [tx for tx in filtered if tx.type == filters.type]

    date_from = _date_boundary(filters.date_from)
    if date_from is not None:
        filtered = [tx for tx in filtered if tx.timestamp >= date_from]

    date_to = _date_boundary(filters.date_to)
    if date_to is not None:
        filtered = [tx for tx in filtered if tx.timestamp <= date_to]

    min_wei = parse_ether(filters.min_amount)
    if min_wei:
        filtered = [tx for tx in filtered if tx.value_wei >= min_wei]

    return filtered


def group_by_date(transactions: Iterable[Transaction]) -> list[TransactionGroup]:
    """
    Group transactions by UTC calendar date, most recent date first.

    Parameters
    ----------
    transactions : Iterable[Transaction]
        Transactions in display order

    Returns
    -------
    list[TransactionGroup]
        One group per date, members keep their input order
    """
    groups: dict[date, list[Transaction]] = {}
    for tx in transactions:
        day = datetime.fromtimestamp(tx.timestamp, tz=timezone.utc).date()
        groups.setdefault(day, []).append(tx)

    return [
        TransactionGroup(
            date=day.isoformat(),
            label=format_date_only(members[0].timestamp),
            transactions=members,
        )
        for day, members in sorted(groups.items(), key=lambda item: item[0], reverse=True)
    ]


def paginate(
    groups: list[TransactionGroup],
    page: int,
    page_size: int = PAGE_SIZE
) -> list[TransactionGroup]:
    """Slice one 1-indexed page of groups; out of range pages are empty."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return groups[start:start + page_size]


def total_pages(group_count: int, page_size: int = PAGE_SIZE) -> int:
    return ceil(group_count / page_size)
