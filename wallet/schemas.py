from pydantic import BaseModel, ConfigDict
from typing import Literal

from wallet.entities import (
    ActivityDay,
    ActivityHour,
    Counterparty,
    TokenBalance,
    TransactionFilters,
    TransactionGroup,
)


class TransactionsResponse(BaseModel):
    """
    Response schema for the transaction history.

    Attributes
    ----------
    address : str
        Inspected address
    filters : TransactionFilters
        Filters that were applied
    page : int
        Requested page (1-indexed)
    page_size : int
        Date groups per page
    total_pages : int
        Number of pages of date groups
    total_transactions : int
        Transactions left after filtering
    groups : list[TransactionGroup]
        Date groups of the requested page, most recent first
    """
    address: str
    filters: TransactionFilters
    page: int
    page_size: int
    total_pages: int
    total_transactions: int
    groups: list[TransactionGroup]

    model_config = ConfigDict(from_attributes=True)


class TokenHoldingsResponse(BaseModel):
    """
    Response schema for token holdings.

    Attributes
    ----------
    address : str
        Inspected address
    tokens : list[TokenBalance]
        Positive balances, largest first
    """
    address: str
    tokens: list[TokenBalance]

    model_config = ConfigDict(from_attributes=True)


class ActivityHeatmapResponse(BaseModel):
    """
    Response schema for the activity heatmap.

    Attributes
    ----------
    address : str
        Inspected address
    hourly : list[ActivityHour]
        24 entries, hour of day in UTC
    daily : list[ActivityDay]
        7 entries, 0 = Sunday
    max_hourly : int
        Largest hourly count, at least 1
    max_daily : int
        Largest daily count, at least 1
    """
    address: str
    hourly: list[ActivityHour]
    daily: list[ActivityDay]
    max_hourly: int
    max_daily: int

    model_config = ConfigDict(from_attributes=True)


class CounterpartiesResponse(BaseModel):
    """
    Response schema for top counterparties.

    Attributes
    ----------
    address : str
        Inspected address
    sort_by : Literal["count", "volume"]
        Ranking key
    order : Literal["desc", "asc"]
        Ranking direction
    counterparties : list[Counterparty]
        Ranked counterparties
    """
    address: str
    sort_by: Literal["count", "volume"]
    order: Literal["desc", "asc"]
    counterparties: list[Counterparty]

    model_config = ConfigDict(from_attributes=True)
