from fastapi import APIRouter, Query
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated, Literal
from wallet.entities import TransactionFilters
from wallet.schemas import (
    ActivityHeatmapResponse,
    CounterpartiesResponse,
    TokenHoldingsResponse,
    TransactionsResponse,
)
from wallet.usecases import (
    GetActivityHeatmapUseCase,
    GetCounterpartiesUseCase,
    GetTokenHoldingsUseCase,
    GetTransactionsUseCase,
)

router = APIRouter(
    prefix="/api/wallet",
    tags=["Wallet"]
)


@router.get("/{address}/transactions", response_model=TransactionsResponse)
@inject
async def get_transactions(
    address: str,
    use_case: Annotated[
        GetTransactionsUseCase, FromComponent("wallet")
    ],
    tx_type: Annotated[Literal["send", "receive", "all"], Query(alias="type")] = "all",
    date_from: str | None = None,
    date_to: str | None = None,
    min_amount: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=1000)] = 50
) -> TransactionsResponse:
    """
    Get transaction history grouped by date.

    Parameters
    ----------
    address : str
        Wallet address
    use_case : GetTransactionsUseCase
        Use case for the transaction history
    tx_type : Literal["send", "receive", "all"]
        Direction filter
    date_from : str | None
        First date (YYYY-MM-DD)
    date_to : str | None
        Last date (YYYY-MM-DD)
    min_amount : str | None
        Minimum value in ETH
    page : int
        Page of date groups
    limit : int
        Recent transactions to fetch before filtering

    Returns
    -------
    TransactionsResponse
        One page of date groups
    """
    filters = TransactionFilters(
        type=tx_type,
        date_from=date_from,
        date_to=date_to,
        min_amount=min_amount
    )
    return await use_case(address=address, filters=filters, page=page, limit=limit)


@router.get("/{address}/tokens", response_model=TokenHoldingsResponse)
@inject
async def get_token_holdings(
    address: str,
    use_case: Annotated[
        GetTokenHoldingsUseCase, FromComponent("wallet")
    ]
) -> TokenHoldingsResponse:
    """
    Get token holdings aggregated from transfers.

    Parameters
    ----------
    address : str
        Wallet address
    use_case : GetTokenHoldingsUseCase
        Use case for token holdings

    Returns
    -------
    TokenHoldingsResponse
        Positive balances, largest first
    """
    return await use_case(address=address)


@router.get("/{address}/activity", response_model=ActivityHeatmapResponse)
@inject
async def get_activity_heatmap(
    address: str,
    use_case: Annotated[
        GetActivityHeatmapUseCase, FromComponent("wallet")
    ]
) -> ActivityHeatmapResponse:
    """
    Get hourly and daily activity for the last 30 days.

    Parameters
    ----------
    address : str
        Wallet address
    use_case : GetActivityHeatmapUseCase
        Use case for the activity heatmap

    Returns
    -------
    ActivityHeatmapResponse
        Dense hourly and daily counts
    """
    return await use_case(address=address)


@router.get("/{address}/counterparties", response_model=CounterpartiesResponse)
@inject
async def get_counterparties(
    address: str,
    use_case: Annotated[
        GetCounterpartiesUseCase, FromComponent("wallet")
    ],
    sort_by: Literal["count", "volume"] = "count",
    order: Literal["desc", "asc"] = "desc",
    limit: Annotated[int, Query(ge=1, le=100)] = 10
) -> CounterpartiesResponse:
    """
    Get top counterparties of a wallet.

    Parameters
    ----------
    address : str
        Wallet address
    use_case : GetCounterpartiesUseCase
        Use case for counterparties
    sort_by : Literal["count", "volume"]
        Ranking key
    order : Literal["desc", "asc"]
        Ranking direction
    limit : int
        Number of counterparties

    Returns
    -------
    CounterpartiesResponse
        Ranked counterparties
    """
    return await use_case(address=address, sort_by=sort_by, order=order, limit=limit)
