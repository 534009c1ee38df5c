import asyncio

from query.executor import QueryExecutor
from wallet import queries
from wallet.activity import bucketize_days, bucketize_hours, max_count
from wallet.addresses import require_address
from wallet.counterparties import SortBy, SortOrder, rank_counterparties
from wallet.entities import TransactionFilters
from wallet.holdings import aggregate_token_balances
from wallet.schemas import (
    ActivityHeatmapResponse,
    CounterpartiesResponse,
    TokenHoldingsResponse,
    TransactionsResponse,
)
from wallet.transactions import (
    PAGE_SIZE,
    filter_transactions,
    group_by_date,
    paginate,
    parse_transactions,
    total_pages,
)


class GetTransactionsUseCase:
    """
    Use case for the filtered, date-grouped transaction history.

    Parameters
    ----------
    executor : QueryExecutor
        Query executor instance
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    async def __call__(
        self,
        address: str,
        filters: TransactionFilters,
        page: int = 1,
        limit: int = 50
    ) -> TransactionsResponse:
        """
        Execute use case.

        Parameters
        ----------
        address : str
            Wallet address
        filters : TransactionFilters
            Client side filters
        page : int
            Page of date groups (1-indexed)
        limit : int
            How many recent transactions to fetch before filtering

        Returns
        -------
        TransactionsResponse
            One page of date groups
        """
        address = require_address(address)
        rows = await self.executor.run(queries.transactions_sql(address, limit), address)

        transactions = filter_transactions(parse_transactions(rows, address), filters)
        groups = group_by_date(transactions)

        return TransactionsResponse(
            address=address,
            filters=filters,
            page=page,
            page_size=PAGE_SIZE,
            total_pages=total_pages(len(groups)),
            total_transactions=len(transactions),
            groups=paginate(groups, page),
        )


class GetTokenHoldingsUseCase:
    """
    Use case for token holdings derived from transfers and the native balance.

    Parameters
    ----------
    executor : QueryExecutor
        Query executor instance
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    async def __call__(self, address: str) -> TokenHoldingsResponse:
        address = require_address(address)

        transfers, native_rows = await asyncio.gather(
            self.executor.run(queries.token_transfers_sql(address), address),
            self.executor.run(queries.native_balance_sql(address), address),
        )
        native_balance = native_rows[0].get("balance") if native_rows else 0

        return TokenHoldingsResponse(
            address=address,
            tokens=aggregate_token_balances(transfers, address, native_balance),
        )


class GetActivityHeatmapUseCase:
    """
    Use case for hour-of-day and day-of-week activity over the last 30 days.

    Parameters
    ----------
    executor : QueryExecutor
        Query executor instance
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    async def __call__(self, address: str) -> ActivityHeatmapResponse:
        address = require_address(address)

        hourly_rows, daily_rows = await asyncio.gather(
            self.executor.run(queries.hourly_activity_sql(address), address),
            self.executor.run(queries.daily_activity_sql(address), address),
        )
        hourly = bucketize_hours(hourly_rows)
        daily = bucketize_days(daily_rows)

        return ActivityHeatmapResponse(
            address=address,
            hourly=hourly,
            daily=daily,
            max_hourly=max_count(hourly),
            max_daily=max_count(daily),
        )


class GetCounterpartiesUseCase:
    """
    Use case for the most frequent or highest-volume counterparties.

    Parameters
    ----------
    executor : QueryExecutor
        Query executor instance
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    async def __call__(
        self,
        address: str,
        sort_by: SortBy = "count",
        order: SortOrder = "desc",
        limit: int = 10
    ) -> CounterpartiesResponse:
        """
        Execute use case.

        Parameters
        ----------
        address : str
            Wallet address
        sort_by : SortBy
            Rank by interaction count or by volume
        order : SortOrder
            Ranking direction
        limit : int
            Number of counterparties to fetch

        Returns
        -------
        CounterpartiesResponse
            Ranked counterparties
        """
        address = require_address(address)
        rows = await self.executor.run(queries.counterparties_sql(address, sort_by, limit), address)

        return CounterpartiesResponse(
            address=address,
            sort_by=sort_by,
            order=order,
            counterparties=rank_counterparties(rows, sort_by, order),
        )
