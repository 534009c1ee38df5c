from dishka import Provider, Scope, provide, FromComponent
from typing import Annotated
from query.executor import QueryExecutor
from wallet.usecases import (
    GetActivityHeatmapUseCase,
    GetCounterpartiesUseCase,
    GetTokenHoldingsUseCase,
    GetTransactionsUseCase,
)


class WalletProvider(Provider):
    """
    Provider for wallet view use cases.
    """

    component = "wallet"

    @provide(scope=Scope.REQUEST)
    def get_transactions_use_case(
        self,
        executor: Annotated[QueryExecutor, FromComponent("query")]
    ) -> GetTransactionsUseCase:
        """
        Provide get transactions use case.

        Parameters
        ----------
        executor : QueryExecutor
            Query executor instance

        Returns
        -------
        GetTransactionsUseCase
            Get transactions use case
        """
        return GetTransactionsUseCase(executor=executor)

    @provide(scope=Scope.REQUEST)
    def get_token_holdings_use_case(
        self,
        executor: Annotated[QueryExecutor, FromComponent("query")]
    ) -> GetTokenHoldingsUseCase:
        return GetTokenHoldingsUseCase(executor=executor)

    @provide(scope=Scope.REQUEST)
    def get_activity_heatmap_use_case(
        self,
        executor: Annotated[QueryExecutor, FromComponent("query")]
    ) -> GetActivityHeatmapUseCase:
        return GetActivityHeatmapUseCase(executor=executor)

    @provide(scope=Scope.REQUEST)
    def get_counterparties_use_case(
        self,
        executor: Annotated[QueryExecutor, FromComponent("query")]
    ) -> GetCounterpartiesUseCase:
        return GetCounterpartiesUseCase(executor=executor)
