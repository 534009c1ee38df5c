import logging
from typing import Annotated
from dishka import Provider, Scope, provide, FromComponent
from core.environment.config import Settings
from core.redis.providers import CacheService
from query.client import CDPClient
from query.executor import QueryExecutor


class QueryProvider(Provider):
    """
    Provider for the warehouse client and the query executor.
    """

    component = "query"

    @provide(scope=Scope.APP)
    def get_cdp_client(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> CDPClient:
        """
        Provide CDP SQL API client.

        Parameters
        ----------
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        CDPClient
            Warehouse client
        """
        return CDPClient(settings=settings, logger=logger)

    @provide(scope=Scope.APP)
    def get_query_executor(
        self,
        client: Annotated[CDPClient, FromComponent("query")],
        cache_service: Annotated[CacheService, FromComponent("cache")],
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> QueryExecutor:
        """
        Provide query executor.

        Parameters
        ----------
        client : CDPClient
            Warehouse client
        cache_service : CacheService
            Response cache
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        QueryExecutor
            Query executor instance
        """
        return QueryExecutor(
            client=client,
            cache_service=cache_service,
            settings=settings,
            logger=logger
        )
