import asyncio
import logging
from typing import Any

from core.environment.config import Settings
from core.exceptions import InvalidAddressException, InvalidQueryException, UpstreamQueryException
from core.redis.providers import CacheService
from query.client import CDPClient
from wallet.addresses import is_valid_address, normalize_address


class QueryExecutor:
    """
    Runs validated queries through the response cache and the warehouse client.

    Parameters
    ----------
    client : CDPClient
        Warehouse client
    cache_service : CacheService
        Response cache keyed by query text and address
    settings : Settings
        Application settings (cache freshness, retries)
    logger : logging.Logger
        Logger instance
    """

    def __init__(
        self,
        client: CDPClient,
        cache_service: CacheService,
        settings: Settings,
        logger: logging.Logger
    ):
        self.client = client
        self.cache = cache_service
        self.settings = settings
        self.logger = logger
        self._in_flight: dict[str, asyncio.Future] = {}

    async def run(self, sql: Any, address: Any = None) -> list[dict[str, Any]]:
        """
        Execute a query, answering from cache within the freshness window.

        Concurrent calls for the same query and address share one warehouse
        request.

        Parameters
        ----------
        sql : Any
            Query text, must be a non-empty string
        address : Any
            Optional address context, validated when given

        Returns
        -------
        list[dict[str, Any]]
            Result rows

        Raises
        ------
        InvalidQueryException
            If ``sql`` is missing or not a string
        InvalidAddressException
            If ``address`` is given but malformed
        UpstreamQueryException
            If the warehouse fails on every attempt
        ConfigurationException
            If warehouse credentials are missing
        """
        if not isinstance(sql, str) or not sql.strip():
            raise InvalidQueryException()

        if address:
            if not is_valid_address(address):
                raise InvalidAddressException()
            address = normalize_address(address)

        cache_key = CacheService.make_key("query", sql, address)
        cached = await self.cache.get(cache_key)
        if cached and isinstance(cached, dict) and "rows" in cached:
            self.logger.debug(f"Cache hit for {cache_key}")
            return cached["rows"]

        fetch = self._in_flight.get(cache_key)
        if fetch is None:
            fetch = asyncio.ensure_future(self._fetch(sql, cache_key))
            self._in_flight[cache_key] = fetch
            fetch.add_done_callback(lambda _: self._in_flight.pop(cache_key, None))
        else:
            self.logger.debug(f"Joining in-flight query for {cache_key}")

        # a cancelled caller must not cancel the fetch other callers wait on
        return await asyncio.shield(fetch)

    async def _fetch(self, sql: str, cache_key: str) -> list[dict[str, Any]]:
        rows = await self._execute_with_retry(sql)
        await self.cache.set(cache_key, {"rows": rows}, ttl=self.settings.query_cache_ttl)
        return rows

    async def _execute_with_retry(self, sql: str) -> list[dict[str, Any]]:
        attempts = max(self.settings.query_retries, 0) + 1
        last_error: UpstreamQueryException | None = None

        for attempt in range(1, attempts + 1):
            try:
                return await self.client.execute(sql)
            except UpstreamQueryException as e:
                last_error = e
                self.logger.warning(f"Query attempt {attempt}/{attempts} failed: {e.message}")

        raise last_error
