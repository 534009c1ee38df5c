from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from core.environment.providers import EnvironmentProvider
from core.redis.providers import RedisProvider, CacheProvider
from core.logging.providers import LoggerProvider
from auth.providers import AuthProvider
from query.providers import QueryProvider
from wallet.providers import WalletProvider


def make_container() -> AsyncContainer:
    """
    Build the application container.

    Returns
    -------
    AsyncContainer
        Container with every provider registered
    """
    return make_async_container(
        FastapiProvider(),
        EnvironmentProvider(),
        LoggerProvider(),
        RedisProvider(),
        CacheProvider(),
        QueryProvider(),
        AuthProvider(),
        WalletProvider()
    )


container = make_container()
