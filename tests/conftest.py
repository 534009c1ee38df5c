import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, patch
import logging
import os


# Set test environment variables before imports
os.environ['ENV_FILE'] = '.env.test'
os.environ['REDIS_HOST'] = 'localhost'
os.environ['REDIS_PORT'] = '6379'
os.environ['REDIS_DB'] = '0'
os.environ['REDIS_PASSWORD'] = ''  # No password for mock
os.environ['CDP_API_KEY_NAME'] = ''  # Credentials deliberately missing
os.environ['CDP_API_SECRET'] = ''
os.environ['AUTH_DOMAIN'] = ''

from core.environment.config import Settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings without CDP credentials."""
    return Settings(
        redis_host="localhost",
        redis_port=6379,
        redis_db=0,
        redis_password="",
        cdp_api_key_name="",
        cdp_api_secret="",
    )


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("wallet_inspector.tests")


@pytest_asyncio.fixture
async def mock_redis():
    """Mock Redis client for testing."""
    mock = AsyncMock()
    mock.ping = AsyncMock(return_value=True)
    mock.get = AsyncMock(return_value=None)
    mock.setex = AsyncMock(return_value=True)
    mock.aclose = AsyncMock()
    return mock


@pytest_asyncio.fixture
async def client(mock_redis):
    """
    Fixture for async test client with mocked Redis.

    A fresh container is built for every test so the APP-scoped Redis
    client is the mock of that test.

    Parameters
    ----------
    mock_redis : AsyncMock
        Mocked Redis client

    Yields
    ------
    AsyncClient
        Async HTTP client for testing
    """
    from main import app
    from core.container import make_container

    with patch('core.redis.providers.Redis', return_value=mock_redis):
        container = make_container()
        app.state.dishka_container = container

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        await container.close()
