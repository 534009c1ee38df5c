import asyncio
import logging
import time
from typing import Any

import aiohttp
import jwt

from core.environment.config import Settings
from core.exceptions import ConfigurationException, UpstreamQueryException


class CDPClient:
    """
    Client for the Coinbase Developer Platform SQL API.

    Every request is authenticated with a short-lived ES256 bearer token
    signed with the configured API secret.

    Parameters
    ----------
    settings : Settings
        Application settings with CDP credentials
    logger : logging.Logger
        Logger instance
    """

    AUDIENCE = "https://api.cdp.coinbase.com"
    ISSUER = "coinbase-cloud"
    TOKEN_LIFETIME = 120
    REQUEST_TIMEOUT = 30

    def __init__(self, settings: Settings, logger: logging.Logger):
        self.settings = settings
        self.logger = logger

    def _bearer_token(self) -> str:
        """
        Sign a bearer token for a single request.

        Returns
        -------
        str
            Encoded JWT

        Raises
        ------
        ConfigurationException
            If credentials are missing or the secret is not a usable key
        """
        if not self.settings.has_cdp_credentials():
            raise ConfigurationException(
                "CDP API credentials not configured. "
                "Please set CDP_API_KEY_NAME and CDP_API_SECRET environment variables."
            )

        now = int(time.time())
        payload = {
            "sub": self.settings.cdp_api_key_name,
            "iss": self.ISSUER,
            "nbf": now,
            "exp": now + self.TOKEN_LIFETIME,
            "aud": self.AUDIENCE,
        }

        try:
            return jwt.encode(
                payload,
                self.settings.cdp_api_secret,
                algorithm="ES256",
                headers={"kid": self.settings.cdp_api_key_name}
            )
        except (ValueError, TypeError, jwt.PyJWTError) as e:
            raise ConfigurationException(f"CDP API credentials are invalid: {e}") from e

    async def execute(self, sql: str) -> list[dict[str, Any]]:
        """
        Run a SQL query against the warehouse.

        Parameters
        ----------
        sql : str
            Query text

        Returns
        -------
        list[dict[str, Any]]
            Result rows, empty when the response carries none

        Raises
        ------
        UpstreamQueryException
            If the API answers with a non-success status or is unreachable
        """
        headers = {
            "Authorization": f"Bearer {self._bearer_token()}",
            "Content-Type": "application/json",
        }
        timeout = aiohttp.ClientTimeout(total=self.REQUEST_TIMEOUT)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.settings.cdp_api_url, json={"sql": sql}, headers=headers
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise UpstreamQueryException(
                            f"CDP API error: {response.status} - {error_text}"
                        )
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamQueryException(f"CDP API request failed: {e}") from e

        rows = self._extract_rows(payload)
        self.logger.debug(f"CDP query returned {len(rows)} rows")
        return rows

    @staticmethod
    def _extract_rows(payload: Any) -> list[dict[str, Any]]:
        """
        Pull the record array out of a response body.

        Parameters
        ----------
        payload : Any
            Decoded JSON body

        Returns
        -------
        list[dict[str, Any]]
            Records that are JSON objects, anything else is dropped
        """
        if isinstance(payload, dict):
            payload = payload.get("data", payload.get("result"))
        if not isinstance(payload, list):
            return []
        return [row for row in payload if isinstance(row, dict)]
