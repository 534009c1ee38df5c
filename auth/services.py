import asyncio
import logging

import aiohttp
import jwt

from auth.schemas import QuickAuthUser
from core.environment.config import Settings
from core.exceptions import AuthException, MissingTokenException
from wallet.addresses import is_valid_address, normalize_address


class QuickAuthService:
    """
    Validates quick auth tokens issued by the Farcaster SDK.

    The token payload carries the FID in ``sub``, the expiry in ``exp`` and
    the app domain in ``aud``. Signatures are not verified here.

    Parameters
    ----------
    settings : Settings
        Application settings (expected audience)
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, settings: Settings, logger: logging.Logger):
        self.settings = settings
        self.logger = logger

    def validate(self, token: object) -> QuickAuthUser:
        """
        Decode a token and return the user it was issued for.

        Parameters
        ----------
        token : object
            Raw token from the request body

        Returns
        -------
        QuickAuthUser
            User with ``fid`` taken from the token subject

        Raises
        ------
        MissingTokenException
            If no token string was supplied
        AuthException
            If the token is malformed, expired or issued for another domain
        """
        if not token or not isinstance(token, str):
            raise MissingTokenException()

        domain = self.settings.auth_domain or None
        try:
            payload = jwt.decode(
                token,
                options={
                    "verify_signature": False,
                    "verify_exp": True,
                    "verify_aud": domain is not None,
                },
                audience=domain,
            )
        except jwt.ExpiredSignatureError as e:
            self.logger.info(f"Token validation error: {e}")
            raise AuthException(detail="Token expired") from e
        except jwt.InvalidAudienceError as e:
            self.logger.info(f"Token validation error: {e}")
            raise AuthException(detail="Token audience mismatch") from e
        except jwt.PyJWTError as e:
            self.logger.info(f"Token validation error: {e}")
            raise AuthException(detail="Failed to decode token") from e

        fid = payload.get("sub")
        if isinstance(fid, str) and fid.isdigit():
            fid = int(fid)
        if not isinstance(fid, int) or isinstance(fid, bool):
            raise AuthException(detail="Token has no FID")

        return QuickAuthUser(fid=fid)


class FarcasterService:
    """
    Looks up a user's primary Ethereum address on the Farcaster API.

    Parameters
    ----------
    settings : Settings
        Application settings (API base URL)
    logger : logging.Logger
        Logger instance
    """

    REQUEST_TIMEOUT = 10

    def __init__(self, settings: Settings, logger: logging.Logger):
        self.settings = settings
        self.logger = logger

    async def get_primary_address(self, fid: int) -> str | None:
        """
        Get the primary address for a FID.

        A missing address or a failed lookup both return None, the user can
        then enter an address manually.

        Parameters
        ----------
        fid : int
            Farcaster user id

        Returns
        -------
        str | None
            Lower-cased address or None
        """
        url = f"{self.settings.farcaster_api_url}/fc/primary-address"
        params = {"fid": str(fid), "protocol": "ethereum"}
        timeout = aiohttp.ClientTimeout(total=self.REQUEST_TIMEOUT)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params) as response:
                    if response.status != 200:
                        self.logger.info(f"Primary address lookup for fid {fid} returned {response.status}")
                        return None
                    data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self.logger.info(f"Could not fetch primary address for fid {fid}: {e}")
            return None

        address = None
        if isinstance(data, dict):
            result = data.get("result") or {}
            entry = result.get("address") if isinstance(result, dict) else None
            address = entry.get("address") if isinstance(entry, dict) else None

        if not is_valid_address(address):
            return None
        return normalize_address(address)
