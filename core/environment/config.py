import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings using Pydantic Settings.

    Attributes
    ----------
    redis_host : str
        Redis host for the query response cache
    redis_port : int
        Redis port
    redis_db : int
        Redis database number
    redis_password : str
        Redis password (optional)
    cdp_api_key_name : str
        CDP API key name, used as the bearer token subject
    cdp_api_secret : str
        CDP API private key in PEM format
    cdp_api_url : str
        CDP SQL API endpoint
    farcaster_api_url : str
        Farcaster API base URL for primary address lookups
    auth_domain : str
        Expected audience of quick auth tokens (empty disables the check)
    query_cache_ttl : int
        Freshness window of cached query results in seconds
    query_retries : int
        How many times a failed warehouse query is retried
    log_level : str
        Root logging level
    """

    redis_host: str
    redis_port: int
    redis_db: int
    redis_password: str

    cdp_api_key_name: str = ""
    cdp_api_secret: str = ""
    cdp_api_url: str = "https://api.cdp.coinbase.com/platform/v2/data/query/run"

    farcaster_api_url: str = "https://api.farcaster.xyz"
    auth_domain: str = ""

    query_cache_ttl: int = 60
    query_retries: int = 1

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    def has_cdp_credentials(self) -> bool:
        """
        Check whether both CDP credentials are configured.

        Returns
        -------
        bool
            True if key name and secret are set
        """
        return bool(self.cdp_api_key_name and self.cdp_api_secret)
