from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class ValidateTokenRequest(BaseModel):
    """
    Request schema for quick auth token validation.

    Attributes
    ----------
    token : Any
        Quick auth JWT issued by the Farcaster SDK
    """
    token: Any = Field(default=None, description="Quick auth JWT")


class QuickAuthUser(BaseModel):
    """
    Authenticated Farcaster user.

    Only ``fid`` comes from the token; the profile fields are filled from
    the SDK context on the client side.
    """
    fid: int
    username: str | None = None
    display_name: str | None = None
    pfp_url: str | None = None
    custody_address: str | None = None
    verified_addresses: list[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ValidateTokenResponse(BaseModel):
    success: bool = True
    user: QuickAuthUser


class PrimaryAddressResponse(BaseModel):
    """
    Primary Ethereum address of a Farcaster user.

    Attributes
    ----------
    fid : int
        Farcaster user id
    address : str | None
        Lower-cased address, None when the user has none or lookup failed
    """
    fid: int
    address: str | None = None
