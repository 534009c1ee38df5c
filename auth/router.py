from fastapi import APIRouter, Path
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated
from auth.schemas import ValidateTokenRequest, ValidateTokenResponse, PrimaryAddressResponse
from auth.services import QuickAuthService, FarcasterService

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"]
)


@router.post("/validate", response_model=ValidateTokenResponse)
@inject
async def validate_token(
    request: ValidateTokenRequest,
    auth_service: Annotated[
        QuickAuthService, FromComponent("auth")
    ]
) -> ValidateTokenResponse:
    """
    Validate a quick auth token and return the user it belongs to.

    Parameters
    ----------
    request : ValidateTokenRequest
        Request with the token
    auth_service : QuickAuthService
        Token validation service

    Returns
    -------
    ValidateTokenResponse
        Success flag and user FID
    """
    user = auth_service.validate(request.token)
    return ValidateTokenResponse(user=user)


@router.get("/primary-address/{fid}", response_model=PrimaryAddressResponse)
@inject
async def get_primary_address(
    fid: Annotated[int, Path(gt=0)],
    farcaster_service: Annotated[
        FarcasterService, FromComponent("auth")
    ]
) -> PrimaryAddressResponse:
    """
    Resolve the primary Ethereum address of a Farcaster user.

    Parameters
    ----------
    fid : int
        Farcaster user id
    farcaster_service : FarcasterService
        Farcaster API service

    Returns
    -------
    PrimaryAddressResponse
        FID and address (None when unknown)
    """
    address = await farcaster_service.get_primary_address(fid)
    return PrimaryAddressResponse(fid=fid, address=address)
