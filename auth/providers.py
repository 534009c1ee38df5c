import logging
from typing import Annotated
from dishka import Provider, Scope, provide, FromComponent
from core.environment.config import Settings
from auth.services import QuickAuthService, FarcasterService


class AuthProvider(Provider):
    """
    Provider for authentication services.
    """

    component = "auth"
    scope = Scope.APP

    @provide
    def get_quick_auth_service(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> QuickAuthService:
        """
        Provide quick auth token validation service.

        Parameters
        ----------
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        QuickAuthService
            Token validation service
        """
        return QuickAuthService(settings=settings, logger=logger)

    @provide
    def get_farcaster_service(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> FarcasterService:
        return FarcasterService(settings=settings, logger=logger)
