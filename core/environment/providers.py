from dishka import Provider, Scope, provide
from core.environment.config import Settings


class EnvironmentProvider(Provider):
    """
    Provider for environment configuration.

    Settings are read once per container from the environment and the
    ``.env`` file (``ENV_FILE`` overrides its path).
    """

    component = "environment"
    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """
        Provide application settings.

        Returns
        -------
        Settings
            Application settings instance
        """
        return Settings()
