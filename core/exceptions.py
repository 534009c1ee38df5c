from abc import ABC


class BaseCustomException(Exception, ABC):
    """
    Base class for all custom exceptions.

    Parameters
    ----------
    message : str | None
        Error message, the class default when omitted
    detail : str | None
        Optional extra detail returned alongside the message
    """

    def __init__(self, message: str | None = None, detail: str | None = None):
        self.message = message or self.get_default_message()
        self.detail = detail
        super().__init__(self.message)

    def get_default_message(self) -> str:
        """
        Return default error message.

        Returns
        -------
        str
            Default error message
        """
        return "error.unknown"

    def get_status_code(self) -> int:
        """
        Return HTTP status code for exception.

        Returns
        -------
        int
            HTTP status code
        """
        return 500


class BadRequestException(BaseCustomException):
    """Bad request exception (400)."""

    def get_status_code(self) -> int:
        return 400


class UnauthorizedException(BaseCustomException):
    """Unauthorized exception (401)."""

    def get_status_code(self) -> int:
        return 401


class InvalidAddressException(BadRequestException):
    """Invalid address exception."""

    def get_default_message(self) -> str:
        return "Invalid Ethereum address format"


class InvalidQueryException(BadRequestException):
    """Missing or malformed SQL query."""

    def get_default_message(self) -> str:
        return "SQL query is required"


class MissingTokenException(BadRequestException):
    """Quick auth token was not supplied."""

    def get_default_message(self) -> str:
        return "Token is required"


class AuthException(UnauthorizedException):
    """Quick auth token is expired, malformed or failed verification."""

    def get_default_message(self) -> str:
        return "Invalid token"


class UpstreamQueryException(BaseCustomException):
    """Warehouse query failed or returned a non-success shape."""

    def get_default_message(self) -> str:
        return "Failed to execute query"


class ConfigurationException(BaseCustomException):
    """
    Server-side configuration is missing.

    The message carries the detail for the logs; handlers never return it.
    """

    public_message = "Server configuration error. Please contact support."

    def get_default_message(self) -> str:
        return "CDP API credentials not configured"
