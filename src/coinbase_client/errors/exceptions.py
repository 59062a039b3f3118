"""Structured exceptions for API and request errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from coinbase_client.errors.models import ErrorDetail


class TransportError(Exception):
    """Base exception for non-2xx HTTP results."""

    def __init__(
        self,
        message: str,
        status_code: int,
        messages: list[str] | None = None,
        errors: "list[ErrorDetail] | None" = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.messages = messages if messages is not None else []
        self.errors = errors if errors is not None else []
        self.response = response


class ClientError(TransportError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    pass


class ServerError(TransportError):
    """5xx server errors."""

    pass


class RequestError(Exception):
    """Base exception for requests that fail before or after the HTTP call."""

    pass


class MissingPathArgument(RequestError):
    """Raised when a path template placeholder has no matching argument."""

    def __init__(self, name: str):
        super().__init__(f"missing path argument: {name}")
        self.name = name


class MissingPagination(RequestError):
    """Raised when a list response comes back without a pagination object."""

    def __init__(self, uri: str):
        super().__init__(f"Unexpected result: no pagination object was returned for {uri}")
        self.uri = uri


class UnexpectedOrigin(RequestError):
    """Raised when a server-supplied URI points outside the API base URL."""

    def __init__(self, uri: str, base_url: str):
        super().__init__(f"Refusing to follow {uri}: not under {base_url}")
        self.uri = uri
        self.base_url = base_url
