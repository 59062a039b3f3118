"""Error handling for the Coinbase client."""

from coinbase_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ForbiddenError,
    MissingPagination,
    MissingPathArgument,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnexpectedOrigin,
    ValidationError,
)
from coinbase_client.errors.handler import raise_for_status
from coinbase_client.errors.models import ErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ErrorDetail",
    "ForbiddenError",
    "MissingPagination",
    "MissingPathArgument",
    "NotFoundError",
    "RateLimitError",
    "RequestError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedOrigin",
    "ValidationError",
    "raise_for_status",
]
