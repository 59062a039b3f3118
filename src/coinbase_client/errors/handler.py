"""Error handling utilities for HTTP responses."""

import httpx

from coinbase_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from coinbase_client.errors.models import ErrorDetail


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the Coinbase ``errors`` envelope if present, otherwise falls
    back to the response text for the exception message.

    Args:
        response: HTTP response object

    Raises:
        TransportError subclass based on status code
    """
    if response.is_success:
        return

    errors = ErrorDetail.list_from_response(response)
    messages = [error.message for error in errors if error.message is not None]

    # Map status codes to exceptions
    status_code = response.status_code

    exception_map = {
        400: BadRequestError,
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
        422: ValidationError,
        429: RateLimitError,
    }

    # Determine exception class
    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = TransportError

    # Build error message
    if errors:
        details = "; ".join(error.to_exception_message() for error in errors)
        message = f"HTTP {status_code}: {details}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    raise exc_class(
        message=message,
        status_code=status_code,
        messages=messages,
        errors=errors,
        response=response,
    )
