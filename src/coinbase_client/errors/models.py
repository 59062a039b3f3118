"""Models for the Coinbase error envelope."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorDetail:
    """One entry of the ``errors`` array in a Coinbase error response.

    See: https://developers.coinbase.com/api/v2#errors
    """

    id: str | None = None  # Machine readable error code, e.g. "invalid_token"
    message: str | None = None  # Human-readable message
    url: str | None = None  # Link to documentation, when the API sends one

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorDetail":
        return cls(id=data.get("id"), message=data.get("message"), url=data.get("url"))

    @classmethod
    def list_from_response(cls, response: httpx.Response) -> list["ErrorDetail"]:
        """Parse the ``errors`` array from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            List of ErrorDetail objects; empty if the body is not JSON or
            does not carry an ``errors`` array.
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return []

        if not isinstance(data, dict):
            return []

        errors = data.get("errors")
        if not isinstance(errors, list):
            return []

        return [cls.from_dict(item) for item in errors if isinstance(item, dict)]

    def to_exception_message(self) -> str:
        """Convert the error entry to a single message line."""
        if self.id and self.message:
            return f"{self.id}: {self.message}"
        return self.message or self.id or "Unknown API error"
