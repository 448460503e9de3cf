"""
Common exception classes for the RocketAPI client.

Every failed dispatch surfaces exactly one of these errors:

- ``RequestError``: the transport never produced an interpretable envelope
  (network fault, timeout, body that is not JSON).
- ``NotFoundError``: a well-formed ``done`` envelope reported status 404.
- ``BadResponseError``: any other envelope that carries no usable payload.
"""

from __future__ import annotations

from typing import Any

from rocketapi.core.domain.envelope import ResponseEnvelope


class RocketAPIError(Exception):
    """Base exception class for all RocketAPI client errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args", "cause"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class RequestError(RocketAPIError):
    """Raised when the HTTP round trip itself fails."""

    def __init__(
        self,
        cause: BaseException,
        message: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            message or f"RequestError: {cause}",
            details,
        )
        self.cause = cause


class ResponseError(RocketAPIError):
    """An envelope was received but it carries no usable payload."""

    label = "ResponseError"

    def __init__(
        self,
        response: Any,
        message: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message or f"{self.label}: {response}", details)
        self.response = response

    @property
    def status_code(self) -> int | None:
        """Inner status code reported by the provider, if any."""
        return ResponseEnvelope.from_raw(self.response).status_code or None


class NotFoundError(ResponseError):
    """Raised when the provider reports that the resource does not exist."""

    label = "NotFound"


class BadResponseError(ResponseError):
    """Raised for every other unusable envelope."""

    label = "BadResponse"
