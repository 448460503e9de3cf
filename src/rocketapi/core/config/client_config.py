from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ROCKETAPI_BASE_URL = "https://v1.rocketapi.io/"
DEFAULT_MAX_TIMEOUT = 30.0  # seconds


class ClientConfig(BaseModel):
    """Connection settings shared by one RocketAPI transport.

    Immutable once built. The base URL is fixed and not part of the model
    fields, so it cannot be overridden by callers.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(description="RocketAPI token (https://rocketapi.io/dashboard/)")
    max_timeout: float = Field(
        default=DEFAULT_MAX_TIMEOUT,
        description="Timeout in seconds for the whole request/response cycle.",
    )

    @property
    def base_url(self) -> str:
        return ROCKETAPI_BASE_URL

    def __repr__(self) -> str:
        # Never echo the token
        return f"<ClientConfig base_url={self.base_url!r} max_timeout={self.max_timeout}>"
