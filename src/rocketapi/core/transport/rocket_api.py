from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from rocketapi.core.common.exceptions import RequestError
from rocketapi.core.common.logging_utils import redact
from rocketapi.core.config.client_config import ClientConfig
from rocketapi.core.interfaces.transport_interface import ITransport

logger = logging.getLogger(__name__)


class RocketAPI(ITransport):
    """HTTP transport for the RocketAPI service.

    Performs one authenticated ``POST <base_url><method>`` per call and
    returns the decoded JSON body, whatever the HTTP status of the response.
    Interpreting that body is left to the dispatcher.

    A caller-owned ``httpx.AsyncClient`` may be supplied to reuse
    connections; otherwise a short-lived client is opened for every request.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.client = client

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Token {self.config.token}",
        }

    async def _post(self, url: str, data: Any) -> httpx.Response:
        timeout = httpx.Timeout(self.config.max_timeout)
        if self.client is not None:
            return await self.client.post(
                url, json=data, headers=self.get_headers(), timeout=timeout
            )
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.post(url, json=data, headers=self.get_headers())

    async def request(self, method: str, data: Any) -> Any:
        """Send ``data`` to ``method`` and return the decoded response body.

        Args:
            method: Route appended verbatim to the base URL,
                e.g. ``instagram/user/get_info``.
            data: JSON-serializable request body.

        Returns:
            The parsed JSON document.

        Raises:
            RequestError: On timeout, any network or protocol failure, or a
                response body that is not JSON.
        """
        url = f"{self.base_url}{method}"
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "RocketAPI POST %s (token=%s)", url, redact(self.config.token)
            )

        try:
            # wait_for bounds the whole cycle, httpx.Timeout only each phase
            response = await asyncio.wait_for(
                self._post(url, data), timeout=self.config.max_timeout
            )
        except asyncio.TimeoutError as e:
            raise RequestError(
                e,
                message=f"RequestError: no response within {self.config.max_timeout}s",
            ) from e
        except httpx.HTTPError as e:
            raise RequestError(e) from e

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(
                e,
                message=f"RequestError: response body is not valid JSON ({e})",
                details={"http_status": response.status_code},
            ) from e
