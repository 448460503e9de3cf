from __future__ import annotations

import abc
from typing import Any

import httpx

from rocketapi.core.config.client_config import DEFAULT_MAX_TIMEOUT, ClientConfig
from rocketapi.core.domain.session import SessionState
from rocketapi.core.services.dispatcher import EnvelopeDispatcher
from rocketapi.core.transport.rocket_api import RocketAPI


class RocketAPIConnector(abc.ABC):
    """
    Abstract base class for RocketAPI platform clients.

    Subclasses only declare their ``namespace`` and build request payloads;
    transport and response classification are shared.
    """

    namespace: str

    def __init__(
        self,
        token: str,
        max_timeout: float = DEFAULT_MAX_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = ClientConfig(token=token, max_timeout=max_timeout)
        self.api = RocketAPI(self.config, client=client)
        self._session = SessionState()
        self._dispatcher = EnvelopeDispatcher(
            self.api, namespace=self.namespace, session=self._session
        )

    @property
    def last_response(self) -> Any:
        """The last raw response received from the API (debugging only)."""
        return self._session.last_response

    @property
    def counter(self) -> int:
        """Number of requests that got a response in this session."""
        return self._session.counter

    async def _request(self, method: str, payload: dict[str, Any]) -> Any:
        return await self._dispatcher.dispatch(method, payload)
