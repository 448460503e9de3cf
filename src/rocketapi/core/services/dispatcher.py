from __future__ import annotations

from enum import Enum
from typing import Any

from rocketapi.core.common.exceptions import (
    BadResponseError,
    NotFoundError,
    RequestError,
)
from rocketapi.core.common.logging_utils import get_logger
from rocketapi.core.domain.envelope import ResponseEnvelope
from rocketapi.core.domain.session import SessionState
from rocketapi.core.interfaces.transport_interface import ITransport

logger = get_logger(__name__)


class DispatchOutcome(str, Enum):
    """Terminal outcome of one dispatch."""

    PAYLOAD = "payload"
    NOT_FOUND = "not_found"
    BAD_RESPONSE = "bad_response"
    TRANSPORT_ERROR = "transport_error"


def classify(envelope: ResponseEnvelope) -> DispatchOutcome:
    if not envelope.is_done:
        return DispatchOutcome.BAD_RESPONSE
    if envelope.has_payload:
        return DispatchOutcome.PAYLOAD
    if envelope.is_not_found:
        return DispatchOutcome.NOT_FOUND
    return DispatchOutcome.BAD_RESPONSE


class EnvelopeDispatcher:
    """Sends requests through a transport and unwraps the RocketAPI envelope.

    One dispatcher serves one platform namespace (``instagram``, ``threads``);
    the classification is the same for all of them. Each dispatch either
    returns the payload of a delivered ``200 application/json`` response or
    raises exactly one of ``RequestError``, ``NotFoundError`` or
    ``BadResponseError``.

    The session state is only touched once the transport has returned a
    body, so a failed round trip leaves ``last_response`` and ``counter`` as
    they were.
    """

    def __init__(
        self,
        api: ITransport,
        namespace: str = "",
        session: SessionState | None = None,
    ) -> None:
        self.api = api
        self.namespace = namespace.strip("/")
        self.session = session if session is not None else SessionState()

    def method_path(self, method: str) -> str:
        if not self.namespace:
            return method
        return f"{self.namespace}/{method}"

    async def dispatch(self, method: str, payload: Any) -> Any:
        """Perform one request/classify cycle.

        Args:
            method: Route inside this dispatcher's namespace.
            payload: JSON request body, forwarded unchanged.

        Returns:
            The ``body`` of the nested response (``None`` when absent).

        Raises:
            RequestError: The transport failed.
            NotFoundError: The platform reported 404.
            BadResponseError: Any other unusable envelope.
        """
        path = self.method_path(method)
        try:
            raw = await self.api.request(path, payload)
        except RequestError as e:
            logger.debug(
                "dispatch",
                method=path,
                outcome=DispatchOutcome.TRANSPORT_ERROR.value,
                error=str(e.cause),
            )
            raise

        counter = self.session.record(raw)
        envelope = ResponseEnvelope.from_raw(raw)
        outcome = classify(envelope)
        logger.debug(
            "dispatch",
            method=path,
            counter=counter,
            outcome=outcome.value,
            status=envelope.status,
            status_code=envelope.status_code,
        )

        if outcome is DispatchOutcome.PAYLOAD:
            return envelope.body
        if outcome is DispatchOutcome.NOT_FOUND:
            raise NotFoundError(raw)
        raise BadResponseError(raw)
