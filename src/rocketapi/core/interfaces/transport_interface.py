from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ITransport(ABC):
    @abstractmethod
    async def request(self, method: str, data: Any) -> Any:
        """Send one request and return the decoded JSON body.

        Implementations raise ``RequestError`` when no body could be obtained.
        """
