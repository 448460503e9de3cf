from __future__ import annotations

import threading
from typing import Any


class SessionState:
    """Diagnostic state of one client session.

    Holds the last raw response received from the API and the number of
    requests that completed a transport round trip. Neither value drives
    control flow. Both are updated together under a lock so a client shared
    between tasks or threads never reports a counter and a response that
    belong to different calls.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_response: Any = None
        self._counter: int = 0

    @property
    def last_response(self) -> Any:
        return self._last_response

    @property
    def counter(self) -> int:
        return self._counter

    def record(self, response: Any) -> int:
        """Store a received response and return the updated counter."""
        with self._lock:
            self._last_response = response
            self._counter += 1
            return self._counter

    def snapshot(self) -> tuple[Any, int]:
        with self._lock:
            return self._last_response, self._counter
