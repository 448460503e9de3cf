from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DONE_STATUS = "done"
JSON_CONTENT_TYPE = "application/json"


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


@dataclass(frozen=True)
class ResponseEnvelope:
    """Structural view of the two-layer RocketAPI response.

    The outer ``status`` tells whether the proxy delivered the call; the
    nested ``response`` object mirrors what the upstream platform returned.
    Fields that are missing or have the wrong type are coerced to zero values
    so that any JSON document can be inspected without raising.
    """

    raw: Any
    status: str
    status_code: int
    content_type: str
    body: Any

    @classmethod
    def from_raw(cls, raw: Any) -> ResponseEnvelope:
        outer = raw if isinstance(raw, dict) else {}
        inner = outer.get("response")
        if not isinstance(inner, dict):
            inner = {}
        return cls(
            raw=raw,
            status=_as_str(outer.get("status")),
            status_code=_as_int(inner.get("status_code")),
            content_type=_as_str(inner.get("content_type")),
            body=inner.get("body"),
        )

    @property
    def is_done(self) -> bool:
        return self.status == DONE_STATUS

    @property
    def has_payload(self) -> bool:
        """True only for a delivered 200 JSON response."""
        return (
            self.is_done
            and self.status_code == 200
            and self.content_type == JSON_CONTENT_TYPE
        )

    @property
    def is_not_found(self) -> bool:
        return self.is_done and self.status_code == 404
