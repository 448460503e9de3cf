from __future__ import annotations

from typing import Any


class Payload(dict[str, Any]):
    """Request body builder.

    Starts from the required fields and only inserts optional keys that have
    a value: the API treats a missing key and an explicit ``null``
    differently when applying its defaults.

    >>> Payload(id=1).add("max_id", None).add("count", 12)
    {'id': 1, 'count': 12}
    """

    def add(self, key: str, value: Any) -> Payload:
        if value is not None:
            self[key] = value
        return self
