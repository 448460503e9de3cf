"""
Logging utilities for the RocketAPI client.

This module provides:
- Structured logger access
- Redaction of the RocketAPI token in log output
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Events are rendered as ``key=value`` text and handed to the stdlib logger
    of the same name, so level filtering, handlers and the redaction filter
    below stay under the application's ``logging`` configuration.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value.

    Args:
        value: The value to redact
        mask: The mask to use

    Returns:
        The redacted value
    """
    if not value:
        return value

    # Keep first and last two characters
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    else:
        return mask


class ApiKeyRedactionFilter(logging.Filter):
    """Logging filter that redacts known API tokens from log records.

    This filter will sanitize `record.msg` and `record.args` (if they are
    strings or containers of strings) replacing any token occurrences with a
    mask.
    """

    def __init__(self, api_keys: Iterable[str] | None = None, mask: str = "***") -> None:
        super().__init__()
        self.mask = mask
        self.api_keys = {k for k in (api_keys or []) if k}

    def add_key(self, api_key: str) -> None:
        if api_key:
            self.api_keys.add(api_key)

    def _sanitize(self, value: object) -> object:
        if isinstance(value, str):
            for key in self.api_keys:
                if key in value:
                    value = value.replace(key, self.mask)
            return value
        if isinstance(value, tuple):
            return tuple(self._sanitize(v) for v in value)
        if isinstance(value, list):
            return [self._sanitize(v) for v in value]
        if isinstance(value, dict):
            return {k: self._sanitize(v) for k, v in value.items()}
        return value

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not self.api_keys:
            return True
        record.msg = self._sanitize(record.msg)
        if record.args:
            record.args = self._sanitize(record.args)  # type: ignore[assignment]
        return True


def install_api_key_redaction_filter(
    api_keys: Iterable[str] | str,
    logger: logging.Logger | None = None,
    mask: str = "***",
) -> ApiKeyRedactionFilter:
    """Attach (or extend) an ApiKeyRedactionFilter on a logger's handlers.

    Args:
        api_keys: A token or an iterable of tokens to mask
        logger: Target logger; the root logger when omitted
        mask: The mask to use

    Returns:
        The filter that now guards the logger
    """
    if isinstance(api_keys, str):
        api_keys = [api_keys]
    target = logger or logging.getLogger()

    existing = next(
        (f for f in target.filters if isinstance(f, ApiKeyRedactionFilter)), None
    )
    if existing is None:
        existing = ApiKeyRedactionFilter(api_keys, mask=mask)
        target.addFilter(existing)
    else:
        for key in api_keys:
            existing.add_key(key)

    for handler in target.handlers:
        if existing not in handler.filters:
            handler.addFilter(existing)

    return existing
