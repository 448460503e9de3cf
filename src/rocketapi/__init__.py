"""Async client for the RocketAPI Instagram and Threads proxy."""

from rocketapi.connectors.instagram import InstagramAPI
from rocketapi.connectors.threads import ThreadsAPI
from rocketapi.core.common.exceptions import (
    BadResponseError,
    NotFoundError,
    RequestError,
    ResponseError,
    RocketAPIError,
)
from rocketapi.core.config.client_config import ClientConfig
from rocketapi.core.transport.rocket_api import RocketAPI

__all__ = [
    "BadResponseError",
    "ClientConfig",
    "InstagramAPI",
    "NotFoundError",
    "RequestError",
    "ResponseError",
    "RocketAPI",
    "RocketAPIError",
    "ThreadsAPI",
]
