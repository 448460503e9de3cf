from .base import RocketAPIConnector
from .instagram import InstagramAPI
from .threads import ThreadsAPI

__all__ = ["InstagramAPI", "RocketAPIConnector", "ThreadsAPI"]
