from __future__ import annotations

from typing import Any

from rocketapi.connectors.base import RocketAPIConnector
from rocketapi.core.domain.payload import Payload


class ThreadsAPI(RocketAPIConnector):
    """
    Threads API client.

    Args:
        token: Your RocketAPI token (https://rocketapi.io/dashboard/)
        max_timeout: Maximum timeout for requests, in seconds. Please, don't use
            values lower than 15 seconds, it may cause problems with API.
        client: Optional ``httpx.AsyncClient`` to reuse between requests.

    For debugging purposes you can use the following properties:
        last_response: the last response from the API.
        counter: the number of requests made in the current session.

    For more information, see documentation: https://docs.rocketapi.io/api/
    """

    namespace = "threads"

    async def search_users(
        self,
        query: str,
        rank_token: str | None = None,
        page_token: str | None = None,
    ) -> Any:
        """
        Search for a specific user in Threads.

        Args:
            query: Username to search for
            rank_token: Rank token returned by the previous page
            page_token: Use for pagination

        For more information, see documentation: https://docs.rocketapi.io/api/threads/search_users
        """
        payload = (
            Payload(query=query)
            .add("rank_token", rank_token)
            .add("page_token", page_token)
        )
        return await self._request("search_users", payload)

    async def get_user_info(self, user_id: int) -> Any:
        """
        Retrieve Threads user information by id.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_info
        """
        return await self._request("user/get_info", Payload(id=user_id))

    async def get_user_feed(self, user_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve Threads user feed by id.

        Args:
            user_id: User id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_feed
        """
        payload = Payload(id=user_id).add("max_id", max_id)
        return await self._request("user/get_feed", payload)

    async def get_user_replies(self, user_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve Threads user replies by id.

        Args:
            user_id: User id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_replies
        """
        payload = Payload(id=user_id).add("max_id", max_id)
        return await self._request("user/get_replies", payload)

    async def get_user_followers(self, user_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve Threads user followers by id.

        Args:
            user_id: User id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through followers (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_followers
        """
        payload = Payload(id=user_id).add("max_id", max_id)
        return await self._request("user/get_followers", payload)

    async def search_user_followers(self, user_id: int, query: str) -> Any:
        """
        Search Threads user followers by user id.

        Args:
            user_id: User id
            query: Search query

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_followers
        """
        return await self._request(
            "user/get_followers", Payload(id=user_id, query=query)
        )

    async def get_user_following(self, user_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve Threads user following by id.

        Args:
            user_id: User id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through following (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_following
        """
        payload = Payload(id=user_id).add("max_id", max_id)
        return await self._request("user/get_following", payload)

    async def search_user_following(self, user_id: int, query: str) -> Any:
        """
        Search Threads user following by user id.

        Args:
            user_id: User id
            query: Search query

        For more information, see documentation: https://docs.rocketapi.io/api/threads/user/get_following
        """
        return await self._request(
            "user/get_following", Payload(id=user_id, query=query)
        )

    async def get_thread_replies(self, thread_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve thread replies by id.

        Args:
            thread_id: Thread id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the replies (take from the `paging_tokens["downwards"]` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/threads/thread/get_replies
        """
        payload = Payload(id=thread_id).add("max_id", max_id)
        return await self._request("thread/get_replies", payload)

    async def get_thread_likes(self, thread_id: int) -> Any:
        """
        Retrieve thread likes by id.

        Args:
            thread_id: Thread id

        For more information, see documentation: https://docs.rocketapi.io/api/threads/thread/get_likes
        """
        return await self._request("thread/get_likes", Payload(id=thread_id))
