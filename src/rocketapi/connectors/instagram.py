from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rocketapi.connectors.base import RocketAPIConnector
from rocketapi.core.domain.payload import Payload


class InstagramAPI(RocketAPIConnector):
    """
    Instagram API client.

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

    namespace = "instagram"

    async def search(self, query: str) -> Any:
        """
        Search for a specific user, hashtag or place.

        Args:
            query: The search query

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/search
        """
        return await self._request("search", Payload(query=query))

    async def get_user_info(self, username: str) -> Any:
        """
        Retrieve user information by username.

        Args:
            username: Username

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_info
        """
        return await self._request("user/get_info", Payload(username=username))

    async def get_user_info_by_id(self, user_id: int) -> Any:
        """
        Retrieve user information by id.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_info_by_id
        """
        return await self._request("user/get_info_by_id", Payload(id=user_id))

    async def get_user_media(
        self, user_id: int, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve user media by id.

        Args:
            user_id: User id
            count: Number of media to retrieve (max: 50)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_media
        """
        payload = Payload(id=user_id, count=count).add("max_id", max_id)
        return await self._request("user/get_media", payload)

    async def get_user_clips(
        self, user_id: int, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve user clips (videos from "Reels" section) by id.

        Args:
            user_id: User id
            count: Number of media to retrieve (max: 50)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `max_id` (!) field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_clips
        """
        payload = Payload(id=user_id, count=count).add("max_id", max_id)
        return await self._request("user/get_clips", payload)

    async def get_user_guides(self, user_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve user guides by id.

        Args:
            user_id: User id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_guides
        """
        payload = Payload(id=user_id).add("max_id", max_id)
        return await self._request("user/get_guides", payload)

    async def get_user_tags(
        self, user_id: int, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve user tags by id.

        Args:
            user_id: User id
            count: Number of media to retrieve (max: 50)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through the media (take from the `end_cursor` (!) field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_tags
        """
        payload = Payload(id=user_id, count=count).add("max_id", max_id)
        return await self._request("user/get_tags", payload)

    async def get_user_following(
        self, user_id: int, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve user following by user id.

        Args:
            user_id: User id
            count: Number of users to return (max: 200)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through following (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_following
        """
        payload = Payload(id=user_id, count=count).add("max_id", max_id)
        return await self._request("user/get_following", payload)

    async def search_user_following(self, user_id: int, query: str) -> Any:
        """
        Search user following by user id.

        Args:
            user_id: User id
            query: Search query

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_following
        """
        return await self._request(
            "user/get_following", Payload(id=user_id, query=query)
        )

    async def get_user_followers(
        self, user_id: int, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve user followers by user id.

        Args:
            user_id: User id
            count: Number of users to return (max: 100)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through followers (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_followers
        """
        payload = Payload(id=user_id, count=count).add("max_id", max_id)
        return await self._request("user/get_followers", payload)

    async def search_user_followers(self, user_id: int, query: str) -> Any:
        """
        Search user followers by user id.

        Args:
            user_id: User id
            query: Search query

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_followers
        """
        return await self._request(
            "user/get_followers", Payload(id=user_id, query=query)
        )

    async def get_user_stories_bulk(self, user_ids: Iterable[int]) -> Any:
        """
        Retrieve user(s) stories by user id(s).
        You can retrieve up to 4 user ids per request.

        Args:
            user_ids: List of user ids

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_stories
        """
        return await self._request("user/get_stories", Payload(ids=list(user_ids)))

    async def get_user_stories(self, user_id: int) -> Any:
        """
        Retrieve user stories by user id.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_stories
        """
        return await self.get_user_stories_bulk([user_id])

    async def get_user_highlights(self, user_id: int) -> Any:
        """
        Retrieve user highlights by user id.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_highlights
        """
        return await self._request("user/get_highlights", Payload(id=user_id))

    async def get_user_live(self, user_id: int) -> Any:
        """
        Retrieve user live broadcast by id.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_live
        """
        return await self._request("user/get_live", Payload(id=user_id))

    async def get_user_similar_accounts(self, user_id: int) -> Any:
        """
        Lookup for user similar accounts by id.
        Typically, up to 80 accounts will be returned.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_similar_accounts
        """
        return await self._request("user/get_similar_accounts", Payload(id=user_id))

    async def get_user_about(self, user_id: int) -> Any:
        """
        Obtain user details from «About this Account» section.

        This method is exclusively available to Enterprise+ clients; contact
        RocketAPI support to enable it for your account.

        Args:
            user_id: User id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/user/get_about
        """
        return await self._request("user/get_about", Payload(id=user_id))

    async def get_media_info(self, media_id: int) -> Any:
        """
        Retrieve media information by media id.

        Args:
            media_id: Media id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_info
        """
        return await self._request("media/get_info", Payload(id=media_id))

    async def get_media_info_by_shortcode(self, shortcode: str) -> Any:
        """
        Retrieve media information by media shortcode.
        This method provides the same information as the `get_media_info`.

        Args:
            shortcode: Media shortcode

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_info_by_shortcode
        """
        return await self._request(
            "media/get_info_by_shortcode", Payload(shortcode=shortcode)
        )

    async def get_media_likes(
        self, shortcode: str, count: int = 12, max_id: str | None = None
    ) -> Any:
        """
        Retrieve media likes by media shortcode.

        Args:
            shortcode: Media shortcode
            count: Number of likers to return (max: 50)
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through likers (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_likes
        """
        payload = Payload(shortcode=shortcode, count=count).add("max_id", max_id)
        return await self._request("media/get_likes", payload)

    async def get_media_comments(
        self,
        media_id: int,
        can_support_threading: bool = True,
        min_id: str | None = None,
    ) -> Any:
        """
        Retrieve media comments by media id.

        Args:
            media_id: Media id
            can_support_threading: Set `False` if you want chronological order
            min_id: Use for pagination

        You can use the `min_id` parameter to paginate through comments (take from the `next_min_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_comments
        """
        payload = Payload(
            media_id=media_id, can_support_threading=can_support_threading
        ).add("min_id", min_id)
        return await self._request("media/get_comments", payload)

    async def get_media_shortcode_by_id(self, media_id: int) -> Any:
        """
        Get media shortcode by media id. This endpoint is provided free of charge.

        Args:
            media_id: Media id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_shortcode_by_id
        """
        return await self._request("media/get_shortcode_by_id", Payload(id=media_id))

    async def get_media_id_by_shortcode(self, shortcode: str) -> Any:
        """
        Get media id by media shortcode. This endpoint is provided free of charge.

        Args:
            shortcode: Media shortcode

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/media/get_id_by_shortcode
        """
        return await self._request(
            "media/get_id_by_shortcode", Payload(shortcode=shortcode)
        )

    async def get_guide_info(self, guide_id: int) -> Any:
        """
        Retrieve guide information by guide id.

        Args:
            guide_id: Guide id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/guide/get_info
        """
        return await self._request("guide/get_info", Payload(id=guide_id))

    async def get_location_info(self, location_id: int) -> Any:
        """
        Retrieve location information by location id.

        Args:
            location_id: Location id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/location/get_info
        """
        return await self._request("location/get_info", Payload(id=location_id))

    async def get_location_media(
        self, location_id: int, page: int | None = None, max_id: str | None = None
    ) -> Any:
        """
        Retrieve location media by location id.

        Args:
            location_id: Location id
            page: Page number
            max_id: Use for pagination

        In order to use pagination, you need to use both the `max_id` and `page` parameters. You can obtain these values from the response's `next_page` and `next_max_id` fields.

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/location/get_media
        """
        payload = Payload(id=location_id).add("page", page).add("max_id", max_id)
        return await self._request("location/get_media", payload)

    async def get_hashtag_info(self, name: str) -> Any:
        """
        Retrieve hashtag information by hashtag name.

        Args:
            name: Hashtag name

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/hashtag/get_info
        """
        return await self._request("hashtag/get_info", Payload(name=name))

    async def get_hashtag_media(
        self, name: str, page: int | None = None, max_id: str | None = None
    ) -> Any:
        """
        Retrieve hashtag media by hashtag name.

        Args:
            name: Hashtag name
            page: Page number
            max_id: Use for pagination

        In order to use pagination, you need to use both the `max_id` and `page` parameters. You can obtain these values from the response's `next_page` and `next_max_id` fields.

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/hashtag/get_media
        """
        payload = Payload(name=name).add("page", page).add("max_id", max_id)
        return await self._request("hashtag/get_media", payload)

    async def get_highlight_stories_bulk(self, highlight_ids: Iterable[int]) -> Any:
        """
        Retrieve highlight(s) stories by highlight id(s).

        Args:
            highlight_ids: Highlight id(s)

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/highlight/get_stories
        """
        return await self._request(
            "highlight/get_stories", Payload(ids=list(highlight_ids))
        )

    async def get_highlight_stories(self, highlight_id: int) -> Any:
        """
        Retrieve highlight stories by highlight id.

        Args:
            highlight_id: Highlight id

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/highlight/get_stories
        """
        return await self.get_highlight_stories_bulk([highlight_id])

    async def get_comment_likes(self, comment_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve comment likes by comment id.

        Args:
            comment_id: Comment id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through likes (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/comment/get_likes
        """
        payload = Payload(id=comment_id).add("max_id", max_id)
        return await self._request("comment/get_likes", payload)

    async def get_comment_replies(
        self, comment_id: int, media_id: int, max_id: str | None = None
    ) -> Any:
        """
        Retrieve comment replies by comment id and media id.

        Args:
            comment_id: Comment id
            media_id: Media id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through replies (take from the `next_max_child_cursor` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/comment/get_replies
        """
        payload = Payload(id=comment_id, media_id=media_id).add("max_id", max_id)
        return await self._request("comment/get_replies", payload)

    async def get_audio_media(self, audio_id: int, max_id: str | None = None) -> Any:
        """
        Retrieve audio media by audio id.

        Args:
            audio_id: Audio id
            max_id: Use for pagination

        You can use the `max_id` parameter to paginate through media (take from the `next_max_id` field of the response).

        For more information, see documentation: https://docs.rocketapi.io/api/instagram/audio/get_media
        """
        payload = Payload(id=audio_id).add("max_id", max_id)
        return await self._request("audio/get_media", payload)
