from typing import Any

import pytest
from pytest_httpx import HTTPXMock
from rocketapi import BadResponseError, InstagramAPI, ThreadsAPI

from tests.mocks.rocketapi_mocks import (
    ROCKETAPI_URL,
    TEST_TOKEN,
    StubTransport,
    make_envelope,
)


@pytest.fixture
def threads(stub_transport: StubTransport) -> ThreadsAPI:
    client = ThreadsAPI(token=TEST_TOKEN)
    client._dispatcher.api = stub_transport
    return client


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("call", "method", "payload"),
    [
        (lambda c: c.search_users("zuck"), "threads/search_users", {"query": "zuck"}),
        (
            lambda c: c.search_users("zuck", rank_token="rt", page_token="pt"),
            "threads/search_users",
            {"query": "zuck", "rank_token": "rt", "page_token": "pt"},
        ),
        (
            lambda c: c.search_users("zuck", page_token="pt"),
            "threads/search_users",
            {"query": "zuck", "page_token": "pt"},
        ),
        (lambda c: c.get_user_info(314216), "threads/user/get_info", {"id": 314216}),
        (lambda c: c.get_user_feed(314216), "threads/user/get_feed", {"id": 314216}),
        (lambda c: c.get_user_feed(314216, max_id="f"), "threads/user/get_feed", {"id": 314216, "max_id": "f"}),
        (lambda c: c.get_user_replies(314216), "threads/user/get_replies", {"id": 314216}),
        (lambda c: c.get_user_followers(314216, max_id="n"), "threads/user/get_followers", {"id": 314216, "max_id": "n"}),
        (lambda c: c.search_user_followers(314216, "al"), "threads/user/get_followers", {"id": 314216, "query": "al"}),
        (lambda c: c.get_user_following(314216), "threads/user/get_following", {"id": 314216}),
        (lambda c: c.search_user_following(314216, "al"), "threads/user/get_following", {"id": 314216, "query": "al"}),
        (lambda c: c.get_thread_replies(1), "threads/thread/get_replies", {"id": 1}),
        (lambda c: c.get_thread_likes(1), "threads/thread/get_likes", {"id": 1}),
    ],
)
async def test_operation_builds_expected_request(
    threads: ThreadsAPI,
    stub_transport: StubTransport,
    call: Any,
    method: str,
    payload: dict[str, Any],
) -> None:
    stub_transport.queue(make_envelope(body={"ok": True}))

    assert await call(threads) == {"ok": True}
    assert stub_transport.calls == [(method, payload)]


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_bad_response_end_to_end(httpx_mock: HTTPXMock) -> None:
    envelope = make_envelope(status_code=500, content_type="text/html")
    httpx_mock.add_response(
        url=f"{ROCKETAPI_URL}threads/thread/get_likes", method="POST", json=envelope
    )
    threads = ThreadsAPI(token=TEST_TOKEN)

    with pytest.raises(BadResponseError) as exc_info:
        await threads.get_thread_likes(1)

    assert exc_info.value.response == envelope
    assert threads.last_response == envelope
    assert threads.counter == 1


@pytest.mark.asyncio
async def test_platform_clients_keep_separate_sessions() -> None:
    instagram = InstagramAPI(token=TEST_TOKEN)
    threads = ThreadsAPI(token=TEST_TOKEN)
    instagram._dispatcher.api = StubTransport(make_envelope(body={}))
    threads._dispatcher.api = StubTransport()

    await instagram.search("x")

    assert instagram.counter == 1
    assert threads.counter == 0
    assert threads.last_response is None
