"""
Tests for queued cookies on the response builder.
"""

import pytest
from httpresp.core.config.app_config import ResponseConfig
from httpresp.core.domain.cookies import Cookie
from httpresp.core.services.options import with_cookie, with_header
from httpresp.core.services.response import Response
from httpresp.core.transport.recording import RecordingSink


def _set_cookie_lines(sink: RecordingSink) -> list[str]:
    assert sink.committed_headers is not None
    return sink.committed_headers.values("Set-Cookie")


@pytest.mark.asyncio
async def test_set_cookie_allows_duplicates(sink: RecordingSink) -> None:
    response = Response(sink, with_cookie(Cookie(name="a", value="1")))
    response.set_cookie(Cookie(name="a", value="2"))
    await response.no_content()

    assert _set_cookie_lines(sink) == ["a=1", "a=2"]


@pytest.mark.asyncio
async def test_bind_cookie_replaces_same_name(response: Response, sink: RecordingSink) -> None:
    response.set_cookie(Cookie(name="a", value="1"))
    response.set_cookie(Cookie(name="a", value="2"))
    response.set_cookie(Cookie(name="ab", value="keep"))
    response.bind_cookie(Cookie(name="a", value="3"))
    await response.no_content()

    assert _set_cookie_lines(sink) == ["ab=keep", "a=3"]


@pytest.mark.asyncio
async def test_del_cookie_matches_exact_name(sink: RecordingSink) -> None:
    response = Response(
        sink,
        with_cookie(Cookie(name="session", value="1")),
        with_cookie(Cookie(name="session_id", value="2")),
        with_cookie(Cookie(name="session", value="3")),
    )
    response.del_cookie("session")

    assert [cookie.name for cookie in response.cookies] == ["session_id"]

    await response.no_content()

    assert _set_cookie_lines(sink) == ["session_id=2"]


@pytest.mark.asyncio
async def test_del_cookie_filters_raw_set_cookie_lines(sink: RecordingSink) -> None:
    response = Response(
        sink,
        with_header("Set-Cookie", "session=1; Path=/"),
        with_header("Set-Cookie", "session_id=2"),
    )
    response.del_cookie("session")
    await response.no_content()

    assert _set_cookie_lines(sink) == ["session_id=2"]


@pytest.mark.asyncio
async def test_clear_cookies(response: Response, sink: RecordingSink) -> None:
    response.set_cookie(Cookie(name="a"))
    response.add_header("Set-Cookie", "b=1")
    response.clear_cookies()
    await response.no_content()

    assert _set_cookie_lines(sink) == []


@pytest.mark.asyncio
async def test_expired_cookie(response: Response, sink: RecordingSink) -> None:
    response.expired_cookie("session")
    await response.no_content()

    assert _set_cookie_lines(sink) == [
        "session=deleted; Path=/; Expires=Thu, 01 Jan 1970 00:00:00 GMT; Max-Age=0"
    ]


def test_expired_cookie_max_age_follows_config(sink: RecordingSink) -> None:
    response = Response(sink, config=ResponseConfig(expired_cookie_max_age=0))
    response.expired_cookie("session")

    assert response.cookies[0].max_age == 0
    assert response.cookies[0].value == "deleted"


def test_cookies_are_queued_until_commit(response: Response, sink: RecordingSink) -> None:
    response.set_cookie(Cookie(name="a", value="1"))

    assert "Set-Cookie" not in sink.headers
    assert [cookie.name for cookie in response.cookies] == ["a"]


@pytest.mark.asyncio
async def test_clear_headers_drops_queued_cookies(response: Response, sink: RecordingSink) -> None:
    response.set_cookie(Cookie(name="session", value="1"))
    response.clear_headers()
    await response.no_content()

    assert _set_cookie_lines(sink) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["Set-Cookie", "set-cookie", " SET-COOKIE "])
async def test_del_set_cookie_header_drops_queued_cookies(
    response: Response, sink: RecordingSink, key: str
) -> None:
    response.set_cookie(Cookie(name="session", value="1"))
    response.add_header("Set-Cookie", "raw=1")
    response.del_header(key)

    assert response.header_values("Set-Cookie") == []

    await response.no_content()

    assert _set_cookie_lines(sink) == []


@pytest.mark.asyncio
async def test_set_cookie_reader_matches_wire(response: Response, sink: RecordingSink) -> None:
    response.add_header("Set-Cookie", "raw=1")
    response.set_cookie(Cookie(name="session", value="1", http_only=True))

    assert response.header("set-cookie") == "raw=1"
    assert response.header_values("Set-Cookie") == ["raw=1", "session=1; HttpOnly"]

    await response.no_content()

    assert _set_cookie_lines(sink) == ["raw=1", "session=1; HttpOnly"]


def test_queued_cookie_is_visible_through_header(response: Response) -> None:
    response.set_cookie(Cookie(name="a", value="1"))

    assert response.header("Set-Cookie") == "a=1"


@pytest.mark.asyncio
async def test_bind_cookie_replaces_raw_lines(response: Response, sink: RecordingSink) -> None:
    response.add_header("Set-Cookie", "a=raw")
    response.add_header("Set-Cookie", "ab=raw")
    response.bind_cookie(Cookie(name="a", value="bound"))
    await response.no_content()

    assert _set_cookie_lines(sink) == ["ab=raw", "a=bound"]
