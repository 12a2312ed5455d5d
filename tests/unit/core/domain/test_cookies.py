"""
Tests for Set-Cookie serialization and the cookie queue.
"""

from datetime import datetime, timezone

import pytest
from httpresp.core.domain.cookies import Cookie, CookieStore, SameSite, cookie_name_of
from pydantic import ValidationError


class TestCookieSerialization:
    def test_minimal_cookie(self) -> None:
        assert Cookie(name="id", value="42").to_header_value() == "id=42"

    def test_attribute_order(self) -> None:
        cookie = Cookie(
            name="session",
            value="abc",
            path="/app",
            domain=".example.com",
            expires=datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            max_age=3600,
            secure=True,
            http_only=True,
            same_site=SameSite.LAX,
            partitioned=True,
        )

        assert cookie.to_header_value() == (
            "session=abc; Path=/app; Domain=example.com; "
            "Expires=Wed, 02 Jan 2030 03:04:05 GMT; Max-Age=3600; "
            "HttpOnly; Secure; SameSite=Lax; Partitioned"
        )

    def test_negative_max_age_is_sent_as_zero(self) -> None:
        assert Cookie(name="a", max_age=-1).to_header_value() == "a=; Max-Age=0"

    def test_values_with_space_or_comma_are_quoted(self) -> None:
        assert Cookie(name="a", value="x y").to_header_value() == 'a="x y"'
        assert Cookie(name="a", value="x,y").to_header_value() == 'a="x,y"'

    def test_control_characters_are_dropped(self) -> None:
        assert Cookie(name="a", value='b";\nc').to_header_value() == "a=bc"

    @pytest.mark.parametrize("name", ["", "has space", "semi;colon", "equals="])
    def test_invalid_names_are_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError):
            Cookie(name=name)


class TestCookieNameOf:
    def test_parses_token_before_equals(self) -> None:
        assert cookie_name_of("session_id=1; Path=/") == "session_id"
        assert cookie_name_of(" session =1") == "session"
        assert cookie_name_of("flag") == "flag"


class TestCookieStore:
    def test_append_allows_duplicates(self) -> None:
        store = CookieStore()
        store.append(Cookie(name="a", value="1"))
        store.append(Cookie(name="a", value="2"))

        assert store.names() == ["a", "a"]

    def test_upsert_keeps_one_per_name(self) -> None:
        store = CookieStore([Cookie(name="a", value="1"), Cookie(name="b", value="x")])
        store.append(Cookie(name="a", value="2"))
        store.upsert(Cookie(name="a", value="3"))

        assert store.header_values() == ["b=x", "a=3"]

    def test_remove_matches_exact_name(self) -> None:
        store = CookieStore(
            [
                Cookie(name="session", value="1"),
                Cookie(name="session_id", value="2"),
                Cookie(name="session", value="3"),
            ]
        )

        assert store.remove("session") == 2
        assert store.names() == ["session_id"]
        assert store.remove("missing") == 0

    def test_clear(self) -> None:
        store = CookieStore([Cookie(name="a")])
        store.clear()

        assert len(store) == 0
        assert list(store) == []
