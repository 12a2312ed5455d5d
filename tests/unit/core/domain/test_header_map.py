"""
Tests for the multi-valued header collection.
"""

from httpresp.core.domain.headers import HeaderMap, canonical_header_key


class TestCanonicalHeaderKey:
    def test_title_cases_unknown_names(self) -> None:
        assert canonical_header_key("x-request-id") == "X-Request-Id"
        assert canonical_header_key("  accept-encoding ") == "Accept-Encoding"

    def test_known_names_keep_registered_spelling(self) -> None:
        assert canonical_header_key("etag") == "ETag"
        assert canonical_header_key("www-authenticate") == "WWW-Authenticate"
        assert canonical_header_key("content-dpr") == "Content-DPR"


class TestHeaderMap:
    def test_lookup_is_case_insensitive(self) -> None:
        headers = HeaderMap()
        headers.set("content-type", "text/plain")

        assert headers.get("Content-Type") == "text/plain"
        assert "CONTENT-TYPE" in headers
        assert headers.names() == ["Content-Type"]

    def test_add_keeps_every_line(self) -> None:
        headers = HeaderMap()
        headers.add("Vary", "Accept")
        headers.add("vary", "Origin")

        assert headers.values("Vary") == ["Accept", "Origin"]
        assert list(headers.items()) == [("Vary", "Accept"), ("Vary", "Origin")]

    def test_set_replaces_all_lines(self) -> None:
        headers = HeaderMap([("Vary", "Accept"), ("Vary", "Origin")])
        headers.set("Vary", "Cookie")

        assert headers.values("Vary") == ["Cookie"]

    def test_replace_values_with_nothing_deletes(self) -> None:
        headers = HeaderMap([("Set-Cookie", "a=1")])
        headers.replace_values("Set-Cookie", [])

        assert "Set-Cookie" not in headers
        assert len(headers) == 0

    def test_missing_header(self) -> None:
        headers = HeaderMap()

        assert headers.get("Server") is None
        assert headers.get("Server", "fallback") == "fallback"
        assert headers.values("Server") == []
        headers.delete("Server")

    def test_raw_is_lowercase_bytes(self) -> None:
        headers = HeaderMap([("ETag", '"abc"'), ("Vary", "Accept"), ("Vary", "Origin")])

        assert headers.raw() == [
            (b"etag", b'"abc"'),
            (b"vary", b"Accept"),
            (b"vary", b"Origin"),
        ]

    def test_copy_is_independent(self) -> None:
        headers = HeaderMap([("Vary", "Accept")])
        clone = headers.copy()
        headers.add("Vary", "Origin")
        headers.set("Server", "x")

        assert clone.to_dict() == {"Vary": ["Accept"]}

    def test_clear(self) -> None:
        headers = HeaderMap([("A", "1"), ("B", "2")])
        headers.clear()

        assert list(headers) == []
