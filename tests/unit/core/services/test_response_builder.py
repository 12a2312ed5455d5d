"""
Tests for builder state: status, header policy and prepare.
"""

import pytest
from httpresp.core.constants import (
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_WWW_AUTHENTICATE,
    STATUS_UNDEFINED,
)
from httpresp.core.services.options import with_header, with_status
from httpresp.core.services.response import Response
from httpresp.core.transport.recording import RecordingSink


class TestHeaderPolicy:
    @pytest.mark.parametrize(
        "header", ["Content-Type", "content-length", "ETag", "Location", "Retry-After"]
    )
    def test_set_single_value_header_keeps_first_value(
        self, response: Response, header: str
    ) -> None:
        response.set_header(header, "v1", "v2", "v3")

        assert response.header_values(header) == ["v1"]

    def test_add_single_value_header_degrades_to_set(self, response: Response) -> None:
        response.add_header(HEADER_CONTENT_LENGTH, "10")
        response.add_header(HEADER_CONTENT_LENGTH, "20", "30")

        assert response.header_values(HEADER_CONTENT_LENGTH) == ["20"]

    def test_set_multi_value_header_joins_with_comma(self, response: Response) -> None:
        response.add_header("Vary", "Cookie")
        response.set_header("Vary", "Accept", "Origin")

        assert response.header_values("Vary") == ["Accept,Origin"]

    def test_add_multi_value_header_keeps_distinct_lines(self, response: Response) -> None:
        response.add_header(HEADER_WWW_AUTHENTICATE, "a")
        response.add_header(HEADER_WWW_AUTHENTICATE, "b")

        assert response.header_values(HEADER_WWW_AUTHENTICATE) == ["a", "b"]

    def test_del_header_removes_all_lines(self, response: Response) -> None:
        response.add_header("Vary", "Accept", "Origin")
        response.del_header("vary")

        assert response.header("Vary") is None

    def test_clear_headers(self, response: Response) -> None:
        response.set_header("Server", "x").add_header("Vary", "Accept")
        response.clear_headers()

        assert len(response.headers) == 0

    def test_headers_live_on_the_sink(self, sink: RecordingSink) -> None:
        Response(sink, with_header("X-Trace", "1"))

        assert sink.headers.get("X-Trace") == "1"


class TestStatusAndPrepare:
    def test_status_starts_undefined(self, response: Response) -> None:
        assert response.status_code == STATUS_UNDEFINED

    def test_set_status_always_overwrites(self, response: Response) -> None:
        response.set_status(201).set_status(202)

        assert response.status_code == 202

    def test_later_options_win(self, sink: RecordingSink) -> None:
        response = Response(sink, with_status(201), with_status(409))

        assert response.status_code == 409

    def test_prepare_fills_defaults(self, response: Response) -> None:
        response.prepare(200, "application/json")

        assert response.status_code == 200
        assert response.header(HEADER_CONTENT_TYPE) == "application/json"

    def test_prepare_keeps_caller_choices(self, response: Response) -> None:
        response.set_status(418).set_header(HEADER_CONTENT_TYPE, "text/html")
        response.prepare(200, "application/json")

        assert response.status_code == 418
        assert response.header(HEADER_CONTENT_TYPE) == "text/html"

    def test_prepare_without_content_type(self, response: Response) -> None:
        response.prepare(204)

        assert response.status_code == 204
        assert HEADER_CONTENT_TYPE not in response.headers

    def test_apply_returns_builder(self, response: Response) -> None:
        assert response.apply(with_status(201)) is response
