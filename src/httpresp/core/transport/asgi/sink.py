"""
ASGI response sink.

Maps the sink contract onto ASGI messages: ``commit`` sends
``http.response.start``, each ``write`` sends a ``http.response.body`` chunk
with ``more_body=True`` and ``finish`` closes the body. Static files are
delegated to Starlette's ``FileResponse``.
"""

from __future__ import annotations

import os

from starlette.responses import FileResponse, PlainTextResponse
from starlette.types import Receive, Scope, Send

from httpresp.core.common.logging import get_logger
from httpresp.core.constants.header_constants import HEADER_CONTENT_TYPE
from httpresp.core.constants.http_status_constants import (
    HTTP_200_OK,
    HTTP_404_NOT_FOUND,
    NOT_FOUND_BODY,
)
from httpresp.core.domain.headers import HeaderMap
from httpresp.core.interfaces.response_sink_interface import IResponseSink

logger = get_logger(__name__)

# Headers FileResponse derives from the file itself.
_FILE_DELEGATE_HEADERS = frozenset(
    {
        b"content-type",
        b"content-length",
        b"content-range",
        b"accept-ranges",
        b"etag",
        b"last-modified",
    }
)


class ASGIResponseSink(IResponseSink):
    """Sink writing one response to an ASGI ``send`` callable."""

    def __init__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self._scope = scope
        self._receive = receive
        self._send = send
        self._headers = HeaderMap()
        self._status_code: int | None = None
        self._finished = False

    @property
    def headers(self) -> HeaderMap:
        return self._headers

    @property
    def committed(self) -> bool:
        return self._status_code is not None

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def finished(self) -> bool:
        return self._finished

    async def commit(self, status_code: int) -> None:
        if self.committed:
            logger.debug(
                "Ignoring duplicate commit",
                status_code=status_code,
                sent_status_code=self._status_code,
            )
            return
        # Encoding may fail; the sink stays uncommitted in that case.
        raw_headers = self._headers.raw()
        self._status_code = status_code
        await self._send(
            {"type": "http.response.start", "status": status_code, "headers": raw_headers}
        )

    async def write(self, data: bytes) -> None:
        if not self.committed:
            await self.commit(HTTP_200_OK)
        if self._finished or not data:
            return
        await self._send(
            {"type": "http.response.body", "body": bytes(data), "more_body": True}
        )

    async def finish(self) -> None:
        if self._finished:
            return
        if not self.committed:
            await self.commit(HTTP_200_OK)
        self._finished = True
        await self._send({"type": "http.response.body", "body": b"", "more_body": False})

    async def serve_file(self, path: str) -> None:
        if self.committed:
            logger.warning("Cannot serve file after commit", path=path)
            return

        if not os.path.isfile(path):
            delegate = PlainTextResponse(NOT_FOUND_BODY, status_code=HTTP_404_NOT_FOUND)
        else:
            delegate = FileResponse(path, media_type=self._headers.get(HEADER_CONTENT_TYPE))
            delegate.raw_headers.extend(
                (name, value)
                for name, value in self._headers.raw()
                if name not in _FILE_DELEGATE_HEADERS
            )

        self._status_code = delegate.status_code
        self._finished = True
        await delegate(self._scope, self._receive, self._send)
