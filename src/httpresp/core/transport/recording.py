"""In-memory response sink.

Records what a real transport would have sent. Useful in tests and for
callers that assemble the response before handing it to another layer.
"""

from __future__ import annotations

import logging
from pathlib import Path

from httpresp.core.constants.header_constants import (
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
)
from httpresp.core.constants.http_status_constants import (
    HTTP_200_OK,
    HTTP_404_NOT_FOUND,
    NOT_FOUND_BODY,
)
from httpresp.core.constants.mime_constants import MIME_TEXT_PLAIN_CHARSET_UTF8
from httpresp.core.domain.headers import HeaderMap
from httpresp.core.interfaces.response_sink_interface import IResponseSink

logger = logging.getLogger(__name__)


class RecordingSink(IResponseSink):
    """Sink that keeps status, committed headers and body in memory."""

    def __init__(self) -> None:
        self._headers = HeaderMap()
        self.status_code: int | None = None
        self.committed_headers: HeaderMap | None = None
        self.body = bytearray()
        self.finished = False
        self.ignored_commits = 0
        self.served_path: str | None = None

    @property
    def headers(self) -> HeaderMap:
        return self._headers

    @property
    def committed(self) -> bool:
        return self.status_code is not None

    async def commit(self, status_code: int) -> None:
        if self.committed:
            self.ignored_commits += 1
            logger.debug(
                "Ignoring commit with status %s, already sent %s",
                status_code,
                self.status_code,
            )
            return
        # Same Latin-1 check a real transport applies on commit.
        self._headers.raw()
        self.status_code = status_code
        self.committed_headers = self._headers.copy()

    async def write(self, data: bytes) -> None:
        if not self.committed:
            await self.commit(HTTP_200_OK)
        self.body.extend(data)

    async def finish(self) -> None:
        self.finished = True

    async def serve_file(self, path: str) -> None:
        self.served_path = path
        file_path = Path(path)
        if not file_path.is_file():
            self._headers.set(HEADER_CONTENT_TYPE, MIME_TEXT_PLAIN_CHARSET_UTF8)
            await self.commit(HTTP_404_NOT_FOUND)
            await self.write(NOT_FOUND_BODY.encode("utf-8"))
        else:
            data = file_path.read_bytes()
            self._headers.set(HEADER_CONTENT_LENGTH, str(len(data)))
            await self.commit(HTTP_200_OK)
            await self.write(data)
        await self.finish()

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")
