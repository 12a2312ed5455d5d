"""
Per-request response builder.

A ``Response`` collects status, header and cookie changes, then commits them
exactly once through one of its emitters (``json``, ``jsonp``, ``string``,
``html``, ``stream``, ``serve_file``, ``serve_file_as_download``,
``redirect``, ``no_content``, ``error``). Every emitter runs ``prepare`` once,
commits status and headers to the sink, writes the body and finishes.

Example::

    response = Response(sink, with_status(201), add_location("/items/7"))
    await response.json({"id": 7})
"""

from __future__ import annotations

import inspect
import logging
import os
from collections.abc import AsyncIterable, Callable, Iterable
from datetime import datetime, timezone
from typing import IO, Any

from starlette.concurrency import iterate_in_threadpool, run_in_threadpool

from httpresp.core.common.exceptions import (
    BodyWriteError,
    EncodeError,
    HeaderEncodeError,
    StreamReadError,
)
from httpresp.core.config.app_config import ResponseConfig
from httpresp.core.constants.header_constants import (
    HEADER_CONTENT_DISPOSITION,
    HEADER_CONTENT_TYPE,
    HEADER_LOCATION,
    HEADER_SET_COOKIE,
    is_single_value_header,
)
from httpresp.core.constants.http_status_constants import (
    HTTP_200_OK,
    HTTP_204_NO_CONTENT,
    HTTP_300_MULTIPLE_CHOICES,
    HTTP_302_FOUND,
    HTTP_308_PERMANENT_REDIRECT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    STATUS_UNDEFINED,
)
from httpresp.core.constants.mime_constants import (
    MIME_APPLICATION_JAVASCRIPT_CHARSET_UTF8,
    MIME_APPLICATION_JSON_CHARSET_UTF8,
    MIME_OCTET_STREAM,
    MIME_TEXT_HTML_CHARSET_UTF8,
    MIME_TEXT_PLAIN_CHARSET_UTF8,
)
from httpresp.core.domain.cookies import Cookie, CookieStore, cookie_name_of
from httpresp.core.domain.error_envelope import ErrorEnvelope
from httpresp.core.domain.headers import HeaderMap
from httpresp.core.interfaces.response_sink_interface import IResponseSink
from httpresp.core.services.buffer_pool import BufferPools, get_default_pools
from httpresp.core.services.header_assemblers import content_disposition_value
from httpresp.core.services.json_codec import JSONEncodeFunc, encode_json

logger = logging.getLogger(__name__)

Option = Callable[["Response"], "Response"]

StreamSource = IO[bytes] | AsyncIterable[bytes] | Iterable[bytes] | bytes

_DEFAULT_CONFIG = ResponseConfig()
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _is_set_cookie(key: str) -> bool:
    return key.strip().lower() == HEADER_SET_COOKIE.lower()


class Response:
    """Mutable builder for one outbound HTTP response.

    The builder is not thread-safe and must only be used by the request
    flow that created it. It is discarded after its emitter returns.
    """

    def __init__(
        self,
        sink: IResponseSink,
        *options: Option,
        config: ResponseConfig | None = None,
        pools: BufferPools | None = None,
    ) -> None:
        self._sink = sink
        self._status_code = STATUS_UNDEFINED
        self._cookies = CookieStore()
        self._json_encoder: JSONEncodeFunc | None = None
        self._config = config or _DEFAULT_CONFIG
        self._pools = pools or get_default_pools()
        self.apply(*options)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def sink(self) -> IResponseSink:
        return self._sink

    @property
    def status_code(self) -> int:
        """Pending status; ``STATUS_UNDEFINED`` until something sets it."""
        return self._status_code

    @property
    def headers(self) -> HeaderMap:
        return self._sink.headers

    @property
    def cookies(self) -> list[Cookie]:
        return list(self._cookies)

    @property
    def json_encoder(self) -> JSONEncodeFunc | None:
        return self._json_encoder

    def apply(self, *options: Option) -> Response:
        """Apply options in order; later options win for the same slot."""
        for option in options:
            option(self)
        return self

    def set_json_encoder(self, encoder: JSONEncodeFunc | None) -> Response:
        self._json_encoder = encoder
        return self

    def set_status(self, code: int) -> Response:
        self._status_code = code
        return self

    def prepare(self, default_status: int, default_content_type: str | None = None) -> None:
        """Fill in status and content type the caller left unset.

        An existing Content-Type header and an already chosen status are
        never overridden.
        """
        if default_content_type is not None and HEADER_CONTENT_TYPE not in self.headers:
            self.headers.set(HEADER_CONTENT_TYPE, default_content_type)
        if self._status_code == STATUS_UNDEFINED:
            self._status_code = default_status

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def set_header(self, key: str, *values: str) -> Response:
        """Replace ``key``.

        Single-valued headers keep only the first value; list-valued headers
        get all values joined with a comma on one line.
        """
        if values and is_single_value_header(key):
            self.headers.set(key, values[0])
        else:
            self.headers.set(key, ",".join(values))
        return self

    def add_header(self, key: str, *values: str) -> Response:
        """Append ``values`` to ``key``, one header line per value.

        Single-valued headers degrade to ``set_header`` with the first value.
        """
        if values and is_single_value_header(key):
            return self.set_header(key, values[0])
        for value in values:
            self.headers.add(key, value)
        return self

    def del_header(self, key: str) -> Response:
        """Remove every line of ``key``; for Set-Cookie, queued cookies too."""
        self.headers.delete(key)
        if _is_set_cookie(key):
            self._cookies.clear()
        return self

    def clear_headers(self) -> Response:
        """Remove every pending header, queued cookies included."""
        self.headers.clear()
        self._cookies.clear()
        return self

    def header(self, key: str) -> str | None:
        values = self.header_values(key)
        return values[0] if values else None

    def header_values(self, key: str) -> list[str]:
        """Return the lines of ``key`` as they would be committed now."""
        values = self.headers.values(key)
        if _is_set_cookie(key):
            values.extend(self._cookies.header_values())
        return values

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------

    def set_cookie(self, cookie: Cookie) -> Response:
        """Queue ``cookie``; duplicates of the same name are allowed."""
        self._cookies.append(cookie)
        return self

    def bind_cookie(self, cookie: Cookie) -> Response:
        """Queue ``cookie`` as the only directive for its name."""
        self._drop_raw_cookie_lines(cookie.name)
        self._cookies.upsert(cookie)
        return self

    def del_cookie(self, name: str) -> Response:
        """Drop every queued cookie named exactly ``name``.

        Raw Set-Cookie lines added through the header API are filtered too.
        """
        self._cookies.remove(name)
        self._drop_raw_cookie_lines(name)
        return self

    def clear_cookies(self) -> Response:
        self._cookies.clear()
        self.headers.delete(HEADER_SET_COOKIE)
        return self

    def expired_cookie(self, name: str) -> Response:
        """Queue a directive telling the client to drop cookie ``name``."""
        self._cookies.append(
            Cookie(
                name=name,
                value="deleted",
                path="/",
                expires=_EPOCH,
                max_age=self._config.expired_cookie_max_age,
            )
        )
        return self

    # ------------------------------------------------------------------
    # Emitters
    # ------------------------------------------------------------------

    async def json(self, data: Any) -> None:
        """Send ``data`` as JSON.

        The body is encoded into a pooled buffer first, so an encoding
        failure raises ``EncodeError`` before anything is committed.
        """
        with self._pools.json.acquire() as buffer:
            self._encode_json(buffer, data)
            self.prepare(HTTP_200_OK, MIME_APPLICATION_JSON_CHARSET_UTF8)
            await self._commit()
            await self._write(buffer.getvalue())
        await self._finish()

    async def jsonp(self, data: Any, callback: str) -> None:
        """Send ``data`` wrapped as ``callback(<json>);``."""
        with self._pools.jsonp.acquire() as buffer:
            self._encode_json(buffer, data)
            payload = buffer.getvalue()
            if payload.endswith(b"\n"):
                payload = payload[:-1]
            self.prepare(HTTP_200_OK, MIME_APPLICATION_JAVASCRIPT_CHARSET_UTF8)
            await self._commit()
            await self._write(callback.encode("utf-8") + b"(" + payload + b");")
        await self._finish()

    async def string(self, data: str) -> None:
        await self._emit_text(data, MIME_TEXT_PLAIN_CHARSET_UTF8)

    async def html(self, data: str) -> None:
        await self._emit_text(data, MIME_TEXT_HTML_CHARSET_UTF8)

    async def stream(self, source: StreamSource) -> None:
        """Copy ``source`` to the body in fixed-size chunks.

        ``source`` may be a binary file object (sync or async ``read``), an
        async iterable of bytes, or a plain iterable of bytes. Blocking reads
        run in the thread pool. The first read or write failure stops the copy.
        """
        self.prepare(HTTP_200_OK, MIME_OCTET_STREAM)
        await self._commit()

        chunk_size = self._config.stream_chunk_size
        if isinstance(source, (bytes, bytearray, memoryview)):
            for start in range(0, len(source), chunk_size):
                await self._write(bytes(source[start : start + chunk_size]))
        elif hasattr(source, "readinto") and not inspect.iscoroutinefunction(
            source.readinto
        ):
            view = memoryview(bytearray(chunk_size))
            while True:
                count = await self._read(source.readinto, view)
                if not count:
                    break
                await self._write(bytes(view[:count]))
        elif hasattr(source, "read"):
            while True:
                chunk = await self._read(source.read, chunk_size)
                if not chunk:
                    break
                if isinstance(chunk, str):
                    chunk = chunk.encode("utf-8")
                await self._write(chunk)
        elif hasattr(source, "__aiter__"):
            await self._copy_async_iterable(source)  # type: ignore[arg-type]
        else:
            await self._copy_async_iterable(iterate_in_threadpool(iter(source)))  # type: ignore[call-overload]
        await self._finish()

    async def serve_file(self, path: str | os.PathLike[str]) -> None:
        """Hand the response to the sink's static file server.

        Only the default content type is applied here; the delegate commits
        status and headers itself.
        """
        self.prepare(HTTP_200_OK, MIME_OCTET_STREAM)
        self._flush_cookies()
        try:
            await self._sink.serve_file(os.fspath(path))
        except UnicodeEncodeError as exc:
            logger.warning("Response headers are not encodable: %s", exc)
            raise HeaderEncodeError(
                f"response headers are not encodable: {exc}",
                details={"encoding": exc.encoding, "path": os.fspath(path)},
            ) from exc
        except OSError as exc:
            logger.error("Serving file %s failed: %s", path, exc)
            raise BodyWriteError(
                f"failed to serve file: {exc}", details={"path": os.fspath(path)}
            ) from exc

    async def serve_file_as_download(
        self, filename: str, data: bytes, *, use_utf8_encoding: bool = False
    ) -> None:
        """Send ``data`` as an attachment named ``filename``."""
        self.headers.set(
            HEADER_CONTENT_DISPOSITION,
            content_disposition_value("attachment", filename, use_utf8_encoding),
        )
        self.prepare(HTTP_200_OK, MIME_OCTET_STREAM)
        await self._commit()
        await self._write(data)
        await self._finish()

    async def redirect(self, url: str) -> None:
        """Redirect to ``url``; statuses outside 300-308 become 302."""
        self.prepare(HTTP_302_FOUND)
        if not HTTP_300_MULTIPLE_CHOICES <= self._status_code <= HTTP_308_PERMANENT_REDIRECT:
            logger.warning(
                "Redirect status %s out of range, using %s",
                self._status_code,
                HTTP_302_FOUND,
            )
            self._status_code = HTTP_302_FOUND
        self.headers.set(HEADER_LOCATION, url)
        await self._commit()
        await self._finish()

    async def no_content(self) -> None:
        self.set_status(HTTP_204_NO_CONTENT)
        self.prepare(HTTP_204_NO_CONTENT)
        await self._commit()
        await self._finish()

    async def error(self, code: int, message: str | None = None) -> None:
        """Send a ``{"code", "message"}`` envelope through the JSON path.

        The status defaults to 500 unless one was set before. A missing
        message is taken from the status table for ``code``.
        """
        if self._status_code == STATUS_UNDEFINED:
            self._status_code = HTTP_500_INTERNAL_SERVER_ERROR
        await self.json(ErrorEnvelope.for_status(code, message).model_dump())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _encode_json(self, buffer: IO[bytes], data: Any) -> None:
        if self._json_encoder is not None:
            try:
                self._json_encoder(buffer, data)
            except Exception as exc:
                logger.warning("Custom JSON encoder failed: %s", exc)
                raise EncodeError(
                    f"custom JSON encoder failed: {exc}",
                    details={"error_type": type(exc).__name__},
                ) from exc
            return
        try:
            encode_json(
                buffer,
                data,
                ensure_ascii=self._config.json_ensure_ascii,
                trailing_newline=self._config.json_trailing_newline,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            logger.warning("JSON encoding failed: %s", exc)
            raise EncodeError(
                f"failed to encode JSON response: {exc}",
                details={"error_type": type(exc).__name__},
            ) from exc

    async def _emit_text(self, data: str, content_type: str) -> None:
        # Unencodable characters (lone surrogates) are replaced, never raised
        # after the headers are out. Large bodies are encoded one slice at a
        # time so at most one encoded chunk is alive.
        self.prepare(HTTP_200_OK, content_type)
        await self._commit()
        if len(data) <= self._config.large_string_threshold:
            await self._write(data.encode("utf-8", errors="replace"))
        else:
            step = self._config.string_chunk_size
            for start in range(0, len(data), step):
                await self._write(data[start : start + step].encode("utf-8", errors="replace"))
        await self._finish()

    async def _copy_async_iterable(self, source: AsyncIterable[bytes]) -> None:
        iterator = source.__aiter__()
        while True:
            try:
                chunk = await iterator.__anext__()
            except StopAsyncIteration:
                break
            except OSError as exc:
                logger.error("Stream source failed: %s", exc)
                raise StreamReadError(f"failed to read stream source: {exc}") from exc
            if chunk:
                await self._write(chunk)

    async def _read(self, read: Callable[..., Any], *args: Any) -> Any:
        try:
            if inspect.iscoroutinefunction(read):
                return await read(*args)
            return await run_in_threadpool(read, *args)
        except OSError as exc:
            logger.error("Stream source failed: %s", exc)
            raise StreamReadError(f"failed to read stream source: {exc}") from exc

    def _drop_raw_cookie_lines(self, name: str) -> None:
        if HEADER_SET_COOKIE in self.headers:
            kept = [
                line
                for line in self.headers.values(HEADER_SET_COOKIE)
                if cookie_name_of(line) != name
            ]
            self.headers.replace_values(HEADER_SET_COOKIE, kept)

    def _flush_cookies(self) -> None:
        for value in self._cookies.header_values():
            self.headers.add(HEADER_SET_COOKIE, value)
        self._cookies.clear()

    async def _commit(self) -> None:
        self._flush_cookies()
        try:
            await self._sink.commit(self._status_code)
        except UnicodeEncodeError as exc:
            logger.warning("Response headers are not encodable: %s", exc)
            raise HeaderEncodeError(
                f"response headers are not encodable: {exc}",
                details={"encoding": exc.encoding},
            ) from exc
        except OSError as exc:
            logger.error("Committing response headers failed: %s", exc)
            raise BodyWriteError(f"failed to commit response: {exc}") from exc

    async def _write(self, data: bytes) -> None:
        try:
            await self._sink.write(data)
        except OSError as exc:
            logger.error("Writing response body failed: %s", exc)
            raise BodyWriteError(f"failed to write response body: {exc}") from exc

    async def _finish(self) -> None:
        try:
            await self._sink.finish()
        except OSError as exc:
            logger.error("Finishing response body failed: %s", exc)
            raise BodyWriteError(f"failed to finish response body: {exc}") from exc
