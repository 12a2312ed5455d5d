"""
One-shot response helpers.

Each helper builds a ``Response`` for ``sink`` with the given options and
calls a single emitter. Use ``Response`` directly when a handler needs to
inspect or adjust the builder between options and emission.
"""

from __future__ import annotations

import os
from typing import Any

from httpresp.core.constants.http_status_constants import (
    HTTP_204_NO_CONTENT,
    HTTP_302_FOUND,
)
from httpresp.core.interfaces.response_sink_interface import IResponseSink
from httpresp.core.services.options import with_status
from httpresp.core.services.response import Option, Response, StreamSource


async def send_json(sink: IResponseSink, data: Any, *options: Option) -> None:
    await Response(sink, *options).json(data)


async def send_jsonp(
    sink: IResponseSink, data: Any, callback: str, *options: Option
) -> None:
    await Response(sink, *options).jsonp(data, callback)


async def send_string(sink: IResponseSink, data: str, *options: Option) -> None:
    await Response(sink, *options).string(data)


async def send_html(sink: IResponseSink, data: str, *options: Option) -> None:
    await Response(sink, *options).html(data)


async def send_error(
    sink: IResponseSink, status: int, message: str | None = None, *options: Option
) -> None:
    """Send an error envelope with ``status`` as both HTTP status and code.

    Options run after the status is applied, so a ``with_status`` among them
    overrides the HTTP status while the envelope code stays ``status``.
    """
    await Response(sink, with_status(status), *options).error(status, message)


async def send_stream(sink: IResponseSink, source: StreamSource, *options: Option) -> None:
    await Response(sink, *options).stream(source)


async def serve_file(
    sink: IResponseSink, path: str | os.PathLike[str], *options: Option
) -> None:
    await Response(sink, *options).serve_file(path)


async def serve_file_as_download(
    sink: IResponseSink,
    filename: str,
    data: bytes,
    *options: Option,
    use_utf8_encoding: bool = False,
) -> None:
    await Response(sink, *options).serve_file_as_download(
        filename, data, use_utf8_encoding=use_utf8_encoding
    )


async def redirect(sink: IResponseSink, url: str, *options: Option) -> None:
    """Redirect to ``url`` with 302 unless an option picks another status."""
    await Response(sink, with_status(HTTP_302_FOUND), *options).redirect(url)


async def no_content(sink: IResponseSink, *options: Option) -> None:
    await Response(sink, with_status(HTTP_204_NO_CONTENT), *options).no_content()
