from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.types import Receive, Scope, Send

from httpresp.core.common.logging import get_logger
from httpresp.core.config.app_config import ResponseConfig
from httpresp.core.constants.http_status_constants import (
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from httpresp.core.services.response import Response
from httpresp.core.transport.asgi.sink import ASGIResponseSink

logger = get_logger(__name__)

Handler = Callable[[Request, ASGIResponseSink], Awaitable[None]]


class ResponseEndpoint:
    """ASGI app that runs ``handler`` against a fresh ``ASGIResponseSink``.

    Usable directly as a Starlette ``Route`` endpoint::

        async def show(request, sink):
            await Response(sink).json({"ok": True})

        Route("/show", ResponseEndpoint(show))

    A handler that fails before anything was committed gets a 500 error
    envelope in its place. Once the status line is out the failure is
    re-raised to the server.
    """

    def __init__(self, handler: Handler, *, config: ResponseConfig | None = None) -> None:
        self._handler = handler
        self._config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        sink = ASGIResponseSink(scope, receive, send)
        try:
            await self._handler(request, sink)
        except Exception:
            logger.exception(
                "Response handler failed",
                path=request.url.path,
                committed=sink.committed,
            )
            if sink.committed:
                raise
            sink.headers.clear()
            await Response(sink, config=self._config).error(HTTP_500_INTERNAL_SERVER_ERROR)
            return
        await sink.finish()
