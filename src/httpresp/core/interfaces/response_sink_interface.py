"""
Response sink interface.

A sink holds the headers, status and body of exactly one outbound HTTP
response. The builder mutates ``headers`` freely until ``commit``; after that
the sink ignores further status changes and header mutations never reach the
wire.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from httpresp.core.domain.headers import HeaderMap


class IResponseSink(ABC):
    """Interface for whatever receives one response."""

    @property
    @abstractmethod
    def headers(self) -> HeaderMap:
        """Mutable header collection sent on commit."""

    @property
    @abstractmethod
    def committed(self) -> bool:
        """Whether status and headers have been sent."""

    @abstractmethod
    async def commit(self, status_code: int) -> None:
        """Send the status line and headers.

        Only the first call has any effect; later calls are ignored.

        Args:
            status_code: The HTTP status to send
        """

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """Write body bytes, committing status 200 first if needed.

        Raises:
            OSError: If the underlying transport fails
        """

    @abstractmethod
    async def finish(self) -> None:
        """Mark the end of the body. Calling it again is a no-op."""

    @abstractmethod
    async def serve_file(self, path: str) -> None:
        """Delegate the whole response to a static file server.

        The delegate decides status and size related headers, commits, and
        finishes the response itself.

        Args:
            path: Filesystem path of the file to serve
        """
