"""
Exception classes for httpresp.

Emitters raise these instead of returning error values. ``committed`` tells
the caller whether status and headers already reached the sink: when it is
False the same builder can still send an alternate response.
"""

from __future__ import annotations

from typing import Any


class ResponseError(Exception):
    """Base exception class for all response construction errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        *,
        committed: bool = False,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            committed: Whether headers were committed before the failure
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.committed = committed

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
                "committed": self.committed,
            }
        }


class EncodeError(ResponseError):
    """Raised when a JSON body cannot be encoded.

    Encoding always happens before commit, so nothing has been sent yet.
    """

    def __init__(
        self,
        message: str = "Failed to encode JSON response",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, committed=False)


class BodyWriteError(ResponseError):
    """Raised when the sink fails while the body is being written."""

    def __init__(
        self,
        message: str = "Failed to write response body",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, committed=True)


class StreamReadError(ResponseError):
    """Raised when a stream source fails after headers were committed."""

    def __init__(
        self,
        message: str = "Failed to read stream source",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, committed=True)


class HeaderEncodeError(ResponseError):
    """Raised when a pending header cannot be encoded for the wire.

    Header values must be Latin-1. The sink checks this before recording the
    commit, so nothing has been sent and the builder can still send an
    alternate response.
    """

    def __init__(
        self,
        message: str = "Failed to encode response headers",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, committed=False)
