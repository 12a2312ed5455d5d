from __future__ import annotations

from pydantic import BaseModel

from httpresp.core.constants.http_status_constants import status_message


class ErrorEnvelope(BaseModel):
    """Fixed ``{"code": ..., "message": ...}`` error payload."""

    code: int
    message: str

    @classmethod
    def for_status(cls, code: int, message: str | None = None) -> ErrorEnvelope:
        """Build an envelope, defaulting the message from the status table."""
        if message is None:
            message = status_message(code)
        return cls(code=code, message=message)
