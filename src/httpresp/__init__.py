"""Build and send HTTP responses over ASGI."""

from httpresp.core.common.exceptions import (
    BodyWriteError,
    EncodeError,
    HeaderEncodeError,
    ResponseError,
    StreamReadError,
)
from httpresp.core.config import (
    LoggingConfig,
    ResponseConfig,
    configure_logging_from_config,
    load_config,
)
from httpresp.core.domain import (
    Cookie,
    CookieStore,
    ErrorEnvelope,
    HeaderMap,
    LinkDirective,
    SameSite,
    WarningDirective,
)
from httpresp.core.interfaces.response_sink_interface import IResponseSink
from httpresp.core.services.buffer_pool import (
    BufferPool,
    BufferPools,
    configure_default_pools,
)
from httpresp.core.services.response import Option, Response
from httpresp.core.transport import ASGIResponseSink, RecordingSink, ResponseEndpoint

__version__ = "0.1.0"

__all__ = [
    "ASGIResponseSink",
    "BodyWriteError",
    "BufferPool",
    "BufferPools",
    "Cookie",
    "CookieStore",
    "EncodeError",
    "ErrorEnvelope",
    "HeaderEncodeError",
    "HeaderMap",
    "IResponseSink",
    "LinkDirective",
    "LoggingConfig",
    "Option",
    "RecordingSink",
    "Response",
    "ResponseConfig",
    "ResponseEndpoint",
    "ResponseError",
    "SameSite",
    "StreamReadError",
    "WarningDirective",
    "configure_default_pools",
    "configure_logging_from_config",
    "load_config",
]
