from .endpoint import Handler, ResponseEndpoint
from .sink import ASGIResponseSink

__all__ = ["ASGIResponseSink", "Handler", "ResponseEndpoint"]
