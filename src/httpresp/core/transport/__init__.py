from .asgi import ASGIResponseSink, ResponseEndpoint
from .recording import RecordingSink

__all__ = ["ASGIResponseSink", "RecordingSink", "ResponseEndpoint"]
