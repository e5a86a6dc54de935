"""External service clients."""

from .realtime_service import (
    RealtimeSessionService,
    SessionProxyError,
    UpstreamRejectedError,
    UpstreamTransportError,
)

__all__ = [
    "RealtimeSessionService",
    "SessionProxyError",
    "UpstreamRejectedError",
    "UpstreamTransportError",
]
