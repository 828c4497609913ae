"""Transport layer: JSON codec and the WebSocket server."""

from .codec import RequestError, decode_request, encode_error, encode_result
from .server import ProjectionServer, handle_message, main, serve

__all__ = [
    "RequestError",
    "decode_request",
    "encode_error",
    "encode_result",
    "ProjectionServer",
    "handle_message",
    "main",
    "serve",
]
