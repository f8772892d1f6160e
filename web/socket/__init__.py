"""WebSocket transport."""

from web.socket.server import SocketSubscriber, handler, run_server

__all__ = [
    "SocketSubscriber",
    "handler",
    "run_server",
]
