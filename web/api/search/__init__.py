"""Search API."""

from web.api.search.views import (
    connect,
    disconnect,
    handle_message,
    parse_request,
)

__all__ = [
    "connect",
    "disconnect",
    "handle_message",
    "parse_request",
]
