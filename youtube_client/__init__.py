"""YouTube Data API client package."""

from youtube_client.base import BaseClient, UpstreamError, set_api_config
from youtube_client.search import SearchClient

__all__ = [
    # Base
    "BaseClient",
    "UpstreamError",
    "set_api_config",
    # Clients
    "SearchClient",
]
