"""Socket API views."""

from web.api import search

__all__ = ["search"]
