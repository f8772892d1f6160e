"""Repositories package - in-memory state for the search core."""

from app.repositories.common.cache import ResultCache

__all__ = [
    "ResultCache",
]
