"""Error taxonomy for the live search core."""

from youtube_client.base import UpstreamError


class ValidationError(Exception):
    """Client sent an unusable query."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


class DeliveryError(Exception):
    """A broadcast could not be delivered to one subscriber."""

    def __init__(self, message: str = "Delivery failed"):
        self.message = message
        super().__init__(self.message)


def validate_query(query: str) -> str:
    """Validate query is non-blank. Returns it unchanged."""
    if not query or not query.strip():
        raise ValidationError("Query must not be empty")
    return query


__all__ = [
    "DeliveryError",
    "UpstreamError",
    "ValidationError",
    "validate_query",
]
