"""Search socket views - thin layer over the gateway and registry."""

from loguru import logger
from pydantic import ValidationError as SchemaError

from app.container import container
from app.errors import ValidationError
from app.models.search import ErrorMessage, SearchRequest
from app.services.search.registry import Subscriber


def connect(subscriber: Subscriber) -> None:
    """Register a newly accepted connection."""
    container.registry.subscribe(subscriber)


def disconnect(subscriber: Subscriber) -> None:
    """Forget a closed connection."""
    container.registry.unsubscribe(subscriber)


def parse_request(raw: str | bytes) -> SearchRequest | None:
    """Parse an inbound message, None if it is not a valid ``{query}`` object."""
    try:
        return SearchRequest.model_validate_json(raw)
    except SchemaError as e:
        logger.warning("Ignoring malformed message: {} errors", e.error_count())
        return None


async def handle_message(subscriber: Subscriber, raw: str | bytes) -> None:
    """Handle one inbound message from a subscriber."""
    request = parse_request(raw)
    if request is None:
        return

    try:
        await container.gateway.handle(request.query)
    except ValidationError as e:
        logger.info("Rejected query {!r}: {}", request.query, e.message)
        await subscriber.send(ErrorMessage(error=e.message, query=request.query).to_wire())
