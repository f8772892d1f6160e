"""Broadcast engine - fan result sets out to every subscriber."""

import asyncio

from loguru import logger

from app.errors import DeliveryError
from app.models.search import SearchResultsMessage, VideoSummary
from app.services.search.registry import ClientRegistry, Subscriber


class BroadcastEngine:
    """Sends one message per call to all subscribers registered at call time."""

    def __init__(self, registry: ClientRegistry):
        self._registry = registry
        self.sent = 0

    async def broadcast(self, query: str, results: list[VideoSummary]) -> int:
        """Deliver the result set to every subscriber. Returns successful deliveries."""
        message = SearchResultsMessage.build(query, results).to_wire()
        targets = self._registry.snapshot()
        if not targets:
            logger.debug("Broadcast '{}': no subscribers", query)
            return 0

        outcomes = await asyncio.gather(*(self._deliver(s, query, message) for s in targets))
        delivered = sum(outcomes)
        self.sent += 1
        logger.debug("Broadcast '{}' ({} results) to {}/{} clients", query, len(results), delivered, len(targets))
        return delivered

    async def _deliver(self, subscriber: Subscriber, query: str, message: dict) -> bool:
        try:
            await subscriber.send(dict(message))
        except Exception as e:
            err = DeliveryError(f"Broadcast '{query}' failed: {e}")
            logger.warning("{} - dropping subscriber", err.message)
            self._registry.unsubscribe(subscriber)
            return False
        return True
