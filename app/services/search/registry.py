"""Client registry - connected subscribers and scheduler lifecycle."""

import threading
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from loguru import logger

from app.services.search.scheduler import RefreshScheduler


class Subscriber(Protocol):
    """A connected client that can receive broadcasts."""

    async def send(self, message: dict[str, Any]) -> None: ...


class ClientRegistry:
    """Set of subscribers. Owns the scheduler's start/stop transitions."""

    def __init__(self, scheduler: RefreshScheduler):
        self.scheduler = scheduler
        self._clients: dict[Subscriber, None] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, handle: Subscriber) -> bool:
        return handle in self._clients

    def size(self) -> int:
        return len(self._clients)

    def subscribe(self, handle: Subscriber) -> bool:
        """Add a subscriber. Returns False if it was already registered."""
        with self._lock:
            if handle in self._clients:
                return False
            self._clients[handle] = None
            if len(self._clients) == 1:
                try:
                    self.scheduler.start()
                except Exception:
                    del self._clients[handle]
                    raise
        logger.info("Client subscribed ({} connected)", len(self._clients))
        return True

    def unsubscribe(self, handle: Subscriber) -> bool:
        """Remove a subscriber. Returns False if it was not registered."""
        with self._lock:
            if handle not in self._clients:
                return False
            del self._clients[handle]
            if not self._clients:
                self.scheduler.stop()
        logger.info("Client unsubscribed ({} connected)", len(self._clients))
        return True

    def snapshot(self) -> list[Subscriber]:
        """Subscribers registered right now."""
        with self._lock:
            return list(self._clients)

    async def for_each(self, fn: Callable[[Subscriber], Awaitable[None]]) -> None:
        """Await ``fn`` for every current subscriber, in registration order."""
        for handle in self.snapshot():
            await fn(handle)
