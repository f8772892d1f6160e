"""Dependency Injection container - initialized at app startup."""

from datetime import timedelta

from app.repositories.common.cache import ResultCache
from app.services.search.broadcast import BroadcastEngine
from app.services.search.gateway import QueryGateway
from app.services.search.registry import ClientRegistry
from app.services.search.scheduler import RefreshScheduler
from app.services.search.upstream import SearchBackend
from settings import FRESHNESS_WINDOW, IDLE_TTL, MAX_RESULTS, REFRESH_INTERVAL


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, backend: SearchBackend, refresh_interval: float = REFRESH_INTERVAL) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.cache = ResultCache(
            max_results=MAX_RESULTS,
            freshness_window=timedelta(seconds=FRESHNESS_WINDOW),
            idle_ttl=timedelta(seconds=IDLE_TTL),
        )

        # Services (with injected repos); the scheduler ticks into the gateway
        self.scheduler = RefreshScheduler(tick=self._tick, period=refresh_interval)
        self.registry = ClientRegistry(self.scheduler)
        self.broadcaster = BroadcastEngine(self.registry)
        self.gateway = QueryGateway(
            cache=self.cache,
            backend=backend,
            broadcaster=self.broadcaster,
        )

        self._initialized = True

    def reset(self) -> None:
        """Stop the scheduler and forget all instances."""
        if not self._initialized:
            return
        self.scheduler.stop()
        self._initialized = False

    def _tick(self) -> None:
        self.gateway.refresh_all()


# Global container instance
container = Container()
