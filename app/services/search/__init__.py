"""Search services - gateway, registry, scheduler and broadcast."""

from app.services.search.broadcast import BroadcastEngine
from app.services.search.gateway import QueryGateway
from app.services.search.registry import ClientRegistry, Subscriber
from app.services.search.scheduler import RefreshScheduler, SchedulerState
from app.services.search.upstream import SearchBackend, YouTubeSearchBackend, to_summary

__all__ = [
    "BroadcastEngine",
    "ClientRegistry",
    "QueryGateway",
    "RefreshScheduler",
    "SchedulerState",
    "SearchBackend",
    "Subscriber",
    "YouTubeSearchBackend",
    "to_summary",
]
