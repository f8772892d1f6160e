"""Services package - service class exports."""

from app.services.search import (
    BroadcastEngine,
    ClientRegistry,
    QueryGateway,
    RefreshScheduler,
)

__all__ = [
    "BroadcastEngine",
    "ClientRegistry",
    "QueryGateway",
    "RefreshScheduler",
]
