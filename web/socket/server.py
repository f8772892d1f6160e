"""WebSocket transport - one connection, one subscriber."""

import json
from typing import Any

from loguru import logger
from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosed

from web.api import search

WS_PATH = "/ws"


class SocketSubscriber:
    """Subscriber backed by a WebSocket connection."""

    def __init__(self, websocket: ServerConnection):
        self._ws = websocket

    def __repr__(self) -> str:
        return f"SocketSubscriber({self._ws.remote_address})"

    async def send(self, message: dict[str, Any]) -> None:
        await self._ws.send(json.dumps(message, ensure_ascii=False))


async def handler(websocket: ServerConnection) -> None:
    """Serve one client connection until it closes."""
    path = websocket.request.path if websocket.request else ""
    if path != WS_PATH:
        await websocket.close(code=1008, reason="Unsupported path")
        return

    subscriber = SocketSubscriber(websocket)
    search.connect(subscriber)
    try:
        async for raw in websocket:
            await search.handle_message(subscriber, raw)
    except ConnectionClosed as e:
        logger.debug("{} closed: {}", subscriber, e)
    finally:
        search.disconnect(subscriber)


async def run_server(host: str, port: int) -> None:
    """Accept connections until cancelled."""
    async with serve(handler, host, port, ping_interval=20, ping_timeout=20) as server:
        logger.info("Listening on ws://{}:{}{}", host, port, WS_PATH)
        await server.serve_forever()
