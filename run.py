#!/usr/bin/env python3
"""Run the live search WebSocket server."""

import asyncio

from app.container import container
from app.services.search.upstream import YouTubeSearchBackend
from settings import (
    API_TIMEOUT,
    LOG_LEVEL,
    MAX_CONCURRENT,
    MAX_RESULTS,
    WS_HOST,
    WS_PORT,
    YOUTUBE_API_KEY,
    YOUTUBE_API_URL,
)
from settings.logging import setup_logging
from web.socket import run_server
from youtube_client import SearchClient, set_api_config

logger = setup_logging(level=LOG_LEVEL, to_file=True)


async def main() -> None:
    if not YOUTUBE_API_KEY:
        logger.warning("YOUTUBE_API_KEY is not set - upstream searches will be rejected")
    set_api_config(YOUTUBE_API_URL, API_TIMEOUT, YOUTUBE_API_KEY)

    async with SearchClient(max_concurrent=MAX_CONCURRENT) as client:
        container.init(YouTubeSearchBackend(client, max_results=MAX_RESULTS))
        try:
            await run_server(WS_HOST, WS_PORT)
        finally:
            container.reset()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down")
