"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

# Default settings
API_BASE_URL = "https://www.googleapis.com/youtube/v3"
API_TIMEOUT = 30
API_KEY = ""


class UpstreamError(Exception):
    """Upstream API call failed or returned malformed data."""

    def __init__(self, message: str = "Upstream request failed"):
        self.message = message
        super().__init__(self.message)


def set_api_config(base_url: str, timeout: int, api_key: str | None = None) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT, API_KEY
    API_BASE_URL = base_url
    API_TIMEOUT = timeout
    if api_key is not None:
        API_KEY = api_key


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff."""

    def __init__(self, max_concurrent: int = 20, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    @property
    def request_count(self) -> int:
        return self._request_count

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=API_TIMEOUT,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside 'async with'")

        query = dict(params or {})
        if API_KEY:
            query["key"] = API_KEY

        async with self._sem:
            await asyncio.sleep(0.05)
            self._request_count += 1
            resp = await self._client.get(f"{API_BASE_URL}/{path}", params=query)
            resp.raise_for_status()
            return resp.json()
