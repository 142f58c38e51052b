import asyncio

import httpx
from loguru import logger

from awesomebar.errors import SpeculativeConnectError

from .base import BaseEngine


class HttpxEngine(BaseEngine):
    """Engine that warms up connections with a background HEAD request.

    The request runs on the caller's event loop; its connection stays in the
    client's pool so a following navigation can reuse it.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 5.0):
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._pending: set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._pending)

    def speculative_connect(self, url: str) -> None:
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise SpeculativeConnectError(f"Invalid url: {url}", original_error=e) from e
        if parsed.scheme not in ("http", "https"):
            raise SpeculativeConnectError(f"Unsupported scheme for speculative connect: {url}")

        if self._closed:
            logger.debug(f"Engine is closed, skipping speculative connect to {url}")
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running event loop, skipping speculative connect to {url}")
            return

        task = loop.create_task(self._preconnect(url))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _preconnect(self, url: str) -> None:
        try:
            await self._client.head(url)
            logger.debug(f"Speculative connect to {url} completed")
        except Exception as e:
            logger.debug(f"Speculative connect to {url} failed: {e}")

    async def drain(self) -> None:
        """Wait for all in-flight speculative connects to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        self._closed = True
        for task in list(self._pending):
            task.cancel()
        await self.drain()
        await self._client.aclose()
