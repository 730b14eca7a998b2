"""Page fetching over httpx."""

import asyncio

import httpx

from .protocols import Response

DEFAULT_USER_AGENT = "KanjiFreq/0.1 (+https://github.com/kanjifreq)"


class HttpFetcher:
    """One GET per page on a shared ``httpx.AsyncClient``.

    Redirects are followed and nothing is retried. Error statuses come back
    as ordinary responses so their bodies can still be counted; network and
    body-read failures propagate as ``httpx.HTTPError``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        # Workers may race to create the client on their first fetch.
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=self.limits,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=True,
                    )
        return self._client

    async def fetch(self, url: str) -> Response:
        client = await self._get_client()
        resp = await client.get(url)
        return Response(url=str(resp.url), status=resp.status_code, content=resp.content)

    async def close(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
