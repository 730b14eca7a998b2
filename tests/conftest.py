"""Shared fixtures."""

import httpx
import pytest

from kanjifreq.core import Response


class FakeFetcher:
    """In-memory fetcher that records every requested URL."""

    def __init__(
        self,
        pages: dict[str, str],
        failing: set[str] | None = None,
        malformed: set[str] | None = None,
    ):
        self.pages = pages
        self.failing = failing or set()
        self.malformed = malformed or set()
        self.requested: list[str] = []

    async def fetch(self, url: str) -> Response:
        self.requested.append(url)
        if url in self.malformed:
            raise httpx.InvalidURL(f"Invalid URL {url!r}")
        if url in self.failing:
            raise httpx.ConnectError("Connection refused")
        if url not in self.pages:
            raise httpx.ReadError("Unable to read body")
        return Response(
            url=url,
            status=200,
            content=self.pages[url].encode("utf-8"),
        )


@pytest.fixture
def make_fetcher():
    return FakeFetcher
