"""Fetch result and fetcher interface shared by the crawler and its tests."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Response:
    """A fetched page.

    ``url`` is the final URL after redirects, which may differ from the
    requested one.
    """

    url: str
    status: int
    content: bytes

    @property
    def text(self) -> str:
        """Page body as UTF-8, undecodable bytes replaced."""
        return self.content.decode("utf-8", errors="replace")


class Fetcher(Protocol):
    """Anything that can GET a page for the crawler.

    Implementations raise ``httpx.HTTPError`` or ``httpx.InvalidURL`` when
    the page cannot be fetched.
    """

    async def fetch(self, url: str) -> Response:
        ...
