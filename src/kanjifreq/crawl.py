"""Depth-bounded crawl that feeds every fetched page to a frequency counter."""

import asyncio
import logging
import time
from dataclasses import dataclass

import httpx

from .config import settings
from .core import Fetcher, HttpFetcher
from .counter import FrequencyCounter
from .links import child_links

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised for traversal settings that prevent a crawl from starting."""


def is_valid_url(url: str) -> bool:
    """Loose check for an http(s) URL with a single ``www.`` host marker."""
    return url.startswith("http") and url.count("://www.") == 1


@dataclass
class TraversalConfig:
    """Validated crawl parameters.

    An out-of-range depth or a concurrency below one raises
    ``ConfigurationError``. An invalid root URL is replaced by
    ``default_url``; the substitution is only reported in logging mode.
    """

    root_url: str
    search_depth: int = settings.default_depth
    logging_mode: bool = False
    max_depth: int = settings.max_depth
    default_url: str = settings.default_url
    concurrency: int = 1

    def __post_init__(self):
        if self.search_depth < 0:
            raise ConfigurationError("search depth should be positive")
        if self.search_depth >= self.max_depth:
            raise ConfigurationError(
                f"search depth {self.search_depth} exceeds maximum depth {self.max_depth - 1}"
            )
        if self.concurrency < 1:
            raise ConfigurationError("concurrency should be at least 1")
        if not is_valid_url(self.root_url):
            level = logging.INFO if self.logging_mode else logging.DEBUG
            logger.log(level, "invalid URL %r, using default URL %s", self.root_url, self.default_url)
            self.root_url = self.default_url


class Crawler:
    """Visits pages breadth-first from a root URL, counting Japanese characters.

    Pages are taken from a FIFO of ``(url, depth_budget)`` pairs by
    ``concurrency`` worker tasks. There is no visited set, so a page linked
    from two places is fetched and counted twice. A failed fetch ends only
    its own branch.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        counter: FrequencyCounter | None = None,
        concurrency: int = 1,
        time_budget: float | None = None,
    ):
        if concurrency < 1:
            raise ConfigurationError("concurrency should be at least 1")
        self.fetcher = fetcher
        self.counter = counter if counter is not None else FrequencyCounter()
        self.concurrency = concurrency
        self.time_budget = time_budget

        self.pages_fetched = 0
        self.pages_failed = 0
        self.timed_out = False
        self._queue: asyncio.Queue[tuple[str, int]] | None = None

    async def visit(self, url: str, depth_budget: int) -> list[tuple[str, int]]:
        """Fetch and count one page, returning the children to visit next."""
        if depth_budget < 0:
            return []

        try:
            response = await self.fetcher.fetch(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.pages_failed += 1
            logger.warning("unable to fetch %s: %s", url, e)
            return []

        self.pages_fetched += 1
        text = response.text
        # No await between observations: a page is counted in one step.
        self.counter.observe_text(text)

        links = child_links(url, text)
        logger.info("fetched %s (status %d, %d child links, depth budget %d)",
                    response.url, response.status, len(links), depth_budget)
        return [(link, depth_budget - 1) for link in links]

    async def _worker(self):
        assert self._queue is not None
        while True:
            url, depth_budget = await self._queue.get()
            try:
                for child in await self.visit(url, depth_budget):
                    self._queue.put_nowait(child)
            finally:
                self._queue.task_done()

    async def _traverse(self, root_url: str, search_depth: int):
        self._queue = asyncio.Queue()
        self._queue.put_nowait((root_url, search_depth))

        workers = [asyncio.create_task(self._worker()) for _ in range(self.concurrency)]
        drained = asyncio.create_task(self._queue.join())
        try:
            done, _ = await asyncio.wait(
                [drained, *workers], return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in [drained, *workers]:
                task.cancel()
            await asyncio.gather(drained, *workers, return_exceptions=True)

        # Workers only finish early by raising.
        for task in done:
            if task is not drained:
                task.result()

    async def crawl(self, root_url: str, search_depth: int) -> FrequencyCounter:
        """Run the traversal and return the finalized counter.

        With a time budget the traversal is cancelled when it runs out and
        the partial counts are returned.
        """
        try:
            if self.time_budget is None:
                await self._traverse(root_url, search_depth)
            else:
                await asyncio.wait_for(self._traverse(root_url, search_depth), self.time_budget)
        except asyncio.TimeoutError:
            self.timed_out = True
            logger.warning("time budget of %.1fs exhausted, reporting partial counts",
                           self.time_budget)
        return self.counter.finalize()


async def count_characters(
    config: TraversalConfig,
    time_budget: float | None = None,
    fetcher: Fetcher | None = None,
) -> Crawler:
    """Crawl from ``config.root_url`` and return the finished crawler."""
    own_fetcher = fetcher is None
    if fetcher is None:
        fetcher = HttpFetcher(
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        )

    logger.info("crawling %s with search depth %d", config.root_url, config.search_depth)
    crawler = Crawler(fetcher, concurrency=config.concurrency, time_budget=time_budget)

    start_time = time.time()
    try:
        await crawler.crawl(config.root_url, config.search_depth)
    finally:
        if own_fetcher:
            await fetcher.close()

    logger.info("crawl complete: %d pages fetched, %d failed in %.1fs",
                crawler.pages_fetched, crawler.pages_failed, time.time() - start_time)
    return crawler
