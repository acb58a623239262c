"""Async item-level pagination over starting_after cursors."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from .cursor import CursorFetcher
from .models import ITERATION_DONE, IterationResult, ListResult

logger = logging.getLogger("listpager")


class AsyncPageSession:
    """Iteration state for one auto-paging session.

    Drives a single cursor through successive pages. ``next_item`` is
    single-flight: callers that overlap share one pending advance, so the
    cursor never moves twice for one item.
    """

    def __init__(self, first_page: Awaitable[ListResult], fetcher: CursorFetcher) -> None:
        self._first_page = first_page
        self._fetcher = fetcher
        self._page_future: asyncio.Future[ListResult] | None = None
        self._index = 0
        self._in_flight: asyncio.Task[IterationResult] | None = None

    @property
    def in_flight(self) -> bool:
        return self._in_flight is not None

    async def next_item(self) -> IterationResult:
        if self._in_flight is None:
            self._in_flight = asyncio.get_running_loop().create_task(self._advance_once())
            self._in_flight.add_done_callback(_retrieve_exception)
        # A cancelled waiter must not abandon the shared advance.
        return await asyncio.shield(self._in_flight)

    async def _advance_once(self) -> IterationResult:
        try:
            return await self._advance()
        finally:
            self._in_flight = None

    async def _advance(self) -> IterationResult:
        while True:
            page = await self._current_page()
            if self._index < len(page.data):
                value = page.data[self._index]
                self._index += 1
                return IterationResult(value=value)
            if not page.has_more:
                logger.debug("auto-paging exhausted")
                return ITERATION_DONE
            self._page_future = asyncio.ensure_future(self._fetcher.fetch_after(page))
            self._index = 0

    def _current_page(self) -> asyncio.Future[ListResult]:
        if self._page_future is None:
            self._page_future = asyncio.ensure_future(self._first_page)
        return self._page_future


def _retrieve_exception(task: "asyncio.Task[IterationResult]") -> None:
    # Failures resurface through the page future; waiters may all be cancelled.
    if not task.cancelled():
        task.exception()


__all__ = [
    "AsyncPageSession",
]
