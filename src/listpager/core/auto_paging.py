"""Push, pull, and bounded-collection adapters over an auto-paging session."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .async_pagination import AsyncPageSession
from .callbacks import (
    ContinueCallback,
    DoneHandler,
    ItemHandler,
    callbackify,
    resolve_done_handler,
    resolve_item_handler,
)
from .errors import ListPagerArgumentError, ListPagerLimitExceededError
from .models import ITERATION_DONE, MAX_COLLECT_ITEMS, IterationResult

logger = logging.getLogger("listpager")

SessionFactory = Callable[[], AsyncPageSession]


class AutoPagingIterator:
    """Async iterator over every item of a list, across pages."""

    def __init__(self, session: AsyncPageSession) -> None:
        self._session = session
        self._closed = False

    def __aiter__(self) -> "AutoPagingIterator":
        return self

    async def __anext__(self) -> Any:
        result = await self.next()
        if result.done:
            raise StopAsyncIteration
        return result.value

    async def next(self) -> IterationResult:
        if self._closed:
            return ITERATION_DONE
        return await self._session.next_item()

    async def aclose(self) -> IterationResult:
        # Nothing beyond the session state is held, so closing never abandons a fetch.
        self._closed = True
        return ITERATION_DONE


def auto_paging_each(
    session_factory: SessionFactory,
    *args: object,
) -> "asyncio.Task[None] | AutoPagingIterator":
    """Iterate over all items of a list.

    ``auto_paging_each(on_item, on_done)`` schedules a push loop on the running
    event loop and returns its task. ``on_item`` is either ``on_item(item)``,
    returning ``False`` to stop, or ``on_item(item, next_)`` which must call
    ``next_()`` (or ``next_(False)`` to stop) once per item. ``on_done`` is
    called error-first when iteration ends.

    Without arguments an ``AutoPagingIterator`` is returned instead.
    """

    if len(args) > 2:
        raise ListPagerArgumentError(
            f"auto_paging_each takes up to two arguments; received {len(args)}"
        )
    on_item = resolve_item_handler(args)
    on_done = resolve_done_handler(args)

    if on_item is None:
        return AutoPagingIterator(session_factory())

    loop = asyncio.get_running_loop()
    task = loop.create_task(_drive_with_callback(session_factory(), on_item))
    return callbackify(task, on_done)


def auto_paging_to_list(
    session_factory: SessionFactory,
    options: Mapping[str, object] | int | None,
    on_done: DoneHandler | None = None,
) -> "asyncio.Task[list[Any]]":
    """Collect up to ``max`` items of a list into a list."""

    max_items = _resolve_max(options)
    if on_done is not None and not callable(on_done):
        raise ListPagerArgumentError(
            "The second argument to auto_paging_to_list, if present, must be a callback "
            f"function; received {type(on_done).__name__}"
        )

    items: list[Any] = []

    def collect(item: Any) -> bool | None:
        items.append(item)
        if len(items) >= max_items:
            return False
        return None

    async def _collect() -> list[Any]:
        await _drive_with_callback(session_factory(), resolve_item_handler((collect,)))
        return items

    task = asyncio.get_running_loop().create_task(_collect())
    return callbackify(task, on_done)


async def _drive_with_callback(session: AsyncPageSession, on_item: ItemHandler) -> None:
    loop = asyncio.get_running_loop()
    while True:
        result = await session.next_item()
        if result.done:
            return

        continuation: asyncio.Future[object] = loop.create_future()
        outcome = on_item(result.value, _continuation_for(continuation))
        if inspect.isawaitable(outcome):
            await outcome
        if await continuation is False:
            logger.debug("auto-paging stopped by item handler")
            return


def _continuation_for(future: "asyncio.Future[object]") -> ContinueCallback:
    def next_(should_continue: object = None) -> None:
        if future.done():
            logger.warning("auto-paging continuation called more than once; ignoring")
            return
        future.set_result(should_continue)

    return next_


def _resolve_max(options: Mapping[str, object] | int | None) -> int:
    if isinstance(options, Mapping):
        max_items = options.get("max")
    else:
        max_items = options
    if not max_items:
        raise ListPagerArgumentError(
            "You must pass a `max` option to auto_paging_to_list, "
            "eg; `auto_paging_to_list({'max': 1000})`."
        )
    if isinstance(max_items, bool) or not isinstance(max_items, int) or max_items < 0:
        raise ListPagerArgumentError("`max` must be a positive integer")
    if max_items > MAX_COLLECT_ITEMS:
        raise ListPagerLimitExceededError(
            f"You cannot specify a max of more than {MAX_COLLECT_ITEMS:,} items to fetch "
            "in auto_paging_to_list; use auto_paging_each to iterate through longer lists."
        )
    return max_items


__all__ = [
    "SessionFactory",
    "AutoPagingIterator",
    "auto_paging_each",
    "auto_paging_to_list",
]
