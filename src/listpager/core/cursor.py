"""Cursor derivation and next-page fetching based on starting_after."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from .errors import ListPagerInvariantError
from .models import ListResult

logger = logging.getLogger("listpager")

CURSOR_PARAM = "starting_after"

FetchPage = Callable[[Mapping[str, object]], Awaitable[ListResult]]


def item_id(item: Any) -> object | None:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def next_cursor(list_result: ListResult) -> str:
    if not list_result.data:
        raise ListPagerInvariantError(
            "Unexpected: page has has_more set but contains no items while auto-paging a list."
        )
    last_id = item_id(list_result.data[-1])
    if last_id is None or last_id == "":
        raise ListPagerInvariantError(
            "Unexpected: No `id` found on the last item while auto-paging a list."
        )
    return str(last_id)


class CursorFetcher:
    """Requests the page that follows a given page of the same list query."""

    def __init__(
        self,
        fetch_page: FetchPage,
        params: Mapping[str, object] | None = None,
    ) -> None:
        self._fetch_page = fetch_page
        self._params = dict(params or {})

    @property
    def params(self) -> Mapping[str, object]:
        return dict(self._params)

    async def fetch_after(self, list_result: ListResult) -> ListResult:
        cursor = next_cursor(list_result)
        logger.debug("fetching next page %s=%s", CURSOR_PARAM, cursor)
        return await self._fetch_page({**self._params, CURSOR_PARAM: cursor})


__all__ = [
    "CURSOR_PARAM",
    "FetchPage",
    "item_id",
    "next_cursor",
    "CursorFetcher",
]
