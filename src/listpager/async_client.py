"""Public async client entrypoint."""

from __future__ import annotations

import asyncio
from collections.abc import Generator, Mapping
from types import TracebackType
from typing import Any

from .client_shared import build_list_params, validate_client_config
from .config import ListPagerConfig
from .core.async_pagination import AsyncPageSession
from .core.async_transport import AsyncTransport
from .core.auto_paging import AutoPagingIterator, auto_paging_each, auto_paging_to_list
from .core.callbacks import DoneHandler
from .core.cursor import CursorFetcher
from .core.errors import ListPagerClientClosedError
from .core.models import ListResult


class PagedList:
    """A list request whose first page is fetched once and shared.

    Awaiting a ``PagedList`` returns its first ``ListResult``. Every
    ``auto_paging_each``/``auto_paging_to_list`` call and every ``async for``
    starts an independent session seeded with that first page.
    """

    def __init__(
        self,
        owner: "AsyncListClient",
        endpoint: str,
        params: Mapping[str, object],
    ) -> None:
        self._owner = owner
        self._endpoint = endpoint
        self._params = dict(params)
        self._first_page: asyncio.Future[ListResult] | None = None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def params(self) -> Mapping[str, object]:
        return dict(self._params)

    def first_page(self) -> "asyncio.Future[ListResult]":
        if self._first_page is None:
            self._owner._ensure_open()
            self._first_page = asyncio.get_running_loop().create_task(self._fetch(self._params))
        return self._first_page

    def __await__(self) -> Generator[Any, None, ListResult]:
        return self.first_page().__await__()

    def __aiter__(self) -> AutoPagingIterator:
        return AutoPagingIterator(self._new_session())

    def auto_paging_each(self, *args: object) -> "asyncio.Task[None] | AutoPagingIterator":
        return auto_paging_each(self._new_session, *args)

    def auto_paging_to_list(
        self,
        options: Mapping[str, object] | int | None,
        on_done: DoneHandler | None = None,
    ) -> "asyncio.Task[list[Any]]":
        return auto_paging_to_list(self._new_session, options, on_done)

    def _new_session(self) -> AsyncPageSession:
        return AsyncPageSession(self.first_page(), CursorFetcher(self._fetch, self._params))

    async def _fetch(self, params: Mapping[str, object]) -> ListResult:
        self._owner._ensure_open()
        return await self._owner._transport.fetch_list(self._endpoint, params)


class AsyncListClient:
    """Public async list client."""

    def __init__(
        self,
        *,
        config: ListPagerConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or ListPagerConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._closed = False

    def list(self, endpoint: str, params: Mapping[str, object] | None = None) -> PagedList:
        self._ensure_open()
        return PagedList(
            self,
            endpoint,
            build_list_params(config=self._config, params=params),
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListPagerClientClosedError("AsyncListClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncListClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "PagedList",
    "AsyncListClient",
]
