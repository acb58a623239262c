"""Normalization of push-style auto-paging callbacks."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .errors import ListPagerArgumentError

T = TypeVar("T")

ContinueCallback = Callable[..., None]
ItemHandler = Callable[[Any, ContinueCallback], Any]
DoneHandler = Callable[[BaseException | None, Any], Any]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(func: Callable[..., Any]) -> int:
    """Count the required positional parameters a callable declares.

    Counting stops at the first parameter with a default, so
    ``def on_item(item, verbose=False)`` has an arity of one. Callables without
    an inspectable signature count as one.
    """

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1
    arity = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL_KINDS:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        arity += 1
    return arity


def accepts_positional(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    return any(
        parameter.kind in _POSITIONAL_KINDS
        or parameter.kind is inspect.Parameter.VAR_POSITIONAL
        for parameter in signature.parameters.values()
    )


def resolve_item_handler(args: Sequence[object]) -> ItemHandler | None:
    if len(args) == 0:
        return None
    on_item = args[0]
    if not callable(on_item):
        raise ListPagerArgumentError(
            "The first argument to auto_paging_each, if present, must be a callback "
            f"function; received {type(on_item).__name__}"
        )

    arity = positional_arity(on_item)
    # on_item(item, next_) controls continuation itself.
    if arity == 2:
        return on_item
    if arity > 2:
        raise ListPagerArgumentError(
            "The on_item callback passed to auto_paging_each must accept at most two "
            f"arguments; got {arity}"
        )
    return _wrap_returning_handler(on_item)


def resolve_done_handler(args: Sequence[object]) -> DoneHandler | None:
    if len(args) < 2:
        return None
    on_done = args[1]
    if not callable(on_done):
        raise ListPagerArgumentError(
            "The second argument to auto_paging_each, if present, must be a callback "
            f"function; received {type(on_done).__name__}"
        )
    return on_done


def _wrap_returning_handler(on_item: Callable[..., Any]) -> ItemHandler:
    """Turn ``on_item(item) -> bool | None`` into ``handler(item, next_)``."""

    pass_item = accepts_positional(on_item)

    async def handler(item: Any, next_: ContinueCallback) -> None:
        should_continue = on_item(item) if pass_item else on_item()
        if inspect.isawaitable(should_continue):
            should_continue = await should_continue
        next_(should_continue)

    return handler


def callbackify(future: "asyncio.Future[T]", on_done: DoneHandler | None) -> "asyncio.Future[T]":
    """Deliver the outcome of ``future`` to an error-first ``on_done`` as well.

    The future itself is returned unchanged so callers may still await it.
    """

    if on_done is None:
        return future

    def _deliver(settled: "asyncio.Future[T]") -> None:
        if settled.cancelled():
            on_done(asyncio.CancelledError(), None)
            return
        error = settled.exception()
        if error is not None:
            on_done(error, None)
        else:
            on_done(None, settled.result())

    future.add_done_callback(_deliver)
    return future


__all__ = [
    "ContinueCallback",
    "ItemHandler",
    "DoneHandler",
    "positional_arity",
    "accepts_positional",
    "resolve_item_handler",
    "resolve_done_handler",
    "callbackify",
]
