"""Core list and iteration models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ListPagerProtocolError

MAX_COLLECT_ITEMS = 10_000


@dataclass(slots=True, frozen=True)
class ListResult:
    """One fetched page of a list endpoint."""

    data: tuple[Any, ...]
    has_more: bool
    url: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ListResult":
        data = payload.get("data")
        if not isinstance(data, list):
            raise ListPagerProtocolError("list payload 'data' must be an array")
        has_more = payload.get("has_more")
        if not isinstance(has_more, bool):
            raise ListPagerProtocolError("list payload 'has_more' must be a boolean")
        url = payload.get("url")
        return cls(
            data=tuple(data),
            has_more=has_more,
            url=str(url) if url is not None else None,
        )


@dataclass(slots=True, frozen=True)
class IterationResult:
    value: Any = None
    done: bool = False


ITERATION_DONE = IterationResult(done=True)


__all__ = [
    "MAX_COLLECT_ITEMS",
    "ListResult",
    "IterationResult",
    "ITERATION_DONE",
]
