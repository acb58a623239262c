"""Shared helpers for client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping

from .config import ListPagerConfig
from .core.errors import ListPagerArgumentError


def validate_client_config(config: ListPagerConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ListPagerArgumentError(str(exc)) from exc


def build_list_params(
    *,
    config: ListPagerConfig,
    params: Mapping[str, object] | None,
) -> dict[str, object]:
    resolved = dict(params or {})
    if config.paging.page_size is not None:
        resolved.setdefault("limit", config.paging.page_size)
    return resolved


__all__ = [
    "validate_client_config",
    "build_list_params",
]
