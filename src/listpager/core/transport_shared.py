"""Shared helpers for transport construction."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import ListPagerConfig


def build_default_headers(config: ListPagerConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ListPagerConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def encode_params(params: Mapping[str, object]) -> dict[str, str]:
    """Render request parameters as query-string values, dropping ``None``."""

    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "encode_params",
]
