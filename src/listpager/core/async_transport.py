"""Async HTTP transport for list endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import ListPagerConfig
from .errors import ListPagerTransportError, classify_http_status
from .models import ListResult
from .response_parsing import parse_json_payload, parse_list_result
from .transport_shared import build_default_headers, build_default_timeout, encode_params

logger = logging.getLogger("listpager")


class AsyncTransportClient(Protocol):
    async def get(self, endpoint: str, params: Mapping[str, str]) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport issuing one GET per list page."""

    def __init__(
        self,
        config: ListPagerConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.AsyncClient(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, endpoint: str, *, params: Mapping[str, object]) -> dict[str, object]:
        if self._closed:
            raise ListPagerTransportError("transport is already closed")

        normalized_endpoint = self._normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s", normalized_endpoint)
        try:
            response = await self._client.get(normalized_endpoint, params=encode_params(params))
        except Exception as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise ListPagerTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            http_status,
        )
        payload = parse_json_payload(response, http_status=http_status)
        mapped_error = classify_http_status(http_status, payload)
        if mapped_error is not None:
            logger.error(
                "request failed endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise mapped_error

        logger.info("request success endpoint=%s", normalized_endpoint)
        return payload

    async def fetch_list(self, endpoint: str, params: Mapping[str, object]) -> ListResult:
        payload = await self.request(endpoint, params=params)
        return parse_list_result(payload)

    @staticmethod
    def _normalize_endpoint(endpoint: str) -> str:
        return endpoint.lstrip("/")


__all__ = [
    "AsyncTransportClient",
    "AsyncTransport",
]
