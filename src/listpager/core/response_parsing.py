"""Response parsing helpers for the async transport."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import ListPagerError, ListPagerProtocolError, ListPagerTransportError
from .models import ListResult


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise ListPagerProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise ListPagerProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def parse_list_result(payload: Mapping[str, object]) -> ListResult:
    return ListResult.from_payload(payload)


def _json_parse_error(*, http_status: int | None) -> ListPagerError:
    message = "response body is not valid JSON"
    if http_status is not None and http_status >= 400:
        return ListPagerTransportError(
            message,
            http_status=http_status,
            cause="server" if http_status >= 500 else "client",
        )
    return ListPagerProtocolError(
        message,
        http_status=http_status,
    )


__all__ = [
    "parse_json_payload",
    "parse_list_result",
]
