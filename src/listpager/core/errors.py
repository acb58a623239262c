"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if isinstance(error, Mapping):
        error = error.get("message")
    return str(error) if error is not None else None


class ListPagerError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class ListPagerArgumentError(ListPagerError, TypeError):
    """Invalid handler, option, or configuration supplied by the caller."""


class ListPagerLimitExceededError(ListPagerError, ValueError):
    """Requested collection size is above the hard ceiling."""


class ListPagerInvariantError(ListPagerError):
    """Page data violates the paging contract (e.g. has_more with no items)."""


class ListPagerTransportError(ListPagerError):
    """Network/transport-level failure or non-success HTTP status."""


class ListPagerProtocolError(ListPagerError):
    """Response body is not a valid list payload."""


class ListPagerClientClosedError(ListPagerError):
    """Raised when client is used after close."""


def classify_http_status(
    http_status: int | None,
    payload: Mapping[str, object] | None = None,
) -> ListPagerError | None:
    """Map an HTTP status to a domain exception, or None on success."""

    if http_status is None:
        return ListPagerProtocolError("Missing HTTP status")
    if 200 <= http_status < 300:
        return None

    message = extract_error_message(payload) or f"list request failed with HTTP {http_status}"
    if http_status >= 500:
        return ListPagerTransportError(
            message,
            http_status=http_status,
            cause="server",
        )
    return ListPagerTransportError(
        message,
        http_status=http_status,
        cause="client",
    )


__all__ = [
    "ListPagerError",
    "ListPagerArgumentError",
    "ListPagerLimitExceededError",
    "ListPagerInvariantError",
    "ListPagerTransportError",
    "ListPagerProtocolError",
    "ListPagerClientClosedError",
    "extract_error_message",
    "classify_http_status",
]
