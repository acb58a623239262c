"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_PAGE_SIZE = 100


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class PagingConfig:
    """Paging-related settings."""

    page_size: int | None = None

    def validate(self) -> None:
        if self.page_size is None:
            return
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ValueError("paging.page_size must be int")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"paging.page_size must be between 1 and {MAX_PAGE_SIZE}")


@dataclass(slots=True, frozen=True)
class ListPagerConfig:
    """Runtime configuration for the list client."""

    base_url: str = "https://api.example.com/v1"
    user_agent: str = "listpager/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    paging: PagingConfig = field(default_factory=PagingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()
        self.paging.validate()


__all__ = [
    "MAX_PAGE_SIZE",
    "TransportConfig",
    "PagingConfig",
    "ListPagerConfig",
]
