"""Public package exports for the list auto-paging client."""

from .async_client import AsyncListClient, PagedList
from .config import ListPagerConfig
from .core.models import IterationResult, ListResult

__all__ = ["AsyncListClient", "PagedList", "ListPagerConfig", "ListResult", "IterationResult"]
