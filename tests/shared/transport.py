from __future__ import annotations

from collections.abc import Sequence

from listpager.config import ListPagerConfig, PagingConfig


class Response:
    def __init__(self, status_code: int, payload: object):
        self.status_code = status_code
        self._payload = payload

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


Step = Response | Exception


class AsyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls = 0
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def get(self, endpoint: str, params: dict[str, str]):
        self.calls += 1
        self.requests.append((endpoint, dict(params)))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


def build_config(*, page_size: int | None = None) -> ListPagerConfig:
    cfg = ListPagerConfig(
        base_url="https://api.test/v1",
        paging=PagingConfig(page_size=page_size),
    )
    cfg.validate()
    return cfg
