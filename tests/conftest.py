from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def two_page_payloads() -> list[dict[str, object]]:
    return [
        {"data": [{"id": "a"}, {"id": "b"}], "has_more": True, "url": "/v1/items"},
        {"data": [{"id": "c"}], "has_more": False, "url": "/v1/items"},
    ]
