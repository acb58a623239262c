from __future__ import annotations

import pytest

from listpager.core.errors import ListPagerProtocolError, ListPagerTransportError
from listpager.core.models import ListResult
from listpager.core.response_parsing import parse_json_payload, parse_list_result
from listpager.core.transport_shared import encode_params
from tests.shared.transport import Response


def test_parse_list_result_preserves_order(two_page_payloads):
    result = parse_list_result(two_page_payloads[0])
    assert result == ListResult(
        data=({"id": "a"}, {"id": "b"}),
        has_more=True,
        url="/v1/items",
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"has_more": False},
        {"data": {"id": "a"}, "has_more": False},
        {"data": [], "has_more": "false"},
        {"data": []},
    ],
)
def test_parse_list_result_rejects_invalid_shapes(payload):
    with pytest.raises(ListPagerProtocolError):
        parse_list_result(payload)


def test_parse_json_payload_rejects_non_object_root():
    with pytest.raises(ListPagerProtocolError):
        parse_json_payload(Response(200, [1, 2]), http_status=200)


def test_parse_json_payload_maps_invalid_json_by_status():
    with pytest.raises(ListPagerProtocolError):
        parse_json_payload(Response(200, ValueError("bad json")), http_status=200)
    with pytest.raises(ListPagerTransportError):
        parse_json_payload(Response(502, ValueError("bad json")), http_status=502)


def test_encode_params_renders_query_values():
    assert encode_params({"limit": 10, "expand": True, "skip": None, "q": "x"}) == {
        "limit": "10",
        "expand": "true",
        "q": "x",
    }
