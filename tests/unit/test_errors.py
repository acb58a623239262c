from __future__ import annotations

from listpager.core.errors import (
    ListPagerArgumentError,
    ListPagerError,
    ListPagerLimitExceededError,
    ListPagerProtocolError,
    ListPagerTransportError,
    classify_http_status,
    extract_error_message,
)


def test_classify_success_statuses_return_none():
    assert classify_http_status(200) is None
    assert classify_http_status(204) is None


def test_classify_500_maps_to_server_transport_error():
    err = classify_http_status(500, {"error": {"message": "boom"}})
    assert isinstance(err, ListPagerTransportError)
    assert err.http_status == 500
    assert err.cause == "server"
    assert str(err) == "boom"


def test_classify_404_maps_to_client_transport_error():
    err = classify_http_status(404)
    assert isinstance(err, ListPagerTransportError)
    assert err.cause == "client"
    assert "404" in str(err)


def test_missing_status_is_protocol_error():
    assert isinstance(classify_http_status(None), ListPagerProtocolError)


def test_extract_error_message_shapes():
    assert extract_error_message({"error": "plain"}) == "plain"
    assert extract_error_message({"error": {"message": "nested"}}) == "nested"
    assert extract_error_message({}) is None
    assert extract_error_message(None) is None


def test_hierarchy_keeps_builtin_bases():
    assert issubclass(ListPagerArgumentError, ListPagerError)
    assert issubclass(ListPagerArgumentError, TypeError)
    assert issubclass(ListPagerLimitExceededError, ValueError)
