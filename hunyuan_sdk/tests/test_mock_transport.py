from __future__ import annotations

import httpx
import pytest

from hunyuan_sdk.mock import canned_transport, fixture_transport, load_fixture_catalog


def test_catalog_contains_named_fixtures():
    catalog = load_fixture_catalog()
    assert {"chat_success", "auth_failure", "embedded_error", "internal_error"} <= set(catalog)


def test_canned_json_body_and_recording():
    canned = canned_transport(200, {"Response": {"RequestId": "r1"}})
    with canned.client() as http:
        resp = http.post("https://example.com/", content=b"{}")
    assert resp.status_code == 200
    assert resp.json() == {"Response": {"RequestId": "r1"}}
    assert canned.last_request.content == b"{}"


def test_canned_text_body():
    canned = canned_transport(500, "internal error")
    with canned.client() as http:
        resp = http.get("https://example.com/")
    assert resp.text == "internal error"


def test_last_request_empty_when_unused():
    assert canned_transport(200, b"").last_request is None


def test_unknown_fixture_raises():
    with pytest.raises(KeyError):
        fixture_transport("does_not_exist")


def test_fixture_transport_from_explicit_catalog():
    canned = fixture_transport("x", {"x": {"status": 404, "text": "missing"}})
    assert isinstance(canned.transport(), httpx.MockTransport)
    assert canned.status == 404
    assert canned.content == b"missing"
