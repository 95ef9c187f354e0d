"""End-to-end action calls through canned transports.

Covers:
- Successful ChatCompletions decode.
- Vendor error envelopes (nested and embedded in a 2xx body).
- Non-JSON error bodies mapped to ``HTTP_{status}``.
- Malformed 2xx bodies, encode failures and transport failures.
- The request that reaches the wire: URL, headers, body and a signature that
  verifies against the sent values.
"""
from __future__ import annotations

import json
import re

import httpx
import pytest

from hunyuan_sdk.base.crypto import sha256_hex
from hunyuan_sdk.base.errors import ErrorKind, SerializationError, ServiceError, TransportError
from hunyuan_sdk.base.signing import build_canonical_headers, tc3_sign
from hunyuan_sdk.hunyuan import ClientBuilder, Credential
from hunyuan_sdk.hunyuan.invoker import decode_error, encode_request, parse_error_envelope
from hunyuan_sdk.mock import canned_transport, fixture_transport
from hunyuan_sdk.models import ChatCompletionsRequest, Message, TencentCloudResponse

from conftest import FIXED_TS, SECRET_ID, SECRET_KEY

AUTH_RE = re.compile(
    r"^TC3-HMAC-SHA256 Credential=(?P<id>[^/]+)/(?P<scope>\d{4}-\d{2}-\d{2}/hunyuan/tc3_request), "
    r"SignedHeaders=content-type;host, Signature=(?P<sig>[0-9a-f]{64})$"
)


def _hello() -> ChatCompletionsRequest:
    return ChatCompletionsRequest(model="hunyuan-lite", messages=[Message(role="user", content="Hello")])


def test_chat_completions_success(make_client):
    canned = fixture_transport("chat_success")
    resp = make_client(canned).chat_completions(_hello())
    assert resp.response.request_id == "r1"
    assert resp.response.id == "id1"
    assert resp.response.first_text() == "Hi"
    assert resp.response.usage.total_tokens == 7


def test_nested_error_envelope_raises_service_error(make_client):
    canned = canned_transport(
        401,
        {"Response": {"Error": {"Code": "AuthFailure.SignatureFailure", "Message": "bad sig"}, "RequestId": "r2"}},
    )
    with pytest.raises(ServiceError) as ei:
        make_client(canned).chat_completions(_hello())
    err = ei.value
    assert err.kind is ErrorKind.SERVICE
    assert err.code == "AuthFailure.SignatureFailure"
    assert err.message == "bad sig"
    assert err.request_id == "r2"
    assert err.status == 401
    assert err.retryable is False


def test_plain_text_error_uses_http_status_code(make_client):
    with pytest.raises(ServiceError) as ei:
        make_client(fixture_transport("internal_error")).chat_completions(_hello())
    err = ei.value
    assert err.code == "HTTP_500"
    assert err.message == "internal error"
    assert err.request_id is None
    assert err.retryable is True


def test_error_inside_2xx_body_raises(make_client):
    with pytest.raises(ServiceError) as ei:
        make_client(fixture_transport("embedded_error")).chat_completions(_hello())
    assert ei.value.code == "RequestLimitExceeded"
    assert ei.value.request_id == "r3"
    assert ei.value.status == 200
    assert ei.value.retryable is True


@pytest.mark.parametrize("body", ["not json", {"Nope": {}}, {"Response": {"Choices": "bad"}}])
def test_malformed_success_body_is_serialization_error(make_client, body):
    with pytest.raises(SerializationError) as ei:
        make_client(canned_transport(200, body)).chat_completions(_hello())
    assert ei.value.kind is ErrorKind.SERIALIZATION
    assert ei.value.raw is not None


def test_transport_failure_is_wrapped(credential):
    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = (
        ClientBuilder()
        .http(httpx.Client(transport=httpx.MockTransport(_boom)))
        .credential(credential)
        .clock(lambda: FIXED_TS)
        .build()
    )
    with pytest.raises(TransportError) as ei:
        client.chat_completions(_hello())
    assert ei.value.kind is ErrorKind.TRANSPORT
    assert isinstance(ei.value.raw, httpx.ConnectError)
    assert isinstance(ei.value.__cause__, httpx.ConnectError)


def test_unencodable_request_is_serialization_error(make_client):
    canned = fixture_transport("chat_success")
    with pytest.raises(SerializationError):
        make_client(canned).invoke("ChatCompletions", {"Model": object()})
    assert canned.requests == []


def test_request_on_the_wire(make_client):
    canned = fixture_transport("chat_success")
    make_client(canned).chat_completions(_hello())
    req = canned.last_request
    assert req.method == "POST"
    assert str(req.url) == "https://hunyuan.tencentcloudapi.com/"
    assert req.headers["Host"] == "hunyuan.tencentcloudapi.com"
    assert req.headers["Content-Type"] == "application/json; charset=utf-8"
    assert req.headers["X-TC-Action"] == "ChatCompletions"
    assert req.headers["X-TC-Version"] == "2023-09-01"
    assert req.headers["X-TC-Region"] == "ap-guangzhou"
    assert req.headers["X-TC-Timestamp"] == str(FIXED_TS)
    assert "X-TC-Token" not in req.headers
    assert json.loads(req.content) == {"Model": "hunyuan-lite", "Messages": [{"Role": "user", "Content": "Hello"}]}


def test_authorization_verifies_against_sent_request(make_client):
    canned = fixture_transport("chat_success")
    make_client(canned).chat_completions(_hello())
    req = canned.last_request
    m = AUTH_RE.match(req.headers["Authorization"])
    assert m is not None
    assert m.group("id") == SECRET_ID
    assert m.group("scope") == "2023-11-14/hunyuan/tc3_request"

    canonical, signed = build_canonical_headers(
        {"Host": req.headers["Host"], "Content-Type": req.headers["Content-Type"]}
    )
    expected = tc3_sign(
        SECRET_KEY, "POST", "/", "", canonical, signed, sha256_hex(req.content), int(req.headers["X-TC-Timestamp"])
    )
    assert m.group("sig") == expected.signature


def test_session_token_and_language_are_sent(make_client):
    canned = fixture_transport("chat_success")
    cred = Credential(SECRET_ID, SECRET_KEY, token="session-token")
    make_client(canned, credential=cred, language="en-US").chat_completions(_hello())
    req = canned.last_request
    assert req.headers["X-TC-Token"] == "session-token"
    assert req.headers["X-TC-Language"] == "en-US"
    assert "x-tc-token" not in req.headers["Authorization"].split("SignedHeaders=")[1]


def test_clock_read_once_per_call(make_client):
    calls = []

    def _clock() -> float:
        calls.append(1)
        return FIXED_TS + 0.75

    canned = fixture_transport("chat_success")
    make_client(canned, clock=_clock).chat_completions(_hello())
    assert len(calls) == 1
    assert canned.last_request.headers["X-TC-Timestamp"] == str(FIXED_TS)


def test_custom_endpoint_and_region(make_client):
    canned = fixture_transport("chat_success")
    make_client(canned, endpoint="https://hunyuan.internal.example.com/", region="ap-beijing").chat_completions(
        _hello()
    )
    req = canned.last_request
    assert str(req.url) == "https://hunyuan.internal.example.com/"
    assert req.headers["Host"] == "hunyuan.internal.example.com"
    assert req.headers["X-TC-Region"] == "ap-beijing"


def test_invoke_generic_action_with_mapping(make_client):
    canned = canned_transport(200, {"Response": {"RequestId": "r5", "TotalTokens": 3}})
    resp = make_client(canned).invoke("GetTokenCount", {"Prompt": "hi"})
    assert isinstance(resp, TencentCloudResponse)
    assert resp.response["TotalTokens"] == 3
    assert canned.last_request.headers["X-TC-Action"] == "GetTokenCount"
    assert canned.last_request.content == b'{"Prompt":"hi"}'


def test_concurrent_clones_share_transport(make_client):
    from concurrent.futures import ThreadPoolExecutor

    canned = fixture_transport("chat_success")
    client = make_client(canned)
    clones = [client, client.clone(region=client.region), client.clone(debug=False)]

    def _call(c) -> str:
        return c.chat_completions(_hello()).response.first_text()

    with ThreadPoolExecutor(max_workers=3) as pool:
        results = list(pool.map(_call, clones * 3))
    assert results == ["Hi"] * 9
    assert len(canned.requests) == 9


def test_encode_request_compact_json():
    assert encode_request({"A": 1, "B": "中"}) == '{"A":1,"B":"中"}'


def test_parse_error_envelope_layouts():
    top = parse_error_envelope(json.dumps({"RequestId": "r", "Error": {"Code": "C", "Message": "M"}}))
    nested = parse_error_envelope(json.dumps({"Response": {"RequestId": "r", "Error": {"Code": "C", "Message": "M"}}}))
    assert top.error.code == nested.error.code == "C"
    assert parse_error_envelope("[]") is None
    assert parse_error_envelope("garbage") is None
    assert parse_error_envelope(json.dumps({"Response": {"RequestId": "r"}})) is None


def test_decode_error_non_json_body():
    err = decode_error(503, "<html>unavailable</html>")
    assert err.code == "HTTP_503"
    assert err.message == "<html>unavailable</html>"
    assert err.retryable is True


def test_full_chat_request_round_trip(make_client):
    canned = fixture_transport("chat_success")
    req = ChatCompletionsRequest(
        model="hunyuan-lite",
        messages=[Message(role="user", content="Hello, Hunyuan!")],
        temperature=0.7,
        top_p=0.95,
        stream=False,
    )
    resp = make_client(canned).chat_completions(req)
    assert json.loads(canned.last_request.content) == {
        "Model": "hunyuan-lite",
        "Messages": [{"Role": "user", "Content": "Hello, Hunyuan!"}],
        "Temperature": 0.7,
        "TopP": 0.95,
        "Stream": False,
    }
    inner = resp.response
    assert inner.request_id == "r1"
    assert inner.id == "id1"
    assert inner.first_text() == "Hi"
    assert inner.choices[0].message.role == "assistant"
    assert inner.choices[0].finish_reason == "stop"
    assert (inner.usage.prompt_tokens, inner.usage.completion_tokens, inner.usage.total_tokens) == (5, 2, 7)


def test_non_ascii_header_value_is_serialization_error(make_client):
    canned = fixture_transport("chat_success")
    client = make_client(canned).clone(credential=Credential(SECRET_ID, SECRET_KEY, token="tök"))
    with pytest.raises(SerializationError) as ei:
        client.chat_completions(_hello())
    assert isinstance(ei.value.raw, UnicodeEncodeError)
    assert "tök" not in ei.value.message
    assert canned.requests == []
