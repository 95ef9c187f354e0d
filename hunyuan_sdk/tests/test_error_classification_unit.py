from __future__ import annotations

import pytest

from hunyuan_sdk.base.errors import (
    ConfigurationError,
    ErrorKind,
    SdkError,
    SerializationError,
    ServiceError,
    TransportError,
    is_retryable_service_error,
    is_retryable_status,
)


@pytest.mark.parametrize(
    "cls, kind",
    [
        (TransportError, ErrorKind.TRANSPORT),
        (SerializationError, ErrorKind.SERIALIZATION),
        (ConfigurationError, ErrorKind.CONFIGURATION),
        (ServiceError, ErrorKind.SERVICE),
    ],
)
def test_subclasses_pin_kind(cls, kind):
    err = cls("boom")
    assert isinstance(err, SdkError)
    assert err.kind is kind
    assert err.message == "boom"


def test_service_error_fields_and_str():
    err = ServiceError(message="bad sig", code="AuthFailure.SignatureFailure", request_id="r2", status=401)
    assert err.retryable is False
    assert "AuthFailure.SignatureFailure" in str(err)
    assert "r2" in str(err)


def test_raw_kept_out_of_repr():
    cause = ValueError("secret-ish detail")
    err = TransportError("wrapped", raw=cause)
    assert err.raw is cause
    assert "secret-ish" not in repr(err)


@pytest.mark.parametrize(
    "code, status, expected",
    [
        ("InternalError", 200, True),
        ("RequestLimitExceeded", 200, True),
        ("LimitExceeded.AppLimit", None, True),
        ("AuthFailure.SignatureFailure", 401, False),
        ("InvalidParameter", 400, False),
        ("", 503, True),
        (None, 429, True),
        ("HTTP_404", 404, False),
    ],
)
def test_retryable_classification(code, status, expected):
    assert is_retryable_service_error(code, status) is expected


def test_retryable_status():
    assert is_retryable_status(502)
    assert not is_retryable_status(400)
    assert not is_retryable_status(None)
