"""Action invocation: encode -> sign -> send -> decode.

Purpose:
    Implements the single code path behind ``Client.invoke``. Every action
    call runs the same sequence, so adding an action only needs a request
    model and a response model.

Sequence:
    1. Serialize the request (pydantic models by alias, ``None`` omitted).
    2. Read the clock once; the value feeds both ``X-TC-Timestamp`` and the
       signature date.
    3. Build headers, canonicalize the signed subset, sign, attach
       ``Authorization``.
    4. POST ``https://{endpoint}/`` through the client's ``httpx.Client``.
    5. Decode: 2xx -> ``{"Response": T}``; otherwise the vendor error
       envelope, or ``HTTP_{status}`` with the raw body.

Retries and error handling:
    - No retries. ``httpx.HTTPError`` becomes :class:`TransportError`,
      decode failures :class:`SerializationError`, vendor failures
      :class:`ServiceError`. All are raised to the caller.

Diagnostics:
    - When ``client.debug`` is set, structured events are emitted through
      ``log_event``. Signatures and the secret id are masked; the secret key
      is never passed to the logger.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ..base.constants import (
    CANONICAL_QUERYSTRING,
    CANONICAL_URI,
    HEADER_AUTHORIZATION,
    HEADER_TOKEN,
    HTTP_ERROR_CODE_PREFIX,
    HTTP_METHOD,
    SERVICE,
)
from ..base.crypto import sha256_hex
from ..base.errors import (
    SerializationError,
    ServiceError,
    TransportError,
    is_retryable_service_error,
    is_retryable_status,
)
from ..base.logging import LogContext, get_logger, log_event
from ..base.masking import mask, mask_authorization
from ..base.signing import (
    build_canonical_request,
    build_credential_scope,
    build_string_to_sign,
    tc3_sign,
    utc_date,
)
from ..models.envelope import TencentCloudErrorResponse
from .headers import attach_authorization, build_headers, canonical_headers_for

if TYPE_CHECKING:  # pragma: no cover
    from .client import Client

R = TypeVar("R", bound=BaseModel)

RequestBody = Union[BaseModel, Mapping[str, Any]]

_LOGGER_NAME = "hunyuan.client"


def encode_request(request: RequestBody) -> str:
    """Serialize ``request`` to the JSON body that is signed and sent.

    Raises:
        SerializationError: When the request cannot be encoded.
    """
    try:
        if isinstance(request, BaseModel):
            return request.model_dump_json(by_alias=True, exclude_none=True)
        return json.dumps(dict(request), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"failed to encode request: {exc}", raw=exc) from exc


def parse_error_envelope(text: str) -> Optional[TencentCloudErrorResponse]:
    """Return the vendor error envelope in ``text`` if one is populated.

    Both the top-level ``{"RequestId", "Error"}`` layout and the nested
    ``{"Response": {"RequestId", "Error"}}`` layout are recognized.
    """
    try:
        payload = json.loads(text)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for candidate in (payload, payload.get("Response")):
        if not isinstance(candidate, dict) or "Error" not in candidate:
            continue
        try:
            envelope = TencentCloudErrorResponse.model_validate(candidate)
        except ValidationError:
            continue
        if envelope.error is not None:
            return envelope
    return None


def _service_error(envelope: TencentCloudErrorResponse, status: int) -> ServiceError:
    err = envelope.error
    code = err.code if err else ""
    return ServiceError(
        message=err.message if err else "",
        code=code,
        request_id=envelope.request_id,
        status=status,
        retryable=is_retryable_service_error(code, status),
    )


def decode_error(status: int, text: str) -> ServiceError:
    """Map a non-2xx response to a :class:`ServiceError`."""
    envelope = parse_error_envelope(text)
    if envelope is not None:
        return _service_error(envelope, status)
    return ServiceError(
        message=text,
        code=f"{HTTP_ERROR_CODE_PREFIX}{status}",
        status=status,
        retryable=is_retryable_status(status),
    )


def decode_response(status: int, text: str, response_model: Type[R]) -> R:
    """Decode a response body into ``response_model`` or raise.

    Raises:
        ServiceError: Non-2xx status, or a 2xx body whose ``Response`` carries
            a vendor ``Error`` object.
        SerializationError: A 2xx body that does not match ``response_model``.
    """
    if not 200 <= status < 300:
        raise decode_error(status, text)
    envelope = parse_error_envelope(text)
    if envelope is not None:
        raise _service_error(envelope, status)
    try:
        return response_model.model_validate_json(text)
    except ValidationError as exc:
        raise SerializationError(f"failed to decode {response_model.__name__}: {exc}", raw=exc) from exc


def send(http: httpx.Client, url: str, headers: Mapping[str, str], body: str) -> httpx.Response:
    """POST ``body`` and return the response; transport failures are wrapped."""
    try:
        return http.post(url, headers=dict(headers), content=body.encode("utf-8"))
    except httpx.HTTPError as exc:
        raise TransportError(f"{type(exc).__name__}: {exc}", raw=exc) from exc
    except UnicodeEncodeError as exc:
        # header values must be ASCII on the wire
        raise SerializationError(f"request could not be encoded: {exc.reason}", raw=exc) from exc


def _log_signature(
    logger: logging.Logger,
    ctx: LogContext,
    canonical_headers: str,
    signed_headers: str,
    hashed_payload: str,
    timestamp: int,
    signature: str,
) -> None:
    hashed_canonical_request = sha256_hex(
        build_canonical_request(
            HTTP_METHOD, CANONICAL_URI, CANONICAL_QUERYSTRING, canonical_headers, signed_headers, hashed_payload
        )
    )
    scope = build_credential_scope(utc_date(timestamp), SERVICE)
    log_event(
        logger,
        "tc3.sign",
        ctx,
        scope=scope,
        hashed_canonical_request=hashed_canonical_request,
        string_to_sign_sha256=sha256_hex(build_string_to_sign(timestamp, scope, hashed_canonical_request)),
        signature=mask(signature),
    )


def _log_request(logger: logging.Logger, ctx: LogContext, url: str, headers: Mapping[str, str], body: str) -> None:
    log_event(logger, "request", ctx, url=url, token_present=HEADER_TOKEN in headers)
    shown = {
        name: (mask_authorization(value) if name == HEADER_AUTHORIZATION else value)
        for name, value in headers.items()
        if name != HEADER_TOKEN
    }
    log_event(logger, "request.headers", ctx, headers=shown)
    log_event(logger, "request.body", ctx, body=body)


def call_action(client: "Client", action: str, request: RequestBody, response_model: Type[R]) -> R:
    """Invoke ``action`` with ``request`` and decode into ``response_model``."""
    logger = get_logger(_LOGGER_NAME, child_level=logging.INFO) if client.debug else None
    ctx = LogContext(action=action, region=client.region.as_str(), endpoint=client.endpoint)

    body = encode_request(request)
    timestamp = int(client.clock())

    headers = build_headers(
        action,
        client.endpoint,
        client.region,
        timestamp,
        token=client.credential.token,
        language=client.language,
    )
    canonical_headers, signed_headers = canonical_headers_for(headers)
    hashed_payload = sha256_hex(body)
    result = tc3_sign(
        client.credential.secret_key,
        HTTP_METHOD,
        CANONICAL_URI,
        CANONICAL_QUERYSTRING,
        canonical_headers,
        signed_headers,
        hashed_payload,
        timestamp,
        service=SERVICE,
    )
    attach_authorization(headers, client.credential, signed_headers, result)
    url = f"https://{client.endpoint}/"

    if logger is not None:
        _log_signature(logger, ctx, canonical_headers, signed_headers, hashed_payload, timestamp, result.signature)
        _log_request(logger, ctx, url, headers, body)

    response = send(client.http, url, headers, body)
    status, text = response.status_code, response.text

    if logger is not None:
        log_event(logger, "response", ctx, status=status, body=text)
    try:
        return decode_response(status, text, response_model)
    except ServiceError as err:
        if logger is not None:
            ctx.request_id = err.request_id
            log_event(logger, "response.error", ctx, level=logging.WARNING, status=status, code=err.code, message=err.message)
        raise


__all__ = [
    "RequestBody",
    "encode_request",
    "parse_error_envelope",
    "decode_error",
    "decode_response",
    "send",
    "call_action",
]
