"""TC3-HMAC-SHA256 request signing engine.

Purpose
-------
Produce the signature and credential scope the vendor verifies server side.
Every step is a pure function of its inputs so each stage can be tested in
isolation and the engine is safe to call from any number of threads.

Algorithm
---------
1. Canonical request::

       METHOD\\nURI\\nQUERY\\nCANONICAL_HEADERS\\nSIGNED_HEADERS\\nHASHED_PAYLOAD

   ``CANONICAL_HEADERS`` is one ``name:value\\n`` line per signed header,
   lowercase and sorted by name. ``SIGNED_HEADERS`` is the ``;``-joined names
   in the same order.
2. ``hashed_canonical_request = sha256_hex(canonical_request)``.
3. ``date`` is the UTC calendar date of the request timestamp.
4. ``credential_scope = "{date}/{service}/tc3_request"``.
5. ``string_to_sign = "TC3-HMAC-SHA256\\n{timestamp}\\n{scope}\\n{hashed}"``.
6. Layered key derivation::

       secret_date    = HMAC("TC3" + secret_key, date)
       secret_service = HMAC(secret_date, service)
       secret_signing = HMAC(secret_service, "tc3_request")
       signature      = hex(HMAC(secret_signing, string_to_sign))

The date is derived from the same timestamp that is sent in
``X-TC-Timestamp``; callers must never read the clock twice.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Mapping, NamedTuple, Tuple

from .constants import (
    ALGORITHM,
    REQUEST_TYPE,
    SECRET_KEY_PREFIX,
    SERVICE,
)
from .crypto import hmac_sha256, hmac_sha256_hex, sha256_hex

# Headers covered by the signature for every action call.
SIGNED_HEADERS: Tuple[str, ...] = ("content-type", "host")


class SignatureResult(NamedTuple):
    """Signature hex digest and the credential scope it is bound to."""

    signature: str
    credential_scope: str


def utc_date(timestamp: int) -> str:
    """Return the ``YYYY-MM-DD`` UTC date for a unix timestamp."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


def build_canonical_headers(
    headers: Mapping[str, str],
    include: Iterable[str] = SIGNED_HEADERS,
) -> Tuple[str, str]:
    """Canonicalize the subset of ``headers`` named in ``include``.

    Header names are matched case-insensitively. Names and values are
    lowercased and trimmed, lines are sorted by name and each line ends with a
    newline.

    Returns:
        ``(canonical_headers, signed_headers)``.

    Raises:
        KeyError: If a header listed in ``include`` is absent from ``headers``.
    """
    lowered = {name.strip().lower(): value for name, value in headers.items()}
    names = sorted({name.strip().lower() for name in include})
    lines = []
    for name in names:
        if name not in lowered:
            raise KeyError(f"signed header '{name}' missing from request headers")
        lines.append(f"{name}:{str(lowered[name]).strip().lower()}\n")
    return "".join(lines), ";".join(names)


def build_canonical_request(
    method: str,
    canonical_uri: str,
    canonical_querystring: str,
    canonical_headers: str,
    signed_headers: str,
    hashed_payload: str,
) -> str:
    return "\n".join(
        (
            method,
            canonical_uri,
            canonical_querystring,
            canonical_headers,
            signed_headers,
            hashed_payload,
        )
    )


def build_credential_scope(date: str, service: str = SERVICE) -> str:
    return f"{date}/{service}/{REQUEST_TYPE}"


def build_string_to_sign(timestamp: int, credential_scope: str, hashed_canonical_request: str) -> str:
    return f"{ALGORITHM}\n{timestamp}\n{credential_scope}\n{hashed_canonical_request}"


def derive_signing_key(secret_key: str, date: str, service: str = SERVICE) -> bytes:
    """Run the date -> service -> request-type HMAC chain and return the key."""
    secret_date = hmac_sha256(f"{SECRET_KEY_PREFIX}{secret_key}".encode("utf-8"), date)
    secret_service = hmac_sha256(secret_date, service)
    return hmac_sha256(secret_service, REQUEST_TYPE)


def tc3_sign(
    secret_key: str,
    method: str,
    canonical_uri: str,
    canonical_querystring: str,
    canonical_headers: str,
    signed_headers: str,
    hashed_payload: str,
    timestamp: int,
    service: str = SERVICE,
) -> SignatureResult:
    """Sign one request.

    Parameters:
        secret_key: Caller secret; only ever used as HMAC key material.
        method: HTTP method, e.g. ``"POST"``.
        canonical_uri: Request path, ``"/"`` for action calls.
        canonical_querystring: Query string, empty for POST action calls.
        canonical_headers: Output of :func:`build_canonical_headers`.
        signed_headers: ``;``-joined lowercase header names.
        hashed_payload: Lowercase hex SHA-256 of the request body.
        timestamp: Unix seconds also sent as ``X-TC-Timestamp``.
        service: Service name bound into the credential scope.

    Returns:
        :class:`SignatureResult` ``(signature, credential_scope)``.
    """
    canonical_request = build_canonical_request(
        method,
        canonical_uri,
        canonical_querystring,
        canonical_headers,
        signed_headers,
        hashed_payload,
    )
    date = utc_date(timestamp)
    credential_scope = build_credential_scope(date, service)
    string_to_sign = build_string_to_sign(timestamp, credential_scope, sha256_hex(canonical_request))
    signing_key = derive_signing_key(secret_key, date, service)
    return SignatureResult(hmac_sha256_hex(signing_key, string_to_sign), credential_scope)


def build_authorization(secret_id: str, credential_scope: str, signed_headers: str, signature: str) -> str:
    """Format the ``Authorization`` header value."""
    return (
        f"{ALGORITHM} Credential={secret_id}/{credential_scope}, "
        f"SignedHeaders={signed_headers}, Signature={signature}"
    )


__all__ = [
    "SIGNED_HEADERS",
    "SignatureResult",
    "utc_date",
    "build_canonical_headers",
    "build_canonical_request",
    "build_credential_scope",
    "build_string_to_sign",
    "derive_signing_key",
    "tc3_sign",
    "build_authorization",
]
