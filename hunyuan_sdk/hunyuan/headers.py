"""Request envelope builder.

Builds the header set of one action call and attaches the ``Authorization``
header once the request is signed. The signing input is always derived from
the header dict that goes on the wire (:func:`canonical_headers_for`), so the
canonical headers and the sent ``Host``/``Content-Type`` cannot diverge.
"""
from __future__ import annotations

from typing import Dict, MutableMapping, Optional, Tuple

from ..base.constants import (
    API_VERSION,
    CONTENT_TYPE,
    HEADER_ACTION,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    HEADER_LANGUAGE,
    HEADER_REGION,
    HEADER_TIMESTAMP,
    HEADER_TOKEN,
    HEADER_VERSION,
)
from ..base.signing import SIGNED_HEADERS, SignatureResult, build_authorization, build_canonical_headers
from .credential import Credential, Region


def build_headers(
    action: str,
    endpoint: str,
    region: Region,
    timestamp: int,
    token: Optional[str] = None,
    language: Optional[str] = None,
) -> Dict[str, str]:
    """Return the unsigned header set for one call.

    ``X-TC-Token`` is present only when ``token`` is given and
    ``X-TC-Language`` only when ``language`` is given.
    """
    headers = {
        HEADER_HOST: endpoint,
        HEADER_CONTENT_TYPE: CONTENT_TYPE,
        HEADER_ACTION: action,
        HEADER_VERSION: API_VERSION,
        HEADER_REGION: region.as_str(),
        HEADER_TIMESTAMP: str(timestamp),
    }
    if token is not None:
        headers[HEADER_TOKEN] = token
    if language:
        headers[HEADER_LANGUAGE] = language
    return headers


def canonical_headers_for(headers: MutableMapping[str, str]) -> Tuple[str, str]:
    """Return ``(canonical_headers, signed_headers)`` for the signed subset."""
    return build_canonical_headers(headers, SIGNED_HEADERS)


def attach_authorization(
    headers: MutableMapping[str, str],
    credential: Credential,
    signed_headers: str,
    result: SignatureResult,
) -> str:
    """Set ``Authorization`` on ``headers`` and return its value."""
    value = build_authorization(credential.secret_id, result.credential_scope, signed_headers, result.signature)
    headers[HEADER_AUTHORIZATION] = value
    return value


__all__ = ["build_headers", "canonical_headers_for", "attach_authorization"]
