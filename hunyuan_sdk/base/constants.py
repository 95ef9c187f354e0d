"""Base shared constants for the Hunyuan client.

Central location for protocol literals so the signing engine, the header
builder and the invoker never disagree about a header name or scope label.

Security
--------
Only protocol identifiers live here. No credentials are embedded.
"""
from __future__ import annotations

# Service and API version pinned for this client
SERVICE = "hunyuan"
API_VERSION = "2023-09-01"

# TC3 signing scheme
ALGORITHM = "TC3-HMAC-SHA256"
SECRET_KEY_PREFIX = "TC3"
REQUEST_TYPE = "tc3_request"

# Request shape
HTTP_METHOD = "POST"
CANONICAL_URI = "/"
CANONICAL_QUERYSTRING = ""
CONTENT_TYPE = "application/json; charset=utf-8"

# Header names (wire casing)
HEADER_HOST = "Host"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACTION = "X-TC-Action"
HEADER_VERSION = "X-TC-Version"
HEADER_REGION = "X-TC-Region"
HEADER_TIMESTAMP = "X-TC-Timestamp"
HEADER_TOKEN = "X-TC-Token"
HEADER_LANGUAGE = "X-TC-Language"
HEADER_AUTHORIZATION = "Authorization"

# Actions
ACTION_CHAT_COMPLETIONS = "ChatCompletions"

# Placeholder code prefix for non-2xx bodies without a vendor error envelope
HTTP_ERROR_CODE_PREFIX = "HTTP_"

__all__ = [
    "SERVICE",
    "API_VERSION",
    "ALGORITHM",
    "SECRET_KEY_PREFIX",
    "REQUEST_TYPE",
    "HTTP_METHOD",
    "CANONICAL_URI",
    "CANONICAL_QUERYSTRING",
    "CONTENT_TYPE",
    "HEADER_HOST",
    "HEADER_CONTENT_TYPE",
    "HEADER_ACTION",
    "HEADER_VERSION",
    "HEADER_REGION",
    "HEADER_TIMESTAMP",
    "HEADER_TOKEN",
    "HEADER_LANGUAGE",
    "HEADER_AUTHORIZATION",
    "ACTION_CHAT_COMPLETIONS",
    "HTTP_ERROR_CODE_PREFIX",
]
