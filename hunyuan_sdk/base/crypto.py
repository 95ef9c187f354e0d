"""SHA-256 and HMAC-SHA256 helpers used by the TC3 signing engine.

Strings are always encoded as UTF-8 before hashing. HMAC accepts keys of any
length, so no key validation happens here.
"""
from __future__ import annotations

import hashlib
import hmac
from typing import Union


def sha256_hex(data: Union[str, bytes]) -> str:
    """Return the lowercase hex SHA-256 digest of ``data``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def hmac_sha256(key: bytes, msg: str) -> bytes:
    """Return the raw HMAC-SHA256 of ``msg`` keyed by ``key``."""
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def hmac_sha256_hex(key: bytes, msg: str) -> str:
    return hmac_sha256(key, msg).hex()


__all__ = ["sha256_hex", "hmac_sha256", "hmac_sha256_hex"]
