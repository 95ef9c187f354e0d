"""Masking helpers for diagnostic output.

Sensitive strings are reduced to a short prefix and suffix joined by an
ellipsis. Values too short to mask that way are replaced entirely.
"""
from __future__ import annotations

import re

MASK_KEEP = 8
MASK_PLACEHOLDER = "***"
MASK_ELLIPSIS = "..."

_CREDENTIAL_RE = re.compile(r"(Credential=)([^/,\s]+)")
_SIGNATURE_RE = re.compile(r"(Signature=)([^,\s]+)")


def mask(value: str | None, keep: int = MASK_KEEP) -> str:
    """Return ``value`` with everything but ``keep`` leading/trailing chars hidden.

    Strings of length ``2 * keep`` or less become ``"***"`` so that no more than
    half of a short secret is ever revealed.
    """
    if not value or len(value) <= keep * 2:
        return MASK_PLACEHOLDER
    return f"{value[:keep]}{MASK_ELLIPSIS}{value[-keep:]}"


def mask_authorization(value: str | None) -> str:
    """Mask the secret id and the signature inside an ``Authorization`` value."""
    if not value:
        return "<missing>"
    if "Signature=" not in value:
        return mask(value)
    masked = _CREDENTIAL_RE.sub(lambda m: m.group(1) + mask(m.group(2)), value)
    return _SIGNATURE_RE.sub(lambda m: m.group(1) + mask(m.group(2)), masked)


__all__ = ["MASK_KEEP", "MASK_PLACEHOLDER", "mask", "mask_authorization"]
