"""
Retry hints for vendor error codes and HTTP statuses.

The client never retries on its own; these helpers only populate
``ServiceError.retryable`` so that caller-side policies have a consistent
signal to act on.
"""
from __future__ import annotations

from typing import FrozenSet, Optional

_RETRYABLE_CODES: FrozenSet[str] = frozenset(
    {
        "InternalError",
        "RequestLimitExceeded",
        "ResourceUnavailable",
        "ServiceUnavailable",
        "FailedOperation.EngineServerError",
        "FailedOperation.EngineRequestTimeout",
    }
)

_RETRYABLE_CODE_PREFIXES = (
    "RequestLimitExceeded.",
    "LimitExceeded.",
    "InternalError.",
)

_RETRYABLE_STATUSES: FrozenSet[int] = frozenset({408, 429, 500, 502, 503, 504})


def is_retryable_status(status: Optional[int]) -> bool:
    return status is not None and status in _RETRYABLE_STATUSES


def is_retryable_service_error(code: Optional[str], status: Optional[int] = None) -> bool:
    """Return True when a vendor code or HTTP status usually clears on retry.

    Precedence:
        1. Exact vendor code match.
        2. Vendor code family prefix (``LimitExceeded.*``).
        3. HTTP status (429 and common 5xx).
    """
    if code:
        if code in _RETRYABLE_CODES:
            return True
        if code.startswith(_RETRYABLE_CODE_PREFIXES):
            return True
    return is_retryable_status(status)


__all__ = ["is_retryable_status", "is_retryable_service_error"]
