"""hunyuan_sdk.config.env
=======================

Environment variable helpers for credentials and client switches.

Design Notes
------------
- Variable names live in ``config.defaults``; this module only reads them.
- Helpers never raise on unset variables; callers decide how to proceed
  (the builder raises ``ConfigurationError`` when a credential is missing).
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Tuple

from .defaults import DEBUG_ENV, SESSION_TOKEN_ENV_ALIASES

_TRUTHY = frozenset({"1", "true", "on", "yes"})


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme' or 'your_' (as in
    ``your_secret_id``). Case-insensitive, surrounding spaces ignored.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your_")


def is_truthy(val: Optional[str]) -> bool:
    """Interpret ``1/true/on/yes`` (any case) as True, everything else False."""
    return val is not None and val.strip().lower() in _TRUTHY


def read_env(name: str) -> Optional[str]:
    """Return the stripped value of ``name`` or ``None`` when unset or blank."""
    val = os.environ.get(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def first_env(names: Iterable[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, name)`` for the first non-empty variable in ``names``."""
    for name in names:
        if val := read_env(name):
            return val, name
    return None, None


def resolve_session_token() -> Optional[str]:
    value, _ = first_env(SESSION_TOKEN_ENV_ALIASES)
    return value


def env_debug_enabled() -> bool:
    """Return the diagnostic logging switch from ``TENCENTCLOUD_SDK_DEBUG``."""
    return is_truthy(os.environ.get(DEBUG_ENV))


__all__ = [
    "is_placeholder",
    "is_truthy",
    "read_env",
    "first_env",
    "resolve_session_token",
    "env_debug_enabled",
]
