"""Unified configuration layer for the Hunyuan client.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Environment variables
    3. Explicit overrides passed by the caller (``None`` values ignored)

Environment Variables
---------------------
TENCENTCLOUD_SECRET_ID, TENCENTCLOUD_SECRET_KEY, TENCENTCLOUD_SESSION_TOKEN
(alias TENCENTCLOUD_TOKEN), TENCENTCLOUD_REGION, HUNYUAN_ENDPOINT,
TENCENTCLOUD_SDK_DEBUG, HUNYUAN_HTTP_TIMEOUT_SECONDS.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .defaults import (
    DEBUG_ENV,
    ENDPOINT_ENV,
    HUNYUAN_DEFAULT_ENDPOINT,
    HUNYUAN_DEFAULT_REGION,
    REGION_ENV,
    SECRET_ID_ENV,
    SECRET_KEY_ENV,
)
from .env import is_placeholder, is_truthy, read_env, resolve_session_token

DEFAULTS: Dict[str, Any] = {
    "region": HUNYUAN_DEFAULT_REGION,
    "endpoint": HUNYUAN_DEFAULT_ENDPOINT,
}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, name in (
        ("secret_id", SECRET_ID_ENV),
        ("secret_key", SECRET_KEY_ENV),
        ("region", REGION_ENV),
        ("endpoint", ENDPOINT_ENV),
    ):
        val = read_env(name)
        if val is not None and not is_placeholder(val):
            out[field] = val
    if token := resolve_session_token():
        out["token"] = token
    if read_env(DEBUG_ENV) is not None:
        out["debug"] = is_truthy(read_env(DEBUG_ENV))
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Keys: ``secret_id``, ``secret_key``, ``token``, ``region``, ``endpoint``,
    ``debug``. Credential keys are absent when nothing provides them.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = ["DEFAULTS", "get_client_config"]
