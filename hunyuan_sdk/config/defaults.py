"""hunyuan_sdk.config.defaults
===========================

Central place for small, stable default values used across the client. These
can be overridden via environment variables or explicit builder settings.

This module intentionally imports nothing from the rest of the package so it
can be used by every layer without circular imports.
"""

from __future__ import annotations

# ---- Endpoint / routing ----
HUNYUAN_SERVICE = "hunyuan"
HUNYUAN_DEFAULT_ENDPOINT = f"{HUNYUAN_SERVICE}.tencentcloudapi.com"
HUNYUAN_DEFAULT_REGION = "ap-guangzhou"
HUNYUAN_DEFAULT_MODEL = "hunyuan-lite"

# ---- HTTP ----
# Baseline single request timeout (seconds)
HUNYUAN_DEFAULT_HTTP_TIMEOUT = 60.0

# ---- Environment variable names ----
SECRET_ID_ENV = "TENCENTCLOUD_SECRET_ID"
SECRET_KEY_ENV = "TENCENTCLOUD_SECRET_KEY"  # pragma: allowlist secret - env var name, not a secret
SESSION_TOKEN_ENV = "TENCENTCLOUD_SESSION_TOKEN"
SESSION_TOKEN_ENV_ALIASES = (SESSION_TOKEN_ENV, "TENCENTCLOUD_TOKEN")
REGION_ENV = "TENCENTCLOUD_REGION"
ENDPOINT_ENV = "HUNYUAN_ENDPOINT"
DEBUG_ENV = "TENCENTCLOUD_SDK_DEBUG"
HTTP_TIMEOUT_ENV = "HUNYUAN_HTTP_TIMEOUT_SECONDS"
LOG_LEVEL_ENV = "HUNYUAN_LOG_LEVEL"

# ---- Logging ----
ROOT_LOGGER_NAME = "hunyuan"

__all__ = [
    "HUNYUAN_SERVICE",
    "HUNYUAN_DEFAULT_ENDPOINT",
    "HUNYUAN_DEFAULT_REGION",
    "HUNYUAN_DEFAULT_MODEL",
    "HUNYUAN_DEFAULT_HTTP_TIMEOUT",
    "SECRET_ID_ENV",
    "SECRET_KEY_ENV",
    "SESSION_TOKEN_ENV",
    "SESSION_TOKEN_ENV_ALIASES",
    "REGION_ENV",
    "ENDPOINT_ENV",
    "DEBUG_ENV",
    "HTTP_TIMEOUT_ENV",
    "LOG_LEVEL_ENV",
    "ROOT_LOGGER_NAME",
]
