"""Timeout configuration for the shared HTTP transport.

Cancellation and deadlines belong to the transport; the client only decides
which timeout the pooled ``httpx.Client`` is created with.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`, parsing
    ``HUNYUAN_HTTP_TIMEOUT_SECONDS`` on first use only. Invalid or non-positive
    values fall back to the default.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from ..config.defaults import HTTP_TIMEOUT_ENV, HUNYUAN_DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds)."""

    http_timeout_seconds: float = HUNYUAN_DEFAULT_HTTP_TIMEOUT


_CACHED: TimeoutConfig | None = None


def _parse_seconds(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    global _CACHED
    if _CACHED is None:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_seconds(os.getenv(HTTP_TIMEOUT_ENV), HUNYUAN_DEFAULT_HTTP_TIMEOUT)
        )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _CACHED
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config"]
