"""Shared HTTP client pool for the Hunyuan client.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so that every ``Client`` built without an explicit transport
    shares connections instead of allocating one per call.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - The client's timeout is taken from ``get_timeout_config()`` when the
      pooled instance is first created and cached thereafter.

Lifecycle & cleanup:
    - Clients are cached by a ``purpose`` string. Purposes allow distinct
      pools (e.g. "chat" vs "cli").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.

Thread-safety:
    ``httpx.Client`` supports concurrent requests from multiple threads, so
    one pooled instance can serve every clone of a ``Client``.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "default") -> httpx.Client:
    """Return the pooled ``httpx.Client`` for ``purpose``, creating it once."""
    client = _CLIENTS.get(purpose)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None and not client.is_closed:
            return client
        cfg = get_timeout_config()
        client = httpx.Client(timeout=cfg.http_timeout_seconds)
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                # Connection pool teardown failures at exit are non-actionable.
                pass
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
