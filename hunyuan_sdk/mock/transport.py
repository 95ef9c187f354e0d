"""Canned-response transports for offline use and tests.

Purpose
-------
Build ``httpx.MockTransport`` instances that answer every request with a fixed
status and body while recording the requests they saw. Plug the transport into
an ``httpx.Client`` and pass that to ``ClientBuilder.http``; the signing and
decoding paths then run unchanged without network traffic.

Fixtures are declared in ``fixtures/responses.json`` and loaded through
``importlib.resources``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Dict, List, Optional

import httpx

_FIXTURE_PACKAGE = "hunyuan_sdk.mock.fixtures"
_FIXTURE_RESOURCE = "responses.json"


def load_fixture_catalog(resource: str = _FIXTURE_RESOURCE) -> Dict[str, Any]:
    """Load the JSON fixture catalog bundled with the package."""
    data = resources.files(_FIXTURE_PACKAGE).joinpath(resource).read_text(encoding="utf-8")
    return json.loads(data)


@dataclass
class CannedTransport:
    """Fixed response plus the list of requests received."""

    status: int
    content: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    requests: List[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status, content=self.content, headers=self.headers)

    @property
    def last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.Client:
        """Return an ``httpx.Client`` routed through this transport."""
        return httpx.Client(transport=self.transport())


def canned_transport(status: int, body: Any) -> CannedTransport:
    """Answer every request with ``status`` and ``body``.

    ``body`` may be ``bytes``, ``str`` (sent verbatim) or any JSON-serializable
    value (sent as JSON with a JSON content type).
    """
    if isinstance(body, bytes):
        return CannedTransport(status, body)
    if isinstance(body, str):
        return CannedTransport(status, body.encode("utf-8"), {"Content-Type": "text/plain; charset=utf-8"})
    content = json.dumps(body, ensure_ascii=False).encode("utf-8")
    return CannedTransport(status, content, {"Content-Type": "application/json"})


def fixture_transport(name: str, catalog: Optional[Dict[str, Any]] = None) -> CannedTransport:
    """Build a :class:`CannedTransport` from a named fixture.

    Raises:
        KeyError: If ``name`` is not in the catalog.
    """
    entry = (catalog or load_fixture_catalog())[name]
    body = entry["text"] if "text" in entry else entry["body"]
    return canned_transport(int(entry["status"]), body)


__all__ = ["CannedTransport", "canned_transport", "fixture_transport", "load_fixture_catalog"]
