"""
Structured exception types raised by the Hunyuan client.

`SdkError` is the common base; each subclass pins its `ErrorKind`. Per-call
failures (transport, serialization, service) are raised from
``Client.invoke``; `ConfigurationError` is raised only while building a
client and is never reachable once a client exists.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .error_kind import ErrorKind


@dataclass
class SdkError(Exception):
    """Base error carrying a message and a normalized kind.

    Attributes:
        message: Message suitable for logging; never contains secret material.
        kind: :class:`ErrorKind` classification for the failure.
        raw: Optional underlying exception for diagnostics.
    """

    message: str
    kind: ErrorKind
    raw: Optional[BaseException] = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.kind.value} error: {self.message}"


@dataclass
class TransportError(SdkError):
    """Send/receive failure (DNS, TLS, connection reset, timeout)."""

    kind: ErrorKind = field(default=ErrorKind.TRANSPORT, init=False)


@dataclass
class SerializationError(SdkError):
    """Request encoding or response decoding failed against the expected shape."""

    kind: ErrorKind = field(default=ErrorKind.SERIALIZATION, init=False)


@dataclass
class ConfigurationError(SdkError):
    """Client configuration is incomplete (for example, no credential)."""

    kind: ErrorKind = field(default=ErrorKind.CONFIGURATION, init=False)


@dataclass
class ServiceError(SdkError):
    """Vendor-reported failure.

    Attributes:
        code: Vendor error code (``AuthFailure.SignatureFailure``) or the
            synthesized ``HTTP_{status}`` placeholder.
        request_id: Vendor request id when the body carried one.
        status: HTTP status of the response.
        retryable: Hint for caller-side retry policies; never acted on here.
    """

    kind: ErrorKind = field(default=ErrorKind.SERVICE, init=False)
    code: str = ""
    request_id: Optional[str] = None
    status: Optional[int] = None
    retryable: bool = False

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"service error: {self.code}: {self.message} (request_id={self.request_id!r})"


__all__ = [
    "SdkError",
    "TransportError",
    "SerializationError",
    "ConfigurationError",
    "ServiceError",
]
