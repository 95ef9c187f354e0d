"""
Error kinds for the Hunyuan client taxonomy.

Defines the `ErrorKind` enumeration attached to every `SdkError`. Values are
lowercase snake_case and are a stable contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed call."""

    TRANSPORT = "transport"
    SERIALIZATION = "serialization"
    SERVICE = "service"
    CONFIGURATION = "configuration"


__all__ = ["ErrorKind"]
