"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `hunyuan_sdk.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .sdk_error import (
    ConfigurationError,
    SdkError,
    SerializationError,
    ServiceError,
    TransportError,
)
from .classification import is_retryable_service_error, is_retryable_status

__all__ = [
    "ErrorKind",
    "SdkError",
    "TransportError",
    "SerializationError",
    "ServiceError",
    "ConfigurationError",
    "is_retryable_service_error",
    "is_retryable_status",
]
