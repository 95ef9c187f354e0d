"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``hunyuan_sdk.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.sdk_error import (
    ConfigurationError,
    SdkError,
    SerializationError,
    ServiceError,
    TransportError,
)
from .errors_parts.classification import is_retryable_service_error, is_retryable_status

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
