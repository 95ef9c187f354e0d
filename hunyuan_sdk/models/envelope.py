"""
Vendor response envelopes.

Success bodies wrap the action payload as ``{"Response": {...}}``; the generic
:class:`TencentCloudResponse` models that wrapper for any payload type so new
actions reuse it unchanged. Failure bodies carry ``{"RequestId", "Error"}``.
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ErrorContent(BaseModel):
    """Vendor error code and message."""

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(alias="Code")
    message: str = Field(alias="Message")


class TencentCloudErrorResponse(BaseModel):
    """Error envelope. Both fields are optional on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    request_id: Optional[str] = Field(default=None, alias="RequestId")
    error: Optional[ErrorContent] = Field(default=None, alias="Error")


class TencentCloudResponse(BaseModel, Generic[T]):
    """Success envelope ``{"Response": T}``."""

    model_config = ConfigDict(populate_by_name=True)

    response: T = Field(alias="Response")


__all__ = ["ErrorContent", "TencentCloudErrorResponse", "TencentCloudResponse"]
