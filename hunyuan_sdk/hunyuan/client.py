"""Hunyuan API client.

Purpose:
    Immutable configuration bundle (transport, credential, region, endpoint,
    debug flag) with typed helpers for vendor actions. Build instances with
    :class:`~hunyuan_sdk.hunyuan.builder.ClientBuilder`.

Concurrency:
    A ``Client`` holds no mutable state. Clones share the same
    ``httpx.Client`` and may issue calls from several threads at once; each
    call reads the clock, signs and sends independently.
"""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ..base.constants import ACTION_CHAT_COMPLETIONS
from ..models import ChatCompletionsRequest, ChatCompletionsResponse, TencentCloudResponse
from .credential import Credential, Region
from .invoker import RequestBody, call_action

R = TypeVar("R", bound=BaseModel)


@dataclass(frozen=True)
class Client:
    """Signed client for the ``hunyuan`` API (version ``2023-09-01``).

    Attributes:
        http: Transport used for every call.
        credential: Secret id/key and optional session token.
        region: Region sent as ``X-TC-Region``.
        endpoint: Host name; requests go to ``https://{endpoint}/``.
        debug: Emit masked diagnostic events for each call.
        language: Optional ``X-TC-Language`` value (``zh-CN`` / ``en-US``).
        clock: Source of unix time; read exactly once per call.
    """

    http: httpx.Client = field(repr=False, compare=False)
    credential: Credential
    region: Region
    endpoint: str
    debug: bool = False
    language: Optional[str] = None
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    @staticmethod
    def builder():
        """Return a new :class:`ClientBuilder`."""
        from .builder import ClientBuilder

        return ClientBuilder()

    def clone(self, **changes: Any) -> "Client":
        """Return a copy sharing the transport, with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def invoke(
        self,
        action: str,
        request: RequestBody,
        response_model: Type[R] = TencentCloudResponse[Dict[str, Any]],  # type: ignore[assignment]
    ) -> R:
        """Call ``action`` with ``request`` and decode into ``response_model``.

        Raises:
            TransportError: The request could not be sent or read.
            SerializationError: Encoding the request or decoding a 2xx body failed.
            ServiceError: The vendor reported an error.
        """
        return call_action(self, action, request, response_model)

    def chat_completions(self, request: ChatCompletionsRequest) -> ChatCompletionsResponse:
        """Call the ``ChatCompletions`` action."""
        return self.invoke(ACTION_CHAT_COMPLETIONS, request, ChatCompletionsResponse)


__all__ = ["Client"]
