"""
ChatCompletions request and response DTOs.

Field names follow Python convention; aliases carry the vendor's PascalCase
wire keys exactly. Requests are serialized with ``by_alias=True`` and
``exclude_none=True`` so unset optional fields are omitted rather than sent
as ``null``. Response fields are optional because the vendor omits absent
fields instead of nulling them.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .envelope import TencentCloudResponse


class Message(BaseModel):
    """One chat turn (``system``, ``user``, ``assistant`` or ``tool``)."""

    model_config = ConfigDict(populate_by_name=True)

    role: str = Field(alias="Role")
    content: str = Field(alias="Content")


class ChatCompletionsRequest(BaseModel):
    """Request body of the ``ChatCompletions`` action.

    Attributes:
        model: Model name, e.g. ``hunyuan-lite``.
        messages: Ordered conversation.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        stream: Streaming flag. Only non-streaming responses are decoded.
    """

    model_config = ConfigDict(populate_by_name=True)

    model: Optional[str] = Field(default=None, alias="Model")
    messages: List[Message] = Field(alias="Messages")
    temperature: Optional[float] = Field(default=None, alias="Temperature")
    top_p: Optional[float] = Field(default=None, alias="TopP")
    stream: Optional[bool] = Field(default=None, alias="Stream")


class ChatChoiceMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: Optional[str] = Field(default=None, alias="Role")
    content: Optional[str] = Field(default=None, alias="Content")


class ChatChoice(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: Optional[int] = Field(default=None, alias="Index")
    message: Optional[ChatChoiceMessage] = Field(default=None, alias="Message")
    finish_reason: Optional[str] = Field(default=None, alias="FinishReason")


class Usage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt_tokens: Optional[int] = Field(default=None, alias="PromptTokens")
    completion_tokens: Optional[int] = Field(default=None, alias="CompletionTokens")
    total_tokens: Optional[int] = Field(default=None, alias="TotalTokens")


class ChatCompletionsResponseInner(BaseModel):
    """Payload inside the ``Response`` envelope."""

    model_config = ConfigDict(populate_by_name=True)

    request_id: Optional[str] = Field(default=None, alias="RequestId")
    id: Optional[str] = Field(default=None, alias="Id")
    choices: Optional[List[ChatChoice]] = Field(default=None, alias="Choices")
    usage: Optional[Usage] = Field(default=None, alias="Usage")

    def first_text(self) -> Optional[str]:
        """Return the content of the first choice message, if any."""
        if not self.choices:
            return None
        message = self.choices[0].message
        return message.content if message else None


ChatCompletionsResponse = TencentCloudResponse[ChatCompletionsResponseInner]


__all__ = [
    "Message",
    "ChatCompletionsRequest",
    "ChatChoiceMessage",
    "ChatChoice",
    "Usage",
    "ChatCompletionsResponseInner",
    "ChatCompletionsResponse",
]
