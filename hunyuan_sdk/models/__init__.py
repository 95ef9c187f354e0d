"""Wire models for the Hunyuan API.

Public surface re-exporting the envelope and ChatCompletions DTOs.
"""

from .envelope import ErrorContent, TencentCloudErrorResponse, TencentCloudResponse
from .chat import (
    ChatChoice,
    ChatChoiceMessage,
    ChatCompletionsRequest,
    ChatCompletionsResponse,
    ChatCompletionsResponseInner,
    Message,
    Usage,
)

__all__ = [
    "ErrorContent",
    "TencentCloudErrorResponse",
    "TencentCloudResponse",
    "Message",
    "ChatCompletionsRequest",
    "ChatChoiceMessage",
    "ChatChoice",
    "Usage",
    "ChatCompletionsResponseInner",
    "ChatCompletionsResponse",
]
