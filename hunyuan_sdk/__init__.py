"""hunyuan_sdk package

Typed client for the Hunyuan API (version ``2023-09-01``) with
TC3-HMAC-SHA256 request signing.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Client`, :class:`ClientBuilder`, :class:`Credential`,
      :class:`Region`
    - Models: :class:`ChatCompletionsRequest`, :class:`Message`,
      :class:`ChatCompletionsResponse`, :class:`TencentCloudResponse`
    - Errors: :class:`SdkError` and its subclasses, :class:`ErrorKind`
    - Signing: :func:`tc3_sign`, :class:`SignatureResult`

Example::

    from hunyuan_sdk import ClientBuilder, Credential, Region
    from hunyuan_sdk import ChatCompletionsRequest, Message

    client = (
        ClientBuilder()
        .credential(Credential(secret_id, secret_key))
        .region(Region.AP_GUANGZHOU)
        .build()
    )
    resp = client.chat_completions(
        ChatCompletionsRequest(model="hunyuan-lite", messages=[Message(role="user", content="Hello")])
    )

Debug logging is enabled with ``ClientBuilder.debug(True)`` or
``TENCENTCLOUD_SDK_DEBUG=true``. Signatures and secret ids are masked, but
request and response bodies are logged as-is.
"""

import logging

from .base.errors import (
    ConfigurationError,
    ErrorKind,
    SdkError,
    SerializationError,
    ServiceError,
    TransportError,
)
from .base.signing import SignatureResult, tc3_sign
from .hunyuan import Client, ClientBuilder, Credential, Region
from .models import (
    ChatChoice,
    ChatChoiceMessage,
    ChatCompletionsRequest,
    ChatCompletionsResponse,
    ChatCompletionsResponseInner,
    ErrorContent,
    Message,
    TencentCloudErrorResponse,
    TencentCloudResponse,
    Usage,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "Client",
    "ClientBuilder",
    "Credential",
    "Region",
    # Models
    "Message",
    "ChatCompletionsRequest",
    "ChatCompletionsResponse",
    "ChatCompletionsResponseInner",
    "ChatChoice",
    "ChatChoiceMessage",
    "Usage",
    "TencentCloudResponse",
    "TencentCloudErrorResponse",
    "ErrorContent",
    # Errors
    "ErrorKind",
    "SdkError",
    "TransportError",
    "SerializationError",
    "ServiceError",
    "ConfigurationError",
    # Signing
    "tc3_sign",
    "SignatureResult",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
