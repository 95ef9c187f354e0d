"""CLI action handlers.

Purpose
-------
Turn parsed arguments into a ``ChatCompletionsRequest``, run it through a
``Client`` built from the environment and print the outcome.

Error Semantics
---------------
- Missing credentials: structured error on stderr, exit code 2.
- Any ``SdkError`` raised by the call: structured error on stderr, exit 1.
- Success: reply text (or full JSON with ``--json``) on stdout, exit 0.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from ..base.errors import ConfigurationError, SdkError, ServiceError
from ..base.logging import LogContext, get_logger, log_event
from ..hunyuan import Client, ClientBuilder
from ..models import ChatCompletionsRequest, Message

EXIT_OK = 0
EXIT_SDK_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_chat_request(args: argparse.Namespace) -> ChatCompletionsRequest:
    messages: List[Message] = []
    if args.system:
        messages.append(Message(role="system", content=args.system))
    messages.append(Message(role="user", content=args.prompt))
    return ChatCompletionsRequest(
        model=args.model,
        messages=messages,
        temperature=args.temperature,
        top_p=args.top_p,
        stream=False,
    )


def build_client(args: argparse.Namespace, http: Optional[Any] = None) -> Client:
    """Build a client from the environment, applying CLI overrides.

    Raises:
        ConfigurationError: When no credential is available.
    """
    builder = ClientBuilder.from_env()
    if args.region:
        builder.region(args.region)
    if args.endpoint:
        builder.endpoint(args.endpoint)
    if args.language:
        builder.language(args.language)
    if args.debug is not None:
        builder.debug(args.debug)
    if http is not None:
        builder.http(http)
    return builder.build()


def _error_payload(err: SdkError) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"ok": False, "kind": err.kind.value, "message": err.message}
    if isinstance(err, ServiceError):
        payload |= {"code": err.code, "request_id": err.request_id, "status": err.status}
    return payload


def handle_chat(args: argparse.Namespace, http: Optional[Any] = None) -> int:
    """Execute the ``chat`` subcommand and return the exit code."""
    logger = get_logger("hunyuan.cli")
    try:
        client = build_client(args, http=http)
    except ConfigurationError as err:
        print(json.dumps(_error_payload(err), ensure_ascii=False), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    ctx = LogContext(action="ChatCompletions", region=client.region.as_str(), endpoint=client.endpoint)
    try:
        resp = client.chat_completions(build_chat_request(args))
    except SdkError as err:
        log_event(logger, "cli.chat.error", ctx, kind=err.kind.value)
        print(json.dumps(_error_payload(err), ensure_ascii=False), file=sys.stderr)
        return EXIT_SDK_ERROR

    if args.json:
        print(resp.model_dump_json(by_alias=True, exclude_none=True))
    else:
        print(resp.response.first_text() or "")
    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_SDK_ERROR",
    "EXIT_CONFIG_ERROR",
    "build_chat_request",
    "build_client",
    "handle_chat",
]
