"""CLI parser construction for hunyuan-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import HUNYUAN_DEFAULT_MODEL


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with the ``chat`` subcommand.

    Credentials are never accepted on the command line; they come from
    ``TENCENTCLOUD_SECRET_ID`` / ``TENCENTCLOUD_SECRET_KEY``.
    """
    p = argparse.ArgumentParser(prog="hunyuan-cli", description="Call Hunyuan API actions")
    sub = p.add_subparsers(dest="cmd")

    p_chat = sub.add_parser("chat", help="Send one prompt through ChatCompletions")
    p_chat.add_argument("prompt")
    p_chat.add_argument("--model", default=HUNYUAN_DEFAULT_MODEL)
    p_chat.add_argument("--system", default=None, help="Optional system message")
    p_chat.add_argument("--temperature", type=float, default=None)
    p_chat.add_argument("--top-p", dest="top_p", type=float, default=None)
    p_chat.add_argument("--region", default=None)
    p_chat.add_argument("--endpoint", default=None)
    p_chat.add_argument("--language", default=None, help="X-TC-Language, e.g. en-US")
    p_chat.add_argument("--debug", action="store_true", default=None, help="Emit masked diagnostics to stderr")
    p_chat.add_argument("--json", action="store_true", help="Print the full response as JSON")

    return p


__all__ = ["build_parser"]
