"""CLI parser construction for openrouter-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ..config.defaults import OPENROUTER_DEFAULT_MODEL


def _str2bool(v: str | None) -> bool:
    """Best-effort conversion of common truthy/falsey strings to bool.

    When ``None`` (flag given without a value, via ``const=True``) this
    returns ``True``.
    """
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags to a parser.

    ``--stream`` accepts an optional boolean (``--stream``, ``--stream true``,
    ``--stream false``) and defaults to ``True`` without a value.
    """
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=False)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def _add_generation_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--model", default=OPENROUTER_DEFAULT_MODEL)
    parser.add_argument("--max-tokens", type=int, default=None)
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Close a stream after this many seconds",
    )
    parser.add_argument("--json", action="store_true", help="Print the raw response as JSON")
    add_stream_flags(parser)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Performs no side effects and wires only argument shapes.
    """
    p = argparse.ArgumentParser(prog="openrouter-cli", description="OpenRouter completion API client")
    p.add_argument("--log-level", default=None, help="SDK log level (DEBUG, INFO, ...)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_complete = sub.add_parser("complete", help="Text completion for a prompt")
    p_complete.add_argument("prompt")
    _add_generation_flags(p_complete)

    p_chat = sub.add_parser("chat", help="Chat completion for a single user message")
    p_chat.add_argument("message")
    p_chat.add_argument("--system", default=None, help="Optional system message")
    _add_generation_flags(p_chat)

    p_models = sub.add_parser("models", help="List available models")
    p_models.add_argument("--json", action="store_true")

    sub.add_parser("credits", help="Show credit balance")

    p_gen = sub.add_parser("generation", help="Show statistics for a generation id")
    p_gen.add_argument("id")

    p_endpoints = sub.add_parser("endpoints", help="List provider endpoints for a model")
    p_endpoints.add_argument("model", help="Model id in author/slug form")

    return p


__all__ = ["build_parser", "add_stream_flags"]
