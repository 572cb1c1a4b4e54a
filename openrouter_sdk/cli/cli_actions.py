"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``openrouter-cli``. Each handler receives the parsed
arguments and an :class:`OpenRouterClient`, prints results to stdout and
returns a process exit code. This module has no top-level side effects and is
safe to import in tests.

Error Semantics
---------------
- SDK errors (``OpenRouterError``), cancellation and transport failures are
  printed as JSON to stderr and yield exit code ``1``.
- Streaming subcommands print deltas as they arrive and a trailing newline.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional

import httpx

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import OpenRouterError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import (
    ChatCompletionRequest,
    ChatMessage,
    CompletionRequest,
    UsageOptions,
)
from ..client import OpenRouterClient

Handler = Callable[[argparse.Namespace, OpenRouterClient], int]

_logger = get_logger("cli")


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _fail(exc: BaseException) -> int:
    payload: Dict[str, Any] = {"error": str(exc), "type": type(exc).__name__}
    if isinstance(exc, OpenRouterError):
        payload["code"] = exc.code.value
    print(json.dumps(payload), file=sys.stderr)
    log_event(_logger, "cli.error", LogContext(), failure_class=type(exc).__name__, error=str(exc))
    return 1


def _deadline_token(args: argparse.Namespace) -> Optional[CancellationToken]:
    deadline = getattr(args, "deadline", None)
    if deadline is None:
        return None
    return CancellationToken().cancel_after(deadline)


def _generation_kwargs(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "model": args.model,
        "max_tokens": args.max_tokens,
        "temperature": args.temperature,
    }


def handle_complete(args: argparse.Namespace, client: OpenRouterClient) -> int:
    """Run a text completion, streaming deltas when ``--stream`` is set."""
    request = CompletionRequest(prompt=args.prompt, **_generation_kwargs(args))
    if not args.stream:
        response = client.completion(request)
        if args.json:
            _print_json(response.model_dump(mode="json", exclude_none=True))
        else:
            print(response.first_text())
        return 0
    request.usage = UsageOptions(include=True)
    with client.completion_stream(request, cancellation=_deadline_token(args)) as reader:
        for chunk in reader:
            if args.json:
                print(chunk.model_dump_json(exclude_none=True))
                continue
            for choice in chunk.choices:
                sys.stdout.write(choice.text)
            sys.stdout.flush()
    if not args.json:
        sys.stdout.write("\n")
    return 0


def handle_chat(args: argparse.Namespace, client: OpenRouterClient) -> int:
    """Run a chat completion for one user message (plus optional system message)."""
    messages = []
    if args.system:
        messages.append(ChatMessage(role="system", content=args.system))
    messages.append(ChatMessage(role="user", content=args.message))
    request = ChatCompletionRequest(messages=messages, **_generation_kwargs(args))
    if not args.stream:
        response = client.chat_completion(request)
        if args.json:
            _print_json(response.model_dump(mode="json", exclude_none=True))
        else:
            print(response.first_content())
        return 0
    request.usage = UsageOptions(include=True)
    with client.chat_completion_stream(request, cancellation=_deadline_token(args)) as reader:
        for chunk in reader:
            if args.json:
                print(chunk.model_dump_json(exclude_none=True))
                continue
            for choice in chunk.choices:
                sys.stdout.write(choice.delta.content or "")
            sys.stdout.flush()
    if not args.json:
        sys.stdout.write("\n")
    return 0


def handle_models(args: argparse.Namespace, client: OpenRouterClient) -> int:
    models = client.list_models()
    if args.json:
        _print_json([m.model_dump(mode="json", exclude_none=True) for m in models])
        return 0
    for model in models:
        print(f"{model.id}\t{model.name}")
    return 0


def handle_credits(args: argparse.Namespace, client: OpenRouterClient) -> int:
    credits = client.get_credits()
    _print_json({**credits.model_dump(mode="json"), "remaining": credits.remaining})
    return 0


def handle_generation(args: argparse.Namespace, client: OpenRouterClient) -> int:
    data = client.get_generation(args.id)
    _print_json(data.model_dump(mode="json", exclude_none=True))
    return 0


def handle_endpoints(args: argparse.Namespace, client: OpenRouterClient) -> int:
    author, _, slug = args.model.partition("/")
    if not slug:
        print(json.dumps({"error": f"expected author/slug, got '{args.model}'"}), file=sys.stderr)
        return 2
    data = client.list_endpoints(author, slug)
    _print_json(data.model_dump(mode="json", exclude_none=True))
    return 0


HANDLERS: Dict[str, Handler] = {
    "complete": handle_complete,
    "chat": handle_chat,
    "models": handle_models,
    "credits": handle_credits,
    "generation": handle_generation,
    "endpoints": handle_endpoints,
}


def dispatch(args: argparse.Namespace, client: OpenRouterClient) -> int:
    """Run the handler for ``args.cmd`` and map failures to exit code ``1``."""
    handler = HANDLERS[args.cmd]
    try:
        return handler(args, client)
    except (OpenRouterError, CancelledError, httpx.HTTPError) as exc:
        return _fail(exc)


__all__ = [
    "HANDLERS",
    "dispatch",
    "handle_complete",
    "handle_chat",
    "handle_models",
    "handle_credits",
    "handle_generation",
    "handle_endpoints",
]
