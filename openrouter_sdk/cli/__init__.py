"""OpenRouter command line (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no request logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Callable, Optional

from ..base.logging import configure_logger
from ..client import OpenRouterClient
from .cli_actions import dispatch
from .cli_parser import build_parser


def main(
    argv: Optional[list[str]] = None,
    *,
    client_factory: Callable[[], OpenRouterClient] = OpenRouterClient,
) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    client_factory: Callable[[], OpenRouterClient]
        Builds the client; tests inject one backed by a mock transport.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.log_level:
        configure_logger(level=args.log_level)
    with client_factory() as client:
        return dispatch(args, client)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
