"""Playground CLI (package entrypoint).

Wires argument parsing to action handlers kept in focused modules. It performs
no provider logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_generate, handle_models, handle_test
from .cli_parser import build_parser

_HANDLERS = {
    "generate": handle_generate,
    "models": handle_models,
    "test": handle_test,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    return _HANDLERS[args.cmd](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
