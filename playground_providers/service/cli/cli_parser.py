"""CLI parser construction for playground-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.models import InputFormat
from ...config.defaults import PLAYGROUND_CLI_DEFAULT_MODEL, PLAYGROUND_CLI_DEFAULT_PROVIDER
from ...registry import MODEL_PROVIDERS, TESTABLE_PROVIDERS


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser with ``generate``, ``models`` and ``test``."""
    p = argparse.ArgumentParser(prog="playground-cli", description="Model playground CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # generate
    p_gen = sub.add_parser("generate", help="Run one playground request")
    p_gen.add_argument("--provider", default=PLAYGROUND_CLI_DEFAULT_PROVIDER)
    p_gen.add_argument("--model", default=PLAYGROUND_CLI_DEFAULT_MODEL)
    p_gen.add_argument("--input", required=True)
    p_gen.add_argument(
        "--format",
        dest="input_format",
        choices=[f.value for f in InputFormat],
        default=InputFormat.TEXT.value,
    )
    p_gen.add_argument("--max-tokens", type=int, default=None)
    p_gen.add_argument("--temperature", type=float, default=None)
    p_gen.add_argument("--json", action="store_true", help="Print the full response as JSON")

    # models
    p_models = sub.add_parser("models", help="List models of a configured provider")
    p_models.add_argument("--provider", required=True, type=str.lower, choices=MODEL_PROVIDERS)

    # test
    p_test = sub.add_parser("test", help="Check provider credentials with a minimal call")
    p_test.add_argument("--provider", required=True, type=str.lower, choices=TESTABLE_PROVIDERS)

    return p
