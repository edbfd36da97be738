"""Resolve (and optionally execute) a settings instruction from the command line.

Examples:
    python -m src.cli "turn off the chat input box"
    python -m src.cli "change the primary color" --value "#112233" --execute
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from src.app import create_app
from src.botsify.dispatch import DispatchError, execute_resolution
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.resolver.resolver import ResolverInputError, resolve_instruction
from src.resolver.schema import Intent


def run(text: str, *, value: str | None, execute: bool) -> int:
    """Resolve `text`, print the result as JSON and return the process exit code."""

    app = None
    if execute:
        try:
            app = create_app(load_settings())
        except RuntimeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    try:
        if app is not None:
            result = app.resolver.resolve(text, value)
        else:
            result = resolve_instruction(text, value)
    except ResolverInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(result.model_dump_json(indent=2))
    if not result.success:
        return 1
    if app is None:
        return 0

    try:
        outcome = execute_resolution(result, app.client, app.resolver.catalog)
    except DispatchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if result.intent == Intent.update and not result.value:
            print("hint: pass the new value with --value", file=sys.stderr)
        return 1

    print(json.dumps(asdict(outcome), indent=2, ensure_ascii=False, default=str))
    return 0 if outcome.success else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""

    parser = argparse.ArgumentParser(description="Resolve a natural-language bot settings instruction.")
    parser.add_argument("text", help="Instruction, e.g. 'turn off the chat input box'.")
    parser.add_argument("--value", help="Explicit value for update instructions (skips extraction).")
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Send the resolved operation to the Botsify API (requires BOTSIFY_* settings).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO).")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    return run(args.text, value=args.value, execute=args.execute)


if __name__ == "__main__":
    sys.exit(main())
