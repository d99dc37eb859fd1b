"""CLI application entry point and command routing for lodash-lite.

This module is the **sole error boundary** for the command line.  It
catches :class:`~lodash_lite.exceptions.LodashLiteError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No helper logic lives here — every computation is delegated to
  :mod:`lodash_lite.core`.
* Helper results are written to stdout as JSON; diagnostics go to
  stderr through the console proxy.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from lodash_lite.cli import exit_codes
from lodash_lite.cli.console import console, escape_markup
from lodash_lite.core.models import ABSENT
from lodash_lite.exceptions import ArgumentDecodeError, CliUsageError, LodashLiteError
from lodash_lite.utils.logger import logger
from lodash_lite.version import __version__

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``lodash-lite <helper> ARG...`` — run a helper on JSON arguments
    * ``lodash-lite list``            — show the helper catalog
    * ``lodash-lite --version``
    """
    parser = argparse.ArgumentParser(
        prog="lodash-lite",
        description="Run lodash-style array helpers on JSON arguments.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Override the LODASH_LITE_LOG_LEVEL environment variable.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Helper name (e.g. chunk, drop-right, findIndex) or 'list'.",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="ARG",
        help="Positional helper arguments, each encoded as JSON.",
    )
    return parser


# ---------------------------------------------------------------------------
# JSON bridging
# ---------------------------------------------------------------------------

def decode_arguments(raw_arguments: list[str]) -> list[Any]:
    """Decode every raw CLI argument as JSON.

    Raises
    ------
    ArgumentDecodeError
        On the first argument that is not valid JSON.
    """
    decoded: list[Any] = []
    for position, raw in enumerate(raw_arguments, start=1):
        try:
            decoded.append(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise ArgumentDecodeError(
                f"Argument {position} is not valid JSON: {raw}",
                hint='Quote strings as JSON, e.g. \'"*"\' for the string *.',
            ) from exc
    return decoded


def _to_jsonable(value: Any) -> Any:
    """Replace ``ABSENT`` with ``None`` so the result serialises as JSON."""
    if value is ABSENT:
        return None
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    return value


def encode_result(value: Any) -> str:
    """Serialise a helper result as a single JSON line."""
    return json.dumps(_to_jsonable(value))


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_helper(name: str, raw_arguments: list[str]) -> int:
    """Resolve *name*, decode its arguments, run it and print the result."""
    from lodash_lite.cli.catalog import resolve_helper

    entry = resolve_helper(name)
    arguments = decode_arguments(raw_arguments)
    logger.debug("running %s with %d argument(s)", entry.name, len(arguments))

    try:
        result = entry.func(*arguments)
    except LodashLiteError:
        raise
    except TypeError as exc:
        # wrong number of arguments for the helper
        raise CliUsageError(
            f"{entry.name}: {exc}",
            hint="Run 'lodash-lite list' to check the helper's arguments.",
        ) from exc

    print(encode_result(result))
    return exit_codes.SUCCESS


def _handle_list() -> int:
    """Dispatch the ``list`` catalog command."""
    from lodash_lite.cli.catalog import run_catalog

    return run_catalog()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lodash-lite CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_level is not None:
        logger.setLevel(getattr(logging, args.log_level))

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target

    if target.lower() == "list":
        return _handle_list()

    return _handle_helper(target, args.arguments)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LodashLiteError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
