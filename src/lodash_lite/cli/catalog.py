"""``lodash-lite list`` — the helper catalog and name resolution.

The catalog is the CLI's view of the library: which helpers exist,
which family they belong to, and whether they can be driven from the
command line.  Helpers that need a callback (``drop_while``, ``map``, …)
are listed but cannot be invoked, since a shell argument cannot carry a
Python callable.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lodash_lite.cli import exit_codes
from lodash_lite.cli.console import console, rich_available
from lodash_lite.core import array, collection
from lodash_lite.exceptions import UnknownHelperError
from lodash_lite.version import __version__


@dataclass(frozen=True, slots=True)
class HelperEntry:
    """One row of the helper catalog."""

    name: str
    """Canonical snake_case name."""

    family: str
    """``"array"`` or ``"collection"``."""

    func: Callable[..., Any]
    """The library function itself."""

    takes_callback: bool
    """Whether the helper needs a predicate or iteratee."""

    @property
    def summary(self) -> str:
        """First line of the helper's docstring."""
        doc = self.func.__doc__ or ""
        return doc.strip().splitlines()[0] if doc.strip() else ""

    @property
    def cli_callable(self) -> bool:
        return not self.takes_callback


def _entry(family: str, func: Callable[..., Any], *, callback: bool = False) -> HelperEntry:
    return HelperEntry(func.__name__, family, func, callback)


HELPERS: tuple[HelperEntry, ...] = (
    _entry("array", array.chunk),
    _entry("array", array.compact),
    _entry("array", array.head),
    _entry("array", array.last),
    _entry("array", array.initial),
    _entry("array", array.drop),
    _entry("array", array.drop_right),
    _entry("array", array.drop_while, callback=True),
    _entry("array", array.drop_right_while, callback=True),
    _entry("array", array.fill),
    _entry("array", array.find_index, callback=True),
    _entry("array", array.find_last_index, callback=True),
    _entry("array", array.nth),
    _entry("array", array.zip),
    _entry("collection", collection.for_each, callback=True),
    _entry("collection", collection.every, callback=True),
    _entry("collection", collection.filter, callback=True),
    _entry("collection", collection.map, callback=True),
    _entry("collection", collection.reduce, callback=True),
)

_BY_NAME: dict[str, HelperEntry] = {entry.name: entry for entry in HELPERS}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_name(raw: str) -> str:
    """Map ``dropRight`` / ``drop-right`` / ``DROP_RIGHT`` to ``drop_right``."""
    return _CAMEL_BOUNDARY.sub("_", raw.strip()).replace("-", "_").lower()


def resolve_helper(raw: str) -> HelperEntry:
    """Return the catalog entry for *raw*, which must be CLI-callable.

    Raises
    ------
    UnknownHelperError
        If no helper has that name, or the helper needs a callback.
    """
    entry = _BY_NAME.get(normalize_name(raw))
    if entry is None:
        raise UnknownHelperError(
            f"Unknown helper: {raw}",
            hint="Run 'lodash-lite list' to see every helper.",
        )
    if not entry.cli_callable:
        raise UnknownHelperError(
            f"{entry.name} needs a callback and cannot run from the command line.",
            hint="Import it from Python instead: "
            f"from lodash_lite import {entry.name}",
        )
    return entry


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _rows() -> list[tuple[str, str, str, str]]:
    return [
        (
            entry.name,
            entry.family,
            "yes" if entry.cli_callable else "no",
            entry.summary,
        )
        for entry in HELPERS
    ]


def _print_plain_catalog(rows: list[tuple[str, str, str, str]]) -> None:
    """Render the catalog without Rich."""
    print(f"\nlodash-lite {__version__} helpers", file=sys.stderr)
    print("=" * 78, file=sys.stderr)
    print(f"{'Helper':<18} {'Family':<11} {'CLI':<4} Summary", file=sys.stderr)
    print("-" * 78, file=sys.stderr)
    for name, family, cli_flag, summary in rows:
        print(f"{name:<18} {family:<11} {cli_flag:<4} {summary}", file=sys.stderr)
    print(file=sys.stderr)


def run_catalog() -> int:
    """Render every helper as a table and return :data:`exit_codes.SUCCESS`."""
    rows = _rows()

    if not rich_available():
        _print_plain_catalog(rows)
        return exit_codes.SUCCESS

    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title=f"lodash-lite {__version__} helpers",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Helper", style="bold", min_width=16)
    table.add_column("Family", min_width=10)
    table.add_column("CLI", justify="center", min_width=3)
    table.add_column("Summary")

    for name, family, cli_flag, summary in rows:
        status = "[green]yes[/green]" if cli_flag == "yes" else "[dim]no[/dim]"
        table.add_row(escape(name), family, status, escape(summary))

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
