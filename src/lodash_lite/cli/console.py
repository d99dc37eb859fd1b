"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and helper evaluation keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from lodash_lite.exceptions import RichUnavailableError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise :class:`RichUnavailableError`."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RichUnavailableError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape_markup(text: object) -> str:
    """Escape *text* for interpolation into Rich markup.

    Returns ``str(text)`` unchanged when Rich is not installed, since the
    plain fallback never parses markup.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except RichUnavailableError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except RichUnavailableError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
