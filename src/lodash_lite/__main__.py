"""Allow ``python -m lodash_lite`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m lodash_lite`` behaves identically to the
``lodash-lite`` console script.
"""

from __future__ import annotations

from lodash_lite.cli.app import cli

if __name__ == "__main__":
    cli()
