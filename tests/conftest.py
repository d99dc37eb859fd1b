"""Shared pytest fixtures and configuration for the lodash-lite test suite.

Guidelines
----------
* Core tests must be pure — no mocking, no side effects beyond the
  documented mutating helpers.
* CLI tests drive :func:`lodash_lite.cli.app.main` with an explicit argv.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def numbers() -> list[int]:
    """A fresh, mutable list for helpers that must not alias fixtures."""
    return [4, 6, 8, 10]
