"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Lodash spellings alias the snake_case helpers.
* The package logger is configured once, from the environment.
"""

from __future__ import annotations

import logging
import uuid

import pytest

import lodash_lite
from lodash_lite import __version__
from lodash_lite.cli import exit_codes
from lodash_lite.cli.app import main
from lodash_lite.exceptions import (
    ArgumentDecodeError,
    CliUsageError,
    InvalidArgumentError,
    LodashLiteError,
    RichUnavailableError,
    UnknownHelperError,
    UnsupportedCollectionError,
)
from lodash_lite.utils.logger import LOG_LEVEL_ENV, setup_logger


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidArgumentError,
            UnsupportedCollectionError,
            CliUsageError,
            UnknownHelperError,
            ArgumentDecodeError,
            RichUnavailableError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[LodashLiteError]
    ) -> None:
        assert issubclass(exc_class, LodashLiteError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(LodashLiteError, Exception)

    def test_builtin_compatibility(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(UnsupportedCollectionError, TypeError)
        assert issubclass(UnsupportedCollectionError, InvalidArgumentError)

    def test_hint_is_stored(self) -> None:
        err = LodashLiteError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = LodashLiteError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Public surface
# ---------------------------------------------------------------------------

class TestPublicSurface:
    @pytest.mark.parametrize(
        ("alias", "name"),
        [
            ("dropRight", "drop_right"),
            ("dropRightWhile", "drop_right_while"),
            ("dropWhile", "drop_while"),
            ("findIndex", "find_index"),
            ("findLastIndex", "find_last_index"),
            ("forEach", "for_each"),
        ],
    )
    def test_lodash_aliases(self, alias: str, name: str) -> None:
        assert getattr(lodash_lite, alias) is getattr(lodash_lite, name)

    def test_all_names_exist(self) -> None:
        for name in lodash_lite.__all__:
            assert hasattr(lodash_lite, name), name


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "lodash-lite" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_list_routes_to_catalog(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from lodash_lite.cli import catalog

        monkeypatch.setattr(catalog, "run_catalog", lambda: exit_codes.SUCCESS)
        assert main(["LIST"]) == exit_codes.SUCCESS

    def test_helper_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from lodash_lite.cli import app as app_module

        seen: list[tuple[str, list[str]]] = []

        def _fake(name: str, raw: list[str]) -> int:
            seen.append((name, raw))
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_helper", _fake)
        assert main(["chunk", "[1]", "1"]) == exit_codes.SUCCESS
        assert seen == [("chunk", ["[1]", "1"])]


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------

class TestLogger:
    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        log = setup_logger(f"lodash_lite.test.{uuid.uuid4().hex}")
        assert log.level == logging.DEBUG

    def test_default_level_is_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        log = setup_logger(f"lodash_lite.test.{uuid.uuid4().hex}")
        assert log.level == logging.WARNING

    def test_configured_once(self) -> None:
        name = f"lodash_lite.test.{uuid.uuid4().hex}"
        first = setup_logger(name, level="INFO")
        second = setup_logger(name, level="ERROR")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.INFO
        assert second.propagate is False
