"""Tests for the process-level host (cli/app.py and cli/console.py).

Output is captured with ``capsys``; ``run`` is checked through the
``SystemExit`` it raises.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from resource_cli.cli import exit_codes
from resource_cli.cli.app import main, run
from resource_cli.cli.console import HostDiagnostics, configure_logging, write_output
from resource_cli.config import LOG_LEVEL_ENV
from resource_cli.core.models import ActionOutcome, CommandSchema
from resource_cli.core.schema import define_command
from resource_cli.exceptions import EnvironmentError
from resource_cli.infra.router import ResourceRouter


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


@pytest.fixture()
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after tests that configure it."""
    logger = logging.getLogger("resource_cli")
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

class TestMain:
    def test_prints_message(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(greeting_schema, router, ["greeting", "-n", "BEAR"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Hello, BEAR\n"

    def test_json_is_printed_verbatim(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(greeting_schema, router, ["greeting", "-n", "[bold]BEAR", "--format=json"])
        body = json.loads(capsys.readouterr().out)
        assert body["greeting"] == "Hello, [bold]BEAR"

    def test_message_bytes_are_unchanged(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        schema = define_command("raw", "Raw text", uri="app://self/raw", output="out")
        invoker = MagicMock()
        invoker.invoke.return_value = ActionOutcome(200, {"out": "a\tb\r\nc [red]d[/red]"})
        assert main(schema, invoker, ["raw"]) == 0
        assert capsys.readouterr().out == "a\tb\r\nc [red]d[/red]\n"

    def test_help_keeps_tab_separators(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(greeting_schema, router, ["greeting", "--help"])
        out = capsys.readouterr().out
        assert "  --name, -n\tName to greet (required)\n" in out
        assert "  --help, -h\t\tShow this help message\n" in out

    def test_error_goes_to_stdout(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(greeting_schema, router, ["greeting"])
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == "Error: Option --name is required\n"

    def test_defaults_to_sys_argv(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["greeting", "--version"])
        assert main(greeting_schema, router) == 0
        assert capsys.readouterr().out == "greeting version 0.1.0\n"


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

class TestRun:
    def test_exits_with_command_code(
        self,
        error_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        with pytest.raises(SystemExit) as exc_info:
            run(error_schema, router, ["error", "--code", "500"])
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR

    def test_help_exits_zero(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        with pytest.raises(SystemExit) as exc_info:
            run(greeting_schema, router, ["greeting", "--help"])
        assert exc_info.value.code == 0

    def test_bad_log_level(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        with pytest.raises(SystemExit) as exc_info:
            run(greeting_schema, router, ["greeting", "-n", "BEAR"])
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown log level: chatty" in captured.err

    def test_debug_logging_goes_to_stderr(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        package_logger: logging.Logger,
    ) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        with pytest.raises(SystemExit):
            run(greeting_schema, router, ["greeting", "-n", "BEAR"])
        assert package_logger.level == logging.DEBUG
        captured = capsys.readouterr()
        assert captured.out == "Hello, BEAR\n"
        assert "parsed options" in " ".join(captured.err.split())

    def test_keyboard_interrupt(
        self,
        greeting_schema: CommandSchema,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        invoker = MagicMock()
        invoker.invoke.side_effect = KeyboardInterrupt()
        with pytest.raises(SystemExit) as exc_info:
            run(greeting_schema, invoker, ["greeting", "-n", "BEAR"])
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_output_failure_is_unexpected(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from resource_cli.cli import app as app_module

        def broken(message: str) -> None:
            raise OSError("stdout closed")

        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        monkeypatch.setattr(app_module, "write_output", broken)
        with pytest.raises(SystemExit) as exc_info:
            run(greeting_schema, router, ["greeting", "-n", "BEAR"])
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "OSError: stdout closed" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Console without Rich
# ---------------------------------------------------------------------------

class TestWithoutRich:
    def test_write_output_needs_no_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        write_output("plain [text]")
        assert capsys.readouterr().out == "plain [text]\n"

    def test_configure_logging_requires_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        package_logger: logging.Logger,
    ) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            configure_logging(logging.INFO)

    def test_main_works_without_rich(
        self,
        greeting_schema: CommandSchema,
        router: ResourceRouter,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        assert main(greeting_schema, router, ["greeting", "-n", "BEAR", "-l", "es"]) == 0
        assert capsys.readouterr().out == "¡Hola, BEAR\n"


# ---------------------------------------------------------------------------
# Host diagnostics
# ---------------------------------------------------------------------------

class TestHostDiagnostics:
    def test_error_and_hint_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        HostDiagnostics().error("bad [value]", hint="use [x]")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: bad [value]" in captured.err
        assert "Hint: use [x]" in captured.err

    def test_notice(self, capsys: pytest.CaptureFixture[str]) -> None:
        HostDiagnostics().notice("Aborted by user.")
        assert "Aborted by user." in capsys.readouterr().err

    def test_plain_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        HostDiagnostics().error("bad [value]", hint="use [x]")
        assert capsys.readouterr().err == "Error: bad [value]\nHint: use [x]\n"
