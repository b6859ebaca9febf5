"""Output channels of the host.

Command output is written to stdout byte for byte.  Host diagnostics
and logging go to stderr through Rich, which is imported lazily so
that importing the package never requires it; a missing install
surfaces as
:class:`~resource_cli.exceptions.EnvironmentError`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from resource_cli.exceptions import EnvironmentError

_RICH_MISSING = "rich is not installed. Install with: pip install rich"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(_RICH_MISSING) from exc
    return Console


def _load_rich_handler_class() -> type[Any]:
    """Return ``rich.logging.RichHandler`` class or raise ``EnvironmentError``."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(_RICH_MISSING) from exc
    return RichHandler


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def write_output(message: str) -> None:
    """Write a command's message to stdout followed by a newline.

    The bytes are passed through untouched: tabs, carriage returns and
    bracketed text reach pipes exactly as the command produced them.
    """
    sys.stdout.write(f"{message}\n")
    sys.stdout.flush()


def configure_logging(level: int) -> None:
    """Route ``resource_cli`` log records to a Rich handler on stderr."""
    handler_class = _load_rich_handler_class()
    handler = handler_class(
        console=get_rich_console(),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger = logging.getLogger("resource_cli")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)


class HostDiagnostics:
    """Host-level messages on stderr, kept apart from command output.

    Used by :func:`resource_cli.cli.app.run` for failures of the host
    itself (bad settings, broken stdout, Ctrl+C).  Messages are escaped
    before styling so brackets in exception text are never read as Rich
    markup.  Without Rich the same text is written unstyled.
    """

    def error(self, message: str, *, hint: str | None = None) -> None:
        self._emit("bold red", "Error:", message)
        if hint:
            self._emit("yellow", "Hint:", hint)

    def notice(self, message: str) -> None:
        self._emit("yellow", "", message)

    @staticmethod
    def _emit(style: str, label: str, message: str) -> None:
        plain = f"{label} {message}" if label else message
        try:
            rich_console = get_rich_console()
            from rich.markup import escape
        except (EnvironmentError, ModuleNotFoundError):
            sys.stderr.write(f"{plain}\n")
            return
        if label:
            rich_console.print(f"[{style}]{label}[/{style}] {escape(message)}")
        else:
            rich_console.print(f"[{style}]{escape(message)}[/{style}]")


diagnostics = HostDiagnostics()
