"""Process-level host for a declared command.

A launcher script for one command only needs::

    from resource_cli.cli.app import run

    run(GREETING, router)

Architecture notes
------------------
* No business logic lives here — parsing, binding and outcome mapping
  belong to :class:`~resource_cli.core.command.ResourceCommand`.
* :func:`main` writes the command's message to stdout and returns the
  exit code, which keeps it testable without ``SystemExit``.
* :func:`run` is the script-level error boundary: it reads process
  settings, installs logging and is the only place that calls
  ``sys.exit``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from resource_cli.cli import exit_codes
from resource_cli.cli.console import configure_logging, diagnostics, write_output
from resource_cli.config import Settings
from resource_cli.core.command import ResourceCommand
from resource_cli.core.models import CommandSchema
from resource_cli.core.protocols import ResourceInvoker
from resource_cli.exceptions import ResourceCliError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    schema: CommandSchema,
    invoker: ResourceInvoker,
    argv: Sequence[str] | None = None,
) -> int:
    """Run *schema* against *invoker* and print its message.

    Parameters
    ----------
    argv:
        Full argument vector including the program name.  When ``None``
        (default), ``sys.argv`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    command = ResourceCommand(schema, invoker)
    result = command(sys.argv if argv is None else argv)
    write_output(result.message)
    return result.exit_code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(
    schema: CommandSchema,
    invoker: ResourceInvoker,
    argv: Sequence[str] | None = None,
) -> None:
    """Top-level error boundary invoked by launcher scripts.

    Command failures are already folded into the exit code by
    :func:`main`; this wrapper only guards the host itself (settings,
    logging setup, output) and Ctrl+C.
    """
    try:
        settings = Settings.from_env()
        if settings.log_level is not None:
            configure_logging(settings.log_level)
        code = main(schema, invoker, argv)
        sys.exit(code)
    except ResourceCliError as exc:
        diagnostics.error(str(exc), hint=exc.hint)
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        diagnostics.notice("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        diagnostics.error(
            f"{type(exc).__name__}: {exc}",
            hint="This is a bug in the host; please report it.",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
