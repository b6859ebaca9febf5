"""Pure text rendering for command output.

No I/O happens here: each function returns a string that the caller
places into an :class:`~resource_cli.core.models.InvocationResult`.
"""

from __future__ import annotations

import json
from typing import Any

from resource_cli.core.models import ActionOutcome, CommandSchema, OptionSpec

_RESERVED_HELP: tuple[tuple[str, str], ...] = (
    ("--help, -h", "Show this help message"),
    ("--version, -v", "Show version information"),
    ("--format", "Output format (text|json) (default: text)"),
)


# ---------------------------------------------------------------------------
# Outcome rendering
# ---------------------------------------------------------------------------

def to_json(value: Any) -> str:
    """Pretty-print *value* as JSON, keeping non-ASCII text readable."""
    return json.dumps(value, indent=4, ensure_ascii=False, default=str)


def render_outcome(outcome: ActionOutcome) -> str:
    """Full structured representation of an outcome's body."""
    return to_json(dict(outcome.body))


def render_field(value: Any) -> str:
    """Render a selected output field: strings verbatim, the rest as JSON."""
    if isinstance(value, str):
        return value
    return to_json(value)


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------

def _option_line(spec: OptionSpec) -> str:
    alias = f", -{spec.short_name}" if spec.short_name else ""
    required = " (required)" if spec.required else ""
    default = f" (default: {spec.default})" if isinstance(spec.default, str) else ""
    return f"  --{spec.name}{alias}\t{spec.description}{required}{default}"


def render_help(schema: CommandSchema) -> str:
    """Render the ``--help`` screen for *schema*; every line ends in ``\\n``.

    Layout::

        <description>

        Usage: <name> [options]

        Options:
          --name, -n    Name to greet (required)
          ...
          --help, -h        Show this help message
    """
    lines = [
        schema.description,
        "",
        f"Usage: {schema.name} [options]",
        "",
        "Options:",
    ]
    lines.extend(_option_line(spec) for spec in schema.options.values())
    lines.extend(f"  {flags}\t\t{text}" for flags, text in _RESERVED_HELP)
    return "\n".join(lines) + "\n"


def render_version(schema: CommandSchema) -> str:
    return f"{schema.name} version {schema.version}"
