"""Core layer — tokenizer, schema, binding, rendering and dispatch.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from resource_cli.core.arg_parser import parse_argv
from resource_cli.core.binding import bind_params
from resource_cli.core.command import ResourceCommand
from resource_cli.core.models import (
    ActionOutcome,
    CommandSchema,
    InvocationResult,
    OptionSpec,
    ParsedOption,
    Verb,
)
from resource_cli.core.protocols import ResourceInvoker
from resource_cli.core.schema import define_command, option

__all__: list[str] = [
    "ActionOutcome",
    "CommandSchema",
    "InvocationResult",
    "OptionSpec",
    "ParsedOption",
    "ResourceCommand",
    "ResourceInvoker",
    "Verb",
    "bind_params",
    "define_command",
    "option",
    "parse_argv",
]
