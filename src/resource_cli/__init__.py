"""resource-cli — run resource actions as command-line programs.

A command is declared once as an immutable schema; the dispatcher
parses the argument vector, binds it against the schema, calls the
resource and turns the outcome into a message and an exit code.
"""

from resource_cli.core.command import ResourceCommand
from resource_cli.core.models import (
    ActionOutcome,
    CommandSchema,
    InvocationResult,
    OptionSpec,
    Verb,
)
from resource_cli.core.schema import define_command, option
from resource_cli.version import __version__

__all__: list[str] = [
    "ActionOutcome",
    "CommandSchema",
    "InvocationResult",
    "OptionSpec",
    "ResourceCommand",
    "Verb",
    "__version__",
    "define_command",
    "option",
]
