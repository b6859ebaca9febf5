"""Declarative command registration.

Commands are declared with explicit calls instead of being discovered
from handler signatures at runtime::

    GREETING = define_command(
        "greeting",
        "Say hello in multiple languages",
        uri="app://self/greeting",
        output="greeting",
        options=[
            option("name", "n", "Name to greet", required=True),
            option("lang", "l", "Language (en, ja, fr, es)", default="en"),
        ],
    )

The returned :class:`~resource_cli.core.models.CommandSchema` is
validated once and immutable afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from resource_cli.core.models import CommandSchema, OptionSpec, Verb
from resource_cli.exceptions import SchemaError


def option(
    name: str,
    short_name: str | None = None,
    description: str = "",
    *,
    required: bool = False,
    default: Any = None,
    type: str = "string",
) -> OptionSpec:
    """Declare one option; see :class:`OptionSpec` for the rules."""
    return OptionSpec(
        name=name,
        short_name=short_name,
        description=description,
        required=required,
        default=default,
        type=type,
    )


def define_command(
    name: str,
    description: str,
    *,
    uri: str,
    method: Verb | str = Verb.GET,
    version: str = "0.1.0",
    output: str = "",
    options: Iterable[OptionSpec] = (),
) -> CommandSchema:
    """Build a :class:`CommandSchema` from an ordered list of options.

    *method* accepts a :class:`Verb` or a name such as ``"post"`` or
    ``"onPost"``.

    Raises
    ------
    SchemaError
        On duplicate option names, reserved names or aliases, or any
        per-option violation.
    """
    verb = method if isinstance(method, Verb) else Verb.from_method_name(method)
    by_name: dict[str, OptionSpec] = {}
    for spec in options:
        if spec.name in by_name:
            raise SchemaError(f"Option --{spec.name} is declared twice")
        by_name[spec.name] = spec
    return CommandSchema(
        name=name,
        description=description,
        uri=uri,
        verb=verb,
        version=version,
        output=output,
        options=by_name,
    )
