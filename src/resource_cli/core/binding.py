"""Bind parsed options against a command schema.

Pure transformations — deterministic, no I/O.

Pipeline order (enforced by :func:`bind_params`):

1. **Resolve** — short alias value, overridden by the long name value.
2. **Require** — a required option with no value raises
   :class:`~resource_cli.exceptions.MissingRequiredOption`.
3. **Coerce** — command-line values are converted to the declared type;
   defaults are passed through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resource_cli.core.models import CommandSchema, OptionSpec
from resource_cli.exceptions import MissingRequiredOption, OptionTypeError

_TRUE_WORDS: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS: frozenset[str] = frozenset({"0", "false", "no", "off"})


# ---------------------------------------------------------------------------
# 1. Resolve
# ---------------------------------------------------------------------------

def resolve_value(
    spec: OptionSpec,
    options: Mapping[str, str | bool],
) -> str | bool | None:
    """Return the raw value given for *spec*, or ``None`` when absent.

    The long form wins when both ``-n`` and ``--name`` are present.
    """
    value: str | bool | None = None
    if spec.short_name and spec.short_name in options:
        value = options[spec.short_name]
    if spec.name in options:
        value = options[spec.name]
    return value


# ---------------------------------------------------------------------------
# 3. Coerce
# ---------------------------------------------------------------------------

def _coerce_bool(spec: OptionSpec, value: str | bool) -> bool:
    if value is True:
        return True
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise OptionTypeError(
        f"Option --{spec.name} expects a boolean, got {value!r}",
        hint="Use one of: true, false, yes, no, on, off, 1, 0.",
    )


def coerce_value(spec: OptionSpec, value: str | bool) -> Any:
    """Convert a command-line *value* to ``spec.type``.

    A bare flag (``True``) is kept as-is for ``string`` options and is
    rejected for numeric ones.
    """
    if spec.type == "bool":
        return _coerce_bool(spec, value)
    if spec.type == "string":
        return value
    if value is True:
        raise OptionTypeError(f"Option --{spec.name} requires a {spec.type} value")
    converter = int if spec.type == "int" else float
    try:
        return converter(value)
    except ValueError:
        raise OptionTypeError(
            f"Option --{spec.name} expects {spec.type}, got {value!r}",
        ) from None


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def bind_params(
    schema: CommandSchema,
    options: Mapping[str, str | bool],
) -> dict[str, Any]:
    """Build the parameter mapping passed to the resource.

    Every declared option appears in the result, in schema order.
    Options the schema does not declare are ignored.

    Raises
    ------
    MissingRequiredOption
        If a required option has no value.
    OptionTypeError
        If a value does not fit the declared type.
    """
    params: dict[str, Any] = {}
    for name, spec in schema.options.items():
        value = resolve_value(spec, options)
        if value is None:
            if spec.required:
                raise MissingRequiredOption(name)
            params[name] = spec.default
            continue
        params[name] = coerce_value(spec, value)
    return params
