"""Domain models for resource-cli.

All models are **frozen** dataclasses — immutable value objects.  The
two schema types validate themselves on construction and raise
:class:`~resource_cli.exceptions.SchemaError`; nothing else here has
behaviour beyond data access and a few derived properties.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from resource_cli.exceptions import SchemaError

RESERVED_NAMES: frozenset[str] = frozenset({"help", "version", "format"})
"""Long option names owned by the dispatcher."""

RESERVED_ALIASES: frozenset[str] = frozenset({"h", "v"})
"""Short aliases owned by the dispatcher."""

OPTION_TYPES: frozenset[str] = frozenset({"string", "int", "float", "bool"})

_REQUIRED_SUFFIX = ":"
_OPTIONAL_SUFFIX = "::"


# ---------------------------------------------------------------------------
# Verb
# ---------------------------------------------------------------------------

class Verb(str, Enum):
    """Request method a command sends to its resource."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"

    @classmethod
    def from_method_name(cls, name: str) -> Verb:
        """Resolve ``"get"``, ``"GET"`` or handler-style ``"onGet"``.

        Raises
        ------
        SchemaError
            If *name* does not denote a supported verb.
        """
        key = name.strip()
        if key.startswith("on") and len(key) > 2 and key[2].isupper():
            key = key[2:]
        try:
            return cls(key.lower())
        except ValueError:
            raise SchemaError(f"Unsupported method: {name}") from None


# ---------------------------------------------------------------------------
# Tokenizer output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOption:
    """One option read from the argument vector."""

    name: str
    """Option name without leading dashes."""

    value: str | bool
    """Explicit value, or ``True`` for a bare flag."""

    advance: int
    """Number of extra tokens consumed (0 or 1)."""


# ---------------------------------------------------------------------------
# Option schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declaration of one command option.

    Raises :class:`SchemaError` when the alias is not exactly one
    character, when a required option declares a default, or when
    *type* is not one of :data:`OPTION_TYPES`.
    """

    name: str
    short_name: str | None = None
    description: str = ""
    required: bool = False
    default: Any = None
    type: str = "string"

    def __post_init__(self) -> None:
        if not self.name or self.name.startswith("-"):
            raise SchemaError(f"Invalid option name: {self.name!r}")
        if self.short_name is not None and len(self.short_name) != 1:
            raise SchemaError(
                f"Short name of --{self.name} must be a single character",
            )
        if self.required and self.default is not None:
            raise SchemaError(
                f"Required option --{self.name} cannot have a default value",
            )
        if self.type not in OPTION_TYPES:
            raise SchemaError(
                f"Unknown type {self.type!r} for option --{self.name}",
                hint=f"Use one of: {', '.join(sorted(OPTION_TYPES))}.",
            )

    @property
    def getopt_suffix(self) -> str:
        return _REQUIRED_SUFFIX if self.required else _OPTIONAL_SUFFIX


# ---------------------------------------------------------------------------
# Command schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSchema:
    """Immutable description of one command.

    *options* is copied into a read-only mapping keyed by option name;
    its iteration order is the declaration order.  ``short_options`` and
    ``long_options`` are derived once, getopt-style: the reserved help
    and version entries come first, required options carry ``:`` and
    optional ones ``::``.
    """

    name: str
    description: str
    uri: str
    verb: Verb = Verb.GET
    version: str = "0.1.0"
    output: str = ""
    options: Mapping[str, OptionSpec] = field(default_factory=dict)
    short_options: str = field(init=False)
    long_options: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("Command name must not be empty")
        self._validate_options()
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "short_options", self._build_short_options())
        object.__setattr__(self, "long_options", self._build_long_options())

    def _validate_options(self) -> None:
        aliases: set[str] = set()
        for key, spec in self.options.items():
            if key != spec.name:
                raise SchemaError(f"Option key {key!r} does not match --{spec.name}")
            if spec.name in RESERVED_NAMES:
                raise SchemaError(f"Option --{spec.name} is reserved")
            if spec.short_name is None:
                continue
            if spec.short_name in RESERVED_ALIASES:
                raise SchemaError(f"Short name -{spec.short_name} is reserved")
            if spec.short_name in aliases:
                raise SchemaError(f"Short name -{spec.short_name} is used twice")
            aliases.add(spec.short_name)

    def _build_short_options(self) -> str:
        short = "hv"
        for spec in self.options.values():
            if spec.short_name:
                short += f"{spec.short_name}{spec.getopt_suffix}"
        return short

    def _build_long_options(self) -> tuple[str, ...]:
        reserved = ("help", "version", f"format{_OPTIONAL_SUFFIX}")
        return reserved + tuple(
            f"{spec.name}{spec.getopt_suffix}" for spec in self.options.values()
        )


# ---------------------------------------------------------------------------
# Action boundary
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """What a resource returns: an HTTP-like status and a body."""

    code: int = 200
    body: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.code >= 400

    @property
    def is_server_error(self) -> bool:
        return self.code >= 500


# ---------------------------------------------------------------------------
# Invocation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Final message and process exit code of one invocation."""

    message: str
    exit_code: int = 0
