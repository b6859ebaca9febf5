"""Custom exception hierarchy for resource-cli.

Every error a command can surface inherits from
:class:`ResourceCliError`.  Each class carries the process exit code it
maps to, so the dispatcher boundary translates errors into an
:class:`~resource_cli.core.models.InvocationResult` without a lookup
table.

Hierarchy
---------
ResourceCliError
├── SchemaError              (never caught — aborts startup)
├── BindingError             exit 1
│   ├── MissingRequiredOption
│   └── OptionTypeError
├── ActionClientError        exit 1
├── ActionServerError        exit 2
├── UnexpectedFailure        exit 2
├── RouteNotFoundError       (raised by the action; reported as UnexpectedFailure)
├── ConfigError              exit 1
└── EnvironmentError         exit 1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_cli.core.models import ActionOutcome


class ResourceCliError(Exception):
    """Base exception for all resource-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the dispatcher can render a one-line message
    without leaking a stack trace.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Schema construction ---------------------------------------------------

class SchemaError(ResourceCliError):
    """Raised when a command schema violates its construction rules."""


# --- Binding (before the action runs) --------------------------------------

class BindingError(ResourceCliError):
    """Raised when parsed options cannot be bound to the schema."""


class MissingRequiredOption(BindingError):
    """Raised when a required option is absent from the command line."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Option --{name} is required",
            hint=f"Pass --{name} <value> or run with --help.",
        )
        self.option_name: str = name


class OptionTypeError(BindingError):
    """Raised when a bound value does not fit the option's declared type."""


# --- Action outcome --------------------------------------------------------

class _OutcomeError(ResourceCliError):
    def __init__(self, outcome: ActionOutcome) -> None:
        super().__init__(f"Resource responded with status {outcome.code}")
        self.outcome: ActionOutcome = outcome


class ActionClientError(_OutcomeError):
    """The action answered with a 4xx status."""


class ActionServerError(_OutcomeError):
    """The action answered with a status of 500 or above."""

    exit_code = 2


class UnexpectedFailure(ResourceCliError):
    """Wraps any exception the action raised that is not one of ours.

    ``str()`` renders as ``Kind(message)``, e.g. ``ValueError(bad input)``.
    """

    exit_code = 2

    def __init__(self, cause: BaseException) -> None:
        self.kind: str = type(cause).__name__
        super().__init__(f"{self.kind}({cause})")
        self.cause: BaseException = cause


# --- Routing ---------------------------------------------------------------

class RouteNotFoundError(ResourceCliError):
    """Raised when no handler is registered for a verb and URI."""


# --- Environment / configuration -------------------------------------------

class ConfigError(ResourceCliError):
    """Raised when a process setting holds an unusable value."""


class EnvironmentError(ResourceCliError):
    """Raised when a required runtime dependency is not available."""
