"""Command dispatcher — parse, bind, invoke, render.

:class:`ResourceCommand` is the single place that turns errors into
exit codes.  It depends on a
:class:`~resource_cli.core.protocols.ResourceInvoker` injected at
construction time and on an immutable
:class:`~resource_cli.core.models.CommandSchema`.

Guarantees
----------
* ``--help`` / ``-h`` and ``--version`` / ``-v`` short-circuit before any
  other token is looked at.
* The resource is called at most once per invocation.
* Every invocation returns an :class:`InvocationResult`; nothing raised
  during parsing, binding or the resource call escapes.
* Errors raised before the call exit 1; anything the call itself raises,
  our own errors included, is an :class:`UnexpectedFailure` (exit 2).
* :class:`~resource_cli.exceptions.SchemaError` is never caught here —
  schemas are validated when they are built.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from resource_cli.core.arg_parser import parse_argv
from resource_cli.core.binding import bind_params
from resource_cli.core.models import ActionOutcome, CommandSchema, InvocationResult
from resource_cli.core.protocols import ResourceInvoker
from resource_cli.core.rendering import (
    render_field,
    render_help,
    render_outcome,
    render_version,
)
from resource_cli.exceptions import (
    ActionClientError,
    ActionServerError,
    ResourceCliError,
    UnexpectedFailure,
)

logger = logging.getLogger(__name__)

_HELP_FLAGS: frozenset[str] = frozenset({"--help", "-h"})
_VERSION_FLAGS: frozenset[str] = frozenset({"--version", "-v"})


class ResourceCommand:
    """Run one declared command against a resource.

    Parameters
    ----------
    schema:
        The command declaration.  It may be shared between instances.
    invoker:
        Any object satisfying the :class:`ResourceInvoker` protocol.

    Usage::

        command = ResourceCommand(GREETING, router)
        result = command(["greeting", "--name", "BEAR"])
        print(result.message)
        sys.exit(result.exit_code)
    """

    def __init__(self, schema: CommandSchema, invoker: ResourceInvoker) -> None:
        self._schema: CommandSchema = schema
        self._invoker: ResourceInvoker = invoker

    @property
    def schema(self) -> CommandSchema:
        return self._schema

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def __call__(self, argv: Sequence[str]) -> InvocationResult:
        """Run the command for *argv* (``argv[0]`` is the program name)."""
        if _HELP_FLAGS.intersection(argv):
            logger.debug("%s: help requested", self._schema.name)
            return InvocationResult(render_help(self._schema))
        if _VERSION_FLAGS.intersection(argv):
            logger.debug("%s: version requested", self._schema.name)
            return InvocationResult(render_version(self._schema))

        try:
            return self._run(argv)
        except (ActionClientError, ActionServerError) as exc:
            return InvocationResult(render_outcome(exc.outcome), exc.exit_code)
        except ResourceCliError as exc:
            logger.debug("%s: %s", self._schema.name, exc)
            return InvocationResult(f"Error: {exc}", exc.exit_code)
        except Exception as exc:
            failure = UnexpectedFailure(exc)
            logger.debug("%s: unexpected failure", self._schema.name, exc_info=exc)
            return InvocationResult(f"Error: {failure}", failure.exit_code)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _run(self, argv: Sequence[str]) -> InvocationResult:
        schema = self._schema
        options = parse_argv(argv)
        logger.debug("%s: parsed options %s", schema.name, list(options))
        params = bind_params(schema, options)
        logger.debug(
            "%s: %s %s with %s",
            schema.name,
            schema.verb.value,
            schema.uri,
            list(params),
        )

        try:
            outcome = self._invoker.invoke(schema.verb, schema.uri, params)
        except Exception as exc:
            raise UnexpectedFailure(exc) from exc
        logger.debug("%s: status %d", schema.name, outcome.code)
        self._check_status(outcome)
        return InvocationResult(self._render(outcome, options))

    @staticmethod
    def _check_status(outcome: ActionOutcome) -> None:
        """Raise the matching outcome error for a 4xx/5xx status."""
        if outcome.is_server_error:
            raise ActionServerError(outcome)
        if outcome.is_error:
            raise ActionClientError(outcome)

    def _render(
        self,
        outcome: ActionOutcome,
        options: Mapping[str, str | bool],
    ) -> str:
        """Pick the text or structured form of a successful outcome."""
        selector = self._schema.output
        if options.get("format") == "json" or not selector:
            return render_outcome(outcome)
        if selector in outcome.body:
            return render_field(outcome.body[selector])
        return render_outcome(outcome)
