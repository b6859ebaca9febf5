"""In-process :class:`~resource_cli.core.protocols.ResourceInvoker`.

Handlers are registered explicitly per ``(verb, uri)`` pair and looked
up by tag; no method name is ever built from a string at call time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from resource_cli.core.models import ActionOutcome, Verb
from resource_cli.exceptions import RouteNotFoundError

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], ActionOutcome]
"""A resource handler: bound parameters in, outcome out."""


class ResourceRouter:
    """Dispatch table from ``(verb, uri)`` to a handler.

    Usage::

        router = ResourceRouter()

        @router.route(Verb.GET, "app://self/greeting")
        def greet(params):
            return ActionOutcome(200, {"greeting": f"Hello, {params['name']}"})

        command = ResourceCommand(GREETING, router)
    """

    def __init__(self) -> None:
        self._handlers: dict[tuple[Verb, str], Handler] = {}

    def add(self, verb: Verb, uri: str, handler: Handler) -> None:
        """Register *handler*; a second registration replaces the first."""
        self._handlers[(verb, uri)] = handler

    def route(self, verb: Verb, uri: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`add`."""

        def register(handler: Handler) -> Handler:
            self.add(verb, uri, handler)
            return handler

        return register

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def invoke(
        self,
        verb: Verb,
        uri: str,
        params: Mapping[str, Any],
    ) -> ActionOutcome:
        """Call the handler registered for *verb* and *uri*.

        Raises
        ------
        RouteNotFoundError
            When nothing is registered for the pair.
        """
        handler = self._handlers.get((verb, uri))
        if handler is None:
            raise RouteNotFoundError(
                f"No resource for {verb.value.upper()} {uri}",
                hint="Register a handler with ResourceRouter.add().",
            )
        logger.debug("routing %s %s", verb.value, uri)
        return handler(params)
