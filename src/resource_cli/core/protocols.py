"""Protocols (interfaces) consumed by the core layer.

The dispatcher depends ONLY on :class:`ResourceInvoker` — never on a
concrete resource implementation — so the invoker is injected at
construction time rather than looked up from ambient state.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from resource_cli.core.models import ActionOutcome, Verb


class ResourceInvoker(Protocol):
    """Contract for the action boundary.

    Any object that implements :meth:`invoke` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def invoke(
        self,
        verb: Verb,
        uri: str,
        params: Mapping[str, Any],
    ) -> ActionOutcome:
        """Send *verb* to the resource at *uri* with bound *params*.

        Parameters
        ----------
        verb:
            Request method declared on the command schema.
        uri:
            Resource identifier declared on the command schema
            (e.g. ``"app://self/greeting"``).
        params:
            Bound option values keyed by long option name.  Optional
            options without a value are present and bound to their
            default (possibly ``None``).

        Returns
        -------
        ActionOutcome
            Status code and body.  A status of 400 or above is not an
            exception; the dispatcher maps it to a non-zero exit code.

        Implementations may raise any exception; the dispatcher reports
        it as an unexpected failure.
        """
        ...  # pragma: no cover
