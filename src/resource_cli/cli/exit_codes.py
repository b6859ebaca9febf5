"""Process exit codes of a resource command.

The dispatcher reads them off the raised error's ``exit_code``; the
host uses them directly for its own failures.  Resource status codes
fold into the first three: below 400 is ``SUCCESS``, 4xx is
``GENERAL_ERROR`` and 5xx is ``UNEXPECTED_ERROR``.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Resource answered below 400, or ``--help`` / ``--version`` was shown."""

GENERAL_ERROR: int = 1
"""Options could not be bound, the resource answered 4xx, or a host
setting was invalid."""

UNEXPECTED_ERROR: int = 2
"""Resource answered 5xx or its call raised."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted by SIGINT (128 + 2)."""
