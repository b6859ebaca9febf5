"""Infrastructure layer — concrete resource invokers.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Implementations satisfy :class:`~resource_cli.core.protocols.ResourceInvoker`.
"""

from resource_cli.infra.router import ResourceRouter

__all__: list[str] = ["ResourceRouter"]
