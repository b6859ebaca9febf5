"""CLI layer — process-level host for declared commands.

This package is the outermost layer.  It may import from ``core`` and
``infra``, but no other layer may import from ``cli``.
"""
