"""Argument tokenizer — raw ``argv`` to an ordered option mapping.

Every function here is **pure**: no I/O, no state, and no failure mode.
Any argument vector yields a (possibly empty) mapping.

Rules
-----
* ``argv[0]`` is the program name and is skipped.
* ``--name=value`` splits on the first ``=`` only; ``--name=`` gives ``""``.
* ``--name value`` / ``-n value`` take the next token when it does not
  start with ``-``; otherwise the option is a flag bound to ``True``.
* The first token without a leading ``-`` ends option parsing: it and
  everything after it are dropped.
* Repeated names overwrite earlier values (last write wins).
"""

from __future__ import annotations

from collections.abc import Sequence

from resource_cli.core.models import ParsedOption


# ---------------------------------------------------------------------------
# Single-token readers
# ---------------------------------------------------------------------------

def parse_long_option(arg: str, next_arg: str | None) -> ParsedOption:
    """Read ``--name=value``, ``--name value`` or ``--name``."""
    name, sep, value = arg[2:].partition("=")
    if sep:
        return ParsedOption(name, value, 0)
    if next_arg is not None and not next_arg.startswith("-"):
        return ParsedOption(name, next_arg, 1)
    return ParsedOption(name, True, 0)


def parse_short_option(arg: str, next_arg: str | None) -> ParsedOption:
    """Read ``-n value`` or ``-n``."""
    name = arg[1:]
    if next_arg is not None and not next_arg.startswith("-"):
        return ParsedOption(name, next_arg, 1)
    return ParsedOption(name, True, 0)


# ---------------------------------------------------------------------------
# Full vector
# ---------------------------------------------------------------------------

def parse_argv(argv: Sequence[str]) -> dict[str, str | bool]:
    """Parse *argv* into ``{name: value}`` preserving first-seen order.

    >>> parse_argv(["greeting", "-n", "BEAR", "--lang=ja", "--loud"])
    {'n': 'BEAR', 'lang': 'ja', 'loud': True}
    """
    options: dict[str, str | bool] = {}
    args = list(argv[1:])
    i = 0
    while i < len(args):
        arg = args[i]
        if not arg.startswith("-"):
            break
        next_arg = args[i + 1] if i + 1 < len(args) else None
        if arg.startswith("--"):
            parsed = parse_long_option(arg, next_arg)
        else:
            parsed = parse_short_option(arg, next_arg)
        options[parsed.name] = parsed.value
        i += 1 + parsed.advance
    return options
