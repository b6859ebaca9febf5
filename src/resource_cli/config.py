"""Process settings read from the environment.

Per-command configuration lives in
:class:`~resource_cli.core.models.CommandSchema`; this module only
covers knobs that affect the host process as a whole.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from resource_cli.exceptions import ConfigError

LOG_LEVEL_ENV: str = "RESOURCE_CLI_LOG_LEVEL"
"""Environment variable naming the diagnostic log level."""

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved process settings."""

    log_level: int | None = None
    """Logging level, or ``None`` to leave logging unconfigured."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises
        ------
        ConfigError
            If ``RESOURCE_CLI_LOG_LEVEL`` names an unknown level.
        """
        env = os.environ if environ is None else environ
        raw = env.get(LOG_LEVEL_ENV, "").strip()
        if not raw:
            return cls()
        level = _LEVELS.get(raw.upper())
        if level is None:
            raise ConfigError(
                f"Unknown log level: {raw}",
                hint=f"{LOG_LEVEL_ENV} must be one of {', '.join(_LEVELS)}.",
            )
        return cls(log_level=level)
