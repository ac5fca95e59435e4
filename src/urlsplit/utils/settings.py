"""utils/settings.py

Runtime settings for Urlsplit.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["Settings", "parse_bool"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Interpret an environment variable value as a boolean."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class Settings:
    """
    Settings configuration.

    Attributes:
        require_url: The URL must come from the command line; standard
            input is never read.
        log_level: Logging level used when verbose output is off.
    """

    require_url: bool = False
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Create Settings from ``URLSPLIT_*`` environment variables.

        Unset variables keep their defaults. An unknown log level name or
        an unparsable boolean raises ValueError.
        """
        if environ is None:
            environ = os.environ

        settings = cls()

        require_url = environ.get("URLSPLIT_REQUIRE_URL")
        if require_url is not None:
            settings.require_url = parse_bool(require_url)

        log_level = environ.get("URLSPLIT_LOG_LEVEL")
        if log_level:
            level = logging.getLevelName(log_level.strip().upper())
            if not isinstance(level, int):
                raise ValueError(f"Invalid log level: {log_level!r}")
            settings.log_level = level

        return settings
