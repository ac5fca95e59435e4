"""src/urlsplit/utils/__init__.py"""

from .quoting import quote, shell_quote
from .settings import Settings, parse_bool

__all__ = ["quote", "shell_quote", "Settings", "parse_bool"]
