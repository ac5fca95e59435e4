"""src/urlsplit/cli/__init__.py"""

from .main import (
    create_parser,
    keep_undecodable_bytes,
    main,
    read_url,
    run,
    setup_logging,
)

__all__ = [
    "create_parser",
    "keep_undecodable_bytes",
    "main",
    "read_url",
    "run",
    "setup_logging",
]
