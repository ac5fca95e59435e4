"""src/urlsplit/url/__init__.py

URL parsing layer for Urlsplit.

This module provides the generic URL parser, percent-encoding rules for each
URL component and query string decoding with canonical re-encoding.
"""

from .parser import URL, parse_url
from .query import QueryValues

__all__ = ["URL", "QueryValues", "parse_url"]
