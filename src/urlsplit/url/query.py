"""src/urlsplit/url/query.py

Query string decoding and canonical encoding.
"""

import logging
import urllib.parse
from typing import Dict, Iterator, List, Mapping, Optional

from urlsplit.url.escape import Component, unescape

__all__ = ["QueryValues"]

logger = logging.getLogger(__name__)


class QueryValues(Mapping[str, List[str]]):
    """
    Query parameters with support for multiple values per name.

    Indexing returns the full list of values. get() returns only the
    first value, or an empty string when the name is absent.
    Names are case-sensitive.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Dict[str, List[str]]] = None):
        self._values: Dict[str, List[str]] = {}
        if values:
            for name, items in values.items():
                self._values[name] = list(items)

    @classmethod
    def parse(cls, query: str) -> "QueryValues":
        """
        Decode a raw query string.

        Pairs are separated by ``&``. A pair holding a ``;`` or an invalid
        percent-escape is skipped. A pair without ``=`` gets an empty value.

        Args:
            query: Raw query string, without the leading ``?``.

        Returns:
            Decoded parameters in order of first appearance.
        """
        values: Dict[str, List[str]] = {}
        for pair in query.split("&"):
            if not pair:
                continue
            if ";" in pair:
                logger.debug("Skipping query pair with semicolon: %r", pair)
                continue

            raw_name, _, raw_value = pair.partition("=")
            try:
                name = unescape(raw_name, Component.QUERY_COMPONENT)
                value = unescape(raw_value, Component.QUERY_COMPONENT)
            except ValueError as exc:
                logger.debug("Skipping query pair %r: %s", pair, exc)
                continue

            values.setdefault(name, []).append(value)

        return cls(values)

    def __getitem__(self, name: str) -> List[str]:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str, default: str = "") -> str:  # type: ignore[override]
        """
        Get the first value of a parameter.

        Args:
            name: Parameter name (case-sensitive).
            default: Returned when the parameter is absent.

        Returns:
            First value for the name, or default.
        """
        values = self._values.get(name)
        if not values:
            return default
        return values[0]

    def names(self) -> List[str]:
        """Parameter names in sorted order."""
        return sorted(self._values)

    def encode(self) -> str:
        """
        Encode the parameters in canonical form.

        Names are sorted and every value becomes its own ``name=value``
        pair. Spaces encode as ``+`` and only unreserved characters are
        left unescaped.
        """
        pairs = [
            (name, value) for name in self.names() for value in self._values[name]
        ]
        return urllib.parse.urlencode(
            pairs, quote_via=urllib.parse.quote_plus, errors="surrogateescape"
        )
