"""src/urlsplit/variables.py

URL decomposition into named string variables.

This module turns a parsed URL into an ordered VariableSet: eleven fixed
variables describing the URL components, followed by one ``URL_QUERY_<name>``
variable per query parameter.
"""

import logging
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional

from urlsplit.url.parser import URL

__all__ = ["Variable", "VariableSet", "FIXED_NAMES", "QUERY_PREFIX", "decompose"]

logger = logging.getLogger(__name__)

FIXED_NAMES = (
    "URL_SCHEME",
    "URL_HOST",
    "URL_HOSTNAME",
    "URL_PORT",
    "URL_USERNAME",
    "URL_PASSWORD",
    "URL_URI",
    "URL_PATH",
    "URL_ESCAPED_PATH",
    "URL_QUERY",
    "URL_FRAGMENT",
)

QUERY_PREFIX = "URL_QUERY_"


class Variable(NamedTuple):
    """A variable name matched with its string value."""

    name: str
    value: str


class VariableSet:
    """
    Ordered collection of variables.

    Iteration follows insertion order. Lookups return the first variable
    with a matching name; as_dict() lets later duplicates win.
    """

    __slots__ = ("_variables",)

    def __init__(self, variables: Optional[Iterable[Variable]] = None):
        self._variables: List[Variable] = []
        if variables:
            for variable in variables:
                self.add(variable.name, variable.value)

    def add(self, name: str, value: str) -> None:
        """Append a variable."""
        self._variables.append(Variable(name, value))

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __contains__(self, name: object) -> bool:
        return any(variable.name == name for variable in self._variables)

    def names(self) -> List[str]:
        """Variable names in order."""
        return [variable.name for variable in self._variables]

    def find(self, name: str) -> Optional[Variable]:
        """Return the first variable named exactly ``name``, or None."""
        for variable in self._variables:
            if variable.name == name:
                return variable
        return None

    def as_dict(self) -> Dict[str, str]:
        """Name to value mapping; the last variable wins on duplicate names."""
        return {variable.name: variable.value for variable in self._variables}


def decompose(url: URL) -> VariableSet:
    """
    Build the variable set describing a parsed URL.

    The fixed variables come first, in FIXED_NAMES order. Query parameters
    follow in sorted name order, each exposing only its first value.

    Args:
        url: A successfully parsed URL.

    Returns:
        The variables, ready for rendering.
    """
    query = url.query()

    variables = VariableSet()
    variables.add("URL_SCHEME", url.scheme)
    variables.add("URL_HOST", url.host)
    variables.add("URL_HOSTNAME", url.hostname)
    variables.add("URL_PORT", url.port)
    variables.add("URL_USERNAME", url.username)
    variables.add("URL_PASSWORD", url.password)
    variables.add("URL_URI", url.request_uri)
    variables.add("URL_PATH", url.path)
    variables.add("URL_ESCAPED_PATH", url.escaped_path)
    variables.add("URL_QUERY", query.encode())
    variables.add("URL_FRAGMENT", url.fragment)

    for name in query.names():
        variables.add(f"{QUERY_PREFIX}{name}", query.get(name))

    logger.debug(
        "Decomposed URL into %d variables (%d query parameters)",
        len(variables),
        len(query),
    )
    return variables
