"""src/urlsplit/url/escape.py

Percent-encoding rules for the individual URL components.
"""

import string
import urllib.parse
from enum import Enum

__all__ = [
    "Component",
    "unescape",
    "escape_path",
    "valid_encoded_path",
    "valid_userinfo",
]

_HEX_DIGITS = frozenset(string.hexdigits)
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")
_SUB_DELIMS = frozenset("!$&'()*+,;=")

_HOST_CHARS = _UNRESERVED | _SUB_DELIMS | frozenset(':[]<>"')
_USERINFO_CHARS = _UNRESERVED | _SUB_DELIMS | frozenset(":%@")
_ENCODED_PATH_CHARS = _UNRESERVED | _SUB_DELIMS | frozenset("/:@[]%")

# Characters left as is when a decoded path is escaped again.
_PATH_SAFE = "$&+,/:;=@"


class Component(Enum):
    """URL component a value is being decoded for."""

    HOST = "host"
    USERINFO = "userinfo"
    PATH = "path"
    QUERY_COMPONENT = "query component"
    FRAGMENT = "fragment"


def _check_escapes(value: str, component: Component) -> None:
    index = value.find("%")
    while index != -1:
        sequence = value[index : index + 3]
        if (
            len(sequence) < 3
            or sequence[1] not in _HEX_DIGITS
            or sequence[2] not in _HEX_DIGITS
        ):
            raise ValueError(f'invalid URL escape "{sequence}"')

        # Inside a host only escaped non-ASCII bytes and "%25" are allowed.
        if (
            component is Component.HOST
            and int(sequence[1], 16) < 8
            and sequence != "%25"
        ):
            raise ValueError(f'invalid URL escape "{sequence}"')

        index = value.find("%", index + 3)


def unescape(value: str, component: Component) -> str:
    """
    Decode percent-escapes in a URL component.

    Args:
        value: Raw component text.
        component: Which component the text belongs to. Hosts are
            checked for forbidden characters and query components decode
            ``+`` as a space.

    Returns:
        The decoded text. Bytes that are not valid UTF-8 are kept as lone
        surrogates so that escape_path() and the query encoder restore them.

    Raises:
        ValueError: On a malformed escape or a forbidden host character.
    """
    _check_escapes(value, component)

    if component is Component.HOST:
        for char in value:
            if char.isascii() and char != "%" and char not in _HOST_CHARS:
                raise ValueError(f'invalid character "{char}" in host name')

    if component is Component.QUERY_COMPONENT:
        return urllib.parse.unquote_plus(value, errors="surrogateescape")
    return urllib.parse.unquote(value, errors="surrogateescape")


def escape_path(path: str) -> str:
    """Percent-escape a decoded path, keeping separators and sub-delimiters."""
    if path == "*":
        return path
    return urllib.parse.quote(path, safe=_PATH_SAFE, errors="surrogateescape")


def valid_encoded_path(raw_path: str) -> bool:
    """Check that a raw path contains nothing that would need escaping."""
    return all(char in _ENCODED_PATH_CHARS for char in raw_path)


def valid_userinfo(userinfo: str) -> bool:
    """Check the characters allowed in the userinfo part of an authority."""
    return all(char in _USERINFO_CHARS for char in userinfo)
