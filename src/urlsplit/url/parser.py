"""src/urlsplit/url/parser.py

Generic URL parser for Urlsplit.
"""

import logging
import string
from typing import Tuple

from urlsplit.exceptions import ParseError
from urlsplit.url.escape import (
    Component,
    escape_path,
    unescape,
    valid_encoded_path,
    valid_userinfo,
)
from urlsplit.url.query import QueryValues

__all__ = ["URL", "parse_url"]

logger = logging.getLogger(__name__)

_SCHEME_FIRST = frozenset(string.ascii_letters)
_SCHEME_REST = _SCHEME_FIRST | frozenset(string.digits + "+-.")


class URL:
    """
    Parsed URL components.

    Attributes:
        scheme: Lower-cased scheme, empty if absent.
        opaque: Opaque part of URLs such as ``mailto:joe@example.com``.
        username: Decoded username, empty if absent.
        password: Decoded password, empty if absent.
        password_set: Whether a password was given (possibly empty).
        host: Decoded ``host[:port]`` from the authority.
        path: Decoded path.
        raw_path: Path as written in the input.
        raw_query: Query string as written, without ``?``.
        force_query: Whether the URL ends with a bare ``?``.
        fragment: Decoded fragment, empty if absent.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "scheme",
        "opaque",
        "username",
        "password",
        "password_set",
        "host",
        "path",
        "raw_path",
        "raw_query",
        "force_query",
        "fragment",
    )

    def __init__(self, url: str):
        self.scheme = ""
        self.opaque = ""
        self.username = ""
        self.password = ""
        self.password_set = False
        self.host = ""
        self.path = ""
        self.raw_path = ""
        self.raw_query = ""
        self.force_query = False
        self.fragment = ""

        try:
            self._parse(url)
        except ValueError as exc:
            raise ParseError(url, str(exc)) from exc

    def __repr__(self) -> str:
        return f"URL(scheme={self.scheme!r}, host={self.host!r}, path={self.path!r})"

    def _parse(self, url: str) -> None:
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in url):
            raise ValueError("invalid control character in URL")

        rest, has_fragment, fragment = url.partition("#")
        if has_fragment:
            self.fragment = unescape(fragment, Component.FRAGMENT)

        self.scheme, rest = _split_scheme(rest)

        if rest.endswith("?") and rest.count("?") == 1:
            self.force_query = True
            rest = rest[:-1]
        else:
            rest, _, self.raw_query = rest.partition("?")

        if not rest.startswith("/"):
            if self.scheme:
                self.opaque = rest
                return
            segment = rest.partition("/")[0]
            if ":" in segment:
                raise ValueError("first path segment in URL cannot contain colon")

        if (self.scheme or not rest.startswith("///")) and rest.startswith("//"):
            authority, slash, path = rest[2:].partition("/")
            self._parse_authority(authority)
            rest = slash + path

        self.raw_path = rest
        self.path = unescape(rest, Component.PATH)

    def _parse_authority(self, authority: str) -> None:
        userinfo, has_userinfo, host = authority.rpartition("@")
        if not has_userinfo:
            host = authority
        self.host = _parse_host(host)

        if not has_userinfo:
            return

        if not valid_userinfo(userinfo):
            raise ValueError("invalid userinfo")

        username, separator, password = userinfo.partition(":")
        self.password_set = bool(separator)
        self.username = unescape(username, Component.USERINFO)
        if self.password_set:
            self.password = unescape(password, Component.USERINFO)

    @property
    def hostname(self) -> str:
        """Host without port; IPv6 brackets are stripped."""
        return _split_host_port(self.host)[0]

    @property
    def port(self) -> str:
        """Port digits, empty when the authority has none."""
        return _split_host_port(self.host)[1]

    @property
    def escaped_path(self) -> str:
        """Path as written when that is a valid encoding, else the decoded path escaped again."""
        if self.raw_path and valid_encoded_path(self.raw_path):
            return self.raw_path
        return escape_path(self.path)

    @property
    def request_uri(self) -> str:
        """Request target: path and query, no scheme, host or fragment."""
        result = self.opaque
        if not result:
            result = self.escaped_path or "/"
        elif result.startswith("//"):
            result = f"{self.scheme}:{result}"

        if self.force_query or self.raw_query:
            result = f"{result}?{self.raw_query}"
        return result

    def query(self) -> QueryValues:
        """Decode the raw query string."""
        return QueryValues.parse(self.raw_query)


def _split_scheme(url: str) -> Tuple[str, str]:
    """Split a leading ``scheme:`` off the URL, returning ("", url) when there is none."""
    for index, char in enumerate(url):
        if char in _SCHEME_FIRST:
            continue
        if char in _SCHEME_REST:
            if index == 0:
                return "", url
            continue
        if char == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return url[:index].lower(), url[index + 1 :]
        return "", url
    return "", url


def _valid_optional_port(port: str) -> bool:
    if not port:
        return True
    if not port.startswith(":"):
        return False
    return all(char in string.digits for char in port[1:])


def _parse_host(host: str) -> str:
    if host.startswith("["):
        end = host.rfind("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        colon_port = host[end + 1 :]
        if not _valid_optional_port(colon_port):
            raise ValueError(f'invalid port "{colon_port}" after host')
    else:
        colon = host.rfind(":")
        if colon != -1:
            colon_port = host[colon:]
            if not _valid_optional_port(colon_port):
                raise ValueError(f'invalid port "{colon_port}" after host')

    return unescape(host, Component.HOST)


def _split_host_port(host_port: str) -> Tuple[str, str]:
    host, port = host_port, ""
    colon = host_port.rfind(":")
    if colon != -1 and _valid_optional_port(host_port[colon:]):
        host, port = host_port[:colon], host_port[colon + 1 :]

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def parse_url(raw: str) -> URL:
    """
    Parse a URL string.

    Args:
        raw: The URL text.

    Returns:
        The parsed URL.

    Raises:
        ParseError: When the text is not a syntactically valid URL.
    """
    url = URL(raw)

    logger.debug(
        "Parsed URL: scheme=%r host=%r path=%r query=%r fragment=%r",
        url.scheme,
        url.host,
        url.path,
        url.raw_query,
        url.fragment,
    )
    return url
