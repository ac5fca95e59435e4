"""utils/quoting.py

Double-quoted string literals for messages and shell output.
"""

__all__ = ["quote", "shell_quote"]

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

_SHELL_ESCAPES = {
    "$": "\\$",
    "`": "\\`",
}


def _escape_char(char: str) -> str:
    if char in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[char]

    if char.isprintable():
        return char

    code = ord(char)
    if 0xDC80 <= code <= 0xDCFF:
        # undecodable input byte carried by surrogateescape
        return f"\\x{code - 0xDC00:02x}"
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """
    Return text as a double-quoted literal on a single line.

    Quotes and backslashes are backslash-escaped. Control and other
    non-printable characters are written as escape sequences (``\\n``,
    ``\\x1b``, ``\\u200b``...). Printable non-ASCII characters are kept.
    Bytes that were not valid UTF-8 are written as ``\\xNN``.

    Args:
        text: String to quote.

    Returns:
        The quoted literal, including the surrounding double quotes.
    """
    return '"' + "".join(_escape_char(char) for char in text) + '"'


def shell_quote(text: str) -> str:
    """
    Quote text like quote() and also escape ``$`` and backticks.

    The result is safe inside a POSIX shell double-quoted word: no
    parameter expansion or command substitution can happen.
    """
    body = "".join(_SHELL_ESCAPES.get(char) or _escape_char(char) for char in text)
    return f'"{body}"'
