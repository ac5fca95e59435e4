"""src/urlsplit/exceptions.py

Urlsplit Exceptions hierarchy.
"""

from typing import Optional

from urlsplit.utils.quoting import quote


class UrlsplitError(Exception):
    """Base exception for all Urlsplit errors."""


class ParseError(UrlsplitError):
    """
    The input string is not a syntactically valid URL.

    The message follows the ``parse "<input>": <reason>`` form and the
    offending input is kept on ``url``.
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"parse {quote(url)}: {reason}")


class InputError(UrlsplitError):
    """General exception for URL input acquisition errors."""


class InputReadError(InputError):
    """Standard input could not be fully read."""


class MissingURL(InputError):
    """A URL argument is required but none was supplied."""

    def __init__(self, message: str = "A URL argument is required"):
        super().__init__(message)


class UsageError(UrlsplitError):
    """Invalid combination of command-line options."""


class NoModeSelected(UsageError):
    """No output mode was requested."""

    def __init__(self, message: str = "One of ('-e', '-k', '-f') must be specified"):
        super().__init__(message)


class ConflictingModes(UsageError):
    """More than one output mode was requested."""


class RenderError(UrlsplitError):
    """Base exception for output rendering errors."""


class NoSuchKey(RenderError):
    """Key-lookup mode asked for a name absent from the variable set."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No such URL component named {quote(key)}")


class TemplateError(RenderError):
    """Base exception for template mode faults."""


class TemplateSyntaxError(TemplateError):
    """The template source could not be compiled."""

    def __init__(self, message: str, lineno: Optional[int] = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"{message} (line {lineno})"
        super().__init__(message)


class TemplateExecutionError(TemplateError):
    """The compiled template failed while rendering."""


class OutputWriteError(RenderError):
    """The output sink rejected a write."""

