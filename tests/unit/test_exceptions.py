"""tests/unit/test_exceptions.py"""

import pytest

from urlsplit.exceptions import (
    ConflictingModes,
    InputError,
    InputReadError,
    MissingURL,
    NoModeSelected,
    NoSuchKey,
    OutputWriteError,
    ParseError,
    RenderError,
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
    UrlsplitError,
    UsageError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Urlsplit exceptions."""
    assert issubclass(ParseError, UrlsplitError)
    assert issubclass(InputError, UrlsplitError)
    assert issubclass(InputReadError, InputError)
    assert issubclass(MissingURL, InputError)
    assert issubclass(UsageError, UrlsplitError)
    assert issubclass(NoModeSelected, UsageError)
    assert issubclass(ConflictingModes, UsageError)
    assert issubclass(RenderError, UrlsplitError)
    assert issubclass(NoSuchKey, RenderError)
    assert issubclass(TemplateError, RenderError)
    assert issubclass(TemplateSyntaxError, TemplateError)
    assert issubclass(TemplateExecutionError, TemplateError)
    assert issubclass(OutputWriteError, RenderError)


def test_parse_error_carries_input():
    """Verify that ParseError keeps the offending input and reason."""
    exc = ParseError("http://x:y/", 'invalid port ":y" after host')
    assert exc.url == "http://x:y/"
    assert exc.reason == 'invalid port ":y" after host'
    assert str(exc) == 'parse "http://x:y/": invalid port ":y" after host'


def test_parse_error_escapes_control_characters():
    """Verify that the quoted input stays on one line."""
    exc = ParseError("http://x/\n", "invalid control character in URL")
    assert str(exc) == 'parse "http://x/\\n": invalid control character in URL'


def test_no_such_key_message():
    """Verify that NoSuchKey names the requested key."""
    exc = NoSuchKey("URL_NOPE")
    assert exc.key == "URL_NOPE"
    assert str(exc) == 'No such URL component named "URL_NOPE"'


def test_no_mode_selected_default_message():
    """Verify that NoModeSelected lists the mode flags."""
    with pytest.raises(NoModeSelected) as exc_info:
        raise NoModeSelected()
    assert "One of ('-e', '-k', '-f') must be specified" in str(exc_info.value)


def test_missing_url_default_message():
    """Verify that MissingURL has a default message."""
    assert str(MissingURL()) == "A URL argument is required"


def test_template_syntax_error_line_number():
    """Verify that TemplateSyntaxError appends the line number when known."""
    exc = TemplateSyntaxError("unexpected end of template", 3)
    assert exc.lineno == 3
    assert str(exc) == "unexpected end of template (line 3)"
    assert str(TemplateSyntaxError("oops")) == "oops"


@pytest.mark.parametrize(
    "exception_class",
    [
        UrlsplitError,
        InputError,
        InputReadError,
        UsageError,
        ConflictingModes,
        RenderError,
        TemplateError,
        TemplateExecutionError,
        OutputWriteError,
    ],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
