"""src/urlsplit/render/template.py

Template mode: render a user supplied Jinja2 template against the variables.

Helpers are handed to each renderer explicitly and installed on a private
Jinja2 environment, both as filters (``{{ URL_PATH|trimpath }}``) and as
global functions (``{{ trimpath(URL_PATH) }}``).
"""

from typing import Any, Callable, Dict, Mapping, Optional, TextIO

import jinja2

from urlsplit.exceptions import TemplateExecutionError, TemplateSyntaxError
from urlsplit.render.output import write
from urlsplit.variables import VariableSet

__all__ = ["Helper", "DEFAULT_HELPERS", "trim_path", "TemplateRenderer"]

Helper = Callable[..., Any]


def trim_path(value: Any) -> str:
    """Strip leading and trailing ``/`` characters."""
    return str(value).strip("/")


DEFAULT_HELPERS: Mapping[str, Helper] = {"trimpath": trim_path}


class TemplateRenderer:
    """
    Compiles a template once and renders it against a variable set.

    Attributes:
        source: Template source text.
        helpers: Helper name to callable mapping available to the template.
    """

    __slots__ = ("source", "helpers", "_environment", "_template")

    def __init__(
        self, source: str, helpers: Optional[Mapping[str, Helper]] = None
    ) -> None:
        """
        Compile the template.

        Args:
            source: Template source text.
            helpers: Helpers exposed to the template. Defaults to
                DEFAULT_HELPERS; pass an empty mapping for none.

        Raises:
            TemplateSyntaxError: If the template cannot be compiled.
        """
        self.source = source
        self.helpers: Dict[str, Helper] = dict(
            DEFAULT_HELPERS if helpers is None else helpers
        )

        self._environment = jinja2.Environment(
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._environment.filters.update(self.helpers)
        self._environment.globals.update(self.helpers)

        try:
            self._template = self._environment.from_string(source)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(exc.message or str(exc), exc.lineno) from exc

    def render(self, variables: VariableSet, sink: TextIO) -> int:
        """
        Render the template and stream the output to the sink.

        Args:
            variables: Variables made available by name.
            sink: Text stream receiving the output.

        Returns:
            Number of characters written.

        Raises:
            TemplateExecutionError: If rendering fails.
            OutputWriteError: If the sink rejects a write.
        """
        chunks = self._template.generate(variables.as_dict())
        written = 0
        while True:
            try:
                chunk = next(chunks)
            except StopIteration:
                break
            except jinja2.TemplateError as exc:
                raise TemplateExecutionError(exc.message or str(exc)) from exc
            except Exception as exc:
                raise TemplateExecutionError(
                    f"Unexpected error rendering template: {exc}"
                ) from exc

            written += write(sink, chunk)

        return written
