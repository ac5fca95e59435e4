"""src/urlsplit/render/export.py

Export mode: one shell ``export`` statement per variable.
"""

from typing import Callable, TextIO

from urlsplit.render.output import write
from urlsplit.utils.quoting import shell_quote
from urlsplit.variables import Variable, VariableSet

__all__ = ["Printer", "format_export", "print_variables", "ExportRenderer"]

Printer = Callable[[Variable], str]


def format_export(variable: Variable) -> str:
    """Format a variable as ``export "NAME=value"`` followed by a newline."""
    return f"export {shell_quote(f'{variable.name}={variable.value}')}\n"


def print_variables(variables: VariableSet, sink: TextIO, printer: Printer) -> int:
    """
    Write every variable in order using a printer function.

    The first failing write aborts the iteration; lines already written
    are left in the sink.

    Args:
        variables: Variables to print.
        sink: Text stream receiving the output.
        printer: Formats one variable.

    Returns:
        Total number of characters written.
    """
    written = 0
    for variable in variables:
        written += write(sink, printer(variable))
    return written


class ExportRenderer:
    """Renders a variable set as shell export statements."""

    __slots__ = ()

    def render(self, variables: VariableSet, sink: TextIO) -> int:
        """Write one export line per variable, in order."""
        return print_variables(variables, sink, format_export)
