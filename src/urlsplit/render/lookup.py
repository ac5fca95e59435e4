"""src/urlsplit/render/lookup.py

Key-lookup mode: the bare value of a single variable.
"""

from typing import TextIO

from urlsplit.exceptions import NoSuchKey
from urlsplit.render.output import write
from urlsplit.variables import VariableSet

__all__ = ["KeyRenderer", "lookup"]


def lookup(variables: VariableSet, key: str) -> str:
    """
    Return the value of the first variable named exactly ``key``.

    Raises:
        NoSuchKey: If no variable has that name.
    """
    variable = variables.find(key)
    if variable is None:
        raise NoSuchKey(key)
    return variable.value


class KeyRenderer:
    """Writes the value of one variable, unquoted and without a newline."""

    __slots__ = ("key",)

    def __init__(self, key: str) -> None:
        self.key = key

    def render(self, variables: VariableSet, sink: TextIO) -> int:
        """
        Write the value of the requested variable.

        Nothing is written when the key is unknown.

        Raises:
            NoSuchKey: If no variable has the requested name.
            OutputWriteError: If the sink rejects the write.
        """
        return write(sink, lookup(variables, self.key))
