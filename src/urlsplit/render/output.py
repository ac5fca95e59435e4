"""src/urlsplit/render/output.py

Output sink helpers shared by the renderers.
"""

from typing import TextIO

from urlsplit.exceptions import OutputWriteError

__all__ = ["write", "flush"]


def write(sink: TextIO, text: str) -> int:
    """
    Write text to the sink.

    Args:
        sink: Text stream receiving the output.
        text: Text to write.

    Returns:
        Number of characters written.

    Raises:
        OutputWriteError: If the sink rejects the write.
    """
    try:
        written = sink.write(text)
    except (OSError, ValueError) as exc:
        raise OutputWriteError(f"Unable to write output: {exc}") from exc
    return len(text) if written is None else written


def flush(sink: TextIO) -> None:
    """
    Flush the sink.

    Raises:
        OutputWriteError: If buffered output cannot be written.
    """
    try:
        sink.flush()
    except (OSError, ValueError) as exc:
        raise OutputWriteError(f"Unable to write output: {exc}") from exc
