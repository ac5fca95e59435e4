"""src/urlsplit/cli/main.py

Command-line interface for Urlsplit.

Split a URL into named variables and print them as shell export statements,
as the value of a single variable, or through a Jinja2 template.
"""

import argparse
import logging
import sys
from typing import List, Mapping, Optional, TextIO

from urlsplit.exceptions import InputReadError, MissingURL, UrlsplitError
from urlsplit.render.modes import make_renderer, select_mode
from urlsplit.render.output import flush
from urlsplit.url.parser import parse_url
from urlsplit.utils.settings import Settings
from urlsplit.variables import decompose
from urlsplit.version import __version__

__all__ = [
    "create_parser",
    "setup_logging",
    "read_url",
    "keep_undecodable_bytes",
    "run",
    "main",
]

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: int = logging.WARNING) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="urlsplit",
        description="Split a URL into its components and expose them as variables.",
        epilog="The URL is read from STDIN when it is not given as an argument.",
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "-e",
        "--export",
        action="store_true",
        help="Print URL variables as a set of export statements",
    )
    modes.add_argument(
        "-k",
        "--key",
        metavar="NAME",
        help="Print the value of this key",
    )
    modes.add_argument(
        "-f",
        "--format",
        metavar="TEMPLATE",
        help="Render a template. Use {{key}} to replace values in the template",
    )

    parser.add_argument(
        "--require-url",
        action="store_true",
        help="Fail instead of reading STDIN when no URL argument is given",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on STDERR",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "url",
        nargs="?",
        metavar="URL",
        help="The URL to parse. URL taken from STDIN if not supplied",
    )
    return parser


def read_url(url: Optional[str], settings: Settings, stdin: TextIO) -> str:
    """
    Resolve the URL text to parse.

    Args:
        url: Positional URL argument, None when omitted.
        settings: Runtime settings.
        stdin: Stream read when the argument is omitted.

    Returns:
        The argument as given, or the whole input stream with surrounding
        whitespace trimmed.

    Raises:
        MissingURL: If the URL is required and was not given.
        InputReadError: If the input stream cannot be read.
    """
    if url is not None:
        return url

    if settings.require_url:
        raise MissingURL()

    logger.debug("Reading URL from STDIN")
    try:
        data = stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Unable to read data from STDIN: {exc}") from exc

    return data.strip()


def keep_undecodable_bytes(stream: TextIO) -> None:
    """Let a standard stream pass bytes that are not valid UTF-8 through unchanged."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def run(
    args: argparse.Namespace, settings: Settings, stdin: TextIO, stdout: TextIO
) -> int:
    """
    Execute one invocation: resolve input, parse, decompose and render.

    Returns:
        Number of characters written.

    Raises:
        UrlsplitError: On any failure.
    """
    mode = select_mode(export=args.export, key=args.key, template=args.format)
    argument = args.key if args.key is not None else args.format

    url = parse_url(read_url(args.url, settings, stdin))
    variables = decompose(url)

    renderer = make_renderer(mode, argument)
    written = renderer.render(variables, stdout)
    flush(stdout)
    return written


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on failure. Usage errors
        detected by argparse exit with status 2.
    """
    if stdin is None:
        stdin = sys.stdin
        keep_undecodable_bytes(stdin)
    if stdout is None:
        stdout = sys.stdout
        keep_undecodable_bytes(stdout)
    stderr = stderr if stderr is not None else sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env(environ)
    except ValueError as exc:
        print(f"urlsplit: {exc}", file=stderr)
        return 1

    if args.require_url:
        settings.require_url = True

    setup_logging(args.verbose, settings.log_level)

    try:
        run(args, settings, stdin, stdout)
    except UrlsplitError as exc:
        logger.debug("urlsplit failed", exc_info=True)
        print(exc, file=stderr)
        return 1

    return 0
