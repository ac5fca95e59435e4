import io
from typing import Callable, List, Optional, Tuple
from unittest import mock

import pytest

from urlsplit.cli.main import main
from urlsplit.url.parser import parse_url
from urlsplit.variables import VariableSet, decompose


@pytest.fixture
def variables_for() -> Callable[[str], VariableSet]:
    """Fixture decomposing a URL string into its variable set."""

    def _variables_for(url: str) -> VariableSet:
        return decompose(parse_url(url))

    return _variables_for


@pytest.fixture
def broken_sink():
    """Fixture providing a sink whose writes fail with a broken pipe."""
    sink = mock.Mock()
    sink.write.side_effect = BrokenPipeError(32, "Broken pipe")
    return sink


@pytest.fixture
def run_cli() -> Callable[..., Tuple[int, str, str]]:
    """Fixture running the CLI in-process, returning (status, stdout, stderr)."""

    def _run_cli(
        argv: List[str], stdin: str = "", environ: Optional[dict] = None
    ) -> Tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        status = main(
            argv,
            stdin=io.StringIO(stdin),
            stdout=stdout,
            stderr=stderr,
            environ=environ or {},
        )
        return status, stdout.getvalue(), stderr.getvalue()

    return _run_cli
