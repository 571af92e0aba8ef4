"""Shared fixtures for end-to-end CLI tests.

Every CLI test runs in the isolated ``workspace`` from the root conftest and
invokes the real click group through ``CliRunner``, the same chain a user
hits: ``boilgen`` entry point -> ``commands.py`` dispatch -> core.

``standalone_mode=False`` makes the command's integer return value visible
as ``result.return_value``, matching what ``main()`` turns into the process
exit code.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from boilgen.cli.commands import _click_cli

RunBoilgen = Callable[..., Result]


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def run_boilgen(runner: CliRunner, workspace: Path) -> RunBoilgen:
    """Return a helper that invokes ``boilgen <args>`` inside the workspace.

    Usage in tests::

        def test_list(run_boilgen: RunBoilgen) -> None:
            result = run_boilgen("list")
            assert result.return_value == 0

    Pass ``input="1\\n1\\nButton\\n"`` to answer interactive prompts.
    """

    def _run(*args: str, input: str | None = None) -> Result:  # noqa: A002
        return runner.invoke(
            _click_cli,
            list(args),
            input=input,
            standalone_mode=False,
            catch_exceptions=False,
        )

    return _run
