"""Fixtures for command line tests."""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from atlassian_console import main
from atlassian_console.commands import ConsoleContext


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def jira():
    fetcher = MagicMock()
    fetcher.config.project_key = "TEST"
    return fetcher


@pytest.fixture
def confluence():
    return MagicMock()


@pytest.fixture
def invoke(runner, jira, confluence):
    """Run the CLI with mocked service clients."""

    def _invoke(*args, **kwargs):
        context = ConsoleContext(jira_fetcher=jira, confluence_fetcher=confluence)
        return runner.invoke(main, list(args), obj=context, **kwargs)

    return _invoke
