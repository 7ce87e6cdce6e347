"""Test fixtures for Confluence unit tests."""

from unittest.mock import MagicMock, patch

import pytest

from atlassian_console.confluence import ConfluenceFetcher
from atlassian_console.confluence.config import ConfluenceConfig


@pytest.fixture
def confluence_config():
    return ConfluenceConfig(
        url="https://test.atlassian.net/wiki",
        username="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_confluence():
    """Mock the Atlassian Confluence client; tests program ``request``."""
    mock_confluence = MagicMock()
    mock_confluence.url = "https://test.atlassian.net/wiki"
    mock_confluence.timeout = 30
    return mock_confluence


@pytest.fixture
def confluence_fetcher(confluence_config, mock_atlassian_confluence):
    with patch("atlassian_console.confluence.client.Confluence") as mock_class:
        mock_class.return_value = mock_atlassian_confluence
        yield ConfluenceFetcher(config=confluence_config)


@pytest.fixture
def search_payload(confluence_page_data):
    return {
        "results": [confluence_page_data],
        "start": 0,
        "limit": 25,
        "size": 1,
    }
