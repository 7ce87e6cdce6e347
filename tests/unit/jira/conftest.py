"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from atlassian_console.jira import JiraFetcher
from atlassian_console.jira.client import JiraClient
from atlassian_console.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://test.atlassian.net",
            "JIRA_USER_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
            "JIRA_PROJECT_KEY": "TEST",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="test_token",
        project_key="TEST",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client; tests program ``request``."""
    mock_jira = MagicMock()
    mock_jira.url = "https://test.atlassian.net"
    mock_jira.timeout = 30
    return mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a JiraClient instance with mocked dependencies."""
    with patch("atlassian_console.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        yield JiraClient(config=mock_config)


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance with mocked dependencies."""
    with patch("atlassian_console.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        yield JiraFetcher(config=mock_config)


def request_call(method, path, json=None, params=None):
    """Expected keyword arguments of one ``Jira.request`` call."""
    return {
        "method": method,
        "path": f"rest/api/3/{path}",
        "json": json,
        "params": params,
        "advanced_mode": True,
    }


@pytest.fixture
def expected_call():
    return request_call
