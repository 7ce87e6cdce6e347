"""Tests for the Jira configuration."""

import os
from unittest.mock import patch

import pytest

from atlassian_console.jira.config import JiraConfig


def test_from_env_success(mock_env_vars):
    config = JiraConfig.from_env()

    assert config.url == "https://test.atlassian.net"
    assert config.email == "test@example.com"
    assert config.api_token == "test_token"
    assert config.project_key == "TEST"
    assert config.max_results == 50
    assert config.timeout == 30
    assert config.story_points_field == "customfield_10016"


def test_from_env_overrides():
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://test.atlassian.net/",
            "JIRA_USER_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
            "JIRA_MAX_RESULTS": "25",
            "JIRA_TIMEOUT_SECONDS": "10",
            "JIRA_STORY_POINTS_FIELD": "customfield_10028",
        },
        clear=True,
    ):
        config = JiraConfig.from_env()

    assert config.url == "https://test.atlassian.net"
    assert config.project_key is None
    assert config.max_results == 25
    assert config.timeout == 10
    assert config.story_points_field == "customfield_10028"


def test_from_env_missing_url():
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValueError, match="JIRA_BASE_URL"):
            JiraConfig.from_env()


def test_from_env_missing_credentials():
    with patch.dict(
        os.environ, {"JIRA_BASE_URL": "https://test.atlassian.net"}, clear=True
    ):
        with pytest.raises(ValueError, match="JIRA_USER_EMAIL and JIRA_API_TOKEN"):
            JiraConfig.from_env()


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_from_env_invalid_integer(mock_env_vars, value):
    with patch.dict(os.environ, {"JIRA_TIMEOUT_SECONDS": value}):
        with pytest.raises(ValueError, match="JIRA_TIMEOUT_SECONDS"):
            JiraConfig.from_env()


def test_is_valid(mock_config):
    assert mock_config.is_auth_configured()
    assert mock_config.is_valid()


def test_is_valid_requires_project_key():
    config = JiraConfig(url="https://x.atlassian.net", email="a@b.c", api_token="t")

    assert config.is_auth_configured()
    assert not config.is_valid()


def test_config_is_frozen(mock_config):
    with pytest.raises(AttributeError):
        mock_config.url = "https://other.atlassian.net"
