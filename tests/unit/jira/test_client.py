"""Tests for the Jira client wiring."""

from unittest.mock import patch

import pytest

from atlassian_console.jira.client import JiraClient
from atlassian_console.rest import FailureKind
from atlassian_console.jira.saved_searches import SavedSearchStore
from atlassian_console.rest import basic_auth_header


def test_init_builds_session_and_rest_clients(mock_config):
    with patch("atlassian_console.jira.client.Jira") as mock_jira_class:
        client = JiraClient(config=mock_config)

    kwargs = mock_jira_class.call_args.kwargs
    assert kwargs["url"] == "https://test.atlassian.net"
    assert kwargs["cloud"] is True
    assert kwargs["timeout"] == 30
    assert kwargs["session"].headers["Authorization"] == basic_auth_header(
        "test@example.com", "test_token"
    )
    assert client.rest.api_prefix == "rest/api/3"
    assert client.agile.api_prefix == "rest/agile/1.0"
    assert isinstance(client.saved_searches, SavedSearchStore)


def test_init_from_env(mock_env_vars):
    with patch("atlassian_console.jira.client.Jira"):
        client = JiraClient()

    assert client.config.project_key == "TEST"


def test_init_missing_env_raises():
    with pytest.raises(ValueError):
        JiraClient()


def test_injected_saved_search_store(mock_config):
    store = SavedSearchStore()
    with patch("atlassian_console.jira.client.Jira"):
        client = JiraClient(config=mock_config, saved_searches=store)

    assert client.saved_searches is store


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_rejects_blank(value):
    with pytest.raises(ValueError, match="Issue key cannot be empty"):
        JiraClient._require(value, "Issue key")


def test_require_strips():
    assert JiraClient._require("  TEST-1 ", "Issue key") == "TEST-1"


@pytest.mark.parametrize("status_code", [429, 503])
def test_rate_limited_response_is_not_retried(mock_config, make_response, status_code):
    throttled = make_response(status_code, text="Rate limit exceeded")
    throttled.headers["Retry-After"] = "0"
    client = JiraClient(config=mock_config)

    with patch("requests.Session.request") as mock_request:
        mock_request.side_effect = [throttled, make_response(200, {"accountId": "abc"})]
        outcome = client.rest.get("myself")

    assert mock_request.call_count == 1
    assert outcome.kind is FailureKind.HTTP
    assert outcome.status_code == status_code
    assert mock_request.call_args.kwargs["url"] == (
        "https://test.atlassian.net/rest/api/3/myself"
    )
    assert mock_request.call_args.kwargs["timeout"] == 30
