"""Tests for the config and whoami commands."""

import json

from atlassian_console import __version__, main
from atlassian_console.models import JiraUser


def _set_jira_env(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://test.atlassian.net")
    monkeypatch.setenv("JIRA_USER_EMAIL", "test@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "secret-token-value")
    monkeypatch.setenv("JIRA_PROJECT_KEY", "TEST")


def test_config_masks_token(invoke, monkeypatch):
    _set_jira_env(monkeypatch)

    result = invoke("config")

    assert result.exit_code == 0, result.output
    assert "JIRA_BASE_URL: https://test.atlassian.net" in result.output
    assert "secret-token-value" not in result.output
    assert "JIRA_API_TOKEN: secr**********alue" in result.output
    assert "Services: confluence=yes, jira=yes" in result.output


def test_config_reports_missing_variables(invoke):
    result = invoke("config")

    assert result.exit_code == 1
    assert "Missing required environment variables: JIRA_BASE_URL" in result.output


def test_config_check(invoke, jira, monkeypatch):
    _set_jira_env(monkeypatch)
    jira.validate_connection.return_value = False

    result = invoke("config", "--check")

    assert result.exit_code == 1
    assert "Jira connection validation failed" in result.output


def test_whoami(invoke, jira):
    jira.get_current_user.return_value = JiraUser(
        account_id="abc", display_name="Test User"
    )

    result = invoke("whoami")

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "account_id": "abc",
        "display_name": "Test User",
        "active": True,
    }


def test_whoami_failure(invoke, jira):
    jira.get_current_user.return_value = None

    result = invoke("whoami")

    assert result.exit_code == 1
    assert "Could not retrieve the current user" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
