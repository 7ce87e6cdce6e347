"""Tests for the project commands."""

import json

from atlassian_console.models.jira import JiraProject


def test_project_get(invoke, jira):
    jira.get_project.return_value = JiraProject(id="1", key="OPS", name="Operations")

    result = invoke("project", "get", "OPS")

    assert result.exit_code == 0
    jira.get_project.assert_called_once_with("OPS")
    assert json.loads(result.output)["key"] == "OPS"


def test_project_priorities(invoke, jira):
    jira.get_priorities.return_value = []

    result = invoke("project", "priorities")

    assert result.exit_code == 0
    assert json.loads(result.output) == []
