"""
Root pytest configuration file for atlassian-console tests.
"""

import json
from typing import Any

import pytest
import requests


def build_response(
    status_code: int = 200,
    body: Any = None,
    text: str | None = None,
    reason: str | None = None,
) -> requests.Response:
    """Build a real ``requests.Response`` with the given status and body.

    ``body`` is serialised as JSON; ``text`` is used verbatim and wins over
    ``body``. With neither, the response has an empty body.
    """
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    response.reason = reason or ("OK" if status_code < 400 else "Error")
    return response


@pytest.fixture
def make_response():
    """Factory fixture returning :func:`build_response`."""
    return build_response


@pytest.fixture(autouse=True)
def clean_atlassian_env(monkeypatch):
    """Keep the developer's own credentials out of every test."""
    for name in (
        "JIRA_BASE_URL",
        "JIRA_USER_EMAIL",
        "JIRA_API_TOKEN",
        "JIRA_PROJECT_KEY",
        "JIRA_MAX_RESULTS",
        "JIRA_TIMEOUT_SECONDS",
        "JIRA_STORY_POINTS_FIELD",
        "CONFLUENCE_URL",
        "CONFLUENCE_USERNAME",
        "CONFLUENCE_API_TOKEN",
        "ATLASSIAN_CONSOLE_VERBOSE",
        "ATLASSIAN_CONSOLE_VERY_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
