"""Shared API payloads for model and service tests."""

import pytest


def issue_payload(
    key="TEST-1",
    summary="Test Issue",
    status="To Do",
    category="new",
    points=None,
    assignee=None,
    priority="Medium",
):
    """Build a ``GET /issue/{key}`` body with the fields the models read."""
    fields = {
        "summary": summary,
        "description": {
            "type": "doc",
            "version": 1,
            "content": [
                {
                    "type": "paragraph",
                    "content": [{"type": "text", "text": f"About {key}"}],
                }
            ],
        },
        "status": {
            "id": "1",
            "name": status,
            "statusCategory": {"id": 2, "key": category, "name": status},
        },
        "issuetype": {"id": "10001", "name": "Story", "subtask": False},
        "priority": {"id": "3", "name": priority},
        "assignee": (
            {"accountId": f"id-{assignee}", "displayName": assignee, "active": True}
            if assignee
            else None
        ),
        "labels": ["backend"],
        "created": "2024-01-15T10:30:00.000+0000",
        "updated": "2024-01-16T08:00:00.000+0000",
        "customfield_10016": points,
    }
    return {"id": "10000", "key": key, "fields": fields}


@pytest.fixture
def make_issue():
    """Factory fixture returning :func:`issue_payload`."""
    return issue_payload


@pytest.fixture
def jira_issue_data():
    return issue_payload(points=5, assignee="Ann Lee")


@pytest.fixture
def jira_comment_data():
    return {
        "id": "10100",
        "author": {"accountId": "abc", "displayName": "Ann Lee"},
        "body": {
            "type": "doc",
            "version": 1,
            "content": [
                {"type": "paragraph", "content": [{"type": "text", "text": "First"}]},
                {"type": "paragraph", "content": [{"type": "text", "text": "Second"}]},
            ],
        },
        "created": "2024-01-15T10:30:00.000+0000",
        "updated": "2024-01-15T11:00:00.000+0000",
    }


@pytest.fixture
def confluence_page_data():
    return {
        "id": "123456",
        "type": "page",
        "status": "current",
        "title": "Team Handbook",
        "space": {"id": 99, "key": "DOCS", "name": "Documentation"},
        "body": {
            "storage": {"value": "<p>Welcome</p>", "representation": "storage"},
            "view": {"value": "<p>Welcome (view)</p>", "representation": "view"},
        },
        "version": {
            "number": 3,
            "when": "2024-02-01T12:00:00.000Z",
            "by": {"accountId": "abc", "displayName": "Ann Lee"},
        },
        "_links": {
            "base": "https://test.atlassian.net/wiki",
            "webui": "/spaces/DOCS/pages/123456/Team+Handbook",
        },
    }
