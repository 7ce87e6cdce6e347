"""
Pydantic models for Jira and Confluence API data.

This package provides type-safe models for working with Atlassian API data,
including conversion methods from API responses to structured models and
simplified dictionaries for display and export.
"""

from .base import ApiModel, TimestampMixin
from .confluence import (
    ConfluencePage,
    ConfluenceSearchResult,
    ConfluenceSpace,
    ConfluenceUser,
    ConfluenceVersion,
)
from .jira import (
    JiraComment,
    JiraField,
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraSearchResult,
    JiraSprint,
    JiraStatus,
    JiraStatusCategory,
    JiraTransition,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "ConfluencePage",
    "ConfluenceSearchResult",
    "ConfluenceSpace",
    "ConfluenceUser",
    "ConfluenceVersion",
    "JiraComment",
    "JiraField",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraSearchResult",
    "JiraSprint",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraTransition",
    "JiraUser",
    "TimestampMixin",
]
