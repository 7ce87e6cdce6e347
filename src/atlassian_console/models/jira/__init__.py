"""
Jira data models.

This package provides Pydantic models for Jira API data structures,
the request payloads sent back to the API, and locally computed reports.
"""

from .agile import JiraSprint
from .comment import JiraComment
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)
from .field import JiraField
from .issue import DEFAULT_STORY_POINTS_FIELD, JiraIssue
from .project import JiraProject
from .reports import (
    BulkUpdateResult,
    CommentTemplate,
    ExecutiveSummary,
    ReportType,
    SavedSearch,
    SmartFilter,
    SprintReport,
    TeamDashboard,
    TeamMemberWorkload,
)
from .requests import (
    AddCommentRequest,
    AdvancedSearchRequest,
    CreateIssueRequest,
    JqlBuilderRequest,
    SaveSearchRequest,
    TransitionIssueRequest,
    UpdateFieldsRequest,
    UpdateIssueRequest,
)
from .search import JiraSearchResult
from .workflow import JiraTransition

__all__ = [
    "DEFAULT_STORY_POINTS_FIELD",
    "AddCommentRequest",
    "AdvancedSearchRequest",
    "BulkUpdateResult",
    "CommentTemplate",
    "CreateIssueRequest",
    "ExecutiveSummary",
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
    "JqlBuilderRequest",
    "ReportType",
    "SaveSearchRequest",
    "SavedSearch",
    "SmartFilter",
    "SprintReport",
    "TeamDashboard",
    "TeamMemberWorkload",
    "TransitionIssueRequest",
    "UpdateFieldsRequest",
    "UpdateIssueRequest",
]
