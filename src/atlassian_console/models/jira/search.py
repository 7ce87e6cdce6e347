"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any, ClassVar

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a Jira search (JQL) result.

    ``jql`` and ``search_time_ms`` are filled in by the caller that ran the
    query; the API response does not carry them.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("issues",)

    total: int = 0
    max_results: int = 0
    is_last: bool = True
    next_page_token: str | None = None
    issues: list[JiraIssue] = Field(default_factory=list)
    jql: str = EMPTY_STRING
    search_time_ms: float | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: ``story_points_field`` is forwarded to each issue, and
                ``jql`` is recorded on the result

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            return cls(jql=kwargs.get("jql") or EMPTY_STRING)

        story_points_field = kwargs.get("story_points_field")
        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            for issue_data in issues_data:
                if issue_data:
                    issues.append(
                        JiraIssue.from_api_response(
                            issue_data, story_points_field=story_points_field
                        )
                    )

        # search/jql does not report a total; fall back to the page size
        raw_total = data.get("total")
        try:
            total = int(raw_total) if raw_total is not None else len(issues)
        except (ValueError, TypeError):
            total = len(issues)

        try:
            max_results = int(data.get("maxResults") or len(issues))
        except (ValueError, TypeError):
            max_results = len(issues)

        return cls(
            total=total,
            max_results=max_results,
            is_last=bool(data.get("isLast", True)),
            next_page_token=data.get("nextPageToken"),
            issues=issues,
            jql=kwargs.get("jql") or EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "total": self.total,
            "jql": self.jql,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
        if self.search_time_ms is not None:
            result["search_time_ms"] = round(self.search_time_ms, 2)
        return result
