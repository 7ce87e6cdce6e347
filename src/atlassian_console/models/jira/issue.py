"""
Jira issue models.

This module provides the Pydantic model for Jira issues as returned by
``GET /rest/api/3/issue/{key}`` and embedded in search results.
"""

import logging
from typing import Any, ClassVar

from pydantic import Field

from ...preprocessing import decode_rich_text
from ..base import ApiModel, TimestampMixin
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
)
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .project import JiraProject

logger = logging.getLogger(__name__)

# Default estimation field for Jira Cloud software projects
DEFAULT_STORY_POINTS_FIELD = "customfield_10016"


class JiraIssue(ApiModel, TimestampMixin):
    """
    Model representing a Jira issue.

    ``description`` is always plain text: the API returns either a legacy
    string or an ADF document and both are flattened on the way in.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("key",)

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str = EMPTY_STRING
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    project: JiraProject | None = None
    labels: list[str] = Field(default_factory=list)
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    resolution_date: str | None = None
    due_date: str | None = None
    story_points: float | None = None
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``story_points_field`` names the custom field holding
                the estimate (defaults to ``customfield_10016``)

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        fields = data.get("fields")
        if not isinstance(fields, dict):
            fields = {}

        story_points_field = kwargs.get("story_points_field") or DEFAULT_STORY_POINTS_FIELD

        assignee = None
        if assignee_data := fields.get("assignee"):
            assignee = JiraUser.from_api_response(assignee_data)

        reporter = None
        if reporter_data := fields.get("reporter"):
            reporter = JiraUser.from_api_response(reporter_data)

        project = None
        if project_data := fields.get("project"):
            project = JiraProject.from_api_response(project_data)

        labels = fields.get("labels") or []
        if not isinstance(labels, list):
            labels = []

        custom_fields = {
            field_id: value
            for field_id, value in fields.items()
            if field_id.startswith("customfield_") and value is not None
        }

        issue_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if issue_id is None else str(issue_id),
            key=str(data.get("key") or JIRA_DEFAULT_KEY),
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=decode_rich_text(fields.get("description")),
            status=JiraStatus.from_api_response(fields.get("status") or {}),
            issue_type=JiraIssueType.from_api_response(fields.get("issuetype") or {}),
            priority=JiraPriority.from_api_response(fields.get("priority") or {}),
            assignee=assignee,
            reporter=reporter,
            project=project,
            labels=[str(label) for label in labels],
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            resolution_date=fields.get("resolutiondate"),
            due_date=fields.get("duedate"),
            story_points=_to_points(fields.get(story_points_field)),
            custom_fields=custom_fields,
        )

    @property
    def is_done(self) -> bool:
        return bool(self.status and self.status.is_done)

    def field_values(self) -> dict[str, Any]:
        """Return the current values of the commonly edited fields."""
        return {
            "summary": self.summary,
            "description": self.description,
            "assignee": self.assignee.display_name if self.assignee else None,
            "priority": self.priority.name if self.priority else None,
            "status": self.status.name if self.status else None,
            "due_date": self.due_date,
            "story_points": self.story_points,
            "created": self.format_timestamp(self.created),
            "updated": self.format_timestamp(self.updated),
        }

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }
        if self.description:
            result["description"] = self.description
        if self.status:
            result["status"] = self.status.to_simplified_dict()
        if self.issue_type:
            result["issue_type"] = self.issue_type.name
        if self.priority:
            result["priority"] = self.priority.name
        result["assignee"] = (
            self.assignee.display_name if self.assignee else "Unassigned"
        )
        if self.reporter:
            result["reporter"] = self.reporter.display_name
        if self.labels:
            result["labels"] = self.labels
        if self.story_points is not None:
            result["story_points"] = self.story_points
        if self.created:
            result["created"] = self.created
        if self.updated:
            result["updated"] = self.updated
        return result


def _to_points(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric story points value: {value!r}")
        return None
