"""
Jira project models.
"""

import logging
from typing import Any, ClassVar

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraProject(ApiModel):
    """
    Model representing a Jira project.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("key",)

    id: str = JIRA_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    description: str | None = None
    project_type_key: str | None = None
    simplified: bool = False
    lead: JiraUser | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API

        Returns:
            A JiraProject instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        lead = None
        if lead_data := data.get("lead"):
            lead = JiraUser.from_api_response(lead_data)

        project_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if project_id is None else str(project_id),
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name") or UNKNOWN),
            description=data.get("description") or None,
            project_type_key=data.get("projectTypeKey"),
            simplified=bool(data.get("simplified", False)),
            lead=lead,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "key": self.key,
            "name": self.name,
        }
        if self.project_type_key:
            result["type"] = self.project_type_key
        if self.description:
            result["description"] = self.description
        if self.lead:
            result["lead"] = self.lead.display_name
        return result
