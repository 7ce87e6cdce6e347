"""
Common Jira entity models.

Users, statuses, priorities and issue types appear nested inside issues,
transitions and project listings, so their converters never raise: missing
or malformed data falls back to the defaults in :mod:`..constants`.
"""

import logging
from typing import Any, ClassVar

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DONE_CATEGORY_KEY,
    JIRA_DONE_STATUS_NAMES,
    NONE_VALUE,
    UNASSIGNED,
    UNKNOWN,
)

logger = logging.getLogger(__name__)


def _str_id(value: Any) -> str:
    # Jira returns some ids as integers
    return JIRA_DEFAULT_ID if value is None else str(value)


class JiraUser(ApiModel):
    """
    Model representing a Jira Cloud user.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("accountId",)

    account_id: str | None = None
    display_name: str = UNASSIGNED
    email: str | None = None
    active: bool = True
    account_type: str | None = None
    time_zone: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName") or UNASSIGNED),
            email=data.get("emailAddress") or None,
            active=bool(data.get("active", True)),
            account_type=data.get("accountType"),
            time_zone=data.get("timeZone"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "account_id": self.account_id,
            "display_name": self.display_name,
            "active": self.active,
        }
        if self.email:
            result["email"] = self.email
        return result


class JiraStatusCategory(ApiModel):
    """
    Model representing a Jira status category (To Do, In Progress, Done).
    """

    id: int = 0
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    color_name: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraStatusCategory":
        if not data or not isinstance(data, dict):
            return cls()

        try:
            category_id = int(data.get("id") or 0)
        except (ValueError, TypeError):
            category_id = 0

        return cls(
            id=category_id,
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name", UNKNOWN)),
            color_name=str(data.get("colorName", EMPTY_STRING)),
        )


class JiraStatus(ApiModel):
    """
    Model representing a Jira issue status.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    description: str | None = None
    category: JiraStatusCategory | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        """
        Create a JiraStatus from a Jira API response.

        Args:
            data: The status data from the Jira API

        Returns:
            A JiraStatus instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        category = None
        if category_data := data.get("statusCategory"):
            category = JiraStatusCategory.from_api_response(category_data)

        return cls(
            id=_str_id(data.get("id")),
            name=str(data.get("name") or UNKNOWN),
            description=data.get("description") or None,
            category=category,
        )

    @property
    def is_done(self) -> bool:
        """Whether the status counts as finished work."""
        if self.category and self.category.key == JIRA_DONE_CATEGORY_KEY:
            return True
        return self.name.lower() in JIRA_DONE_STATUS_NAMES

    @property
    def is_in_progress(self) -> bool:
        if self.category and self.category.key:
            return self.category.key == "indeterminate"
        return "progress" in self.name.lower()

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.category:
            result["category"] = self.category.name
        return result


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    description: str | None = None
    subtask: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=_str_id(data.get("id")),
            name=str(data.get("name") or UNKNOWN),
            description=data.get("description") or None,
            subtask=bool(data.get("subtask", False)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "subtask": self.subtask}


class JiraPriority(ApiModel):
    """
    Model representing a Jira priority.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = NONE_VALUE
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraPriority":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=_str_id(data.get("id")),
            name=str(data.get("name") or NONE_VALUE),
            description=data.get("description") or None,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}
