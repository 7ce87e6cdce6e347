"""
Jira workflow models.

This module provides Pydantic models for Jira workflow entities,
such as transitions between statuses.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing a Jira issue transition.

    A transition is a named state change on an issue's workflow. Its ``id``
    is what ``POST /issue/{key}/transitions`` expects.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None
    has_screen: bool = False
    is_global: bool = False
    is_available: bool = True

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: The transition data from the Jira API

        Returns:
            A JiraTransition instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        to_status = None
        if isinstance(to := data.get("to"), dict):
            to_status = JiraStatus.from_api_response(to)

        transition_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if transition_id is None else str(transition_id),
            name=str(data.get("name") or EMPTY_STRING),
            to_status=to_status,
            has_screen=bool(data.get("hasScreen", False)),
            is_global=bool(data.get("isGlobal", False)),
            is_available=bool(data.get("isAvailable", True)),
        )

    @classmethod
    def decode_page(cls, data: Any) -> list["JiraTransition"]:
        """Strictly decode a ``{"transitions": [...]}`` response."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        transitions = data["transitions"]
        if not isinstance(transitions, list):
            raise TypeError("'transitions' is not a list")
        return [cls.from_api_response(item) for item in transitions]

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "to_status": self.to_status.name if self.to_status else None,
        }
