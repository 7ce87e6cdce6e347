"""
Jira comment models.
"""

import logging
from typing import Any

from ...preprocessing import decode_rich_text
from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraComment(ApiModel, TimestampMixin):
    """
    Model representing a Jira issue comment.

    The comment body is flattened from ADF the same way issue descriptions
    are.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    author: JiraUser | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        comment_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if comment_id is None else str(comment_id),
            body=decode_rich_text(data.get("body")),
            created=str(data.get("created") or EMPTY_STRING),
            updated=str(data.get("updated") or EMPTY_STRING),
            author=author,
        )

    @classmethod
    def decode_page(cls, data: Any) -> list["JiraComment"]:
        """Strictly decode a ``{"comments": [...]}`` page of comments."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        comments = data["comments"]
        if not isinstance(comments, list):
            raise TypeError("'comments' is not a list")
        return [cls.from_api_response(item) for item in comments]

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "body": self.body,
            "created": self.format_timestamp(self.created),
            "updated": self.format_timestamp(self.updated),
            "author": self.author.display_name if self.author else "Unknown",
        }
