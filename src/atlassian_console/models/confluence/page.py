"""
Confluence page models.
This module provides Pydantic models for Confluence pages and their versions.
"""

import logging
from typing import Any, ClassVar

from ..base import ApiModel, TimestampMixin
from ..constants import CONFLUENCE_DEFAULT_ID, EMPTY_STRING, UNASSIGNED
from .space import ConfluenceSpace

logger = logging.getLogger(__name__)


class ConfluenceUser(ApiModel):
    """
    Model representing a Confluence user.
    """

    account_id: str | None = None
    display_name: str = UNASSIGNED
    email: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ConfluenceUser":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName") or UNASSIGNED),
            email=data.get("email") or None,
        )


class ConfluenceVersion(ApiModel, TimestampMixin):
    """
    Model representing a Confluence page version.
    """

    number: int = 0
    when: str = EMPTY_STRING
    message: str | None = None
    by: ConfluenceUser | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceVersion":
        """
        Create a ConfluenceVersion from a Confluence API response.

        Args:
            data: The version data from the Confluence API

        Returns:
            A ConfluenceVersion instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        by_user = None
        if by_data := data.get("by"):
            by_user = ConfluenceUser.from_api_response(by_data)

        try:
            number = int(data.get("number") or 0)
        except (ValueError, TypeError):
            number = 0

        return cls(
            number=number,
            when=str(data.get("when") or EMPTY_STRING),
            message=data.get("message") or None,
            by=by_user,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "number": self.number,
            "when": self.format_timestamp(self.when),
        }
        if self.message:
            result["message"] = self.message
        if self.by:
            result["by"] = self.by.display_name
        return result


class ConfluencePage(ApiModel, TimestampMixin):
    """
    Model representing a Confluence page or blog post.

    ``content`` holds the storage-format body when it was expanded, falling
    back to the rendered view.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("id",)

    id: str = CONFLUENCE_DEFAULT_ID
    title: str = EMPTY_STRING
    type: str = "page"  # "page", "blogpost"
    status: str = "current"
    space: ConfluenceSpace | None = None
    content: str = EMPTY_STRING
    content_format: str | None = None
    version: ConfluenceVersion | None = None
    url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ConfluencePage":
        """
        Create a ConfluencePage from a Confluence API response.

        Args:
            data: The page data from the Confluence API

        Returns:
            A ConfluencePage instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        space = None
        if isinstance(space_data := data.get("space"), dict):
            space = ConfluenceSpace.from_api_response(space_data)

        content = EMPTY_STRING
        content_format = None
        if isinstance(body := data.get("body"), dict):
            for fmt in ("storage", "view"):
                value = body.get(fmt)
                if isinstance(value, dict) and value.get("value"):
                    content = str(value["value"])
                    content_format = fmt
                    break

        version = None
        if version_data := data.get("version"):
            version = ConfluenceVersion.from_api_response(version_data)

        # Cloud responses carry the browser link split into base + webui
        url = None
        links = data.get("_links")
        if isinstance(links, dict) and links.get("webui"):
            url = f"{links.get('base', EMPTY_STRING)}{links['webui']}"

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            title=str(data.get("title") or EMPTY_STRING),
            type=str(data.get("type") or "page"),
            status=str(data.get("status") or "current"),
            space=space,
            content=content,
            content_format=content_format,
            version=version,
            url=url,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "type": self.type,
        }
        if self.space:
            result["space"] = {"key": self.space.key, "name": self.space.name}
        if self.version:
            result["version"] = self.version.number
            result["updated"] = self.format_timestamp(self.version.when)
        if self.url:
            result["url"] = self.url
        if self.content:
            result["content"] = self.content
        return result
