"""
Confluence space models.
This module provides Pydantic models for Confluence spaces.
"""

import logging
from typing import Any, ClassVar

from ..base import ApiModel
from ..constants import CONFLUENCE_DEFAULT_ID, EMPTY_STRING, UNKNOWN

logger = logging.getLogger(__name__)


class ConfluenceSpace(ApiModel):
    """
    Model representing a Confluence space.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("key",)

    id: str = CONFLUENCE_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    type: str = "global"  # "global", "personal"
    status: str = "current"  # "current", "archived"
    description: str = EMPTY_STRING
    homepage_id: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSpace":
        """
        Create a ConfluenceSpace from a Confluence API response.

        Args:
            data: The space data from the Confluence API

        Returns:
            A ConfluenceSpace instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        # Only present with expand=description.plain
        description = EMPTY_STRING
        if isinstance(desc := data.get("description"), dict):
            plain = desc.get("plain")
            if isinstance(plain, dict):
                description = str(plain.get("value") or EMPTY_STRING)

        homepage_id = None
        if isinstance(homepage := data.get("homepage"), dict):
            homepage_id = homepage.get("id")

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name") or UNKNOWN),
            type=str(data.get("type") or "global"),
            status=str(data.get("status") or "current"),
            description=description,
            homepage_id=str(homepage_id) if homepage_id is not None else None,
        )

    @classmethod
    def decode_page(cls, data: Any) -> list["ConfluenceSpace"]:
        """Strictly decode a ``{"results": [...]}`` space listing."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        results = data["results"]
        if not isinstance(results, list):
            raise TypeError("'results' is not a list")
        return [cls.from_api_response(item) for item in results]

    def to_simplified_dict(self) -> dict[str, Any]:
        result = {
            "key": self.key,
            "name": self.name,
            "type": self.type,
            "status": self.status,
        }
        if self.description:
            result["description"] = self.description
        return result
