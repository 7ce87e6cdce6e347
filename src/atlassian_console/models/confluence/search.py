"""
Confluence search result models.
"""

import logging
from typing import Any, ClassVar

from pydantic import Field

from ..base import ApiModel
from .page import ConfluencePage

logger = logging.getLogger(__name__)


class ConfluenceSearchResult(ApiModel):
    """
    Model representing one page of ``content/search`` or ``content`` results.

    Both endpoints return content objects directly in ``results``.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("results",)

    results: list[ConfluencePage] = Field(default_factory=list)
    start: int = 0
    limit: int = 0
    size: int = 0
    total_size: int | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResult":
        if not data or not isinstance(data, dict):
            return cls()

        results_data = data.get("results")
        if not isinstance(results_data, list):
            results_data = []
        results = [
            ConfluencePage.from_api_response(item)
            for item in results_data
            if isinstance(item, dict)
        ]

        def _int(key: str, default: int | None) -> int | None:
            try:
                return int(data[key]) if data.get(key) is not None else default
            except (ValueError, TypeError):
                return default

        return cls(
            results=results,
            start=_int("start", 0) or 0,
            limit=_int("limit", 0) or 0,
            size=_int("size", len(results)) or 0,
            total_size=_int("totalSize", None),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "total_size": self.total_size,
            "results": [page.to_simplified_dict() for page in self.results],
        }
