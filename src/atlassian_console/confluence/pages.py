"""Module for Confluence page operations."""

import logging
from typing import Any

from ..models.confluence import ConfluencePage, ConfluenceSearchResult
from ..rest import Failure, payload_or
from .client import ConfluenceClient

logger = logging.getLogger("atlassian-console.confluence")


class PagesMixin(ConfluenceClient):
    """Mixin for Confluence page operations."""

    def get_page(self, page_id: str) -> ConfluencePage | None:
        """
        Get a page with its storage-format body.

        Args:
            page_id: The ID of the page

        Returns:
            The page, or None if not found or on failure

        Raises:
            ValueError: If the page id is empty
        """
        page_id = self._require(page_id, "Page ID")
        outcome = self.rest.get(
            f"content/{page_id}",
            decoder=ConfluencePage.decode,
            params={"expand": "space,body.storage,body.view,version"},
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting page {page_id}", outcome)
            return None
        return payload_or(outcome)

    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
    ) -> ConfluencePage | None:
        """
        Create a page in a space.

        Args:
            space_key: The key of the space
            title: The title of the page
            content: The body in Confluence storage format (XHTML)
            parent_id: Optional ID of the parent page

        Returns:
            The created page, or None on failure

        Raises:
            ValueError: If the space key or title is empty
        """
        space_key = self._require(space_key, "Space key")
        title = self._require(title, "Page title")

        body: dict[str, Any] = {
            "type": "page",
            "title": title,
            "space": {"key": space_key},
            "body": {"storage": {"value": content, "representation": "storage"}},
        }
        if parent_id:
            body["ancestors"] = [{"id": parent_id}]

        logger.debug(f"Creating page {title!r} in space {space_key}")
        outcome = self.rest.post("content", body, decoder=ConfluencePage.decode)
        if isinstance(outcome, Failure):
            self._log_failure(f"Creating page {title!r}", outcome)
            return None

        page = payload_or(outcome)
        if page is not None:
            logger.info(f"Created page {page.id} in space {space_key}")
        return page

    def get_pages_in_space(self, space_key: str, limit: int = 25) -> list[ConfluencePage]:
        """
        Get the pages of a space.

        Raises:
            ValueError: If the space key is empty
        """
        space_key = self._require(space_key, "Space key")
        outcome = self.rest.get(
            "content",
            decoder=ConfluenceSearchResult.decode,
            params={
                "spaceKey": space_key,
                "type": "page",
                "limit": limit,
                "expand": "space,version",
            },
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting pages in space {space_key}", outcome)
            return []

        result = payload_or(outcome)
        pages = result.results if result else []
        logger.info(f"Retrieved {len(pages)} pages from space {space_key}")
        return pages
