"""Module for Confluence search operations."""

import logging

from ..models.confluence import ConfluencePage, ConfluenceSearchResult
from ..rest import Failure, payload_or
from ..utils import quote_query_value
from .client import ConfluenceClient

logger = logging.getLogger("atlassian-console.confluence")


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    def search_pages(
        self, query: str, space_key: str | None = None, limit: int = 25
    ) -> list[ConfluencePage]:
        """
        Full-text search over Confluence content.

        Args:
            query: Text to search for
            space_key: Optional space to restrict the search to
            limit: Maximum number of results to return

        Returns:
            Matching pages; empty on failure

        Raises:
            ValueError: If the query is empty
        """
        query = self._require(query, "Search query")
        cql = f"text ~ {quote_query_value(query)}"
        if space_key and space_key.strip():
            cql += f" and space = {quote_query_value(space_key.strip())}"

        logger.debug(f"Searching Confluence with CQL: {cql}")
        outcome = self.rest.get(
            "content/search",
            decoder=ConfluenceSearchResult.decode,
            params={"cql": cql, "limit": limit, "expand": "space,body.view,version"},
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Confluence search for {query!r}", outcome)
            return []

        result = payload_or(outcome)
        pages = result.results if result else []
        logger.info(f"Confluence search returned {len(pages)} pages")
        return pages
