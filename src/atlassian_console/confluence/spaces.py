"""Module for Confluence space operations."""

import logging

from ..models.confluence import ConfluenceSpace
from ..rest import Failure, payload_or
from .client import ConfluenceClient

logger = logging.getLogger("atlassian-console.confluence")


class SpacesMixin(ConfluenceClient):
    """Mixin for Confluence space operations."""

    def test_connection(self) -> bool:
        """Check that Confluence answers an authenticated request."""
        outcome = self.rest.get("space", params={"limit": 1})
        if isinstance(outcome, Failure):
            self._log_failure("Confluence connection test", outcome)
            return False
        logger.info("Confluence connection successful")
        return True

    def get_spaces(self, limit: int = 50) -> list[ConfluenceSpace]:
        """
        Get available spaces.

        Args:
            limit: Maximum number of spaces to return

        Returns:
            Spaces with their plain-text descriptions; empty on failure
        """
        outcome = self.rest.get(
            "space",
            decoder=ConfluenceSpace.decode_page,
            params={"limit": limit, "expand": "description.plain,homepage"},
        )
        if isinstance(outcome, Failure):
            self._log_failure("Getting spaces", outcome)
            return []

        spaces = payload_or(outcome, [])
        logger.info(f"Retrieved {len(spaces)} spaces")
        return spaces
