"""Module for Jira authentication checks."""

import logging

from ..models import JiraUser
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")


class AuthMixin(JiraClient):
    """Mixin for checking who the configured credentials belong to."""

    def get_current_user(self) -> JiraUser | None:
        """
        Get the user the API token belongs to.

        Returns:
            The authenticated user, or None if the call failed
        """
        outcome = self.rest.get("myself", decoder=JiraUser.decode)
        if isinstance(outcome, Failure):
            self._log_failure("Fetching current user", outcome)
            return None
        return payload_or(outcome)

    def validate_connection(self) -> bool:
        """
        Check that the configuration is complete and the credentials work.

        Returns:
            True if an active user was returned for the configured credentials
        """
        logger.info("Validating Jira connection...")
        if not self.config.is_valid():
            logger.warning("Jira settings are invalid or incomplete")
            return False

        user = self.get_current_user()
        if user is None or not user.active:
            logger.warning("Connection validation failed")
            return False

        logger.info(f"Connection validation successful for user: {user.display_name}")
        return True
