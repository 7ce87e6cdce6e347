"""Module for Jira user operations."""

import logging
from typing import Any

from ..models import JiraUser
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def _user_list(self, path: str, params: dict[str, Any], action: str) -> list[JiraUser]:
        outcome = self.rest.get(path, decoder=JiraUser.decode_list, params=params)
        if isinstance(outcome, Failure):
            self._log_failure(action, outcome)
            return []
        users = payload_or(outcome, [])
        logger.info(f"{action}: {len(users)} users")
        return users

    def search_users(self, query: str, max_results: int | None = None) -> list[JiraUser]:
        """
        Find users by display name or email address.

        Args:
            query: Text matched against display names and email addresses
            max_results: Maximum number of users to return

        Returns:
            Matching users; empty on failure

        Raises:
            ValueError: If the query is empty
        """
        query = self._require(query, "Search query")
        return self._user_list(
            "user/search",
            {"query": query, "maxResults": max_results or self.config.max_results},
            f"Searching users for {query!r}",
        )

    def get_user(self, account_id: str) -> JiraUser | None:
        """
        Get a user by account id.

        Returns:
            The user, or None if not found or on failure

        Raises:
            ValueError: If the account id is empty
        """
        account_id = self._require(account_id, "Account ID")
        outcome = self.rest.get(
            "user", decoder=JiraUser.decode, params={"accountId": account_id}
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting user {account_id}", outcome)
            return None
        return payload_or(outcome)

    def get_assignable_users(
        self, project_key: str, max_results: int | None = None
    ) -> list[JiraUser]:
        """
        Get users who can be assigned issues in a project.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        return self._user_list(
            "user/assignable/search",
            {
                "project": project_key,
                "maxResults": max_results or self.config.max_results,
            },
            f"Assignable users for project {project_key}",
        )

    def get_assignable_users_for_issue(
        self, issue_key: str, max_results: int | None = None
    ) -> list[JiraUser]:
        """
        Get users who can be assigned a specific issue.

        Raises:
            ValueError: If the issue key is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        return self._user_list(
            "user/assignable/search",
            {
                "issueKey": issue_key,
                "maxResults": max_results or self.config.max_results,
            },
            f"Assignable users for issue {issue_key}",
        )
