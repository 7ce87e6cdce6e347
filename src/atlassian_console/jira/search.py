"""Module for Jira search operations."""

import logging
from typing import Any

from ..models.jira import JiraIssue, JiraSearchResult
from ..rest import Failure, payload_or
from ..utils import quote_query_value
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")

# Every field shown in the issue navigator, custom estimation fields included
DEFAULT_SEARCH_FIELDS = "*navigable"


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        max_results: int | None = None,
        fields: list[str] | None = None,
    ) -> JiraSearchResult | None:
        """
        Run a JQL query and return one page of results.

        Args:
            jql: JQL query string
            max_results: Page size (defaults to the configured page size)
            fields: Fields to return (defaults to all navigable fields)

        Returns:
            The search result, or None if the search failed

        Raises:
            ValueError: If the JQL query is empty
        """
        jql = self._require(jql, "JQL query")
        limit = max_results or self.config.max_results
        logger.debug(f"Searching issues with JQL: {jql}")

        params: dict[str, Any] = {
            "jql": jql,
            "maxResults": limit,
            "fields": ",".join(fields) if fields else DEFAULT_SEARCH_FIELDS,
        }

        def decode(data: Any) -> JiraSearchResult:
            return JiraSearchResult.decode(
                data, jql=jql, story_points_field=self.config.story_points_field
            )

        outcome = self.rest.get("search/jql", decoder=decode, params=params)
        if isinstance(outcome, Failure):
            self._log_failure(f"Search for {jql!r}", outcome)
            return None

        result = payload_or(outcome)
        if result is not None:
            logger.info(f"Search returned {len(result.issues)} issues")
        return result

    def _search_list(self, jql: str, max_results: int | None) -> list[JiraIssue]:
        result = self.search_issues(jql, max_results=max_results)
        return result.issues if result else []

    def get_project_issues(
        self, project_key: str, max_results: int | None = None
    ) -> list[JiraIssue]:
        """
        Get the most recently created issues of a project.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        return self._search_list(
            f"project = {quote_query_value(project_key)} ORDER BY created DESC",
            max_results,
        )

    def get_my_issues(self, max_results: int | None = None) -> list[JiraIssue]:
        """Get issues assigned to the authenticated user, most recently updated first."""
        return self._search_list(
            "assignee = currentUser() ORDER BY updated DESC", max_results
        )

    def get_open_issues(
        self, project_key: str, max_results: int | None = None
    ) -> list[JiraIssue]:
        """
        Get the issues of a project whose status category is not Done.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        return self._search_list(
            f"project = {quote_query_value(project_key)} AND statusCategory != Done "
            "ORDER BY created DESC",
            max_results,
        )
