"""Module for Jira project operations."""

import logging

from ..models import JiraIssueType, JiraPriority, JiraProject
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_projects(self) -> list[JiraProject]:
        """
        Get all projects visible to the user.

        Returns:
            Projects; empty on failure
        """
        outcome = self.rest.get("project", decoder=JiraProject.decode_list)
        if isinstance(outcome, Failure):
            self._log_failure("Getting projects", outcome)
            return []

        projects = payload_or(outcome, [])
        logger.info(f"Found {len(projects)} projects")
        return projects

    def get_project(self, project_key: str) -> JiraProject | None:
        """
        Get a project by key.

        Returns:
            The project, or None if not found or on failure

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        outcome = self.rest.get(f"project/{project_key}", decoder=JiraProject.decode)
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting project {project_key}", outcome)
            return None
        return payload_or(outcome)

    def get_issue_types(self, project_key: str) -> list[JiraIssueType]:
        """
        Get the issue types usable in a project.

        The project's own issue types are tried first; if that call fails
        the global issue type list is returned instead.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")

        # Lists the issue types of the project, each with its statuses
        outcome = self.rest.get(
            f"project/{project_key}/statuses", decoder=JiraIssueType.decode_list
        )
        if not isinstance(outcome, Failure):
            issue_types = payload_or(outcome, [])
            logger.debug(f"Found {len(issue_types)} issue types for {project_key}")
            return issue_types

        if outcome.is_not_found:
            logger.warning(f"Project not found: {project_key}")
            return []

        self._log_failure(f"Getting issue types for {project_key}", outcome)
        fallback = self.rest.get("issuetype", decoder=JiraIssueType.decode_list)
        if isinstance(fallback, Failure):
            self._log_failure("Getting global issue types", fallback)
            return []
        return payload_or(fallback, [])

    def get_priorities(self) -> list[JiraPriority]:
        """Get the priorities defined on the site."""
        outcome = self.rest.get("priority", decoder=JiraPriority.decode_list)
        if isinstance(outcome, Failure):
            self._log_failure("Getting priorities", outcome)
            return []
        return payload_or(outcome, [])
