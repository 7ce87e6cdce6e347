"""Module for Jira issue operations."""

import logging
from functools import partial

from ..models.jira import CreateIssueRequest, JiraIssue, UpdateIssueRequest
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")


class IssuesMixin(JiraClient):
    """Mixin for creating, reading and updating Jira issues."""

    def _issue_decoder(self) -> partial:
        return partial(
            JiraIssue.decode, story_points_field=self.config.story_points_field
        )

    def get_issue(self, issue_key: str) -> JiraIssue | None:
        """
        Get a single issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The issue, or None if it does not exist or could not be fetched

        Raises:
            ValueError: If the issue key is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        logger.info(f"Getting issue: {issue_key}")

        outcome = self.rest.get(f"issue/{issue_key}", decoder=self._issue_decoder())
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting issue {issue_key}", outcome)
            return None
        return payload_or(outcome)

    def create_issue(self, request: CreateIssueRequest) -> JiraIssue | None:
        """
        Create an issue.

        The API answers with the new issue's id and key only; fetch the issue
        again for its full field set.

        Args:
            request: Fields of the new issue

        Returns:
            The created issue (id and key populated), or None on failure

        Raises:
            ValueError: If project key, summary or issue type is empty
        """
        self._require(request.project_key, "Project key")
        self._require(request.summary, "Summary")
        self._require(request.issue_type_id, "Issue type")
        logger.info(f"Creating issue in project {request.project_key}")

        outcome = self.rest.post(
            "issue", request.to_api_payload(), decoder=self._issue_decoder()
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Creating issue in {request.project_key}", outcome)
            return None

        issue = payload_or(outcome)
        if issue is not None:
            logger.info(f"Created issue {issue.key}")
        return issue

    def update_issue(self, issue_key: str, request: UpdateIssueRequest) -> bool:
        """
        Update the summary, description, priority or assignee of an issue.

        Args:
            issue_key: The issue key
            request: Fields to change; blank fields are left untouched

        Returns:
            True if Jira accepted the update

        Raises:
            ValueError: If the issue key is empty or nothing would change
        """
        issue_key = self._require(issue_key, "Issue key")
        if request.is_empty:
            error_msg = "No fields to update"
            raise ValueError(error_msg)

        outcome = self.rest.put(f"issue/{issue_key}", request.to_api_payload())
        if isinstance(outcome, Failure):
            self._log_failure(f"Updating issue {issue_key}", outcome)
            return False

        logger.info(f"Updated issue {issue_key}")
        return True
