"""Module for Jira transition operations."""

import logging

from ..models.jira import JiraTransition, TransitionIssueRequest
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the workflow transitions currently available for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Available transitions; empty if none or if the call failed

        Raises:
            ValueError: If the issue key is empty
        """
        issue_key = self._require(issue_key, "Issue key")

        outcome = self.rest.get(
            f"issue/{issue_key}/transitions", decoder=JiraTransition.decode_page
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting transitions for {issue_key}", outcome)
            return []

        transitions = payload_or(outcome, [])
        logger.debug(f"Found {len(transitions)} transitions for {issue_key}")
        return transitions

    def transition_issue(
        self, issue_key: str, transition_id: str, comment: str | None = None
    ) -> bool:
        """
        Move an issue through a workflow transition.

        Jira replies ``204 No Content`` on success, so only the status is
        checked.

        Args:
            issue_key: The issue key
            transition_id: Id from :meth:`get_transitions`
            comment: Optional comment added as part of the transition

        Returns:
            True if the transition was applied

        Raises:
            ValueError: If the issue key or transition id is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        transition_id = self._require(transition_id, "Transition ID")
        logger.info(f"Transitioning {issue_key} with transition {transition_id}")

        request = TransitionIssueRequest(transition_id=transition_id, comment=comment)
        outcome = self.rest.post_no_content(
            f"issue/{issue_key}/transitions", request.to_api_payload()
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Transitioning {issue_key}", outcome)
            return False

        logger.info(f"Successfully transitioned {issue_key}")
        return True
