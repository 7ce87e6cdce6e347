"""Module for Jira field operations."""

import logging
from typing import Any

from ..models.jira import BulkUpdateResult, JiraField, UpdateFieldsRequest
from ..rest import Failure, payload_or
from .issues import IssuesMixin

logger = logging.getLogger("atlassian-console.jira")


class FieldsMixin(IssuesMixin):
    """Mixin for reading and updating Jira fields, custom fields included."""

    def update_issue_fields(self, issue_key: str, request: UpdateFieldsRequest) -> bool:
        """
        Update arbitrary fields of an issue.

        Args:
            issue_key: The issue key
            request: Named and custom field values to set

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
            self._log_failure(f"Updating fields of {issue_key}", outcome)
            return False

        logger.info(f"Updated fields of {issue_key}")
        return True

    def bulk_update_fields(
        self, issue_keys: list[str], request: UpdateFieldsRequest
    ) -> BulkUpdateResult:
        """
        Apply the same field update to several issues, one after another.

        A failure on one issue is recorded and the remaining issues are still
        updated.

        Args:
            issue_keys: Keys of the issues to update
            request: Field values to set on every issue

        Returns:
            Counts of successful and failed updates with the failing keys

        Raises:
            ValueError: If the request would change nothing
        """
        if request.is_empty:
            error_msg = "No fields to update"
            raise ValueError(error_msg)

        logger.info(f"Bulk updating {len(issue_keys)} issues")
        result = BulkUpdateResult(total_tickets=len(issue_keys))

        for issue_key in issue_keys:
            try:
                updated = self.update_issue_fields(issue_key, request)
            except ValueError as e:
                result.record_failure(issue_key, f"Error updating {issue_key!r}: {e}")
                continue
            if updated:
                result.successful_updates += 1
            else:
                result.record_failure(issue_key, f"Failed to update {issue_key}")

        logger.info(
            f"Bulk update completed. Success: {result.successful_updates}, "
            f"Failed: {result.failed_updates}"
        )
        return result

    def get_available_fields(self) -> list[JiraField]:
        """
        Get all system and custom field definitions visible to the user.

        Returns:
            Field definitions; empty if the call failed
        """
        outcome = self.rest.get("field", decoder=JiraField.decode_list)
        if isinstance(outcome, Failure):
            self._log_failure("Getting field definitions", outcome)
            return []
        return payload_or(outcome, [])

    def get_issue_field_values(self, issue_key: str) -> dict[str, Any]:
        """
        Get the current values of the commonly edited fields of an issue.

        Args:
            issue_key: The issue key

        Returns:
            Field name to value; empty if the issue could not be fetched

        Raises:
            ValueError: If the issue key is empty
        """
        issue = self.get_issue(issue_key)
        if issue is None:
            logger.warning(f"No field values found for issue: {issue_key}")
            return {}
        return issue.field_values()
