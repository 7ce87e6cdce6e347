"""Module for Jira comment operations."""

import logging

from ..models.jira import AddCommentRequest, CommentTemplate, JiraComment
from ..preprocessing import text_to_adf
from ..rest import Failure, payload_or
from .client import JiraClient

logger = logging.getLogger("atlassian-console.jira")

COMMENT_TEMPLATES: tuple[CommentTemplate, ...] = (
    CommentTemplate(
        name="Testing Complete",
        template="✅ Testing completed successfully. All test cases passed.",
        category="QA",
    ),
    CommentTemplate(
        name="Code Review Done",
        template="👀 Code review completed. Changes look good to merge.",
        category="Development",
    ),
    CommentTemplate(
        name="Ready for Deployment",
        template="🚀 Feature is ready for deployment to production.",
        category="DevOps",
    ),
    CommentTemplate(
        name="Needs More Info",
        template="ℹ️ Need additional information to proceed. Please provide more details.",
        category="General",
    ),
    CommentTemplate(
        name="Blocked",
        template="🚫 This ticket is blocked. Waiting for dependencies to be resolved.",
        category="General",
    ),
    CommentTemplate(
        name="In Progress",
        template="🔄 Started working on this ticket. Will update progress regularly.",
        category="General",
    ),
    CommentTemplate(
        name="Ready for Review",
        template="👁️ Work completed. Ready for review and feedback.",
        category="General",
    ),
    CommentTemplate(
        name="Approved",
        template="✅ Approved. Great work!",
        category="Management",
    ),
)


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_comments(self, issue_key: str) -> list[JiraComment]:
        """
        Get the comments of an issue with their bodies flattened to text.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Comments in the order Jira returns them; empty on failure

        Raises:
            ValueError: If the issue key is empty
        """
        issue_key = self._require(issue_key, "Issue key")

        outcome = self.rest.get(
            f"issue/{issue_key}/comment", decoder=JiraComment.decode_page
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Getting comments for {issue_key}", outcome)
            return []

        comments = payload_or(outcome, [])
        logger.debug(f"Found {len(comments)} comments for {issue_key}")
        return comments

    def add_comment(
        self, issue_key: str, request: AddCommentRequest
    ) -> JiraComment | None:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key
            request: Comment text and the users to mention

        Returns:
            The created comment, or None on failure

        Raises:
            ValueError: If the issue key or comment body is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        self._require(request.body, "Comment body")
        logger.info(f"Adding comment to {issue_key}")

        outcome = self.rest.post(
            f"issue/{issue_key}/comment",
            request.to_api_payload(),
            decoder=JiraComment.decode,
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Adding comment to {issue_key}", outcome)
            return None

        comment = payload_or(outcome)
        if comment is None:
            # 2xx without a body; the comment exists but its id is unknown
            comment = JiraComment(body=request.rendered_body())
        logger.info(f"Successfully added comment to {issue_key}")
        return comment

    def update_comment(self, issue_key: str, comment_id: str, text: str) -> bool:
        """
        Replace the body of an existing comment.

        Raises:
            ValueError: If the issue key, comment id or text is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        comment_id = self._require(comment_id, "Comment ID")
        self._require(text, "Comment body")

        outcome = self.rest.put(
            f"issue/{issue_key}/comment/{comment_id}", {"body": text_to_adf(text)}
        )
        if isinstance(outcome, Failure):
            self._log_failure(f"Updating comment {comment_id} on {issue_key}", outcome)
            return False

        logger.info(f"Updated comment {comment_id} on {issue_key}")
        return True

    def delete_comment(self, issue_key: str, comment_id: str) -> bool:
        """
        Delete a comment.

        Raises:
            ValueError: If the issue key or comment id is empty
        """
        issue_key = self._require(issue_key, "Issue key")
        comment_id = self._require(comment_id, "Comment ID")

        outcome = self.rest.delete(f"issue/{issue_key}/comment/{comment_id}")
        if isinstance(outcome, Failure):
            self._log_failure(f"Deleting comment {comment_id} on {issue_key}", outcome)
            return False

        logger.info(f"Deleted comment {comment_id} on {issue_key}")
        return True

    def get_comment_templates(self) -> list[CommentTemplate]:
        """Return the built-in catalogue of canned comments."""
        return list(COMMENT_TEMPLATES)
