"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

from ..models.jira import DEFAULT_STORY_POINTS_FIELD
from ..utils import get_positive_int

logger = logging.getLogger("atlassian-console.jira.config")

DEFAULT_MAX_RESULTS = 50
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is Basic Auth with the account email and an API token.
    Instances are frozen: the base URL, credentials and timeout of a client
    never change after it is built.
    """

    url: str  # Base URL for Jira, e.g. https://example.atlassian.net
    email: str  # Account email
    api_token: str  # API token
    project_key: str | None = None  # Default project for project-scoped commands
    max_results: int = DEFAULT_MAX_RESULTS  # Page size passed to searches
    timeout: int = DEFAULT_TIMEOUT_SECONDS  # Per-request timeout in seconds
    story_points_field: str = DEFAULT_STORY_POINTS_FIELD  # Estimation field id

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_BASE_URL", "").strip()
        if not url:
            error_msg = "Missing required JIRA_BASE_URL environment variable"
            raise ValueError(error_msg)

        email = os.getenv("JIRA_USER_EMAIL", "").strip()
        api_token = os.getenv("JIRA_API_TOKEN", "").strip()
        if not (email and api_token):
            error_msg = (
                "Jira Cloud authentication requires JIRA_USER_EMAIL and JIRA_API_TOKEN"
            )
            raise ValueError(error_msg)

        return cls(
            url=url.rstrip("/"),
            email=email,
            api_token=api_token,
            project_key=os.getenv("JIRA_PROJECT_KEY", "").strip() or None,
            max_results=get_positive_int("JIRA_MAX_RESULTS", DEFAULT_MAX_RESULTS),
            timeout=get_positive_int("JIRA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            story_points_field=os.getenv("JIRA_STORY_POINTS_FIELD", "").strip()
            or DEFAULT_STORY_POINTS_FIELD,
        )

    def is_auth_configured(self) -> bool:
        """Check if the credentials needed for API calls are present."""
        return bool(self.url and self.email and self.api_token)

    def is_valid(self) -> bool:
        """Check if the configuration is complete, default project included."""
        if not self.is_auth_configured():
            return False
        if not self.project_key:
            logger.warning("JIRA_PROJECT_KEY is not set")
            return False
        return True
