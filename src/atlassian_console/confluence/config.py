"""Configuration module for the Confluence client."""

import os
from dataclasses import dataclass

from ..jira.config import DEFAULT_TIMEOUT_SECONDS
from ..utils import get_positive_int

CONFLUENCE_PATH = "/wiki"


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence Cloud API configuration.

    Confluence lives on the same Cloud site as Jira, so each value falls back
    to its Jira counterpart when no ``CONFLUENCE_*`` variable is set.
    """

    url: str  # Base URL for Confluence, e.g. https://example.atlassian.net/wiki
    username: str  # Account email
    api_token: str  # API token used as password
    timeout: int = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If any required environment variable is missing
        """
        url = os.getenv("CONFLUENCE_URL", "").strip()
        if not url:
            jira_url = os.getenv("JIRA_BASE_URL", "").strip().rstrip("/")
            if not jira_url:
                error_msg = (
                    "Missing required CONFLUENCE_URL or JIRA_BASE_URL environment variable"
                )
                raise ValueError(error_msg)
            url = f"{jira_url}{CONFLUENCE_PATH}"

        username = (
            os.getenv("CONFLUENCE_USERNAME", "").strip()
            or os.getenv("JIRA_USER_EMAIL", "").strip()
        )
        api_token = (
            os.getenv("CONFLUENCE_API_TOKEN", "").strip()
            or os.getenv("JIRA_API_TOKEN", "").strip()
        )
        if not (username and api_token):
            error_msg = (
                "Cloud authentication requires CONFLUENCE_USERNAME and "
                "CONFLUENCE_API_TOKEN (or JIRA_USER_EMAIL and JIRA_API_TOKEN)"
            )
            raise ValueError(error_msg)

        return cls(
            url=url.rstrip("/"),
            username=username,
            api_token=api_token,
            timeout=get_positive_int("JIRA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        )

    def is_auth_configured(self) -> bool:
        """Check if the credentials needed for API calls are present."""
        return bool(self.url and self.username and self.api_token)
