"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from ..rest import Failure, RestClient, create_session
from ..utils import log_config_param
from .config import JiraConfig
from .saved_searches import SavedSearchStore

# Configure logging
logger = logging.getLogger("atlassian-console.jira")

JIRA_API_PREFIX = "rest/api/3"
JIRA_AGILE_API_PREFIX = "rest/agile/1.0"


class JiraClient:
    """Base client for Jira API interactions.

    ``self.jira`` is the atlassian-python-api client; every call goes through
    ``self.rest`` (platform API v3) or ``self.agile`` (Jira Software API),
    which wrap it and return outcome values instead of raising.
    """

    config: JiraConfig
    saved_searches: SavedSearchStore

    def __init__(
        self,
        config: JiraConfig | None = None,
        saved_searches: SavedSearchStore | None = None,
    ) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            saved_searches: Store for saved searches; a fresh in-memory store
                is created when omitted

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        # Load configuration from environment variables if not provided
        self.config = config or JiraConfig.from_env()
        log_config_param(logger, "Jira", "URL", self.config.url)
        log_config_param(logger, "Jira", "USER_EMAIL", self.config.email)
        log_config_param(
            logger, "Jira", "API_TOKEN", self.config.api_token, sensitive=True
        )

        session = create_session(self.config.email, self.config.api_token)
        self.jira = Jira(
            url=self.config.url,
            session=session,
            cloud=True,
            timeout=self.config.timeout,
            # 429 and 5xx responses are reported to the caller, never retried
            retry_with_header=False,
            backoff_and_retry=False,
        )
        self.rest = RestClient(self.jira, service_name="Jira", api_prefix=JIRA_API_PREFIX)
        self.agile = RestClient(
            self.jira, service_name="Jira Agile", api_prefix=JIRA_AGILE_API_PREFIX
        )
        self.saved_searches = (
            saved_searches if saved_searches is not None else SavedSearchStore()
        )

    @staticmethod
    def _require(value: str | None, label: str) -> str:
        """Return ``value`` stripped, raising ValueError if it is blank."""
        if value is None or not str(value).strip():
            error_msg = f"{label} cannot be empty"
            raise ValueError(error_msg)
        return str(value).strip()

    @staticmethod
    def _log_failure(action: str, failure: Failure) -> None:
        if failure.is_not_found:
            logger.warning(f"{action}: not found")
        else:
            logger.warning(f"{action} failed: {failure}")
