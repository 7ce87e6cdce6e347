"""Base client module for Confluence API interactions."""

import logging

from atlassian import Confluence

from ..rest import Failure, RestClient, create_session
from ..utils import log_config_param
from .config import ConfluenceConfig

# Configure logging
logger = logging.getLogger("atlassian-console.confluence")

CONFLUENCE_API_PREFIX = "rest/api"


class ConfluenceClient:
    """Base client for Confluence API interactions."""

    config: ConfluenceConfig

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ValueError: If configuration is invalid or environment variables are missing
        """
        self.config = config or ConfluenceConfig.from_env()
        log_config_param(logger, "Confluence", "URL", self.config.url)
        log_config_param(logger, "Confluence", "USERNAME", self.config.username)
        log_config_param(
            logger, "Confluence", "API_TOKEN", self.config.api_token, sensitive=True
        )

        session = create_session(self.config.username, self.config.api_token)
        self.confluence = Confluence(
            url=self.config.url,
            session=session,
            cloud=True,
            timeout=self.config.timeout,
            # 429 and 5xx responses are reported to the caller, never retried
            retry_with_header=False,
            backoff_and_retry=False,
        )
        self.rest = RestClient(
            self.confluence, service_name="Confluence", api_prefix=CONFLUENCE_API_PREFIX
        )

    @staticmethod
    def _require(value: str | None, label: str) -> str:
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
