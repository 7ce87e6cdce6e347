"""Utility functions related to environment checking."""

import logging
import os

logger = logging.getLogger("atlassian-console.utils.environment")

REQUIRED_JIRA_VARIABLES = (
    "JIRA_BASE_URL",
    "JIRA_USER_EMAIL",
    "JIRA_API_TOKEN",
    "JIRA_PROJECT_KEY",
)


def get_missing_variables() -> list[str]:
    """Return the required environment variables that are unset or blank."""
    return [
        name for name in REQUIRED_JIRA_VARIABLES if not os.getenv(name, "").strip()
    ]


def get_available_services() -> dict[str, bool]:
    """Determine which services are available based on environment variables.

    Confluence reuses the Jira site and credentials unless its own
    ``CONFLUENCE_*`` variables are set, so it is available whenever a URL and
    a credential pair can be resolved for it.
    """
    jira_is_setup = all(
        os.getenv(name) for name in ("JIRA_BASE_URL", "JIRA_USER_EMAIL", "JIRA_API_TOKEN")
    )
    if jira_is_setup:
        logger.info("Using Jira Cloud Basic Authentication (API Token)")
    else:
        logger.info("Jira is not configured or required environment variables are missing.")

    confluence_url = os.getenv("CONFLUENCE_URL") or os.getenv("JIRA_BASE_URL")
    confluence_user = os.getenv("CONFLUENCE_USERNAME") or os.getenv("JIRA_USER_EMAIL")
    confluence_token = os.getenv("CONFLUENCE_API_TOKEN") or os.getenv("JIRA_API_TOKEN")
    confluence_is_setup = bool(confluence_url and confluence_user and confluence_token)
    if not confluence_is_setup:
        logger.info(
            "Confluence is not configured or required environment variables are missing."
        )

    return {"confluence": confluence_is_setup, "jira": jira_is_setup}


def get_positive_int(name: str, default: int) -> int:
    """Read a positive integer environment variable.

    Raises:
        ValueError: If the variable is set but not a positive integer
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        error_msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(error_msg) from None
    if value <= 0:
        error_msg = f"{name} must be positive, got {value}"
        raise ValueError(error_msg)
    return value
