import logging
import os

import click
from dotenv import load_dotenv

from atlassian_console.commands import COMMANDS
from atlassian_console.utils.logging import setup_logging

__version__ = "0.1.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("ATLASSIAN_CONSOLE_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.INFO

# Set up logging using the utility function
logger = setup_logging(logging_level)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--jira-url",
    help="Jira Cloud URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option("--jira-project", help="Default Jira project key")
@click.option(
    "--confluence-url",
    help="Confluence URL (default: the Jira URL followed by /wiki)",
)
@click.version_option(__version__, prog_name="atlassian-console")
def main(
    verbose: int,
    env_file: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_project: str | None,
    confluence_url: str | None,
) -> None:
    """Atlassian Console - Jira and Confluence Cloud from the command line

    Credentials are read from the environment (or a .env file): JIRA_BASE_URL,
    JIRA_USER_EMAIL, JIRA_API_TOKEN and JIRA_PROJECT_KEY. Confluence reuses
    them unless CONFLUENCE_* variables are set.
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        if _env_flag("ATLASSIAN_CONSOLE_VERY_VERBOSE"):
            current_logging_level = logging.DEBUG
        elif _env_flag("ATLASSIAN_CONSOLE_VERBOSE"):
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv()

    # Command line values take precedence over the environment
    overrides = {
        "JIRA_BASE_URL": jira_url,
        "JIRA_USER_EMAIL": jira_username,
        "JIRA_API_TOKEN": jira_token,
        "JIRA_PROJECT_KEY": jira_project,
        "CONFLUENCE_URL": confluence_url,
    }
    for name, value in overrides.items():
        if value:
            os.environ[name] = value


for _command in COMMANDS:
    main.add_command(_command)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
