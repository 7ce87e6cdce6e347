"""Configuration and identity commands."""

import os

import click

from ..utils import get_available_services, get_missing_variables, mask_sensitive
from ..utils.environment import REQUIRED_JIRA_VARIABLES
from .context import ConsoleContext, emit, handle_errors, pass_console, require_result

SECRET_VARIABLES = frozenset({"JIRA_API_TOKEN", "CONFLUENCE_API_TOKEN"})

DISPLAYED_VARIABLES = (
    *REQUIRED_JIRA_VARIABLES,
    "JIRA_MAX_RESULTS",
    "JIRA_TIMEOUT_SECONDS",
    "JIRA_STORY_POINTS_FIELD",
    "CONFLUENCE_URL",
)


@click.command("config")
@click.option("--check", is_flag=True, help="Also verify the credentials against Jira")
@pass_console
@handle_errors
def config_command(console: ConsoleContext, check: bool) -> None:
    """Show the configuration read from the environment, secrets masked."""
    for name in DISPLAYED_VARIABLES:
        value = os.getenv(name)
        shown = mask_sensitive(value) if name in SECRET_VARIABLES else (value or "Not set")
        click.echo(f"{name}: {shown}")

    services = get_available_services()
    click.echo(
        "Services: "
        + ", ".join(f"{name}={'yes' if ok else 'no'}" for name, ok in services.items())
    )

    missing = get_missing_variables()
    if missing:
        raise click.ClickException(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    if check:
        require_result(
            console.jira.validate_connection(), "Jira connection validation failed"
        )
        click.echo("Jira connection OK")


@click.command("whoami")
@pass_console
@handle_errors
def whoami_command(console: ConsoleContext) -> None:
    """Show the account the API token belongs to."""
    user = require_result(
        console.jira.get_current_user(), "Could not retrieve the current user"
    )
    emit(user.to_simplified_dict())
