"""User commands."""

import click

from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)


@click.group("user")
def user_group() -> None:
    """Look up Jira users."""


@user_group.command("search")
@click.argument("query")
@click.option("--max-results", type=click.IntRange(min=1))
@pass_console
@handle_errors
def search_users(console: ConsoleContext, query: str, max_results: int | None) -> None:
    """Find users by name or email."""
    emit_models(console.jira.search_users(query, max_results=max_results))


@user_group.command("get")
@click.argument("account_id")
@pass_console
@handle_errors
def get_user(console: ConsoleContext, account_id: str) -> None:
    """Show a user by account ID."""
    user = require_result(
        console.jira.get_user(account_id), f"User {account_id} not found"
    )
    emit(user.to_simplified_dict())


@user_group.command("assignable")
@click.option("--project", "project_key", help="Project key (default: JIRA_PROJECT_KEY)")
@click.option("--issue", "issue_key", help="List users assignable to this issue instead")
@pass_console
@handle_errors
def assignable_users(
    console: ConsoleContext, project_key: str | None, issue_key: str | None
) -> None:
    """List users who can be assigned issues."""
    if issue_key:
        users = console.jira.get_assignable_users_for_issue(issue_key)
    else:
        users = console.jira.get_assignable_users(console.project_key(project_key))
    emit_models(users)
