"""Comment commands."""

import click

from ..models.jira import AddCommentRequest
from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)


@click.group("comment")
def comment_group() -> None:
    """Read and write issue comments."""


@comment_group.command("list")
@click.argument("issue_key")
@pass_console
@handle_errors
def list_comments(console: ConsoleContext, issue_key: str) -> None:
    """List the comments of an issue."""
    emit_models(console.jira.get_comments(issue_key))


@comment_group.command("add")
@click.argument("issue_key")
@click.argument("body", required=False)
@click.option("--template", help="Use a comment template by name instead of BODY")
@click.option(
    "--mention", "mentioned_users", multiple=True, help="User to @mention (repeatable)"
)
@click.option("--no-notify", is_flag=True, help="Do not notify watchers")
@pass_console
@handle_errors
def add_comment(
    console: ConsoleContext,
    issue_key: str,
    body: str | None,
    template: str | None,
    mentioned_users: tuple[str, ...],
    no_notify: bool,
) -> None:
    """Add a comment to an issue."""
    if template:
        templates = {t.name.lower(): t for t in console.jira.get_comment_templates()}
        chosen = templates.get(template.lower())
        if chosen is None:
            raise click.BadParameter(
                f"Unknown template {template!r}", param_hint="--template"
            )
        body = chosen.template
    if not body:
        raise click.UsageError("Provide BODY or --template")

    request = AddCommentRequest(
        body=body,
        notify_users=not no_notify,
        mentioned_users=list(mentioned_users),
    )
    comment = require_result(
        console.jira.add_comment(issue_key, request),
        f"Failed to add comment to {issue_key}",
    )
    emit(comment.to_simplified_dict())


@comment_group.command("update")
@click.argument("issue_key")
@click.argument("comment_id")
@click.argument("body")
@pass_console
@handle_errors
def update_comment(
    console: ConsoleContext, issue_key: str, comment_id: str, body: str
) -> None:
    """Replace the body of a comment."""
    require_result(
        console.jira.update_comment(issue_key, comment_id, body),
        f"Failed to update comment {comment_id}",
    )
    click.echo(f"Updated comment {comment_id}")


@comment_group.command("delete")
@click.argument("issue_key")
@click.argument("comment_id")
@click.confirmation_option(prompt="Delete this comment?")
@pass_console
@handle_errors
def delete_comment(console: ConsoleContext, issue_key: str, comment_id: str) -> None:
    """Delete a comment."""
    require_result(
        console.jira.delete_comment(issue_key, comment_id),
        f"Failed to delete comment {comment_id}",
    )
    click.echo(f"Deleted comment {comment_id}")


@comment_group.command("templates")
@pass_console
def list_templates(console: ConsoleContext) -> None:
    """List the built-in comment templates."""
    emit([t.model_dump() for t in console.jira.get_comment_templates()])
