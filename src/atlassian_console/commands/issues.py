"""Issue, transition and field commands."""

import json
from datetime import datetime
from typing import Any

import click

from ..models.jira import CreateIssueRequest, UpdateFieldsRequest, UpdateIssueRequest
from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)


def _parse_field_assignments(assignments: tuple[str, ...]) -> dict[str, Any]:
    """Parse ``FIELD=VALUE`` pairs; values that are valid JSON are decoded."""
    fields: dict[str, Any] = {}
    for assignment in assignments:
        name, sep, raw = assignment.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Expected FIELD=VALUE, got {assignment!r}", param_hint="--field"
            )
        try:
            fields[name.strip()] = json.loads(raw)
        except json.JSONDecodeError:
            fields[name.strip()] = raw
    return fields


@click.group("issue")
def issue_group() -> None:
    """Create, read and update issues."""


@issue_group.command("get")
@click.argument("issue_key")
@pass_console
@handle_errors
def get_issue(console: ConsoleContext, issue_key: str) -> None:
    """Show an issue."""
    issue = require_result(
        console.jira.get_issue(issue_key), f"Issue {issue_key} not found"
    )
    emit(issue.to_simplified_dict())


@issue_group.command("create")
@click.option("--project", "project_key", help="Project key (default: JIRA_PROJECT_KEY)")
@click.option("--summary", required=True)
@click.option("--type-id", "issue_type_id", required=True, help="Issue type ID")
@click.option("--description", default="")
@click.option("--priority", default="Medium", show_default=True)
@click.option("--assignee", "assignee_id", help="Assignee account ID")
@pass_console
@handle_errors
def create_issue(
    console: ConsoleContext,
    project_key: str | None,
    summary: str,
    issue_type_id: str,
    description: str,
    priority: str,
    assignee_id: str | None,
) -> None:
    """Create an issue."""
    request = CreateIssueRequest(
        project_key=console.project_key(project_key),
        summary=summary,
        issue_type_id=issue_type_id,
        description=description,
        priority=priority,
        assignee_id=assignee_id,
    )
    issue = require_result(
        console.jira.create_issue(request), "Failed to create issue"
    )
    emit(issue.to_simplified_dict())


@issue_group.command("update")
@click.argument("issue_key")
@click.option("--summary")
@click.option("--description")
@click.option("--priority")
@click.option("--assignee", "assignee_id", help="Assignee account ID")
@pass_console
@handle_errors
def update_issue(
    console: ConsoleContext,
    issue_key: str,
    summary: str | None,
    description: str | None,
    priority: str | None,
    assignee_id: str | None,
) -> None:
    """Update the summary, description, priority or assignee of an issue."""
    request = UpdateIssueRequest(
        summary=summary,
        description=description,
        priority=priority,
        assignee_id=assignee_id,
    )
    require_result(
        console.jira.update_issue(issue_key, request),
        f"Failed to update issue {issue_key}",
    )
    click.echo(f"Updated {issue_key}")


@issue_group.command("transitions")
@click.argument("issue_key")
@pass_console
@handle_errors
def list_transitions(console: ConsoleContext, issue_key: str) -> None:
    """List the transitions available for an issue."""
    emit_models(console.jira.get_transitions(issue_key))


@issue_group.command("transition")
@click.argument("issue_key")
@click.argument("transition_id")
@click.option("--comment", help="Comment added with the transition")
@pass_console
@handle_errors
def transition_issue(
    console: ConsoleContext, issue_key: str, transition_id: str, comment: str | None
) -> None:
    """Move an issue through a workflow transition."""
    require_result(
        console.jira.transition_issue(issue_key, transition_id, comment=comment),
        f"Failed to transition issue {issue_key}",
    )
    click.echo(f"Transitioned {issue_key}")


@issue_group.command("fields")
@click.argument("issue_key", required=False)
@pass_console
@handle_errors
def show_fields(console: ConsoleContext, issue_key: str | None) -> None:
    """Show the field values of an issue, or every field defined on the site."""
    if issue_key:
        values = console.jira.get_issue_field_values(issue_key)
        if not values:
            raise click.ClickException(f"Issue {issue_key} not found")
        emit(values)
    else:
        emit_models(console.jira.get_available_fields())


@issue_group.command("set-fields")
@click.argument("issue_keys", nargs=-1, required=True)
@click.option("--summary")
@click.option("--description")
@click.option("--assignee", "assignee_id", help="Assignee account ID")
@click.option("--priority-id")
@click.option("--due-date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option(
    "--field",
    "assignments",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Custom field value; JSON values are decoded",
)
@pass_console
@handle_errors
def set_fields(
    console: ConsoleContext,
    issue_keys: tuple[str, ...],
    summary: str | None,
    description: str | None,
    assignee_id: str | None,
    priority_id: str | None,
    due_date: datetime | None,
    assignments: tuple[str, ...],
) -> None:
    """Update fields on one or more issues."""
    request = UpdateFieldsRequest(
        summary=summary,
        description=description,
        assignee_id=assignee_id,
        priority_id=priority_id,
        due_date=due_date.date() if due_date else None,
        custom_fields=_parse_field_assignments(assignments),
    )

    if len(issue_keys) == 1:
        require_result(
            console.jira.update_issue_fields(issue_keys[0], request),
            f"Failed to update fields of {issue_keys[0]}",
        )
        click.echo(f"Updated {issue_keys[0]}")
        return

    result = console.jira.bulk_update_fields(list(issue_keys), request)
    emit(result.model_dump())
    if result.failed_updates:
        raise click.ClickException(
            f"{result.failed_updates} of {result.total_tickets} updates failed"
        )
