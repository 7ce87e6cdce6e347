"""Search commands."""

from datetime import date, datetime

import click

from ..models.jira import AdvancedSearchRequest, JqlBuilderRequest, SaveSearchRequest
from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)

DATE = click.DateTime(formats=["%Y-%m-%d"])


def _date(value: datetime | None) -> date | None:
    return value.date() if value else None


@click.group("search")
def search_group() -> None:
    """Search issues with JQL and ready-made filters."""


@search_group.command("jql")
@click.argument("jql")
@click.option("--max-results", type=click.IntRange(min=1), default=50, show_default=True)
@click.option("--order-by", help="ORDER BY clause appended unless JQL has one")
@click.option("--field", "fields", multiple=True, help="Field to return (repeatable)")
@pass_console
@handle_errors
def search_jql(
    console: ConsoleContext,
    jql: str,
    max_results: int,
    order_by: str | None,
    fields: tuple[str, ...],
) -> None:
    """Run a JQL query."""
    result = require_result(
        console.jira.advanced_search(
            AdvancedSearchRequest(
                jql=jql, max_results=max_results, fields=list(fields), order_by=order_by
            )
        ),
        "Search failed",
    )
    emit(result.to_simplified_dict())


@search_group.command("project")
@click.argument("project_key", required=False)
@click.option("--max-results", type=click.IntRange(min=1))
@pass_console
@handle_errors
def search_project(
    console: ConsoleContext, project_key: str | None, max_results: int | None
) -> None:
    """List the most recently created issues of a project."""
    emit_models(
        console.jira.get_project_issues(
            console.project_key(project_key), max_results=max_results
        )
    )


@search_group.command("mine")
@click.option("--max-results", type=click.IntRange(min=1))
@pass_console
@handle_errors
def search_mine(console: ConsoleContext, max_results: int | None) -> None:
    """List issues assigned to me."""
    emit_models(console.jira.get_my_issues(max_results=max_results))


@search_group.command("open")
@click.argument("project_key", required=False)
@click.option("--max-results", type=click.IntRange(min=1))
@pass_console
@handle_errors
def search_open(
    console: ConsoleContext, project_key: str | None, max_results: int | None
) -> None:
    """List the open issues of a project."""
    emit_models(
        console.jira.get_open_issues(
            console.project_key(project_key), max_results=max_results
        )
    )


@search_group.command("build")
@click.option("--project", "project_key")
@click.option("--assignee", help="Account name, 'currentUser' or 'unassigned'")
@click.option("--status")
@click.option("--priority")
@click.option("--type", "issue_type")
@click.option("--created-after", type=DATE)
@click.option("--created-before", type=DATE)
@click.option("--updated-after", type=DATE)
@click.option("--updated-before", type=DATE)
@click.option("--label", "labels", multiple=True)
@click.option("--text", "text_search")
@click.option("--run", is_flag=True, help="Execute the built query")
@pass_console
@handle_errors
def search_build(
    console: ConsoleContext,
    project_key: str | None,
    assignee: str | None,
    status: str | None,
    priority: str | None,
    issue_type: str | None,
    created_after: datetime | None,
    created_before: datetime | None,
    updated_after: datetime | None,
    updated_before: datetime | None,
    labels: tuple[str, ...],
    text_search: str | None,
    run: bool,
) -> None:
    """Build a JQL query from filter options."""
    jql = console.jira.build_jql(
        JqlBuilderRequest(
            project_key=project_key,
            assignee=assignee,
            status=status,
            priority=priority,
            issue_type=issue_type,
            created_after=_date(created_after),
            created_before=_date(created_before),
            updated_after=_date(updated_after),
            updated_before=_date(updated_before),
            labels=list(labels),
            text_search=text_search,
        )
    )
    if not jql:
        raise click.UsageError("Give at least one filter option")

    click.echo(jql)
    if run:
        result = require_result(
            console.jira.advanced_search(AdvancedSearchRequest(jql=jql)),
            "Search failed",
        )
        emit(result.to_simplified_dict())


@search_group.command("filters")
@click.option("--run", "filter_name", help="Execute the filter with this name")
@pass_console
@handle_errors
def search_filters(console: ConsoleContext, filter_name: str | None) -> None:
    """List the smart filters, or run one of them."""
    filters = console.jira.get_smart_filters()
    if not filter_name:
        emit([f.model_dump() for f in filters])
        return

    by_name = {f.name.lower(): f for f in filters}
    chosen = by_name.get(filter_name.lower())
    if chosen is None:
        raise click.BadParameter(f"Unknown filter {filter_name!r}", param_hint="--run")
    result = require_result(
        console.jira.advanced_search(AdvancedSearchRequest(jql=chosen.jql)),
        "Search failed",
    )
    emit(result.to_simplified_dict())


@search_group.command("save")
@click.argument("name")
@click.argument("jql")
@click.option("--description", default="")
@click.option("--shared", is_flag=True)
@pass_console
@handle_errors
def search_save(
    console: ConsoleContext, name: str, jql: str, description: str, shared: bool
) -> None:
    """Save a JQL query for this session and run it."""
    saved = console.jira.save_search(
        SaveSearchRequest(name=name, jql=jql, description=description, is_shared=shared)
    )
    result = require_result(
        console.jira.execute_saved_search(saved.id), "Search failed"
    )
    emit({"saved_search": saved.model_dump(), "result": result.to_simplified_dict()})
