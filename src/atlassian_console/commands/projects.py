"""Project commands."""

import click

from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)


@click.group("project")
def project_group() -> None:
    """Browse projects and their metadata."""


@project_group.command("list")
@pass_console
@handle_errors
def list_projects(console: ConsoleContext) -> None:
    emit_models(console.jira.get_projects())


@project_group.command("get")
@click.argument("project_key", required=False)
@pass_console
@handle_errors
def get_project(console: ConsoleContext, project_key: str | None) -> None:
    key = console.project_key(project_key)
    project = require_result(console.jira.get_project(key), f"Project {key} not found")
    emit(project.to_simplified_dict())


@project_group.command("issue-types")
@click.argument("project_key", required=False)
@pass_console
@handle_errors
def issue_types(console: ConsoleContext, project_key: str | None) -> None:
    """List the issue types usable in a project."""
    emit_models(console.jira.get_issue_types(console.project_key(project_key)))


@project_group.command("priorities")
@pass_console
@handle_errors
def priorities(console: ConsoleContext) -> None:
    emit_models(console.jira.get_priorities())
