"""Report commands."""

import click

from ..jira.reporting import EXPORT_FORMATS
from .context import ConsoleContext, emit, handle_errors, pass_console, require_result

format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(EXPORT_FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
)
output_option = click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the report to a file instead of stdout",
)


def _write(console: ConsoleContext, report, fmt: str, output: str | None) -> None:
    rendered = console.jira.export_report(report, fmt)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(rendered)
        click.echo(f"Report written to {output}")
    else:
        click.echo(rendered)


@click.group("report")
def report_group() -> None:
    """Sprint, team and executive reports."""


@report_group.command("sprint")
@click.argument("sprint_id")
@format_option
@output_option
@pass_console
@handle_errors
def sprint_report(
    console: ConsoleContext, sprint_id: str, fmt: str, output: str | None
) -> None:
    """Story points planned, completed and remaining in a sprint."""
    report = require_result(
        console.jira.generate_sprint_report(sprint_id),
        f"Failed to generate report for sprint {sprint_id}",
    )
    _write(console, report, fmt, output)


@report_group.command("team")
@click.argument("project_key", required=False)
@format_option
@output_option
@pass_console
@handle_errors
def team_dashboard(
    console: ConsoleContext, project_key: str | None, fmt: str, output: str | None
) -> None:
    """Workload per assignee with status and priority breakdowns."""
    key = console.project_key(project_key)
    report = require_result(
        console.jira.generate_team_dashboard(key),
        f"Failed to generate team dashboard for {key}",
    )
    _write(console, report, fmt, output)


@report_group.command("executive")
@click.argument("project_key", required=False)
@format_option
@output_option
@pass_console
@handle_errors
def executive_summary(
    console: ConsoleContext, project_key: str | None, fmt: str, output: str | None
) -> None:
    """Completion summary of a project."""
    key = console.project_key(project_key)
    report = require_result(
        console.jira.generate_executive_summary(key),
        f"Failed to generate executive summary for {key}",
    )
    _write(console, report, fmt, output)


@report_group.command("types")
@pass_console
def report_types(console: ConsoleContext) -> None:
    emit([t.model_dump() for t in console.jira.get_report_types()])
