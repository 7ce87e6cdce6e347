"""Module for Jira reports computed from search results."""

import json
import logging
from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import Union

from ..models.jira import (
    ExecutiveSummary,
    JiraIssue,
    JiraSprint,
    ReportType,
    SprintReport,
    TeamDashboard,
    TeamMemberWorkload,
)
from ..models.constants import UNASSIGNED
from ..rest import Failure, payload_or
from ..utils import quote_query_value
from .search import SearchMixin

logger = logging.getLogger("atlassian-console.jira")

# Single page of issues analysed per report
REPORT_PAGE_SIZE = 100

EXPORT_FORMATS = ("text", "json")

REPORT_TYPES: tuple[ReportType, ...] = (
    ReportType(
        id="sprint",
        name="Sprint Report",
        description="Planned, completed and remaining story points of a sprint",
        required_parameters=["sprint_id"],
    ),
    ReportType(
        id="team",
        name="Team Dashboard",
        description="Team workload and status/priority distribution",
        required_parameters=["project_key"],
    ),
    ReportType(
        id="executive",
        name="Executive Summary",
        description="High-level project status",
        required_parameters=["project_key"],
    ),
)

Report = Union[SprintReport, TeamDashboard, ExecutiveSummary]


def _sum_points(issues: list[JiraIssue]) -> float:
    return sum(issue.story_points for issue in issues if issue.story_points is not None)


class ReportingMixin(SearchMixin):
    """Mixin for sprint, team and executive reports.

    Story points come from the configured estimation field; issues without
    an estimate count towards issue totals but add no points.
    """

    def _report_issues(self, jql: str) -> list[JiraIssue] | None:
        result = self.search_issues(jql, max_results=REPORT_PAGE_SIZE)
        if result is None:
            return None
        if not result.is_last:
            logger.warning(
                f"Report limited to the first {len(result.issues)} issues of {jql!r}"
            )
        return result.issues

    def _get_sprint(self, sprint_id: str) -> JiraSprint | None:
        outcome = self.agile.get(f"sprint/{sprint_id}", decoder=JiraSprint.decode)
        if isinstance(outcome, Failure):
            logger.debug(f"Sprint details unavailable for {sprint_id}: {outcome}")
            return None
        return payload_or(outcome)

    def generate_sprint_report(self, sprint_id: str) -> SprintReport | None:
        """
        Summarise the story points of a sprint.

        Args:
            sprint_id: Numeric sprint id or sprint name

        Returns:
            The report, or None if the sprint issues could not be fetched

        Raises:
            ValueError: If the sprint id is empty
        """
        sprint_id = self._require(sprint_id, "Sprint ID")
        logger.debug(f"Generating sprint report for sprint: {sprint_id}")

        sprint_clause = (
            sprint_id if sprint_id.isdigit() else quote_query_value(sprint_id)
        )
        issues = self._report_issues(f"sprint = {sprint_clause}")
        if issues is None:
            return None

        sprint = self._get_sprint(sprint_id) if sprint_id.isdigit() else None
        completed = [issue for issue in issues if issue.is_done]
        incomplete = [issue for issue in issues if not issue.is_done]

        report = SprintReport(
            sprint_id=sprint_id,
            sprint_name=sprint.name if sprint else f"Sprint {sprint_id}",
            state=sprint.state if sprint else "",
            start_date=sprint.start_date if sprint else "",
            end_date=sprint.end_date if sprint else "",
            planned_points=_sum_points(issues),
            completed_points=_sum_points(completed),
            remaining_points=_sum_points(incomplete),
            unestimated_issues=sum(1 for i in issues if i.story_points is None),
            completed_issues=completed,
            incomplete_issues=incomplete,
        )
        logger.info(
            f"Sprint report generated for {sprint_id}. "
            f"Completed: {len(completed)}, Incomplete: {len(incomplete)}"
        )
        return report

    def generate_team_dashboard(self, project_key: str) -> TeamDashboard | None:
        """
        Break a project's issues down by assignee, status and priority.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        logger.info(f"Generating team dashboard for project: {project_key}")

        issues = self._report_issues(f"project = {quote_query_value(project_key)}")
        if issues is None:
            return None

        by_assignee: dict[str, list[JiraIssue]] = defaultdict(list)
        for issue in issues:
            name = issue.assignee.display_name if issue.assignee else UNASSIGNED
            by_assignee[name].append(issue)

        workloads = [
            TeamMemberWorkload(
                user_name=name,
                open_tickets=sum(1 for i in assigned if not i.is_done),
                in_progress_tickets=sum(
                    1 for i in assigned if i.status and i.status.is_in_progress
                ),
                completed_tickets=sum(1 for i in assigned if i.is_done),
                total_points=_sum_points(assigned),
            )
            for name, assigned in by_assignee.items()
        ]

        status_counts = Counter(i.status.name if i.status else "" for i in issues)
        priority_counts = Counter(i.priority.name if i.priority else "" for i in issues)

        return TeamDashboard(
            project_key=project_key,
            total_issues=len(issues),
            team_workloads=workloads,
            status_distribution=dict(status_counts.most_common()),
            priority_distribution=dict(priority_counts.most_common()),
        )

    def generate_executive_summary(self, project_key: str) -> ExecutiveSummary | None:
        """
        Summarise completion of a project for stakeholders.

        Raises:
            ValueError: If the project key is empty
        """
        project_key = self._require(project_key, "Project key")
        logger.info(f"Generating executive summary for project: {project_key}")

        issues = self._report_issues(f"project = {quote_query_value(project_key)}")
        if issues is None:
            return None

        total = len(issues)
        completed = [i for i in issues if i.is_done]
        in_progress = sum(
            1 for i in issues if not i.is_done and i.status and i.status.is_in_progress
        )
        open_count = total - len(completed) - in_progress
        completion = round(len(completed) / total * 100, 2) if total else 0.0

        risks = [
            "High number of open tickets"
            if open_count > in_progress
            else "Manageable backlog",
            "Low completion rate needs attention"
            if completion < 50
            else "Good progress rate",
        ]

        summary = ExecutiveSummary(
            project_key=project_key,
            report_date=datetime.now(timezone.utc),
            total_issues=total,
            completed_issues=len(completed),
            in_progress_issues=in_progress,
            open_issues=open_count,
            completion_percentage=completion,
            total_points=_sum_points(issues),
            completed_points=_sum_points(completed),
            key_achievements=[
                f"Completed {len(completed)} tickets",
                f"Achieved {completion:.1f}% completion rate",
            ],
            risks=risks,
        )
        logger.info(
            f"Executive summary generated for {project_key}. Completion: {completion}%"
        )
        return summary

    def get_report_types(self) -> list[ReportType]:
        return list(REPORT_TYPES)

    def export_report(self, report: Report, fmt: str = "text") -> str:
        """
        Render a report for saving or printing.

        Args:
            report: A report produced by one of the ``generate_*`` methods
            fmt: ``text`` or ``json``

        Returns:
            The rendered report

        Raises:
            ValueError: If the format is not supported
        """
        fmt = fmt.lower()
        if fmt not in EXPORT_FORMATS:
            error_msg = (
                f"Unsupported export format {fmt!r}; choose one of "
                f"{', '.join(EXPORT_FORMATS)}"
            )
            raise ValueError(error_msg)

        if fmt == "json":
            return json.dumps(report.to_simplified_dict(), indent=2, default=str)

        generated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        header = f"Jira {type(report).__name__} export\nGenerated: {generated} UTC\n\n"
        return header + report.render_text()
