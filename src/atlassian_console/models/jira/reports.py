"""
Jira reporting and catalogue models.

Reports are computed locally from search results; nothing here is read
from a single API response, so these models have no ``from_api_response``.
Each report can render itself as plain text for the console and for
text exports.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from ..constants import EMPTY_STRING
from .issue import JiraIssue


def _points(value: float) -> str:
    return f"{value:g}"


class SprintReport(BaseModel):
    """Progress of one sprint, measured in estimated story points."""

    sprint_id: str
    sprint_name: str
    state: str = EMPTY_STRING
    start_date: str = EMPTY_STRING
    end_date: str = EMPTY_STRING
    planned_points: float = 0.0
    completed_points: float = 0.0
    remaining_points: float = 0.0
    unestimated_issues: int = 0
    completed_issues: list[JiraIssue] = Field(default_factory=list)
    incomplete_issues: list[JiraIssue] = Field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.completed_issues) + len(self.incomplete_issues)

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "sprint_id": self.sprint_id,
            "sprint_name": self.sprint_name,
            "state": self.state,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "planned_points": self.planned_points,
            "completed_points": self.completed_points,
            "remaining_points": self.remaining_points,
            "unestimated_issues": self.unestimated_issues,
            "completed_issues": [i.key for i in self.completed_issues],
            "incomplete_issues": [i.key for i in self.incomplete_issues],
        }

    def render_text(self) -> str:
        lines = [
            f"Sprint: {self.sprint_name} ({self.sprint_id})",
        ]
        if self.state:
            lines.append(f"State: {self.state}")
        if self.start_date or self.end_date:
            lines.append(f"Dates: {self.start_date or '?'} -> {self.end_date or '?'}")
        lines += [
            f"Planned points: {_points(self.planned_points)}",
            f"Completed points: {_points(self.completed_points)}",
            f"Remaining points: {_points(self.remaining_points)}",
            f"Issues without estimate: {self.unestimated_issues}",
            f"Completed issues ({len(self.completed_issues)}):",
        ]
        lines += [f"  {i.key} {i.summary}" for i in self.completed_issues]
        lines.append(f"Incomplete issues ({len(self.incomplete_issues)}):")
        lines += [f"  {i.key} {i.summary}" for i in self.incomplete_issues]
        return "\n".join(lines)


class TeamMemberWorkload(BaseModel):
    user_name: str
    open_tickets: int = 0
    in_progress_tickets: int = 0
    completed_tickets: int = 0
    total_points: float = 0.0


class TeamDashboard(BaseModel):
    """Workload per assignee plus status and priority distributions."""

    project_key: str
    total_issues: int = 0
    team_workloads: list[TeamMemberWorkload] = Field(default_factory=list)
    status_distribution: dict[str, int] = Field(default_factory=dict)
    priority_distribution: dict[str, int] = Field(default_factory=dict)

    def to_simplified_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def render_text(self) -> str:
        lines = [
            f"Team dashboard: {self.project_key}",
            f"Issues analysed: {self.total_issues}",
            "Workload:",
        ]
        for w in self.team_workloads:
            lines.append(
                f"  {w.user_name}: open {w.open_tickets}, "
                f"in progress {w.in_progress_tickets}, "
                f"done {w.completed_tickets}, points {_points(w.total_points)}"
            )
        lines.append("Status distribution:")
        lines += [f"  {k}: {v}" for k, v in self.status_distribution.items()]
        lines.append("Priority distribution:")
        lines += [f"  {k}: {v}" for k, v in self.priority_distribution.items()]
        return "\n".join(lines)


class ExecutiveSummary(BaseModel):
    """High-level completion figures for one project."""

    project_key: str
    report_date: datetime
    total_issues: int = 0
    completed_issues: int = 0
    in_progress_issues: int = 0
    open_issues: int = 0
    completion_percentage: float = 0.0
    total_points: float = 0.0
    completed_points: float = 0.0
    key_achievements: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)

    def to_simplified_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def render_text(self) -> str:
        lines = [
            f"Executive summary: {self.project_key}",
            f"Report date: {self.report_date:%Y-%m-%d %H:%M}",
            f"Total issues: {self.total_issues}",
            f"Completed: {self.completed_issues}",
            f"In progress: {self.in_progress_issues}",
            f"Open: {self.open_issues}",
            f"Completion: {self.completion_percentage:.1f}%",
            f"Story points: {_points(self.completed_points)} of "
            f"{_points(self.total_points)} done",
            "Key achievements:",
        ]
        lines += [f"  - {a}" for a in self.key_achievements]
        lines.append("Risks:")
        lines += [f"  - {r}" for r in self.risks]
        return "\n".join(lines)


class ReportType(BaseModel):
    id: str
    name: str
    description: str
    required_parameters: list[str] = Field(default_factory=list)


class BulkUpdateResult(BaseModel):
    """Outcome of applying the same field update to several issues."""

    total_tickets: int = 0
    successful_updates: int = 0
    failed_updates: int = 0
    failed_ticket_keys: list[str] = Field(default_factory=list)
    error_messages: list[str] = Field(default_factory=list)

    def record_failure(self, key: str, message: str) -> None:
        self.failed_updates += 1
        self.failed_ticket_keys.append(key)
        self.error_messages.append(message)


class CommentTemplate(BaseModel):
    name: str
    template: str
    category: str


class SmartFilter(BaseModel):
    name: str
    description: str
    jql: str
    category: str


class SavedSearch(BaseModel):
    """A JQL query saved under a name for the lifetime of its store."""

    id: str
    name: str
    jql: str
    description: str = EMPTY_STRING
    created: datetime
    is_shared: bool = False
