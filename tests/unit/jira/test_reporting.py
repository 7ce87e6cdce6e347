"""Tests for the Jira Reporting mixin."""

import json

import pytest

from atlassian_console.models.constants import UNASSIGNED


@pytest.fixture
def sprint_issues(make_issue):
    return {
        "issues": [
            make_issue("TEST-1", status="Done", category="done", points=5, assignee="Ann Lee"),
            make_issue(
                "TEST-2",
                status="In Progress",
                category="indeterminate",
                points=3,
                assignee="Ann Lee",
            ),
            make_issue("TEST-3", status="To Do", category="new"),
        ],
        "isLast": True,
    }


SPRINT = {
    "id": 7,
    "name": "Sprint 7",
    "state": "active",
    "startDate": "2024-01-01T09:00:00.000Z",
    "endDate": "2024-01-14T17:00:00.000Z",
}


class TestSprintReport:
    def test_generate_sprint_report(self, jira_fetcher, make_response, sprint_issues):
        jira_fetcher.jira.request.side_effect = [
            make_response(200, sprint_issues),
            make_response(200, SPRINT),
        ]

        report = jira_fetcher.generate_sprint_report("7")

        calls = jira_fetcher.jira.request.call_args_list
        assert calls[0].kwargs["params"]["jql"] == "sprint = 7"
        assert calls[0].kwargs["params"]["maxResults"] == 100
        assert calls[1].kwargs["path"] == "rest/agile/1.0/sprint/7"
        assert report.sprint_name == "Sprint 7"
        assert report.state == "active"
        assert report.planned_points == 8
        assert report.completed_points == 5
        assert report.remaining_points == 3
        assert report.unestimated_issues == 1
        assert [i.key for i in report.completed_issues] == ["TEST-1"]
        assert [i.key for i in report.incomplete_issues] == ["TEST-2", "TEST-3"]

    def test_sprint_details_unavailable(self, jira_fetcher, make_response, sprint_issues):
        jira_fetcher.jira.request.side_effect = [
            make_response(200, sprint_issues),
            make_response(404, text=""),
        ]

        report = jira_fetcher.generate_sprint_report("7")

        assert report.sprint_name == "Sprint 7"
        assert report.state == ""

    def test_sprint_by_name(self, jira_fetcher, make_response):
        jira_fetcher.jira.request.return_value = make_response(200, {"issues": []})

        report = jira_fetcher.generate_sprint_report("Release 1")

        jira_fetcher.jira.request.assert_called_once()
        params = jira_fetcher.jira.request.call_args.kwargs["params"]
        assert params["jql"] == 'sprint = "Release 1"'
        assert report.sprint_name == "Sprint Release 1"
        assert report.planned_points == 0

    def test_search_failure(self, jira_fetcher, make_response):
        jira_fetcher.jira.request.return_value = make_response(500, text="error")

        assert jira_fetcher.generate_sprint_report("7") is None

    def test_empty_sprint_id(self, jira_fetcher):
        with pytest.raises(ValueError):
            jira_fetcher.generate_sprint_report("")


class TestTeamDashboard:
    def test_generate_team_dashboard(self, jira_fetcher, make_response, sprint_issues):
        jira_fetcher.jira.request.return_value = make_response(200, sprint_issues)

        dashboard = jira_fetcher.generate_team_dashboard("TEST")

        params = jira_fetcher.jira.request.call_args.kwargs["params"]
        assert params["jql"] == 'project = "TEST"'
        assert dashboard.total_issues == 3

        workloads = {w.user_name: w for w in dashboard.team_workloads}
        assert set(workloads) == {"Ann Lee", UNASSIGNED}
        ann = workloads["Ann Lee"]
        assert (ann.open_tickets, ann.in_progress_tickets, ann.completed_tickets) == (
            1,
            1,
            1,
        )
        assert ann.total_points == 8
        assert workloads[UNASSIGNED].open_tickets == 1

        assert dashboard.status_distribution == {
            "Done": 1,
            "In Progress": 1,
            "To Do": 1,
        }
        assert dashboard.priority_distribution == {"Medium": 3}


class TestExecutiveSummary:
    def test_generate_executive_summary(self, jira_fetcher, make_response, sprint_issues):
        jira_fetcher.jira.request.return_value = make_response(200, sprint_issues)

        summary = jira_fetcher.generate_executive_summary("TEST")

        assert summary.total_issues == 3
        assert summary.completed_issues == 1
        assert summary.in_progress_issues == 1
        assert summary.open_issues == 1
        assert summary.completion_percentage == 33.33
        assert summary.total_points == 8
        assert summary.completed_points == 5
        assert summary.risks == [
            "Manageable backlog",
            "Low completion rate needs attention",
        ]

    def test_empty_project(self, jira_fetcher, make_response):
        jira_fetcher.jira.request.return_value = make_response(200, {"issues": []})

        summary = jira_fetcher.generate_executive_summary("TEST")

        assert summary.total_issues == 0
        assert summary.completion_percentage == 0.0


class TestExport:
    @pytest.fixture
    def report(self, jira_fetcher, make_response, sprint_issues):
        jira_fetcher.jira.request.side_effect = [
            make_response(200, sprint_issues),
            make_response(200, SPRINT),
        ]
        return jira_fetcher.generate_sprint_report("7")

    def test_report_types(self, jira_fetcher):
        assert [t.id for t in jira_fetcher.get_report_types()] == [
            "sprint",
            "team",
            "executive",
        ]

    def test_export_json(self, jira_fetcher, report):
        data = json.loads(jira_fetcher.export_report(report, "JSON"))

        assert data["sprint_id"] == "7"
        assert data["completed_issues"] == ["TEST-1"]

    def test_export_text(self, jira_fetcher, report):
        text = jira_fetcher.export_report(report)

        assert text.startswith("Jira SprintReport export\nGenerated: ")
        assert "Sprint: Sprint 7 (7)" in text
        assert "  TEST-1 Test Issue" in text

    def test_export_unsupported_format(self, jira_fetcher, report):
        with pytest.raises(ValueError, match="Unsupported export format"):
            jira_fetcher.export_report(report, "pdf")
