"""Tests for the Jira models."""

from datetime import date, datetime, timezone

import pytest

from atlassian_console.models.jira import (
    AddCommentRequest,
    AdvancedSearchRequest,
    BulkUpdateResult,
    CreateIssueRequest,
    ExecutiveSummary,
    JiraComment,
    JiraField,
    JiraIssue,
    JiraIssueType,
    JiraProject,
    JiraSearchResult,
    JiraSprint,
    JiraStatus,
    JiraTransition,
    JiraUser,
    SprintReport,
    TeamDashboard,
    TeamMemberWorkload,
    TransitionIssueRequest,
    UpdateFieldsRequest,
    UpdateIssueRequest,
)
from atlassian_console.preprocessing import text_to_adf


class TestJiraUser:
    def test_from_api_response(self):
        user = JiraUser.from_api_response(
            {
                "accountId": "abc",
                "displayName": "Ann Lee",
                "emailAddress": "ann@example.com",
                "active": False,
                "timeZone": "Europe/Berlin",
            }
        )

        assert user.account_id == "abc"
        assert user.display_name == "Ann Lee"
        assert user.email == "ann@example.com"
        assert user.active is False
        assert user.time_zone == "Europe/Berlin"

    def test_decode_requires_account_id(self):
        with pytest.raises(KeyError):
            JiraUser.decode({"displayName": "No Id"})

    def test_empty_data(self):
        user = JiraUser.from_api_response({})

        assert user.account_id is None
        assert user.display_name == "Unassigned"


class TestJiraStatus:
    @pytest.mark.parametrize(
        ("data", "done", "in_progress"),
        [
            ({"name": "Done", "statusCategory": {"key": "done"}}, True, False),
            ({"name": "Closed", "statusCategory": {"key": "done"}}, True, False),
            ({"name": "Resolved", "statusCategory": {"key": "indeterminate"}}, True, True),
            ({"name": "In Review", "statusCategory": {"key": "indeterminate"}}, False, True),
            ({"name": "To Do", "statusCategory": {"key": "new"}}, False, False),
            ({"name": "In Progress"}, False, True),
            ({"name": "resolved"}, True, False),
        ],
    )
    def test_done_and_in_progress(self, data, done, in_progress):
        status = JiraStatus.from_api_response(data)

        assert status.is_done is done
        assert status.is_in_progress is in_progress


class TestJiraIssue:
    def test_from_api_response(self, jira_issue_data):
        issue = JiraIssue.from_api_response(jira_issue_data)

        assert issue.id == "10000"
        assert issue.key == "TEST-1"
        assert issue.summary == "Test Issue"
        assert issue.description == "About TEST-1"
        assert issue.status.name == "To Do"
        assert issue.issue_type.name == "Story"
        assert issue.priority.name == "Medium"
        assert issue.assignee.display_name == "Ann Lee"
        assert issue.labels == ["backend"]
        assert issue.story_points == 5.0
        assert issue.custom_fields == {"customfield_10016": 5}
        assert not issue.is_done

    def test_plain_string_description(self, jira_issue_data):
        jira_issue_data["fields"]["description"] = "Legacy text"

        assert JiraIssue.from_api_response(jira_issue_data).description == "Legacy text"

    def test_null_description(self, jira_issue_data):
        jira_issue_data["fields"]["description"] = None

        assert JiraIssue.from_api_response(jira_issue_data).description == ""

    def test_custom_story_points_field(self, jira_issue_data):
        jira_issue_data["fields"]["customfield_10028"] = 8

        issue = JiraIssue.from_api_response(
            jira_issue_data, story_points_field="customfield_10028"
        )

        assert issue.story_points == 8.0

    @pytest.mark.parametrize("value", [None, "lots", True, {"value": 3}])
    def test_non_numeric_story_points(self, make_issue, value):
        issue = JiraIssue.from_api_response(make_issue(points=value))

        assert issue.story_points is None

    def test_decode_requires_key(self):
        with pytest.raises(KeyError):
            JiraIssue.decode({"id": "1", "fields": {}})

    def test_decode_rejects_list(self):
        with pytest.raises(TypeError):
            JiraIssue.decode([])

    def test_created_response_has_only_id_and_key(self):
        issue = JiraIssue.decode({"id": "10001", "key": "TEST-2", "self": "https://x"})

        assert issue.key == "TEST-2"
        assert issue.summary == ""

    def test_field_values(self, jira_issue_data):
        values = JiraIssue.from_api_response(jira_issue_data).field_values()

        assert values["summary"] == "Test Issue"
        assert values["assignee"] == "Ann Lee"
        assert values["status"] == "To Do"
        assert values["story_points"] == 5.0
        assert values["created"] == "2024-01-15 10:30:00"

    def test_to_simplified_dict(self, make_issue):
        result = JiraIssue.from_api_response(make_issue()).to_simplified_dict()

        assert result["key"] == "TEST-1"
        assert result["status"] == {"name": "To Do", "category": "To Do"}
        assert result["assignee"] == "Unassigned"
        assert "story_points" not in result


class TestJiraComment:
    def test_from_api_response_decodes_adf_body(self, jira_comment_data):
        comment = JiraComment.from_api_response(jira_comment_data)

        assert comment.id == "10100"
        assert comment.body == "First\nSecond"
        assert comment.author.display_name == "Ann Lee"

    def test_decode_page(self, jira_comment_data):
        comments = JiraComment.decode_page(
            {"comments": [jira_comment_data], "total": 1}
        )

        assert len(comments) == 1

    def test_decode_page_requires_comments(self):
        with pytest.raises(KeyError):
            JiraComment.decode_page({"total": 0})

    def test_to_simplified_dict(self, jira_comment_data):
        result = JiraComment.from_api_response(jira_comment_data).to_simplified_dict()

        assert result["created"] == "2024-01-15 10:30:00"
        assert result["author"] == "Ann Lee"


class TestJiraTransition:
    def test_decode_page(self):
        transitions = JiraTransition.decode_page(
            {
                "transitions": [
                    {
                        "id": "31",
                        "name": "Done",
                        "to": {"id": "3", "name": "Done"},
                        "hasScreen": False,
                    }
                ]
            }
        )

        assert transitions[0].id == "31"
        assert transitions[0].to_status.name == "Done"
        assert transitions[0].to_simplified_dict() == {
            "id": "31",
            "name": "Done",
            "to_status": "Done",
        }

    def test_decode_page_rejects_list(self):
        with pytest.raises(TypeError):
            JiraTransition.decode_page([])


class TestJiraSearchResult:
    def test_from_api_response(self, make_issue):
        result = JiraSearchResult.decode(
            {
                "issues": [make_issue("TEST-1"), make_issue("TEST-2")],
                "isLast": False,
                "nextPageToken": "abc",
            },
            jql="project = TEST",
        )

        assert [i.key for i in result.issues] == ["TEST-1", "TEST-2"]
        assert result.total == 2
        assert result.is_last is False
        assert result.next_page_token == "abc"
        assert result.jql == "project = TEST"

    def test_explicit_total(self, make_issue):
        result = JiraSearchResult.decode({"issues": [make_issue()], "total": 40})

        assert result.total == 40

    def test_decode_requires_issues(self):
        with pytest.raises(KeyError):
            JiraSearchResult.decode({"total": 0})


class TestSmallModels:
    def test_project(self):
        project = JiraProject.decode(
            {
                "id": "10000",
                "key": "TEST",
                "name": "Test Project",
                "projectTypeKey": "software",
                "lead": {"accountId": "abc", "displayName": "Ann Lee"},
            }
        )

        assert project.to_simplified_dict() == {
            "key": "TEST",
            "name": "Test Project",
            "type": "software",
            "lead": "Ann Lee",
        }

    def test_issue_type(self):
        issue_type = JiraIssueType.from_api_response(
            {"id": "10002", "name": "Sub-task", "subtask": True}
        )

        assert issue_type.to_simplified_dict() == {
            "id": "10002",
            "name": "Sub-task",
            "subtask": True,
        }

    def test_field(self):
        field = JiraField.decode(
            {
                "id": "customfield_10016",
                "name": "Story Points",
                "custom": True,
                "schema": {"type": "number"},
            }
        )

        assert field.key == "customfield_10016"
        assert field.custom is True
        assert field.schema_type == "number"

    def test_sprint(self):
        sprint = JiraSprint.decode(
            {"id": 7, "name": "Sprint 7", "state": "active", "startDate": "2024-01-01"}
        )

        assert sprint.id == "7"
        assert sprint.state == "active"
        assert sprint.end_date == ""


class TestRequests:
    def test_create_issue_payload(self):
        request = CreateIssueRequest(
            project_key="TEST",
            summary="New",
            issue_type_id="10001",
            description="Body",
            assignee_id="abc",
        )

        assert request.to_api_payload() == {
            "fields": {
                "project": {"key": "TEST"},
                "summary": "New",
                "description": text_to_adf("Body"),
                "issuetype": {"id": "10001"},
                "priority": {"name": "Medium"},
                "assignee": {"id": "abc"},
            }
        }

    def test_update_issue_payload_skips_blank_fields(self):
        request = UpdateIssueRequest(summary="New title", description="  ")

        assert request.to_api_payload() == {"fields": {"summary": "New title"}}
        assert not request.is_empty
        assert UpdateIssueRequest().is_empty

    def test_transition_payload_with_comment(self):
        payload = TransitionIssueRequest(transition_id="31", comment="Done!").to_api_payload()

        assert payload == {
            "transition": {"id": "31"},
            "update": {"comment": [{"add": {"body": text_to_adf("Done!")}}]},
        }

    def test_transition_payload_without_comment(self):
        assert TransitionIssueRequest(transition_id="31").to_api_payload() == {
            "transition": {"id": "31"}
        }

    def test_update_fields_payload(self):
        request = UpdateFieldsRequest(
            priority_id="2",
            due_date=date(2024, 3, 1),
            custom_fields={"customfield_10016": 3, "summary": "Overridden"},
            summary="Original",
        )

        assert request.to_api_payload() == {
            "fields": {
                "summary": "Overridden",
                "priority": {"id": "2"},
                "duedate": "2024-03-01",
                "customfield_10016": 3,
            }
        }

    def test_add_comment_mentions(self):
        request = AddCommentRequest(body="please check", mentioned_users=["ann", "bob"])

        assert request.rendered_body() == "@bob @ann please check"
        assert request.to_api_payload() == {
            "body": text_to_adf("@bob @ann please check")
        }

    def test_add_comment_existing_mention_not_duplicated(self):
        request = AddCommentRequest(body="@ann please check", mentioned_users=["ann"])

        assert request.rendered_body() == "@ann please check"

    def test_advanced_search_order_by(self):
        request = AdvancedSearchRequest(jql="project = TEST", order_by="created DESC")

        assert request.effective_jql() == "project = TEST ORDER BY created DESC"

    def test_advanced_search_keeps_existing_order_by(self):
        request = AdvancedSearchRequest(
            jql="project = TEST order by updated", order_by="created DESC"
        )

        assert request.effective_jql() == "project = TEST order by updated"


class TestReports:
    def test_sprint_report_text_and_dict(self, make_issue):
        done = JiraIssue.from_api_response(make_issue("TEST-1", status="Done"))
        todo = JiraIssue.from_api_response(make_issue("TEST-2"))
        report = SprintReport(
            sprint_id="7",
            sprint_name="Sprint 7",
            planned_points=8,
            completed_points=5,
            remaining_points=3,
            completed_issues=[done],
            incomplete_issues=[todo],
        )

        assert report.total_issues == 2
        assert report.to_simplified_dict()["completed_issues"] == ["TEST-1"]
        text = report.render_text()
        assert "Sprint: Sprint 7 (7)" in text
        assert "Planned points: 8" in text
        assert "  TEST-2 Test Issue" in text

    def test_team_dashboard_text(self):
        dashboard = TeamDashboard(
            project_key="TEST",
            total_issues=1,
            team_workloads=[TeamMemberWorkload(user_name="Ann", open_tickets=1)],
            status_distribution={"To Do": 1},
        )

        text = dashboard.render_text()

        assert "Ann: open 1, in progress 0, done 0, points 0" in text
        assert "  To Do: 1" in text

    def test_executive_summary_dict_is_json_ready(self):
        summary = ExecutiveSummary(
            project_key="TEST",
            report_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            completion_percentage=33.33,
        )

        assert summary.to_simplified_dict()["report_date"] == "2024-01-01T00:00:00Z"
        assert "Completion: 33.3%" in summary.render_text()

    def test_bulk_update_record_failure(self):
        result = BulkUpdateResult(total_tickets=2)

        result.record_failure("TEST-1", "boom")

        assert result.failed_updates == 1
        assert result.failed_ticket_keys == ["TEST-1"]
        assert result.error_messages == ["boom"]
