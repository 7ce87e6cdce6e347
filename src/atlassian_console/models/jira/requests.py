"""
Write-side request models for the Jira REST API.

Each request knows how to render itself as the JSON payload the endpoint
expects via ``to_api_payload``. Optional fields left blank are omitted so an
update never clears a value by accident.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from ...preprocessing import text_to_adf
from ...utils import format_jql_date
from ..constants import JIRA_DEFAULT_NEW_PRIORITY


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


class CreateIssueRequest(BaseModel):
    """Payload for ``POST /issue``."""

    project_key: str
    summary: str
    issue_type_id: str
    description: str = ""
    priority: str = JIRA_DEFAULT_NEW_PRIORITY
    assignee_id: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "summary": self.summary,
            "description": text_to_adf(self.description),
            "issuetype": {"id": self.issue_type_id},
            "priority": {"name": self.priority},
        }
        if _present(self.assignee_id):
            fields["assignee"] = {"id": self.assignee_id}
        return {"fields": fields}


class UpdateIssueRequest(BaseModel):
    """Payload for ``PUT /issue/{key}`` covering the basic editable fields."""

    summary: str | None = None
    description: str | None = None
    priority: str | None = None
    assignee_id: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if _present(self.summary):
            fields["summary"] = self.summary
        if _present(self.description):
            fields["description"] = text_to_adf(self.description)
        if _present(self.priority):
            fields["priority"] = {"name": self.priority}
        if _present(self.assignee_id):
            fields["assignee"] = {"id": self.assignee_id}
        return {"fields": fields}

    @property
    def is_empty(self) -> bool:
        return not self.to_api_payload()["fields"]


class TransitionIssueRequest(BaseModel):
    """Payload for ``POST /issue/{key}/transitions``, optionally with a comment."""

    transition_id: str
    comment: str | None = None

    def to_api_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"transition": {"id": self.transition_id}}
        if _present(self.comment):
            payload["update"] = {
                "comment": [{"add": {"body": text_to_adf(self.comment)}}]
            }
        return payload


class UpdateFieldsRequest(BaseModel):
    """
    Payload for ``PUT /issue/{key}`` covering any field, custom ones included.

    ``custom_fields`` maps field ids (``customfield_10016``) to raw values and
    is merged last, so it can override the named fields.
    """

    summary: str | None = None
    description: str | None = None
    assignee_id: str | None = None
    priority_id: str | None = None
    due_date: date | None = None
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    def to_api_payload(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if _present(self.summary):
            fields["summary"] = self.summary
        if _present(self.description):
            fields["description"] = text_to_adf(self.description)
        if _present(self.assignee_id):
            fields["assignee"] = {"id": self.assignee_id}
        if _present(self.priority_id):
            fields["priority"] = {"id": self.priority_id}
        if self.due_date is not None:
            fields["duedate"] = format_jql_date(self.due_date)
        fields.update(self.custom_fields)
        return {"fields": fields}

    @property
    def is_empty(self) -> bool:
        return not self.to_api_payload()["fields"]


class AddCommentRequest(BaseModel):
    """Payload for ``POST /issue/{key}/comment``."""

    body: str
    notify_users: bool = True
    mentioned_users: list[str] = Field(default_factory=list)

    def rendered_body(self) -> str:
        """Body text with every mentioned user prefixed as ``@user``."""
        text = self.body
        for user in self.mentioned_users:
            if f"@{user}" not in text:
                text = f"@{user} {text}"
        return text

    def to_api_payload(self) -> dict[str, Any]:
        return {"body": text_to_adf(self.rendered_body())}


class JqlBuilderRequest(BaseModel):
    """
    Filter criteria turned into a JQL string.

    ``assignee`` accepts an account id or one of the special values
    ``currentUser`` and ``unassigned`` (case-insensitive).
    """

    project_key: str | None = None
    assignee: str | None = None
    status: str | None = None
    priority: str | None = None
    issue_type: str | None = None
    created_after: date | None = None
    created_before: date | None = None
    updated_after: date | None = None
    updated_before: date | None = None
    labels: list[str] = Field(default_factory=list)
    text_search: str | None = None


class AdvancedSearchRequest(BaseModel):
    """A JQL search with explicit page size, field list and ordering."""

    jql: str
    max_results: int = 50
    fields: list[str] = Field(default_factory=list)
    order_by: str | None = None

    def effective_jql(self) -> str:
        if not _present(self.order_by) or "order by" in self.jql.lower():
            return self.jql
        return f"{self.jql} ORDER BY {self.order_by}"


class SaveSearchRequest(BaseModel):
    """A named JQL query to keep for the rest of the session."""

    name: str
    jql: str
    description: str = ""
    is_shared: bool = False
