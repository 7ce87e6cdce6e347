"""
Jira Software (agile) models.
"""

import logging
from typing import Any, ClassVar

from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN

logger = logging.getLogger(__name__)


class JiraSprint(ApiModel, TimestampMixin):
    """
    Model representing a sprint from ``GET /rest/agile/1.0/sprint/{id}``.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("id",)

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    state: str = UNKNOWN
    start_date: str = EMPTY_STRING
    end_date: str = EMPTY_STRING
    goal: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraSprint":
        if not data or not isinstance(data, dict):
            return cls()

        sprint_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if sprint_id is None else str(sprint_id),
            name=str(data.get("name") or UNKNOWN),
            state=str(data.get("state") or UNKNOWN),
            start_date=str(data.get("startDate") or EMPTY_STRING),
            end_date=str(data.get("endDate") or EMPTY_STRING),
            goal=str(data.get("goal") or EMPTY_STRING),
        )
