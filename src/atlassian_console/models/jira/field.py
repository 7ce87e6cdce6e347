"""
Jira field metadata models.
"""

from typing import Any, ClassVar

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN


class JiraField(ApiModel):
    """
    Model representing a system or custom field definition from ``GET /field``.
    """

    required_keys: ClassVar[tuple[str, ...]] = ("id",)

    id: str = EMPTY_STRING
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    custom: bool = False
    schema_type: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraField":
        if not data or not isinstance(data, dict):
            return cls()

        schema = data.get("schema")
        return cls(
            id=str(data.get("id") or EMPTY_STRING),
            key=str(data.get("key") or data.get("id") or EMPTY_STRING),
            name=str(data.get("name") or UNKNOWN),
            custom=bool(data.get("custom", False)),
            schema_type=schema.get("type") if isinstance(schema, dict) else None,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "custom": self.custom,
            "type": self.schema_type,
        }
