"""REST request/response layer used by every Jira and Confluence operation."""

from .client import RestClient, basic_auth_header, create_session
from .outcome import EmptyOk, Failure, FailureKind, Outcome, Success, payload_or

__all__ = [
    "EmptyOk",
    "Failure",
    "FailureKind",
    "Outcome",
    "RestClient",
    "Success",
    "basic_auth_header",
    "create_session",
    "payload_or",
]
