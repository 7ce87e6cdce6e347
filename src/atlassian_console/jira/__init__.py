"""Jira API module for atlassian_console.

This module provides the Jira client composed from per-concern mixins.
"""

# flake8: noqa

from .advanced_search import AdvancedSearchMixin
from .auth import AuthMixin
from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .reporting import ReportingMixin
from .saved_searches import SavedSearchStore
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin


class JiraFetcher(
    AuthMixin,
    ReportingMixin,
    AdvancedSearchMixin,
    SearchMixin,
    FieldsMixin,
    IssuesMixin,
    TransitionsMixin,
    CommentsMixin,
    UsersMixin,
    ProjectsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - AuthMixin: Current user and connection checks
    - ReportingMixin: Sprint, team and executive reports
    - AdvancedSearchMixin: JQL building, saved searches and smart filters
    - SearchMixin: Search operations
    - FieldsMixin: Field updates and bulk updates
    - IssuesMixin: Issue operations
    - TransitionsMixin: Issue transition operations
    - CommentsMixin: Comment operations
    - UsersMixin: User operations
    - ProjectsMixin: Project-related operations
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient", "SavedSearchStore"]
