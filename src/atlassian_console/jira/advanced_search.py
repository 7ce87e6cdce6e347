"""Module for JQL building, saved searches and smart filters."""

import logging
import time

from ..models.jira import (
    AdvancedSearchRequest,
    JiraSearchResult,
    JqlBuilderRequest,
    SavedSearch,
    SaveSearchRequest,
    SmartFilter,
)
from ..utils import format_jql_date, quote_query_value
from .search import SearchMixin

logger = logging.getLogger("atlassian-console.jira")

SMART_FILTERS: tuple[SmartFilter, ...] = (
    SmartFilter(
        name="My Open Tickets",
        description="All open tickets assigned to me",
        jql="assignee = currentUser() AND status != Done",
        category="Personal",
    ),
    SmartFilter(
        name="My In Progress",
        description="My tickets currently in progress",
        jql='assignee = currentUser() AND status = "In Progress"',
        category="Personal",
    ),
    SmartFilter(
        name="Overdue Items",
        description="All overdue tickets",
        jql="duedate < now() AND status != Done",
        category="Priority",
    ),
    SmartFilter(
        name="High Priority Open",
        description="High priority open tickets",
        jql="priority = High AND status != Done",
        category="Priority",
    ),
    SmartFilter(
        name="Recently Created",
        description="Tickets created in the last 7 days",
        jql="created >= -7d",
        category="Recent",
    ),
    SmartFilter(
        name="Recently Updated",
        description="Tickets updated in the last 24 hours",
        jql="updated >= -1d",
        category="Recent",
    ),
    SmartFilter(
        name="Unassigned Tickets",
        description="All unassigned open tickets",
        jql="assignee is EMPTY AND status != Done",
        category="Management",
    ),
    SmartFilter(
        name="This Week's Work",
        description="Tickets due this week",
        jql="duedate >= startOfWeek() AND duedate <= endOfWeek()",
        category="Planning",
    ),
)


class AdvancedSearchMixin(SearchMixin):
    """Mixin for building JQL and managing saved searches."""

    def build_jql(self, request: JqlBuilderRequest) -> str:
        """
        Build a JQL query from filter criteria.

        Clauses are emitted in a fixed order and joined with ``AND``. Blank
        criteria are skipped, so an empty request yields an empty string.

        Args:
            request: The filter criteria

        Returns:
            The JQL query
        """
        clauses: list[str] = []

        if request.project_key and request.project_key.strip():
            clauses.append(f"project = {quote_query_value(request.project_key.strip())}")

        if request.assignee and request.assignee.strip():
            assignee = request.assignee.strip()
            if assignee.lower() == "currentuser":
                clauses.append("assignee = currentUser()")
            elif assignee.lower() == "unassigned":
                clauses.append("assignee is EMPTY")
            else:
                clauses.append(f"assignee = {quote_query_value(assignee)}")

        for field, value in (
            ("status", request.status),
            ("priority", request.priority),
            ("issuetype", request.issue_type),
        ):
            if value and value.strip():
                clauses.append(f"{field} = {quote_query_value(value.strip())}")

        for field, operator, value in (
            ("created", ">=", request.created_after),
            ("created", "<=", request.created_before),
            ("updated", ">=", request.updated_after),
            ("updated", "<=", request.updated_before),
        ):
            if value is not None:
                clauses.append(f'{field} {operator} "{format_jql_date(value)}"')

        labels = [label.strip() for label in request.labels if label.strip()]
        if labels:
            quoted = ",".join(quote_query_value(label) for label in labels)
            clauses.append(f"labels in ({quoted})")

        if request.text_search and request.text_search.strip():
            clauses.append(f"text ~ {quote_query_value(request.text_search.strip())}")

        jql = " AND ".join(clauses)
        logger.debug(f"Built JQL: {jql}")
        return jql

    def advanced_search(self, request: AdvancedSearchRequest) -> JiraSearchResult | None:
        """
        Run a search with explicit ordering and field selection, timing it.

        Returns:
            The result with ``search_time_ms`` set, or None if the search failed

        Raises:
            ValueError: If the JQL query is empty
        """
        self._require(request.jql, "JQL query")
        jql = request.effective_jql()

        started = time.perf_counter()
        result = self.search_issues(
            jql, max_results=request.max_results, fields=request.fields or None
        )
        elapsed_ms = (time.perf_counter() - started) * 1000

        if result is None:
            logger.warning(f"Advanced search failed after {elapsed_ms:.0f}ms")
            return None

        result.search_time_ms = elapsed_ms
        logger.info(
            f"Advanced search completed. Found {result.total} issues in {elapsed_ms:.0f}ms"
        )
        return result

    def save_search(self, request: SaveSearchRequest) -> SavedSearch:
        """
        Save a named JQL query in this client's saved-search store.

        Raises:
            ValueError: If the name or JQL query is empty
        """
        self._require(request.name, "Search name")
        self._require(request.jql, "JQL query")
        saved = self.saved_searches.add(request)
        logger.info(f"Saved search {saved.name!r} with ID {saved.id}")
        return saved

    def get_saved_searches(self) -> list[SavedSearch]:
        return self.saved_searches.list()

    def execute_saved_search(
        self, search_id: str, max_results: int | None = None
    ) -> JiraSearchResult | None:
        """
        Run a previously saved search.

        Raises:
            ValueError: If no saved search has the given id
        """
        search_id = self._require(search_id, "Search ID")
        saved = self.saved_searches.get(search_id)
        if saved is None:
            error_msg = f"Saved search with ID {search_id} not found"
            raise ValueError(error_msg)

        logger.debug(f"Executing saved search {saved.name!r}")
        return self.advanced_search(
            AdvancedSearchRequest(
                jql=saved.jql, max_results=max_results or self.config.max_results
            )
        )

    def get_smart_filters(self) -> list[SmartFilter]:
        """Return the built-in catalogue of ready-made JQL filters."""
        return list(SMART_FILTERS)
