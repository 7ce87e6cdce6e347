"""Storage for saved JQL searches."""

import logging
import uuid
from datetime import datetime, timezone

from ..models.jira import SavedSearch, SaveSearchRequest

logger = logging.getLogger("atlassian-console.jira.saved_searches")


class SavedSearchStore:
    """In-memory store of saved searches.

    A store is created empty and lives as long as the object that owns it;
    with the default wiring that is one CLI process. Nothing is written to
    disk, so searches saved in one run are gone in the next.
    """

    def __init__(self) -> None:
        self._searches: dict[str, SavedSearch] = {}

    def add(self, request: SaveSearchRequest) -> SavedSearch:
        saved = SavedSearch(
            id=str(uuid.uuid4()),
            name=request.name,
            description=request.description,
            jql=request.jql,
            created=datetime.now(timezone.utc),
            is_shared=request.is_shared,
        )
        self._searches[saved.id] = saved
        logger.debug(f"Stored saved search {saved.name!r} as {saved.id}")
        return saved

    def get(self, search_id: str) -> SavedSearch | None:
        return self._searches.get(search_id)

    def list(self) -> list[SavedSearch]:
        return list(self._searches.values())

    def __len__(self) -> int:
        return len(self._searches)
