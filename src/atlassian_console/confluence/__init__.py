"""Confluence API integration module.

This module provides access to Confluence spaces and pages.
"""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .pages import PagesMixin
from .search import SearchMixin
from .spaces import SpacesMixin


class ConfluenceFetcher(SearchMixin, SpacesMixin, PagesMixin):
    """Main entry point for Confluence operations.

    This class combines functionality from the search, space and page mixins.
    """

    pass


__all__ = ["ConfluenceFetcher", "ConfluenceConfig", "ConfluenceClient"]
