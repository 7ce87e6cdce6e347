"""
Confluence data models.
"""

from .page import ConfluencePage, ConfluenceUser, ConfluenceVersion
from .search import ConfluenceSearchResult
from .space import ConfluenceSpace

__all__ = [
    "ConfluencePage",
    "ConfluenceSearchResult",
    "ConfluenceSpace",
    "ConfluenceUser",
    "ConfluenceVersion",
]
