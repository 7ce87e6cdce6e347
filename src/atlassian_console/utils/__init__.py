"""
Utility functions for atlassian-console.
"""

from .date import format_jql_date, parse_date
from .environment import (
    get_available_services,
    get_missing_variables,
    get_positive_int,
)
from .logging import log_config_param, mask_sensitive, setup_logging
from .query import quote_query_value

__all__ = [
    "format_jql_date",
    "get_available_services",
    "get_missing_variables",
    "get_positive_int",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "quote_query_value",
    "setup_logging",
]
