"""Utility functions for date operations."""

import logging
from datetime import date, datetime, timezone

import dateutil.parser

logger = logging.getLogger("atlassian-console.utils.date")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse an Atlassian date value into a datetime.

    The input accepts:
    - None or an empty string
    - Epoch timestamp in milliseconds (int or digit-only string)
    - Anything `dateutil.parser` understands, including the Jira
      ``2024-01-01T10:00:00.000+0000`` form

    Args:
        date_str: Date value from an API response

    Returns:
        Parsed datetime, or None if the value is empty or unparseable
    """
    if not date_str:
        return None
    try:
        if isinstance(date_str, int) or date_str.isdigit():
            return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        return dateutil.parser.parse(date_str)
    except (ValueError, OverflowError, OSError):
        logger.debug(f"Could not parse date value: {date_str!r}")
        return None


def format_jql_date(value: date) -> str:
    """Format a date the way JQL date clauses expect it (yyyy-MM-dd)."""
    return value.strftime("%Y-%m-%d")
