"""Helpers for building JQL and CQL queries."""


def quote_query_value(value: str) -> str:
    """
    Quote a value for use in a JQL or CQL clause.

    Backslashes and double quotes are escaped so the value cannot end the
    string literal early.

    Args:
        value: The raw value

    Returns:
        The value wrapped in double quotes
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
