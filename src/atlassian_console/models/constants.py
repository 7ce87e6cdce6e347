"""
Constants and default values for model conversions.

This module centralizes all default values and fallbacks used when
converting API responses to models.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NONE_VALUE = "None"

#
# Jira defaults
#
JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"

# Priority used for new issues when none is chosen
JIRA_DEFAULT_NEW_PRIORITY = "Medium"

# Status names treated as finished when the status category is missing
JIRA_DONE_STATUS_NAMES = frozenset({"done", "resolved"})
JIRA_DONE_CATEGORY_KEY = "done"

#
# Confluence defaults
#
CONFLUENCE_DEFAULT_ID = "0"
