"""Command line groups for atlassian-console."""

from .comments import comment_group
from .confluence import confluence_group
from .context import ConsoleContext
from .general import config_command, whoami_command
from .issues import issue_group
from .projects import project_group
from .reports import report_group
from .search import search_group
from .users import user_group

COMMANDS = (
    config_command,
    whoami_command,
    issue_group,
    comment_group,
    search_group,
    user_group,
    project_group,
    report_group,
    confluence_group,
)

__all__ = ["COMMANDS", "ConsoleContext"]
