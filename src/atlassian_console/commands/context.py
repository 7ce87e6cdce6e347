"""Shared state and helpers for the command line."""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import click

from ..confluence import ConfluenceConfig, ConfluenceFetcher
from ..jira import JiraConfig, JiraFetcher

logger = logging.getLogger("atlassian-console.commands")

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class ConsoleContext:
    """Per-invocation context holding lazily built service clients.

    Clients are only constructed when a command needs them, so commands such
    as ``config`` work without complete credentials.
    """

    jira_config: JiraConfig | None = None
    confluence_config: ConfluenceConfig | None = None
    jira_fetcher: JiraFetcher | None = None
    confluence_fetcher: ConfluenceFetcher | None = None

    @property
    def jira(self) -> JiraFetcher:
        if self.jira_fetcher is None:
            logger.debug("Creating Jira client")
            self.jira_fetcher = JiraFetcher(config=self.jira_config)
        return self.jira_fetcher

    @property
    def confluence(self) -> ConfluenceFetcher:
        if self.confluence_fetcher is None:
            logger.debug("Creating Confluence client")
            self.confluence_fetcher = ConfluenceFetcher(config=self.confluence_config)
        return self.confluence_fetcher

    def project_key(self, value: str | None) -> str:
        """Resolve an explicit project key, falling back to ``JIRA_PROJECT_KEY``."""
        if value and value.strip():
            return value.strip()
        if self.jira.config.project_key:
            return self.jira.config.project_key
        raise click.ClickException(
            "No project key given and JIRA_PROJECT_KEY is not set"
        )


pass_console = click.make_pass_decorator(ConsoleContext, ensure=True)


def handle_errors(func: F) -> F:
    """Turn ``ValueError`` from configuration or arguments into a CLI error."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ValueError as e:
            logger.debug(f"Command failed: {e}", exc_info=True)
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]


def emit(data: Any) -> None:
    """Print command output as indented JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def emit_models(items: list[Any]) -> None:
    emit([item.to_simplified_dict() for item in items])


def require_result(value: Any, message: str) -> Any:
    """Return ``value``, or fail the command when the service returned nothing."""
    if value is None or value is False:
        raise click.ClickException(message)
    return value
