"""Confluence commands."""

import click

from .context import (
    ConsoleContext,
    emit,
    emit_models,
    handle_errors,
    pass_console,
    require_result,
)


@click.group("confluence")
def confluence_group() -> None:
    """Browse and create Confluence content."""


@confluence_group.command("test")
@pass_console
@handle_errors
def test_connection(console: ConsoleContext) -> None:
    """Check that Confluence accepts the configured credentials."""
    require_result(console.confluence.test_connection(), "Confluence connection failed")
    click.echo("Confluence connection OK")


@confluence_group.command("spaces")
@click.option("--limit", type=click.IntRange(min=1), default=50, show_default=True)
@pass_console
@handle_errors
def list_spaces(console: ConsoleContext, limit: int) -> None:
    emit_models(console.confluence.get_spaces(limit=limit))


@confluence_group.command("search")
@click.argument("query")
@click.option("--space", "space_key", help="Restrict the search to a space")
@click.option("--limit", type=click.IntRange(min=1), default=25, show_default=True)
@pass_console
@handle_errors
def search_pages(
    console: ConsoleContext, query: str, space_key: str | None, limit: int
) -> None:
    """Full-text search over pages."""
    emit_models(console.confluence.search_pages(query, space_key=space_key, limit=limit))


@confluence_group.command("page")
@click.argument("page_id")
@pass_console
@handle_errors
def get_page(console: ConsoleContext, page_id: str) -> None:
    page = require_result(
        console.confluence.get_page(page_id), f"Page {page_id} not found"
    )
    emit(page.to_simplified_dict())


@confluence_group.command("create")
@click.argument("space_key")
@click.argument("title")
@click.option("--content", default="", help="Body in storage format (XHTML)")
@click.option(
    "--content-file",
    type=click.File("r", encoding="utf-8"),
    help="Read the body from a file",
)
@click.option("--parent", "parent_id", help="ID of the parent page")
@pass_console
@handle_errors
def create_page(
    console: ConsoleContext,
    space_key: str,
    title: str,
    content: str,
    content_file,
    parent_id: str | None,
) -> None:
    """Create a page."""
    if content_file is not None:
        content = content_file.read()
    page = require_result(
        console.confluence.create_page(space_key, title, content, parent_id=parent_id),
        f"Failed to create page {title!r}",
    )
    emit(page.to_simplified_dict())


@confluence_group.command("pages")
@click.argument("space_key")
@click.option("--limit", type=click.IntRange(min=1), default=25, show_default=True)
@pass_console
@handle_errors
def list_pages(console: ConsoleContext, space_key: str, limit: int) -> None:
    """List the pages of a space."""
    emit_models(console.confluence.get_pages_in_space(space_key, limit=limit))
