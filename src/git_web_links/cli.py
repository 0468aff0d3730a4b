"""CLI for Git Web Links."""

import sys
from typing import NoReturn

import click

from git_web_links.config.logging import configure_logging
from git_web_links.core.exceptions import ErrorKind, GitWebLinksError
from git_web_links.core.models.link import LinkType, SelectedRange

# Exit codes, one per kind of failure.
EXIT_CODES = {
    ErrorKind.SERVER_NOT_MATCHED: 2,
    ErrorKind.NO_REMOTE: 3,
    ErrorKind.NO_REMOTE_HEAD: 4,
    ErrorKind.DETACHED_HEAD: 5,
    ErrorKind.EXTERNAL_COMMAND: 6,
    ErrorKind.FILE_NOT_IN_REPOSITORY: 7,
}


def _create_service():
    """Create the link service from the current settings."""
    from git_web_links.config.settings import get_settings
    from git_web_links.services.links import LinkService

    return LinkService.from_settings(get_settings())


def _fail(error: GitWebLinksError) -> NoReturn:
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(EXIT_CODES.get(error.kind, 1))


def _format_selection(selection: SelectedRange) -> str | None:
    if selection.start_line is None:
        return None
    text = f"line {selection.start_line}"
    if selection.start_column is not None:
        text += f", column {selection.start_column}"
    if selection.end_line is not None:
        text += f" to line {selection.end_line}"
        if selection.end_column is not None:
            text += f", column {selection.end_column}"
    return text


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Git Web Links: links to files on git hosting providers."""
    from git_web_links.config.settings import get_settings

    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--line", "-l", "start_line", type=click.IntRange(min=1), help="First selected line")
@click.option("--end-line", "-e", type=click.IntRange(min=1), help="Last selected line")
@click.option("--column", "start_column", type=click.IntRange(min=1), help="First selected column")
@click.option("--end-column", type=click.IntRange(min=1), help="Last selected column")
@click.option(
    "--type",
    "-t",
    "link_type",
    type=click.Choice([t.value for t in LinkType]),
    default=None,
    help="Link to the current commit, the current branch or the default branch",
)
@click.option("--open", "open_url", is_flag=True, help="Open the link in the browser")
def link(
    path: str,
    start_line: int | None,
    end_line: int | None,
    start_column: int | None,
    end_column: int | None,
    link_type: str | None,
    open_url: bool,
) -> None:
    """Create a link to a file.

    The link uses the default link type from the settings unless --type is given.
    """
    selection = None
    if start_line is not None:
        selection = SelectedRange(
            start_line=start_line,
            start_column=start_column,
            end_line=end_line if end_line is not None else start_line,
            end_column=end_column,
        )

    try:
        url = _create_service().get_link(
            path,
            selection=selection,
            link_type=LinkType(link_type) if link_type else None,
        )
    except GitWebLinksError as e:
        _fail(e)

    click.echo(url)
    if open_url:
        click.launch(url)


@cli.command()
@click.argument("url")
@click.option("--strict/--no-strict", default=False, help="Only accept URLs on known servers")
@click.option(
    "--repo",
    "-r",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    help="Find the file the URL points at in this repository",
)
def resolve(url: str, strict: bool, repo_path: str | None) -> None:
    """Find the file and selection that a URL points at."""
    service = _create_service()

    if repo_path is not None:
        location = service.find_file(url, repo_path, strict=strict)
        if location is None:
            click.echo("No file in the repository matches the URL.", err=True)
            sys.exit(1)
        click.echo(str(location.path))
        info = location.info
    else:
        info = service.get_url_info(url, strict=strict)
        if info is None:
            click.echo("The URL was not recognized.", err=True)
            sys.exit(1)
        click.echo(info.file_path)

    selection = _format_selection(info.selection)
    if selection:
        click.echo(f"  Selection: {selection}")
    click.echo(f"  Server:    {info.server.http}")


@cli.command()
def providers() -> None:
    """List the supported hosting providers, in matching order."""
    service = _create_service()
    for handler in service.catalog.handlers:
        if handler.definition.is_private:
            servers = handler.get_servers()
            detail = ", ".join(s.http for s in servers) if servers else "not configured"
            click.echo(f"  {handler.name} (self-hosted: {detail})")
        else:
            click.echo(f"  {handler.name}")


if __name__ == "__main__":
    cli()
