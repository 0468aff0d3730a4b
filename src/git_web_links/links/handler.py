"""Creates links for one hosting provider, and parses its links back."""

import re
import threading
from types import SimpleNamespace
from typing import Any

import structlog
from jinja2 import Template

from git_web_links.config.settings import SettingsProvider
from git_web_links.core.exceptions import NoRemoteError, ServerNotMatchedError
from git_web_links.core.models.handler import HandlerDefinition
from git_web_links.core.models.link import (
    FileInfo,
    LinkOptions,
    LinkType,
    SelectedRange,
    StaticServer,
    UrlInfo,
)
from git_web_links.core.models.repository import Repository
from git_web_links.git.paths import get_repository_relative_path
from git_web_links.git.runner import Git
from git_web_links.links.refs import RefResolver, ResolvedRef
from git_web_links.links.servers import ServerMatch, match_server
from git_web_links.links.templates import compile_template, render

logger = structlog.get_logger(__name__)

_NUMBER = re.compile(r"\d+", re.ASCII)

_SELECTION_FIELDS = ("start_line", "start_column", "end_line", "end_column")


def apply_query_modification(url: str, key: str, value: str) -> str:
    """Add ``key=value`` to the query string of ``url``, before any fragment."""
    base, hash_sign, fragment = url.partition("#")
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{key}={value}{hash_sign}{fragment}"


def parse_selection_value(text: str) -> int | None:
    """Parse a rendered selection value. Anything but a number means "not specified"."""
    text = text.strip()
    if _NUMBER.fullmatch(text):
        return int(text)
    return None


class LinkHandler:
    """Creates and parses links using one provider's definition.

    All templates are compiled when the handler is created. The handler
    holds no state that changes between calls.
    """

    def __init__(self, definition: HandlerDefinition, settings: SettingsProvider, git: Git) -> None:
        self._definition = definition
        self._settings = settings
        self._refs = RefResolver(git, settings)

        self._url = compile_template(definition.url)
        self._selection = compile_template(definition.selection)
        self._query = [(modification, compile_template(modification.value)) for modification in definition.query]

        reverse = definition.reverse
        self._reverse_file = compile_template(reverse.file)
        self._reverse_http = compile_template(reverse.server.http)
        self._reverse_ssh = compile_template(reverse.server.ssh)
        self._reverse_selection: dict[str, Template] = {}
        for field in _SELECTION_FIELDS:
            source = getattr(reverse.selection, field)
            if source is not None:
                self._reverse_selection[field] = compile_template(source)

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def definition(self) -> HandlerDefinition:
        return self._definition

    def get_servers(self) -> list[StaticServer]:
        """The servers of this provider. Private providers read them from settings."""
        if self._definition.private is not None:
            return self._settings.servers_for(self._definition.private)
        return list(self._definition.servers)

    def match_url(self, url: str) -> ServerMatch | None:
        """Match a remote URL (or a web URL) against this provider's servers."""
        return match_server(url, self.get_servers())

    def create_url(
        self,
        repository: Repository,
        file: FileInfo,
        options: LinkOptions | None = None,
        cancel: threading.Event | None = None,
    ) -> str:
        """Create a link to a file (and selection) in the repository.

        Raises ServerNotMatchedError when the remote is not on one of this
        provider's servers, and the ref resolution errors when the ref cannot
        be determined. A URL is only returned when everything succeeded.
        """
        options = options or LinkOptions()
        if repository.remote is None:
            raise NoRemoteError(str(repository.root))

        server = self.match_url(repository.remote.url)
        if server is None:
            raise ServerNotMatchedError(repository.remote.url)

        resolved = self._refs.resolve_ref(
            options.link_type, repository, self._definition.branch_ref, cancel=cancel
        )
        file_path = get_repository_relative_path(repository.root, file.file_path)

        context: dict[str, Any] = {
            "base": server.http,
            "http": server.http,
            "ssh": server.ssh,
            "repository": server.repository,
            "ref": resolved.ref,
            "commit": self._get_commit(repository, resolved, cancel),
            "type": "commit" if resolved.link_type == LinkType.COMMIT else "branch",
            "file": file_path,
        }

        url = render(self._url, context)

        selection = file.selection
        if selection is not None and resolved.link_type not in self._definition.exclude_selection_for:
            # A selection without an end covers the start line only.
            end_line = selection.start_line if selection.end_line is None else selection.end_line
            url += render(
                self._selection,
                {
                    **context,
                    "startLine": selection.start_line,
                    "startColumn": selection.start_column,
                    "endLine": end_line,
                    "endColumn": selection.end_column,
                },
            )

        for modification, value in self._query:
            if modification.pattern.search(file_path):
                url = apply_query_modification(url, modification.key, render(value, context))

        logger.debug("Created link", handler=self.name, link_type=resolved.link_type.value, url=url)
        return url

    def _get_commit(self, repository: Repository, resolved: ResolvedRef, cancel: threading.Event | None) -> str:
        if resolved.link_type == LinkType.COMMIT and not self._settings.use_short_hashes:
            return resolved.ref
        return self._refs.get_commit(repository, cancel=cancel)

    def get_url_info(self, url: str, strict: bool) -> UrlInfo | None:
        """Parse a link created by this provider.

        In strict mode the URL must be on one of this provider's servers
        before the pattern is tried. Returns None when the URL is not
        recognized.
        """
        server = self.match_url(url)
        if strict and server is None:
            return None

        match = self._definition.reverse.pattern.search(url)
        if match is None:
            return None

        # Groups are attributes so that names like "items" are not shadowed by dict methods.
        context: dict[str, Any] = {"match": {"groups": SimpleNamespace(**match.groupdict())}}
        if server is not None:
            context["http"] = server.http
            context["ssh"] = server.ssh

        selection = {
            field: parse_selection_value(render(template, context))
            for field, template in self._reverse_selection.items()
        }

        return UrlInfo(
            file_path=render(self._reverse_file, context),
            server=StaticServer(
                http=render(self._reverse_http, context),
                ssh=render(self._reverse_ssh, context),
            ),
            selection=SelectedRange(**selection),
            file_may_start_with_branch=self._definition.reverse.file_may_start_with_branch,
        )
