"""Link service."""

import threading
from dataclasses import dataclass
from pathlib import Path

import structlog

from git_web_links.config.settings import Settings
from git_web_links.core.exceptions import (
    FileNotInRepositoryError,
    NoRemoteError,
    ServerNotMatchedError,
)
from git_web_links.core.models.link import FileInfo, LinkOptions, LinkType, SelectedRange, UrlInfo
from git_web_links.git.repository import RepositoryFinder
from git_web_links.git.runner import Git
from git_web_links.links.catalog import ProviderCatalog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FileLocation:
    """A local file that a provider URL refers to."""

    path: Path
    info: UrlInfo


class LinkService:
    """Service for creating links to local files and finding the files behind links."""

    def __init__(self, catalog: ProviderCatalog, finder: RepositoryFinder) -> None:
        self._catalog = catalog
        self._finder = finder

    @classmethod
    def from_settings(cls, settings: Settings) -> "LinkService":
        git = Git(timeout=settings.git_timeout)
        return cls(
            ProviderCatalog.load(settings, git),
            RepositoryFinder(git, preferred_remote_name=settings.preferred_remote_name),
        )

    @property
    def catalog(self) -> ProviderCatalog:
        return self._catalog

    def get_link(
        self,
        path: str | Path,
        selection: SelectedRange | None = None,
        link_type: LinkType | None = None,
        cancel: threading.Event | None = None,
    ) -> str:
        """Create a link to a local file."""
        path = Path(path).absolute()
        repository = self._finder.find_repository(path)
        if repository is None:
            raise FileNotInRepositoryError(str(path))
        if repository.remote is None:
            raise NoRemoteError(str(repository.root))

        handler = self._catalog.find_handler(repository)
        if handler is None:
            raise ServerNotMatchedError(repository.remote.url)

        return handler.create_url(
            repository,
            FileInfo(file_path=str(path), selection=selection),
            LinkOptions(link_type=link_type),
            cancel=cancel,
        )

    def get_url_info(self, url: str, strict: bool = False) -> UrlInfo | None:
        """Parse a provider URL into a file path and selection."""
        found = self._catalog.find_handler_for_url(url, strict)
        return None if found is None else found[1]

    def find_file(self, url: str, repository_root: str | Path, strict: bool = False) -> FileLocation | None:
        """Find the file in a local repository that a provider URL points at."""
        info = self.get_url_info(url, strict)
        if info is None:
            return None

        root = Path(repository_root)
        for candidate in info.candidate_paths():
            if (root / candidate).exists():
                return FileLocation(path=root / candidate, info=info)

        logger.debug("No local file matches the URL", url=url, root=str(root))
        return None
