"""The catalog of hosting providers."""

import json
from importlib import resources

import structlog

from git_web_links.config.settings import SettingsProvider
from git_web_links.core.models.handler import HandlerDefinition
from git_web_links.core.models.link import UrlInfo
from git_web_links.core.models.repository import Repository
from git_web_links.git.runner import Git
from git_web_links.links.handler import LinkHandler

logger = structlog.get_logger(__name__)

_HANDLERS_PACKAGE = "git_web_links.links.handlers"


def load_handler_definitions() -> list[HandlerDefinition]:
    """Load the bundled provider definitions in catalog order."""
    files = resources.files(_HANDLERS_PACKAGE)
    order = json.loads((files / "index.json").read_text(encoding="utf-8"))
    return [
        HandlerDefinition.model_validate_json((files / f"{name}.json").read_text(encoding="utf-8"))
        for name in order
    ]


class ProviderCatalog:
    """An ordered collection of link handlers. The first match always wins."""

    def __init__(
        self,
        definitions: list[HandlerDefinition],
        settings: SettingsProvider,
        git: Git,
    ) -> None:
        self._handlers = [LinkHandler(definition, settings, git) for definition in definitions]

    @classmethod
    def load(cls, settings: SettingsProvider, git: Git) -> "ProviderCatalog":
        """Create a catalog of the bundled providers."""
        return cls(load_handler_definitions(), settings, git)

    @property
    def handlers(self) -> list[LinkHandler]:
        return list(self._handlers)

    def find_handler(self, repository: Repository) -> LinkHandler | None:
        """Find the handler whose servers match the repository's remote."""
        if repository.remote is None:
            return None

        for handler in self._handlers:
            if handler.match_url(repository.remote.url) is not None:
                logger.debug("Found handler", handler=handler.name, remote=repository.remote.url)
                return handler

        logger.debug("No handler matches the remote", remote=repository.remote.url)
        return None

    def find_handler_for_url(self, url: str, strict: bool = False) -> tuple[LinkHandler, UrlInfo] | None:
        """Find the first handler that can parse ``url``."""
        for handler in self._handlers:
            info = handler.get_url_info(url, strict)
            if info is not None:
                logger.debug("Parsed URL", handler=handler.name, file=info.file_path)
                return handler, info

        return None
