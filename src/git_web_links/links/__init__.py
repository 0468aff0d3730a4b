"""Link creation and parsing for git hosting providers."""

from git_web_links.links.catalog import ProviderCatalog, load_handler_definitions
from git_web_links.links.handler import LinkHandler
from git_web_links.links.refs import RefResolver, ResolvedRef
from git_web_links.links.servers import ServerMatch, match_server
from git_web_links.links.templates import compile_template, render

__all__ = [
    "LinkHandler",
    "ProviderCatalog",
    "RefResolver",
    "ResolvedRef",
    "ServerMatch",
    "compile_template",
    "load_handler_definitions",
    "match_server",
    "render",
]
