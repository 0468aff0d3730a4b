"""Matching git remote URLs against hosting servers."""

import re
from dataclasses import dataclass

from git_web_links.core.models.link import StaticServer

_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)
_HTTP_USERINFO = re.compile(r"^(https?://)[^/@]+@", re.IGNORECASE)
_SSH_SCHEME = re.compile(r"^ssh://")
_SSH_USER = re.compile(r"^[^@/:]+@")
_SSH_PORT = re.compile(r"^\d+/")


@dataclass(frozen=True)
class ServerMatch:
    """A server that matched a remote URL.

    ``http`` is the web address without a trailing slash, ``ssh`` is the SSH
    address without the ``ssh://`` scheme and without a trailing separator,
    and ``repository`` is the path of the repository on the server.
    """

    server: StaticServer
    http: str
    ssh: str | None
    repository: str


def normalize_remote_url(url: str) -> str:
    """Remove the ``.git`` suffix and trailing slashes from a remote URL."""
    url = url.strip().rstrip("/")
    url = re.sub(r"\.git$", "", url)
    return url.rstrip("/")


def _canonical_ssh(value: str) -> str:
    """Remove the scheme and the user from an SSH address."""
    value = _SSH_SCHEME.sub("", value)
    return _SSH_USER.sub("", value)


def _display_ssh(value: str) -> str:
    return _SSH_SCHEME.sub("", value).rstrip("/:")


def _match_http(url: str, base: str) -> str | None:
    base = base.rstrip("/")
    if url == base:
        return ""
    if url.startswith(base + "/"):
        return url[len(base) + 1 :]
    return None


def _match_ssh(url: str, ssh: str) -> str | None:
    prefix = _canonical_ssh(ssh).rstrip("/:")
    if not prefix:
        return None

    candidate = _canonical_ssh(url)
    if candidate == prefix:
        return ""
    if not candidate.startswith(prefix) or candidate[len(prefix)] not in "/:":
        return None

    remainder = candidate[len(prefix) :].lstrip("/:")
    # ssh://git@host:22/path has a port, not a path, after the colon.
    if _SSH_SCHEME.match(url) and candidate[len(prefix)] == ":" and _SSH_PORT.match(remainder):
        remainder = remainder.split("/", 1)[1]
    return remainder


def match_server(url: str, servers: list[StaticServer]) -> ServerMatch | None:
    """Find the first server whose HTTP or SSH address matches ``url``.

    Matching is case-sensitive and never fuzzy. Returns None when no server
    matches.
    """
    url = normalize_remote_url(url)
    is_http = _HTTP_URL.match(url) is not None
    if is_http:
        url = _HTTP_USERINFO.sub(r"\1", url)

    for server in servers:
        remainder = _match_http(url, server.http) if is_http else None
        if remainder is None and server.ssh:
            remainder = _match_ssh(url, server.ssh)

        if remainder is not None:
            return ServerMatch(
                server=server,
                http=server.http.rstrip("/"),
                ssh=_display_ssh(server.ssh) if server.ssh else None,
                repository=normalize_remote_url(remainder.lstrip("/:")),
            )

    return None
