"""Core domain models and exceptions for Git Web Links."""

from git_web_links.core.exceptions import (
    DetachedHeadError,
    ErrorKind,
    ExternalCommandError,
    FileNotInRepositoryError,
    GitWebLinksError,
    NoRemoteError,
    NoRemoteHeadError,
    ServerNotMatchedError,
)
from git_web_links.core.models import (
    BranchRefType,
    FileInfo,
    HandlerDefinition,
    LinkOptions,
    LinkType,
    QueryModification,
    Remote,
    Repository,
    ReverseSettings,
    SelectedRange,
    StaticServer,
    UrlInfo,
)

__all__ = [
    # Models
    "BranchRefType",
    "FileInfo",
    "HandlerDefinition",
    "LinkOptions",
    "LinkType",
    "QueryModification",
    "Remote",
    "Repository",
    "ReverseSettings",
    "SelectedRange",
    "StaticServer",
    "UrlInfo",
    # Exceptions
    "ErrorKind",
    "GitWebLinksError",
    "ServerNotMatchedError",
    "NoRemoteError",
    "NoRemoteHeadError",
    "DetachedHeadError",
    "ExternalCommandError",
    "FileNotInRepositoryError",
]
