"""Domain models for Git Web Links."""

from git_web_links.core.models.handler import (
    HandlerDefinition,
    QueryModification,
    ReverseSelectionSettings,
    ReverseServerSettings,
    ReverseSettings,
)
from git_web_links.core.models.link import (
    BranchRefType,
    FileInfo,
    LinkOptions,
    LinkType,
    SelectedRange,
    StaticServer,
    UrlInfo,
)
from git_web_links.core.models.repository import Remote, Repository

__all__ = [
    "BranchRefType",
    "FileInfo",
    "HandlerDefinition",
    "LinkOptions",
    "LinkType",
    "QueryModification",
    "Remote",
    "Repository",
    "ReverseSelectionSettings",
    "ReverseServerSettings",
    "ReverseSettings",
    "SelectedRange",
    "StaticServer",
    "UrlInfo",
]
