"""Application services."""

from git_web_links.services.links import FileLocation, LinkService

__all__ = ["FileLocation", "LinkService"]
