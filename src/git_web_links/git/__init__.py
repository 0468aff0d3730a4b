"""Git integration module for Git Web Links."""

from git_web_links.git.paths import get_repository_relative_path
from git_web_links.git.repository import RepositoryFinder
from git_web_links.git.runner import Git, GitResult

__all__ = ["Git", "GitResult", "RepositoryFinder", "get_repository_relative_path"]
