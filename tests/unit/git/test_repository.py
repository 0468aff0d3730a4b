"""Tests for finding repositories and remotes."""

from collections.abc import Callable
from pathlib import Path

import pytest

from git_web_links.core.models.repository import Remote
from git_web_links.git.repository import RepositoryFinder
from git_web_links.git.runner import Git


@pytest.mark.unit
class TestRepositoryFinder:
    """Tests for RepositoryFinder."""

    def test_finds_repository_from_file(self, git_repo: Path, git: Git) -> None:
        repository = RepositoryFinder(git).find_repository(git_repo / "src" / "app.py")
        assert repository is not None
        assert repository.root.resolve() == git_repo.resolve()

    def test_finds_repository_from_directory(self, git_repo: Path, git: Git) -> None:
        repository = RepositoryFinder(git).find_repository(git_repo / "src")
        assert repository is not None
        assert repository.root.resolve() == git_repo.resolve()

    def test_not_a_repository(self, tmp_path: Path, git: Git) -> None:
        assert RepositoryFinder(git).find_repository(tmp_path) is None

    def test_missing_path(self, tmp_path: Path, git: Git) -> None:
        assert RepositoryFinder(git).find_repository(tmp_path / "missing" / "file.txt") is None

    def test_repository_without_remote(self, git_repo: Path, git: Git) -> None:
        repository = RepositoryFinder(git).find_repository(git_repo)
        assert repository is not None
        assert repository.remote is None

    def test_prefers_origin(self, git_repo: Path, git: Git, run_git: Callable[..., str]) -> None:
        run_git(git_repo, "remote", "add", "another", "https://example.com/another.git")
        run_git(git_repo, "remote", "add", "origin", "https://example.com/origin.git")
        repository = RepositoryFinder(git).find_repository(git_repo)
        assert repository is not None
        assert repository.remote == Remote(name="origin", url="https://example.com/origin.git")

    def test_preferred_remote_name(self, git_repo: Path, git: Git, run_git: Callable[..., str]) -> None:
        run_git(git_repo, "remote", "add", "origin", "https://example.com/origin.git")
        run_git(git_repo, "remote", "add", "upstream", "https://example.com/upstream.git")
        repository = RepositoryFinder(git, preferred_remote_name="upstream").find_repository(git_repo)
        assert repository is not None
        assert repository.remote is not None
        assert repository.remote.name == "upstream"

    def test_falls_back_to_first_remote(self, git_repo: Path, git: Git, run_git: Callable[..., str]) -> None:
        run_git(git_repo, "remote", "add", "fork", "git@example.com:fork/repo.git")
        repository = RepositoryFinder(git).find_repository(git_repo)
        assert repository is not None
        assert repository.remote == Remote(name="fork", url="git@example.com:fork/repo.git")
